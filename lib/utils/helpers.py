"""General helper utilities."""

from typing import Any, Mapping


def _is_missing_val(v: Any) -> bool:
    """Treat None, non-strings and blank strings as missing."""
    if v is None:
        return True
    if not isinstance(v, str):
        return True
    return v.strip() == ""


def _as_mapping(payload: Any) -> Mapping[str, Any]:
    return payload if isinstance(payload, Mapping) else {}
