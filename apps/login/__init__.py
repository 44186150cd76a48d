"""Login service.

:class:`LoginHandler` maps an HTTP method and a decoded request body to a
:class:`LoginResult`.  It knows nothing about FastAPI so the same object can be
mounted behind any HTTP layer.  Credential comparison is delegated to a
:class:`CredentialChecker`; the default :class:`StaticCredentialChecker`
accepts exactly one username/password pair and can be swapped for a real user
store without touching the handler.
"""

from __future__ import annotations

import hmac
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Union

from lib.contracts.credentials import Credentials, ErrorMessage, LoginRequest, LoginSuccess, LoginUser
from lib.telemetry.logger import get_logger
from lib.utils.helpers import _as_mapping, _is_missing_val

logger = get_logger("apps.login")

METHOD_NOT_ALLOWED = "Method Not Allowed"
MISSING_FIELDS = "Missing username or password"
INVALID_CREDENTIALS = "Invalid credentials"


def _utf8(value: str) -> bytes:
    # lone surrogates are valid in JSON strings but not in UTF-8
    return value.encode("utf-8", errors="surrogatepass")


class CredentialChecker(Protocol):
    def verify(self, credentials: Credentials) -> bool:
        ...


class StaticCredentialChecker:
    """Accept a single fixed username/password pair."""

    def __init__(self, username: str = "admin", password: str = "1234") -> None:
        self._username = username
        self._password = password

    def verify(self, credentials: Credentials) -> bool:
        username_ok = hmac.compare_digest(_utf8(credentials.username), _utf8(self._username))
        password_ok = hmac.compare_digest(_utf8(credentials.password), _utf8(self._password))
        return username_ok and password_ok


@dataclass
class LoginResult:
    """Status code plus body; a ``str`` body is plain text, a ``dict`` is JSON."""

    status_code: int
    body: Union[Dict[str, Any], str]


class LoginHandler:
    def __init__(self, checker: Optional[CredentialChecker] = None):
        self.checker = checker or StaticCredentialChecker()

    def handle(self, method: str, payload: Any) -> LoginResult:
        logger.info("Login API hit")

        if (method or "").upper() != "POST":
            return LoginResult(405, METHOD_NOT_ALLOWED)

        req = LoginRequest.model_validate(dict(_as_mapping(payload)))
        if _is_missing_val(req.username) or _is_missing_val(req.password):
            logger.debug("login rejected: missing field")
            return LoginResult(400, ErrorMessage(message=MISSING_FIELDS).model_dump())

        creds = Credentials(username=req.username, password=req.password)
        if self.checker.verify(creds):
            logger.debug("login accepted for %s", creds.username)
            body = LoginSuccess(user=LoginUser(username=creds.username))
            return LoginResult(200, body.model_dump())

        logger.debug("login rejected for %s", creds.username)
        return LoginResult(401, ErrorMessage(message=INVALID_CREDENTIALS).model_dump())


__all__ = [
    "CredentialChecker",
    "LoginHandler",
    "LoginResult",
    "StaticCredentialChecker",
]
