import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from lib.utils.validation import ensure

from .yaml_loader import load_yaml

DEFAULT_CONFIG_PATH = "config/login.yaml"


@dataclass
class LoginConfig:
    """Typed view over ``login.yaml``.

    ``max_instances`` replaces the process-wide instance cap of the hosted
    function; it is read once at startup and handed to the server runner.
    """

    route: str = "/login"
    max_instances: int = 10
    host: str = "0.0.0.0"
    port: int = 8080
    username: str = "admin"
    password: str = "1234"
    log_level: str = "INFO"
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        ensure(self.route.startswith("/"), "route must start with '/'")
        ensure(self.max_instances >= 1, "max_instances must be at least 1")
        ensure(0 < self.port < 65536, "port must be between 1 and 65535")
        ensure(bool(self.username), "credentials.username must not be empty")
        ensure(bool(self.password), "credentials.password must not be empty")
        ensure(
            isinstance(logging.getLevelName(self.log_level.upper()), int),
            f"unknown log_level {self.log_level!r}",
        )


def load_login_config(path: Optional[str] = None) -> LoginConfig:
    """Load ``login.yaml`` and return a :class:`LoginConfig`.

    Parameters
    ----------
    path:
        File system path to the YAML file.  When the file does not exist the
        defaults are returned.
    """

    path = path or DEFAULT_CONFIG_PATH
    raw = load_yaml(path) if Path(path).exists() else {}
    section = raw.get("login") or {}
    ensure(isinstance(section, dict), "login must be a mapping")
    creds = section.get("credentials") or {}
    ensure(isinstance(creds, dict), "login.credentials must be a mapping")
    defaults = LoginConfig()
    return LoginConfig(
        route=str(section.get("route", defaults.route)),
        max_instances=int(section.get("max_instances", defaults.max_instances)),
        host=str(section.get("host", defaults.host)),
        port=int(section.get("port", defaults.port)),
        username=str(creds.get("username", defaults.username)),
        password=str(creds.get("password", defaults.password)),
        log_level=str(section.get("log_level", defaults.log_level)),
        raw=raw,
    )
