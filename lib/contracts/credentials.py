"""Credential value and the wire models of the login endpoint."""
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict


@dataclass(frozen=True)
class Credentials:
    """Username/password pair built from a single request body."""

    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"


class LoginRequest(BaseModel):
    """Incoming payload for ``POST /login``.

    Both fields accept any JSON value so that absent or mistyped values are
    reported by the handler as a missing field instead of a schema error.
    """

    model_config = ConfigDict(extra="ignore")

    username: Any = None
    password: Any = None


class LoginUser(BaseModel):
    username: str


class LoginSuccess(BaseModel):
    message: str = "Login successful"
    user: LoginUser


class ErrorMessage(BaseModel):
    message: str
