import base64
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from ..models.errors import ConfigurationError, UnsupportedAuthTypeError
from .constants import AUTH_BASIC, AUTH_BEARER


class AuthType(str, Enum):
    BASIC = AUTH_BASIC
    BEARER = AUTH_BEARER


@dataclass(frozen=True)
class BasicAuth:
    """HTTP basic credentials (RFC 2617)."""

    username: str
    password: str

    def header_value(self) -> str:
        credentials = f"{self.username}:{self.password}".encode("utf-8")
        return f"Basic {base64.b64encode(credentials).decode('ascii')}"


@dataclass(frozen=True)
class BearerAuth:
    """OAuth 2.0 bearer token."""

    token: str

    def header_value(self) -> str:
        return f"Bearer {self.token}"


AuthSpec = Union[BasicAuth, BearerAuth]


def auth_from(auth_type: AuthType | str, value: Any) -> AuthSpec:
    """Build an auth variant from a type name and its raw value.

    Args:
        auth_type: ``"basic"`` or ``"bearer"`` (or the matching ``AuthType``).
        value: A ``(username, password)`` pair for basic auth, the token for
            bearer auth.

    Raises:
        UnsupportedAuthTypeError: If ``auth_type`` is not a known auth type.
        ConfigurationError: If basic auth is not given a two-item tuple or list.
    """
    try:
        resolved = AuthType(auth_type)
    except ValueError as e:
        raise UnsupportedAuthTypeError(auth_type) from e

    if resolved is AuthType.BASIC:
        if not isinstance(value, (tuple, list)) or len(value) != 2:
            raise ConfigurationError(
                "Basic auth expects a (username, password) pair, "
                f"got {type(value).__name__}"
            )
        username, password = value
        return BasicAuth(username=str(username), password=str(password))
    return BearerAuth(token=str(value))
