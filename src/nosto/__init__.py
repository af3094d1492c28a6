"""Nosto HTTP request builder.

Assembles request URLs, headers and bodies and sends them through a
swappable transport adapter.
"""

from typing import Any

from ._config import Config
from ._utils import (
    AuthType,
    BasicAuth,
    BearerAuth,
    UrlParts,
    build_query_string,
    build_uri,
    build_url,
    parse_query_string,
    parse_url,
    replace_query_param,
    replace_query_param_in_url,
)
from .http import (
    HttpRequest,
    HttpRequestAdapter,
    HttpResponse,
    SocketAdapter,
)
from .models import (
    AccountBillingDetails,
    BillingDetailsProvider,
    ConfigurationError,
    MalformedUrlError,
    NostoError,
    TransportError,
    UnsupportedAuthTypeError,
)

__all__ = [
    "Config",
    "AuthType",
    "BasicAuth",
    "BearerAuth",
    "UrlParts",
    "build_query_string",
    "build_uri",
    "build_url",
    "parse_query_string",
    "parse_url",
    "replace_query_param",
    "replace_query_param_in_url",
    "HttpRequest",
    "HttpRequestAdapter",
    "HttpResponse",
    "HttpxAdapter",
    "SocketAdapter",
    "AccountBillingDetails",
    "BillingDetailsProvider",
    "ConfigurationError",
    "MalformedUrlError",
    "NostoError",
    "TransportError",
    "UnsupportedAuthTypeError",
]


def __getattr__(name: str) -> Any:
    if name == "HttpxAdapter":
        from .http import HttpxAdapter

        return HttpxAdapter
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
