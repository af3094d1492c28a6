from typing import Any

from ._adapter import HttpRequestAdapter
from ._request import HttpRequest
from ._response import HttpResponse
from ._selection import httpx_available, select_adapter
from ._socket_adapter import SocketAdapter

__all__ = [
    "HttpRequest",
    "HttpRequestAdapter",
    "HttpResponse",
    "HttpxAdapter",
    "SocketAdapter",
    "httpx_available",
    "select_adapter",
]


def __getattr__(name: str) -> Any:
    # httpx is optional; load its adapter only when asked for
    if name == "HttpxAdapter":
        from ._httpx_adapter import HttpxAdapter

        return HttpxAdapter
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
