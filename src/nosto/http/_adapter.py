from abc import ABC, abstractmethod
from typing import Iterable, Sequence

from ._response import HttpResponse


def split_header(header: str) -> tuple[str, str]:
    """Split a raw ``"Key: Value"`` header line into its name and value."""
    name, _, value = header.partition(":")
    return name.strip(), value.strip()


def merge_headers(items: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Lower-case header names and join repeated headers with ``", "``."""
    merged: dict[str, str] = {}
    for name, value in items:
        key = name.lower()
        merged[key] = f"{merged[key]}, {value}" if key in merged else value
    return merged


def encode_content(content: str | bytes | None) -> bytes:
    if content is None:
        return b""
    if isinstance(content, str):
        return content.encode("utf-8")
    return bytes(content)


class HttpRequestAdapter(ABC):
    """Transport used by ``HttpRequest`` to send a request once.

    ``headers`` is the ordered list of raw ``"Key: Value"`` lines collected by
    the request; duplicates are sent as they are. Implementations raise
    ``TransportError`` when the request cannot be carried out and return error
    statuses as ordinary responses.
    """

    @abstractmethod
    def get(self, url: str, *, headers: Sequence[str] = ()) -> HttpResponse:
        """Send a GET request."""
        ...

    @abstractmethod
    def post(
        self,
        url: str,
        *,
        headers: Sequence[str] = (),
        content: str | bytes | None = None,
    ) -> HttpResponse:
        """Send a POST request with ``content`` as the body."""
        ...

    def close(self) -> None:
        """Release adapter resources."""

    def __enter__(self) -> "HttpRequestAdapter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
