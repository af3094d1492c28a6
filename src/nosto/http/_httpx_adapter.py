import logging
from typing import Sequence

import httpx

from .._utils._errors import handle_errors
from ._adapter import HttpRequestAdapter, encode_content, merge_headers, split_header
from ._response import HttpResponse

logger = logging.getLogger(__name__)


def _encode_headers(headers: Sequence[str]) -> list[tuple[str, bytes]]:
    """Split raw header lines, encoding values as UTF-8."""
    pairs = (split_header(header) for header in headers)
    return [(name, value.encode("utf-8")) for name, value in pairs]


class HttpxAdapter(HttpRequestAdapter):
    """Primary adapter backed by ``httpx.Client``.

    Requests block until the server answers: no timeout is applied and
    redirects are returned to the caller instead of being followed.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=None, follow_redirects=False)

    def get(self, url: str, *, headers: Sequence[str] = ()) -> HttpResponse:
        return self._send("GET", url, headers)

    def post(
        self,
        url: str,
        *,
        headers: Sequence[str] = (),
        content: str | bytes | None = None,
    ) -> HttpResponse:
        return self._send("POST", url, headers, encode_content(content))

    def _send(
        self,
        method: str,
        url: str,
        headers: Sequence[str],
        content: bytes | None = None,
    ) -> HttpResponse:
        with handle_errors(url):
            response = self._client.request(
                method,
                url,
                headers=_encode_headers(headers),
                content=content,
            )

        logger.debug(f"{method} {url} -> {response.status_code}")

        return HttpResponse(
            status_code=response.status_code,
            headers=merge_headers(response.headers.multi_items()),
            content=response.content,
            url=url,
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
