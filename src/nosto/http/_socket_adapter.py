"""Fallback adapter speaking HTTP/1.1 directly over a socket.

Used when httpx is not available. Each request opens a new connection, sends
``Connection: close`` and reads the response until the server closes the
connection or the announced ``Content-Length`` has been received.
"""

import logging
import re
import socket
import ssl
from typing import Sequence
from urllib.parse import quote, urlsplit

from .._utils.constants import HEADER_CONTENT_LENGTH, HEADER_USER_AGENT, USER_AGENT
from ..models.errors import TransportError
from ._adapter import HttpRequestAdapter, encode_content, merge_headers, split_header
from ._response import HttpResponse

logger = logging.getLogger(__name__)

_STATUS_LINE = re.compile(r"^HTTP/\d(?:\.\d)? (\d{3})(?: .*)?$")
_CONTENT_LENGTH = re.compile(rb"\r\ncontent-length:[ \t]*(\d+)", re.IGNORECASE)
# set by the adapter itself
_MANAGED_HEADERS = {"host", "connection", "content-length"}
# characters left as they are in the request target; "%" keeps existing escapes
_PATH_SAFE = "/%:@!$&'()*+,;="
_QUERY_SAFE = _PATH_SAFE + "?"


class SocketAdapter(HttpRequestAdapter):
    DEFAULT_PORTS = {"http": 80, "https": 443}
    CHUNK_SIZE = 65536

    def get(self, url: str, *, headers: Sequence[str] = ()) -> HttpResponse:
        return self._send("GET", url, headers, None)

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
        body: bytes | None,
    ) -> HttpResponse:
        scheme, host, port, target = self._target(url)
        request = self._build_request(method, scheme, host, port, target, headers, body)
        raw = self._exchange(scheme, host, port, request, url)
        status_code, response_headers, content = self._parse_response(raw, url)

        logger.debug(f"{method} {url} -> {status_code}")

        return HttpResponse(
            status_code=status_code,
            headers=response_headers,
            content=content,
            url=url,
        )

    def _target(self, url: str) -> tuple[str, str, int, str]:
        try:
            split = urlsplit(url)
            port = split.port
        except ValueError as e:
            raise TransportError(f"Invalid request URL: {e}", url=url) from e

        scheme = split.scheme.lower()
        if scheme not in self.DEFAULT_PORTS:
            raise TransportError(f"Unsupported URL scheme {split.scheme!r}", url=url)
        if not split.hostname:
            raise TransportError("Request URL has no host", url=url)

        target = quote(split.path or "/", safe=_PATH_SAFE)
        if split.query:
            target += f"?{quote(split.query, safe=_QUERY_SAFE)}"
        return scheme, split.hostname, port or self.DEFAULT_PORTS[scheme], target

    def _build_request(
        self,
        method: str,
        scheme: str,
        host: str,
        port: int,
        target: str,
        headers: Sequence[str],
        body: bytes | None,
    ) -> bytes:
        host_header = f"[{host}]" if ":" in host else host
        if port != self.DEFAULT_PORTS[scheme]:
            host_header += f":{port}"

        pairs = [split_header(header) for header in headers]
        names = {name.lower() for name, _ in pairs}

        lines = [f"{method} {target} HTTP/1.1", f"Host: {host_header}"]
        if HEADER_USER_AGENT.lower() not in names:
            lines.append(f"{HEADER_USER_AGENT}: {USER_AGENT}")
        lines.extend(
            f"{name}: {value}"
            for name, value in pairs
            if name.lower() not in _MANAGED_HEADERS
        )
        if body is not None:
            lines.append(f"{HEADER_CONTENT_LENGTH}: {len(body)}")
        lines.append("Connection: close")

        return ("\r\n".join(lines) + "\r\n\r\n").encode("utf-8") + (body or b"")

    def _exchange(
        self, scheme: str, host: str, port: int, request: bytes, url: str
    ) -> bytes:
        try:
            with socket.create_connection((host, port)) as sock:
                if scheme == "https":
                    context = ssl.create_default_context()
                    with context.wrap_socket(sock, server_hostname=host) as tls:
                        return self._roundtrip(tls, request)
                return self._roundtrip(sock, request)
        except OSError as e:
            raise TransportError(
                f"Could not complete request to {host}:{port}: {e}", url=url
            ) from e

    def _roundtrip(self, sock: socket.socket, request: bytes) -> bytes:
        sock.sendall(request)

        buffer = bytearray()
        header_end = -1
        expected: int | None = None
        while True:
            data = sock.recv(self.CHUNK_SIZE)
            if not data:
                break
            buffer += data
            if header_end == -1:
                header_end = buffer.find(b"\r\n\r\n")
                if header_end != -1:
                    match = _CONTENT_LENGTH.search(buffer, 0, header_end)
                    if match:
                        expected = header_end + 4 + int(match.group(1))
            if expected is not None and len(buffer) >= expected:
                break
        return bytes(buffer)

    def _parse_response(self, raw: bytes, url: str) -> tuple[int, dict[str, str], bytes]:
        head, separator, body = raw.partition(b"\r\n\r\n")
        if not separator:
            raise TransportError(
                "Malformed HTTP response: incomplete header block", url=url
            )

        lines = head.decode("iso-8859-1").split("\r\n")
        match = _STATUS_LINE.match(lines[0])
        if match is None:
            raise TransportError(
                f"Malformed HTTP response: bad status line {lines[0]!r}", url=url
            )

        items: list[tuple[str, str]] = []
        for line in lines[1:]:
            name, separator, value = line.partition(":")
            if not separator or not name.strip():
                raise TransportError(
                    f"Malformed HTTP response: bad header line {line!r}", url=url
                )
            items.append((name.strip(), value.strip()))
        headers = merge_headers(items)

        if "chunked" in headers.get("transfer-encoding", "").lower():
            body = self._dechunk(body, url)
        elif "content-length" in headers:
            try:
                length = int(headers["content-length"])
            except ValueError as e:
                raise TransportError(
                    f"Malformed HTTP response: bad Content-Length {headers['content-length']!r}",
                    url=url,
                ) from e
            if len(body) < length:
                raise TransportError(
                    f"Truncated HTTP response: expected {length} bytes, got {len(body)}",
                    url=url,
                )
            body = body[:length]

        return int(match.group(1)), headers, body

    def _dechunk(self, body: bytes, url: str) -> bytes:
        decoded = bytearray()
        pos = 0
        while True:
            line_end = body.find(b"\r\n", pos)
            if line_end == -1:
                raise TransportError("Malformed chunked response body", url=url)
            size_field = body[pos:line_end].split(b";", 1)[0].strip()
            try:
                size = int(size_field, 16)
            except ValueError as e:
                raise TransportError(
                    f"Malformed chunk size {size_field!r}", url=url
                ) from e
            pos = line_end + 2
            if size == 0:
                return bytes(decoded)
            chunk = body[pos : pos + size]
            if len(chunk) < size or body[pos + size : pos + size + 2] != b"\r\n":
                raise TransportError("Truncated chunked response body", url=url)
            decoded += chunk
            pos += size + 2
