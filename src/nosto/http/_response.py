import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class HttpResponse:
    """Uniform response returned by every request adapter.

    Header names are lower-cased and repeated headers are joined with ``", "``,
    so callers see the same mapping whichever adapter carried the request.
    Error statuses are returned as-is; interpreting them is up to the caller.
    """

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    content: bytes = b""
    url: str = ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        try:
            return self.content.decode(self.encoding, errors="replace")
        except LookupError:
            return self.content.decode("utf-8", errors="replace")

    @property
    def encoding(self) -> str:
        content_type = self.headers.get("content-type", "")
        for param in content_type.split(";")[1:]:
            name, _, value = param.strip().partition("=")
            if name.lower() == "charset" and value:
                return value.strip("\"'")
        return "utf-8"

    def json(self) -> Any:
        return json.loads(self.text)

    @property
    def message(self) -> str | None:
        """Error message reported by the API for unsuccessful responses."""
        if self.is_success:
            return None
        try:
            body = self.json()
        except ValueError:
            return self.text or None
        if isinstance(body, dict):
            for key in ("message", "error", "detail"):
                if body.get(key):
                    return str(body[key])
        return self.text or None
