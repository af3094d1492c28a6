from logging import getLogger
from typing import Any, Mapping

from .._config import Config
from .._utils._auth import AuthSpec, AuthType, auth_from
from .._utils._url import (
    build_query_string,
    build_uri,
    build_url,
    parse_query_string,
    parse_url,
    replace_query_param,
    replace_query_param_in_url,
)
from .._utils.constants import HEADER_AUTHORIZATION, HEADER_CONTENT_TYPE
from ..models.errors import ConfigurationError
from ._adapter import HttpRequestAdapter
from ._response import HttpResponse
from ._selection import select_adapter


class HttpRequest:
    """Builds one HTTP request and sends it through a request adapter.

    The URL may contain placeholders that are filled from the replace params
    when the request is sent. Headers are kept as raw ``"Key: Value"`` lines in
    the order they were added; nothing is deduplicated, so setting the content
    type twice sends two ``Content-type`` headers.

    Example:
        ```python
        from nosto.http import HttpRequest

        request = HttpRequest()
        request.set_url("https://api.nosto.com/v1/accounts/{account}")
        request.set_replace_params({"{account}": "shop-1"})
        request.set_auth_bearer(token)
        response = request.get()
        ```

    An instance is meant to be configured and used by a single caller; it does
    no locking.
    """

    AUTH_BASIC = AuthType.BASIC
    AUTH_BEARER = AuthType.BEARER

    build_uri = staticmethod(build_uri)
    build_url = staticmethod(build_url)
    parse_url = staticmethod(parse_url)
    parse_query_string = staticmethod(parse_query_string)
    replace_query_param = staticmethod(replace_query_param)
    replace_query_param_in_url = staticmethod(replace_query_param_in_url)

    def __init__(
        self,
        adapter: HttpRequestAdapter | None = None,
        *,
        config: Config | None = None,
    ) -> None:
        self._logger = getLogger("nosto")
        self._adapter = adapter if adapter is not None else select_adapter(config)
        self._url: str | None = None
        self._headers: list[str] = []
        self._query_params: Mapping[str, Any] = {}
        self._replace_params: Mapping[str, Any] = {}

    @property
    def adapter(self) -> HttpRequestAdapter:
        return self._adapter

    @property
    def url(self) -> str | None:
        return self._url

    def set_url(self, url: str) -> None:
        self._url = url

    def set_content_type(self, content_type: str) -> None:
        self.add_header(HEADER_CONTENT_TYPE, content_type)

    def add_header(self, key: str, value: str) -> None:
        self._headers.append(f"{key}: {value}")

    def get_headers(self) -> list[str]:
        return list(self._headers)

    def set_query_params(self, query_params: Mapping[str, Any]) -> None:
        self._query_params = query_params

    def get_query_params(self) -> Mapping[str, Any]:
        return self._query_params

    def set_replace_params(self, replace_params: Mapping[str, Any]) -> None:
        self._replace_params = replace_params

    def set_auth(self, auth_type: AuthType | str, value: Any) -> None:
        """Add an ``Authorization`` header.

        Args:
            auth_type: ``HttpRequest.AUTH_BASIC`` or ``HttpRequest.AUTH_BEARER``.
            value: A ``(username, password)`` pair for basic auth, the access
                token for bearer auth.

        Raises:
            UnsupportedAuthTypeError: If ``auth_type`` is not supported. No
                header is added in that case.
        """
        self.set_auth_spec(auth_from(auth_type, value))

    def set_auth_spec(self, auth: AuthSpec) -> None:
        self.add_header(HEADER_AUTHORIZATION, auth.header_value())

    def set_auth_basic(self, username: str, password: str) -> None:
        self.set_auth(self.AUTH_BASIC, (username, password))

    def set_auth_bearer(self, token: str) -> None:
        self.set_auth(self.AUTH_BEARER, token)

    def post(self, content: str | bytes | None = None) -> HttpResponse:
        url = self._resolve_url()
        self._logger.debug(f"Request: POST {url}")
        return self._adapter.post(url, headers=self.get_headers(), content=content)

    def get(self) -> HttpResponse:
        url = self._resolve_url()
        query = build_query_string(self._query_params) if self._query_params else ""
        if query:
            url += f"?{query}"
        self._logger.debug(f"Request: GET {url}")
        return self._adapter.get(url, headers=self.get_headers())

    def _resolve_url(self) -> str:
        if self._url is None:
            raise ConfigurationError("The request URL has not been set")
        if self._replace_params:
            return build_uri(self._url, self._replace_params)
        return self._url
