from ._auth import AuthSpec, AuthType, BasicAuth, BearerAuth, auth_from
from ._url import (
    UrlParts,
    build_query_string,
    build_uri,
    build_url,
    parse_query_string,
    parse_url,
    replace_query_param,
    replace_query_param_in_url,
)

__all__ = [
    "AuthSpec",
    "AuthType",
    "BasicAuth",
    "BearerAuth",
    "auth_from",
    "UrlParts",
    "build_query_string",
    "build_uri",
    "build_url",
    "parse_query_string",
    "parse_url",
    "replace_query_param",
    "replace_query_param_in_url",
]
