"""URL and query string helpers used to assemble request URLs.

Query strings follow the bracket convention for structured values:
``a[]=1&a[]=2`` is a list, ``a[x]=1`` a mapping. Encoding uses RFC 3986
percent-escapes, so a space becomes ``%20``.
"""

import re
from dataclasses import dataclass, replace
from typing import Any, Mapping
from urllib.parse import quote, unquote_plus, urlsplit

from ..models.errors import MalformedUrlError


@dataclass
class UrlParts:
    """The raw components of a URL; absent components are ``None``."""

    scheme: str | None = None
    host: str | None = None
    port: int | None = None
    user: str | None = None
    password: str | None = None
    path: str | None = None
    query: str | None = None
    fragment: str | None = None


def build_uri(template: str, replace_params: Mapping[str, Any]) -> str:
    """Substitute placeholders in a URL template.

    Every key is replaced literally wherever it occurs. A key that is not
    wrapped in braces also matches its ``{key}`` token. Substitution is a
    single pass: at each position the longest key wins, and replacement values
    are never scanned again.

    A bare key also matches inside other text, so ``{"id": "42"}`` turns
    ``/widgets/{id}`` into ``/w42gets/42``. Pass the braced token as the key,
    e.g. ``{"{id}": "42"}``, to replace only the placeholder.

    Args:
        template: The URL template, e.g. ``https://api.nosto.com/accounts/{id}``.
        replace_params: Mapping of placeholder to replacement value.

    Returns:
        The template with all placeholders substituted.

    Examples:
        >>> build_uri("/accounts/{id}", {"id": "42"})
        '/accounts/42'
        >>> build_uri("/a/{x}", {"{x}": "{y}", "{y}": "z"})
        '/a/{y}'
        >>> build_uri("/widgets/{id}", {"{id}": "42"})
        '/widgets/42'
    """
    replacements: dict[str, str] = {}
    for key, value in replace_params.items():
        key = str(key)
        if key:
            replacements[key] = str(value)

    for key, value in list(replacements.items()):
        if not (key.startswith("{") and key.endswith("}")):
            replacements.setdefault(f"{{{key}}}", value)

    if not replacements:
        return template

    pattern = re.compile(
        "|".join(re.escape(key) for key in sorted(replacements, key=len, reverse=True))
    )
    return pattern.sub(lambda match: replacements[match.group(0)], template)


def parse_url(url: str) -> UrlParts:
    """Split a URL into its raw components.

    Components are returned exactly as written, without percent-decoding.
    Empty components are reported as absent.

    Raises:
        MalformedUrlError: If the input is not a string or cannot be parsed,
            for example when the port is not a number in range.
    """
    if not isinstance(url, str):
        raise MalformedUrlError(url, "expected a string")

    try:
        split = urlsplit(url)
        port = split.port
    except ValueError as e:
        raise MalformedUrlError(url, str(e)) from e

    user: str | None = None
    password: str | None = None
    host: str | None = None
    if split.netloc:
        userinfo, has_userinfo, hostport = split.netloc.rpartition("@")
        if has_userinfo:
            user, has_password, secret = userinfo.partition(":")
            password = secret if has_password else None
        host = _strip_port(hostport) or None

    return UrlParts(
        scheme=split.scheme or None,
        host=host,
        port=port,
        user=user,
        password=password,
        path=split.path or None,
        query=split.query or None,
        fragment=split.fragment or None,
    )


def _strip_port(hostport: str) -> str:
    if hostport.startswith("["):
        return hostport[: hostport.find("]") + 1]
    return hostport.partition(":")[0]


def build_url(parts: UrlParts | Mapping[str, Any]) -> str:
    """Rebuild a URL from the components returned by :func:`parse_url`.

    A mapping is accepted as well; ``pass`` is an alias for ``password``.
    The ``@`` separator is written whenever a user or a password is present.

    Raises:
        MalformedUrlError: If a mapping contains keys that are not URL parts.
    """
    if not isinstance(parts, UrlParts):
        parts = _parts_from_mapping(parts)

    url = ""
    if parts.scheme is not None:
        url += f"{parts.scheme}://"
    if parts.user is not None or parts.password is not None:
        url += parts.user or ""
        if parts.password is not None:
            url += f":{parts.password}"
        url += "@"
    if parts.host is not None:
        url += parts.host
    if parts.port is not None:
        url += f":{parts.port}"
    if parts.path is not None:
        url += parts.path
    if parts.query is not None:
        url += f"?{parts.query}"
    if parts.fragment is not None:
        url += f"#{parts.fragment}"
    return url


def _parts_from_mapping(parts: Mapping[str, Any]) -> UrlParts:
    values = dict(parts)
    if "pass" in values:
        values["password"] = values.pop("pass")
    try:
        return UrlParts(**values)
    except TypeError as e:
        raise MalformedUrlError(parts, str(e)) from e


def parse_query_string(query_string: str | None) -> dict[str, Any]:
    """Parse a query string into a mapping.

    Values are percent-decoded, with ``+`` read as a space. A repeated plain key
    keeps its last value. Bracketed keys build nested values, and a mapping
    whose keys are exactly ``"0"`` to ``"n-1"`` is returned as a list.

    Examples:
        >>> parse_query_string("a=1&b=2")
        {'a': '1', 'b': '2'}
        >>> parse_query_string("a[]=1&a[]=2&b[x]=3")
        {'a': ['1', '2'], 'b': {'x': '3'}}
    """
    result: dict[str, Any] = {}
    if not query_string:
        return result

    for pair in query_string.split("&"):
        if not pair:
            continue
        raw_key, _, raw_value = pair.partition("=")
        key = unquote_plus(raw_key)
        if not key:
            continue
        _assign(result, key, unquote_plus(raw_value))

    return {key: _normalize(value) for key, value in result.items()}


def _split_key(key: str) -> tuple[str, list[str]]:
    start = key.find("[")
    if start <= 0:
        return key, []

    segments: list[str] = []
    pos = start
    while pos < len(key) and key[pos] == "[":
        end = key.find("]", pos)
        if end == -1:
            break
        segments.append(key[pos + 1 : end])
        pos = end + 1

    if not segments:
        return key, []
    return key[:start], segments


def _assign(target: dict[str, Any], key: str, value: str) -> None:
    name, segments = _split_key(key)
    container: dict[str, Any] | list[Any] = target
    slot = name
    for segment in segments:
        existing = container.get(slot) if isinstance(container, dict) else None
        child: dict[str, Any] | list[Any]
        if isinstance(existing, dict):
            child = existing
        elif isinstance(existing, list):
            child = (
                existing
                if segment == ""
                else {str(index): item for index, item in enumerate(existing)}
            )
        else:
            child = [] if segment == "" else {}
        _store(container, slot, child)
        container, slot = child, segment
    _store(container, slot, value)


def _store(container: dict[str, Any] | list[Any], slot: str, value: Any) -> None:
    # lists are only ever addressed through an empty "[]" segment
    if isinstance(container, list):
        container.append(value)
        return
    if slot == "":
        indices = [int(key) for key in container if key.isdigit()]
        slot = str(max(indices) + 1) if indices else "0"
    container[slot] = value


def _normalize(value: Any) -> Any:
    if isinstance(value, list):
        return [_normalize(item) for item in value]
    if isinstance(value, dict):
        normalized = {key: _normalize(item) for key, item in value.items()}
        if list(normalized) == [str(index) for index in range(len(normalized))]:
            return list(normalized.values())
        return normalized
    return value


def build_query_string(params: Mapping[str, Any]) -> str:
    """Encode a mapping as a query string.

    Lists and mappings use bracketed keys, ``True``/``False`` become ``1``/``0``
    and ``None`` values are left out. Key order follows the mapping.

    Examples:
        >>> build_query_string({"q": "hello world", "ids": [1, 2]})
        'q=hello%20world&ids%5B0%5D=1&ids%5B1%5D=2'
    """
    pairs: list[str] = []
    for key, value in params.items():
        _encode_pairs(str(key), value, pairs)
    return "&".join(pairs)


def _encode_pairs(key: str, value: Any, pairs: list[str]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _encode_pairs(f"{key}[{sub_key}]", sub_value, pairs)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _encode_pairs(f"{key}[{index}]", item, pairs)
    else:
        pairs.append(f"{quote(key, safe='')}={quote(_scalar(value), safe='')}")


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def replace_query_param(param: str, value: Any, query_string: str | None) -> str:
    """Set a single parameter in a query string.

    An existing parameter keeps its position; a new one is appended.

    Examples:
        >>> replace_query_param("x", "9", "x=1&y=2")
        'x=9&y=2'
        >>> replace_query_param("z", "3", "x=1&y=2")
        'x=1&y=2&z=3'
    """
    parsed = parse_query_string(query_string)
    parsed[param] = value
    return build_query_string(parsed)


def replace_query_param_in_url(param: str, value: Any, url: str) -> str:
    """Set a single query parameter in a URL, leaving the other parts untouched."""
    parts = parse_url(url)
    query = replace_query_param(param, value, parts.query)
    return build_url(replace(parts, query=query or None))
