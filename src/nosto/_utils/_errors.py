from contextlib import contextmanager
from typing import Generator

import httpx

from ..models.errors import TransportError


@contextmanager
def handle_errors(url: str) -> Generator[None, None, None]:
    """Context manager for translating httpx failures into transport errors.

    Connection, DNS and protocol failures, as well as responses that cannot be
    decoded, are raised as ``TransportError``. HTTP error statuses are not
    touched here; they reach the caller as regular responses.

    Args:
        url: The URL being requested, attached to the raised error.

    Yields:
        None: The context manager yields control to the wrapped code.

    Raises:
        TransportError: For any httpx error raised inside the block.
    """
    try:
        yield
    except httpx.InvalidURL as e:
        raise TransportError(f"Invalid request URL: {e}", url=url) from e
    except httpx.HTTPError as e:
        raise TransportError(f"{type(e).__name__}: {e}", url=url) from e
