import importlib.util
import logging

from .._config import Config
from .._utils.constants import ADAPTER_HTTPX, ADAPTER_SOCKET
from ..models.errors import ConfigurationError
from ._adapter import HttpRequestAdapter
from ._socket_adapter import SocketAdapter

logger = logging.getLogger(__name__)


def httpx_available() -> bool:
    """Whether the httpx transport can be used in this environment."""
    return importlib.util.find_spec("httpx") is not None


def select_adapter(config: Config | None = None) -> HttpRequestAdapter:
    """Pick the adapter for a new request.

    ``config.adapter`` may force a specific adapter. With ``"auto"`` the httpx
    adapter is used when httpx is installed and the socket adapter otherwise.
    The httpx adapter module is only imported once httpx is known to exist.

    Raises:
        ConfigurationError: If the httpx adapter is requested but unavailable.
    """
    config = config or Config.from_env()

    if config.adapter == ADAPTER_SOCKET:
        logger.debug("Using socket adapter (configured)")
        return SocketAdapter()

    if httpx_available():
        from ._httpx_adapter import HttpxAdapter

        logger.debug("Using httpx adapter")
        return HttpxAdapter()

    if config.adapter == ADAPTER_HTTPX:
        raise ConfigurationError(
            "The httpx adapter was requested but httpx is not installed"
        )

    logger.warning("httpx is not available; falling back to the socket adapter")
    return SocketAdapter()
