import os
from typing import Literal

from pydantic import BaseModel, ValidationError

from ._utils.constants import ADAPTER_AUTO, ENV_HTTP_ADAPTER
from .models.errors import ConfigurationError

AdapterName = Literal["auto", "httpx", "socket"]


class Config(BaseModel):
    adapter: AdapterName = ADAPTER_AUTO

    @classmethod
    def from_env(cls) -> "Config":
        """Build the configuration from ``NOSTO_HTTP_ADAPTER``.

        Raises:
            ConfigurationError: If the variable holds an unknown adapter name.
        """
        adapter = os.getenv(ENV_HTTP_ADAPTER, "").strip().lower() or ADAPTER_AUTO
        try:
            return cls(adapter=adapter)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid {ENV_HTTP_ADAPTER} value {adapter!r}; "
                "expected one of 'auto', 'httpx', 'socket'"
            ) from e
