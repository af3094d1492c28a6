from .account import AccountBillingDetails, BillingDetailsProvider
from .errors import (
    ConfigurationError,
    MalformedUrlError,
    NostoError,
    TransportError,
    UnsupportedAuthTypeError,
)

__all__ = [
    "AccountBillingDetails",
    "BillingDetailsProvider",
    "ConfigurationError",
    "MalformedUrlError",
    "NostoError",
    "TransportError",
    "UnsupportedAuthTypeError",
]
