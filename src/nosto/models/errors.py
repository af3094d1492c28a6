class NostoError(Exception):
    """Base class for every error raised by the Nosto HTTP layer."""


class ConfigurationError(NostoError):
    """Raised while a request is being set up, before any network activity."""


class UnsupportedAuthTypeError(ConfigurationError):
    def __init__(self, auth_type: object):
        self.auth_type = auth_type
        self.message = f"Unsupported auth type: {auth_type!r}"
        super().__init__(self.message)


class MalformedUrlError(NostoError, ValueError):
    """Raised when a URL cannot be parsed or rebuilt."""

    def __init__(self, url: object, reason: str = ""):
        self.url = url
        self.reason = reason
        self.message = f"Malformed URL {url!r}" + (f": {reason}" if reason else "")
        super().__init__(self.message)


class TransportError(NostoError):
    """Raised by an adapter when the request could not be carried out.

    Covers connection and DNS failures as well as responses that could not be
    read off the wire. HTTP error statuses are not transport errors; they are
    returned to the caller as ordinary responses.
    """

    def __init__(self, message: str, url: str | None = None):
        self.url = url
        self.message = message
        super().__init__(self.message)
