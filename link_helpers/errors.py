"""Exception types raised by the link helpers."""


class LinkHelperError(Exception):
    """Base class for link helper failures."""


class InvalidLinkOptionsError(LinkHelperError, TypeError):
    """Raised when link ``options`` are neither a URL string nor a mapping."""

    def __init__(self, value):
        self.value = value
        super().__init__(
            f"Link options must be a string, a mapping or LinkOptions, got {type(value).__name__}"
        )


class MissingRequestContextError(LinkHelperError, RuntimeError):
    """Raised when the current request URI is needed outside of a request."""

    def __init__(self, message: str = "No request context is active; cannot read the current request URI."):
        super().__init__(message)
