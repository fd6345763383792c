"""Exceptions raised by the assistant services."""


class OmniSmartError(Exception):
    """Base class for assistant errors."""


class InvalidQueryError(OmniSmartError):
    """Raised when a search query is empty or blank."""


class CartError(OmniSmartError):
    """Raised on invalid cart operations (unknown item, bad quantity, empty checkout)."""


class SessionNotFoundError(OmniSmartError):
    """Raised when a session id is unknown."""


class UnsupportedActionError(OmniSmartError):
    """Raised when an action kind has no server-side handler."""
