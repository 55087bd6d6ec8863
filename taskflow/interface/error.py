"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class UnauthorizedError(InterfaceError):
    """Raised when a request carries no usable bearer token."""

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message)
