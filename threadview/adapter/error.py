"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class TransportError(AdapterError):
    """Comment service could not be reached (network failure or timeout)."""

    pass


class ApiError(AdapterError):
    """Comment service answered with a non-success status."""

    def __init__(self, status: int, message: str):
        self.status = status
        self.message = message
        super().__init__(f"HTTP {status}: {message}")
