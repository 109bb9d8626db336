"""Adapter layer errors."""


class AdapterError(Exception):
    """Base error for calls to external systems."""

    pass


class ProviderError(AdapterError):
    """An external provider failed or answered with an unexpected status.

    Attributes:
        status_code: HTTP status returned by the provider, None for transport errors
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
