"""Custom exception hierarchy for customer-hub."""


class CustomerHubError(Exception):
    """Base exception for all customer-hub errors."""


class NetworkError(CustomerHubError):
    """Raised when a remote sheet cannot be fetched."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class InsufficientDataError(CustomerHubError):
    """Raised when a loaded source yields no usable rows."""


class DataLoadError(CustomerHubError):
    """Raised when not even the built-in sample data can be processed."""


class ConfigurationError(CustomerHubError):
    """Raised when configuration is invalid or missing."""
