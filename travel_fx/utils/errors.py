"""Custom exception classes for Travel FX."""


class TravelFxError(Exception):
    """Base exception for all Travel FX errors."""
    pass


class ConfigurationError(TravelFxError):
    """Raised when there's a configuration error."""
    pass


class ValidationError(TravelFxError):
    """Raised when data validation fails."""
    pass


class InvalidArgument(ValidationError):
    """Raised when a caller passes arguments outside an operation's contract."""
    pass


class EmptySeriesError(TravelFxError):
    """Raised when a series has too few points for the requested analysis."""
    pass


class DataProviderError(TravelFxError):
    """Base exception for data provider errors."""
    pass


class RemoteError(DataProviderError):
    """Raised when the remote rate estimator cannot produce a usable number."""

    def __init__(self, message: str = "", reason: str = "remote_error"):
        super().__init__(message or reason)
        self.reason = reason


class RateLimitError(RemoteError):
    """Raised when API rate limit is exceeded."""

    def __init__(self, message: str = "Rate limit exceeded"):
        super().__init__(message, reason="rate_limited")
