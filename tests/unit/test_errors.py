"""Tests for custom errors."""
from travel_fx.utils.errors import (
    TravelFxError,
    ConfigurationError,
    ValidationError,
    InvalidArgument,
    EmptySeriesError,
    DataProviderError,
    RemoteError,
    RateLimitError,
)


def test_error_hierarchy():
    """Test error inheritance."""
    assert issubclass(ConfigurationError, TravelFxError)
    assert issubclass(ValidationError, TravelFxError)
    assert issubclass(InvalidArgument, ValidationError)
    assert issubclass(EmptySeriesError, TravelFxError)
    assert issubclass(RemoteError, DataProviderError)
    assert issubclass(RateLimitError, RemoteError)


def test_error_messages():
    """Test error messages."""
    error = ConfigurationError("Test message")
    assert str(error) == "Test message"


def test_remote_error_reason():
    error = RemoteError("boom", reason="retries_exhausted")
    assert error.reason == "retries_exhausted"
    assert str(error) == "boom"

    assert RemoteError().reason == "remote_error"
    assert RateLimitError().reason == "rate_limited"
