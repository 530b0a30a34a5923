"""Tests for client exception classes."""

from ptcg_assets.clients import (
    APIError,
    ClientError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)


class TestClientError:
    """Tests for the base ClientError exception."""

    def test_instantiation_with_message(self):
        """ClientError stores the error message."""
        error = ClientError("Something went wrong")

        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"
        assert error.url is None

    def test_url(self):
        """ClientError optionally records the URL involved."""
        error = ClientError("Failed", url="https://example.org/a.png")

        assert error.url == "https://example.org/a.png"


class TestConnectionError:
    """Tests for ConnectionError exception."""

    def test_inheritance(self):
        """ConnectionError inherits from ClientError."""
        error = ConnectionError("Network unreachable")

        assert isinstance(error, ClientError)
        assert error.message == "Network unreachable"


class TestAPIError:
    """Tests for APIError exception."""

    def test_stores_status_code(self):
        """APIError stores the HTTP status code."""
        error = APIError("Server error", status_code=500)

        assert error.status_code == 500
        assert isinstance(error, ClientError)


class TestRateLimitError:
    """Tests for RateLimitError exception."""

    def test_defaults(self):
        """RateLimitError has a default message and status 429."""
        error = RateLimitError()

        assert error.message == "Rate limit exceeded"
        assert error.status_code == 429
        assert isinstance(error, APIError)


class TestNotFoundError:
    """Tests for NotFoundError exception."""

    def test_defaults(self):
        """NotFoundError has a default message and status 404."""
        error = NotFoundError(url="https://example.org/missing.png")

        assert error.message == "Resource not found"
        assert error.status_code == 404
        assert error.url == "https://example.org/missing.png"
        assert isinstance(error, APIError)


class TestValidationError:
    """Tests for ValidationError exception."""

    def test_stores_errors(self):
        """ValidationError stores the validation errors."""
        error = ValidationError("Invalid data", errors=["missing symbolUrl"])

        assert error.errors == ["missing symbolUrl"]
        assert isinstance(error, ClientError)

    def test_default_errors(self):
        """ValidationError defaults to an empty error list."""
        assert ValidationError("Invalid data").errors == []
