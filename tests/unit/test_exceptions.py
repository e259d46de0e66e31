"""
Exception Hierarchy Unit Tests
"""

import pytest

from nexmo_rest.exceptions import (
    ApiError,
    ConfigError,
    ErrorCategory,
    NexmoError,
    ParseError,
    StatusError,
    TransportError,
    ValidationError,
)


class TestErrorCategories:
    """Tests for category detection from error codes"""

    @pytest.mark.parametrize(
        "error, category",
        [
            (ConfigError("missing"), ErrorCategory.CONFIG),
            (ValidationError("bad", field="to"), ErrorCategory.VALIDATION),
            (TransportError.timeout(), ErrorCategory.TRANSPORT),
            (ParseError(), ErrorCategory.PARSE),
            (ApiError("rejected", payload={}), ErrorCategory.API),
            (StatusError(401), ErrorCategory.STATUS),
            (NexmoError("plain"), ErrorCategory.UNKNOWN),
        ],
    )
    def test_category(self, error: NexmoError, category: ErrorCategory):
        assert error.category == category
        assert error.is_category(category)

    def test_all_errors_share_base(self):
        for cls in (ConfigError, ValidationError, TransportError, ParseError, ApiError, StatusError):
            assert issubclass(cls, NexmoError)


class TestErrorDetails:
    """Tests for error payloads and descriptions"""

    def test_validation_error_names_field(self):
        error = ValidationError("to is required", field="to")
        assert error.field == "to"
        assert str(error) == "to is required"

    def test_api_error_keeps_payload(self):
        payload = {"messages": [{"status": "1", "error-text": "bad"}]}
        error = ApiError("bad", payload=payload, api_status="1")
        assert error.payload is payload
        assert error.api_status == "1"
        assert error.details == {"status": "1"}

    def test_status_error_description(self):
        error = StatusError(420)
        assert error.status_code == 420
        assert error.get_description() == "[STATUS01] Request failed with HTTP status 420 (HTTP 420)"

    def test_transport_factories(self):
        assert TransportError.timeout().has_code("NET01")
        assert TransportError.connection_refused().has_code("NET02")
        assert TransportError.ssl_error().has_code("NET04")
        assert TransportError.connection_closed().has_code("NET06")

    def test_parse_error_keeps_cause(self):
        cause = ValueError("Expecting value")
        error = ParseError(cause=cause)
        assert error.cause is cause

    def test_to_dict(self):
        data = ConfigError("missing credentials").to_dict()
        assert data["name"] == "ConfigError"
        assert data["message"] == "missing credentials"
        assert data["code"] == "CONFIG01"
        assert data["category"] == "CONFIG"
        assert data["timestamp"].endswith("+00:00")
