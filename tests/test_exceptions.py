"""
Unit tests for messenger_send_methods.exceptions module.

Tests the exception hierarchy and the mapping of Graph API error bodies and
HTTP status codes to exception types.
"""

import pytest
import sys
import os

# Add the parent directory to the path so we can import the module
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from messenger_send_methods.exceptions import (
    MessengerError,
    AuthenticationError,
    RateLimitError,
    ValidationError,
    ProxyConfigError,
    NetworkError,
    APIError,
    create_exception_from_response
)


class TestExceptionHierarchy:
    """Test the custom exception classes."""

    def test_messenger_error_base_class(self):
        """Test the base MessengerError class."""
        err = MessengerError(
            message="Base error",
            status_code=500,
            error_code=2,
            details={"key": "value"}
        )

        assert "Base error" in str(err)
        assert "500" in str(err)
        assert "Error Code: 2" in str(err)
        assert "value" in str(err)

        err_dict = err.to_dict()
        assert err_dict["type"] == "MessengerError"
        assert err_dict["message"] == "Base error"

    def test_defaults(self):
        """Test default messages."""
        assert "Authentication failed" in str(AuthenticationError())
        assert "Rate limit exceeded" in str(RateLimitError())
        assert "Network error occurred" in str(NetworkError())

    def test_validation_error(self):
        """Test the ValidationError class."""
        err = ValidationError("Bad recipient", field="recipient_id", value="")
        assert "Field: recipient_id" in str(err)
        assert "Value: " in str(err)

    def test_proxy_config_error_is_validation_error(self):
        """Test that proxy errors can be caught as validation errors."""
        assert issubclass(ProxyConfigError, ValidationError)
        assert issubclass(ProxyConfigError, MessengerError)


class TestCreateExceptionFromResponse:
    """Test the create_exception_from_response function."""

    def test_graph_error_body(self):
        """Test that the Graph error envelope is unpacked."""
        response_data = {
            "error": {
                "message": "(#100) Param recipient must be non-empty.",
                "type": "OAuthException",
                "code": 100,
                "error_subcode": 2018001,
                "fbtrace_id": "Eh7X"
            }
        }
        err = create_exception_from_response(400, response_data)

        assert isinstance(err, ValidationError)
        assert err.message == "(#100) Param recipient must be non-empty."
        assert err.status_code == 400
        assert err.error_code == 100
        assert err.details["error"] == response_data["error"]

    def test_invalid_token_code(self):
        """Test that code 190 maps to AuthenticationError regardless of status."""
        err = create_exception_from_response(400, {"error": {"message": "expired", "code": 190}})
        assert isinstance(err, AuthenticationError)

    @pytest.mark.parametrize("code", [4, 17, 32, 613])
    def test_rate_limit_codes(self, code):
        """Test throttling codes."""
        err = create_exception_from_response(400, {"error": {"message": "slow down", "code": code}})
        assert isinstance(err, RateLimitError)

    def test_http_status_mapping(self):
        """Test status-only mapping."""
        assert isinstance(create_exception_from_response(401, {}), AuthenticationError)
        assert isinstance(create_exception_from_response(429, {}), RateLimitError)
        assert isinstance(create_exception_from_response(404, {}), APIError)

    def test_unknown_status_maps_to_api_error(self):
        """Test the APIError fallback and its extra attributes."""
        response_data = {
            "error": {
                "message": "An unknown error has occurred.",
                "type": "OAuthException",
                "code": 1,
                "error_subcode": 99,
                "fbtrace_id": "TrAcE"
            }
        }
        err = create_exception_from_response(503, response_data)

        assert isinstance(err, APIError)
        assert err.error_type == "OAuthException"
        assert err.error_subcode == 99
        assert err.fbtrace_id == "TrAcE"
        assert err.api_response == response_data
        assert "Trace: TrAcE" in str(err)

    def test_string_error(self):
        """Test a non-object error value."""
        err = create_exception_from_response(500, {"error": "boom"})
        assert err.message == "boom"
        assert err.details == {}

    def test_no_body(self):
        """Test the default message."""
        err = create_exception_from_response(500)
        assert err.message == "API request failed"
