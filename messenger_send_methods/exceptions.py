"""
Custom exceptions for Messenger Send Methods SDK.

This module defines the exception hierarchy for errors raised while building
Send API requests or reported back by the Graph API.
"""

from typing import Optional, Dict, Any

from .constants import GraphErrorCodes, StatusCodes


class MessengerError(Exception):
    """
    Base exception class for all Messenger Send API related errors.

    Attributes:
        message (str): Error message
        status_code (Optional[int]): HTTP status code if applicable
        error_code (Optional[int]): Graph API error code
        details (Dict[str, Any]): Additional error details
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}

    def __str__(self):
        error_parts = [f"{self.__class__.__name__}: {self.message}"]

        if self.status_code:
            error_parts.append(f"Status Code: {self.status_code}")

        if self.error_code is not None:
            error_parts.append(f"Error Code: {self.error_code}")

        if self.details:
            error_parts.append(f"Details: {self.details}")

        return " | ".join(error_parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
            "error_code": self.error_code,
            "details": self.details
        }


class AuthenticationError(MessengerError):
    """
    Raised when the page access token is rejected.

    This typically occurs when:
    - The token is invalid or expired (Graph code 190)
    - The token lacks the pages_messaging permission
    """

    def __init__(self, message: str = "Authentication failed", **kwargs):
        super().__init__(message, **kwargs)


class RateLimitError(MessengerError):
    """Raised when the Graph API reports a throttling error."""

    def __init__(self, message: str = "Rate limit exceeded", **kwargs):
        super().__init__(message, **kwargs)


class ValidationError(MessengerError):
    """
    Raised when input validation fails, locally or on the platform side.

    Attributes:
        field (Optional[str]): The field that failed validation
        value (Any): The invalid value
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value

    def __str__(self):
        base_str = super().__str__()
        if self.field:
            base_str += f" | Field: {self.field}"
        if self.value is not None:
            base_str += f" | Value: {self.value}"
        return base_str


class ProxyConfigError(ValidationError):
    """Raised when a proxy descriptor lacks a hostname or port."""


class NetworkError(MessengerError):
    """
    Raised when the HTTP call itself fails.

    This includes connection errors, DNS failures, proxy errors and
    timeouts reported by the transport.
    """

    def __init__(self, message: str = "Network error occurred", **kwargs):
        super().__init__(message, **kwargs)


class APIError(MessengerError):
    """
    Raised when the Graph API returns an error that fits no other category.

    Attributes:
        api_response (Optional[Dict]): Raw response body
        error_type (Optional[str]): Graph `error.type` (e.g. OAuthException)
        error_subcode (Optional[int]): Graph `error.error_subcode`
        fbtrace_id (Optional[str]): Graph trace id for support requests
    """

    def __init__(
        self,
        message: str,
        api_response: Optional[Dict[str, Any]] = None,
        error_type: Optional[str] = None,
        error_subcode: Optional[int] = None,
        fbtrace_id: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.api_response = api_response
        self.error_type = error_type
        self.error_subcode = error_subcode
        self.fbtrace_id = fbtrace_id

    def __str__(self):
        base_str = super().__str__()
        if self.fbtrace_id:
            base_str += f" | Trace: {self.fbtrace_id}"
        return base_str


# Exception mapping for HTTP status codes
HTTP_STATUS_TO_EXCEPTION = {
    StatusCodes.BAD_REQUEST: ValidationError,
    StatusCodes.UNAUTHORIZED: AuthenticationError,
    StatusCodes.FORBIDDEN: AuthenticationError,
    StatusCodes.NOT_FOUND: APIError,
    StatusCodes.TOO_MANY_REQUESTS: RateLimitError,
    StatusCodes.INTERNAL_SERVER_ERROR: APIError,
}


def _exception_class_for(status_code: Optional[int], error_code: Optional[int]):
    """Graph error codes win over the HTTP status."""
    if error_code in GraphErrorCodes.AUTH_CODES:
        return AuthenticationError
    if error_code in GraphErrorCodes.RATE_LIMIT_CODES:
        return RateLimitError
    return HTTP_STATUS_TO_EXCEPTION.get(status_code, APIError)


def create_exception_from_response(
    status_code: Optional[int],
    response_data: Optional[Dict[str, Any]] = None,
    default_message: str = "API request failed"
) -> MessengerError:
    """
    Create appropriate exception based on HTTP status code and response data.

    The Graph API reports failures as
    ``{"error": {"message", "type", "code", "error_subcode", "fbtrace_id"}}``.
    The platform message becomes the exception message and the raw error
    object is kept under ``details["error"]``.

    Args:
        status_code: HTTP status code (None when unknown)
        response_data: Parsed response body
        default_message: Message used when the body carries none

    Returns:
        Appropriate MessengerError subclass instance
    """
    message = default_message
    error: Dict[str, Any] = {}

    if isinstance(response_data, dict) and "error" in response_data:
        raw_error = response_data["error"]
        if isinstance(raw_error, dict):
            error = raw_error
            message = raw_error.get("message") or default_message
        else:
            message = str(raw_error)

    error_code = error.get("code")
    exception_class = _exception_class_for(status_code, error_code)
    details = {"error": error} if error else None

    if exception_class is APIError:
        return APIError(
            message=message,
            status_code=status_code,
            error_code=error_code,
            details=details,
            api_response=response_data if isinstance(response_data, dict) else None,
            error_type=error.get("type"),
            error_subcode=error.get("error_subcode"),
            fbtrace_id=error.get("fbtrace_id")
        )

    return exception_class(
        message=message,
        status_code=status_code,
        error_code=error_code,
        details=details
    )
