"""
Constants and configuration for Messenger Send Methods SDK.

This module contains the Graph API endpoints, sender actions, attachment
types, platform limits and other constants used throughout the SDK.
"""

from typing import Dict, Set

# API Configuration
DEFAULT_API_VERSION = "3.1"
GRAPH_BASE_URL = "https://graph.facebook.com/v{version}/"
DEFAULT_PROFILE_FIELD = "first_name"


# API Endpoints
class Endpoints:
    """Messenger Platform endpoints, relative to the versioned Graph URL."""

    SEND_API = "me/messages"


class HttpMethods:
    """HTTP methods used by the Send API."""

    GET = "GET"
    POST = "POST"


# Sender actions
class SenderActions:
    """Values for the `sender_action` field."""

    MARK_SEEN = "mark_seen"
    TYPING_ON = "typing_on"
    TYPING_OFF = "typing_off"


# Attachment types
class AttachmentTypes:
    """Attachment `type` values accepted by the Send API."""

    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"
    FILE = "file"
    TEMPLATE = "template"


class TemplateTypes:
    """Template `template_type` values."""

    BUTTON = "button"
    GENERIC = "generic"


class ButtonTypes:
    """Button `type` values."""

    WEB_URL = "web_url"
    POSTBACK = "postback"
    PHONE_NUMBER = "phone_number"
    ELEMENT_SHARE = "element_share"
    ACCOUNT_LINK = "account_link"
    ACCOUNT_UNLINK = "account_unlink"


class QuickReplyContentTypes:
    """Quick reply `content_type` values."""

    TEXT = "text"
    USER_PHONE_NUMBER = "user_phone_number"
    USER_EMAIL = "user_email"


class MessagingTypes:
    """Values for the `messaging_type` field."""

    RESPONSE = "RESPONSE"
    UPDATE = "UPDATE"
    MESSAGE_TAG = "MESSAGE_TAG"


# Message Limits
class MessageLimits:
    """Limits enforced by the Messenger Platform."""

    MAX_TEXT_LENGTH = 2000
    MAX_QUICK_REPLIES = 13
    MAX_BUTTONS = 3


# Graph API error codes
class GraphErrorCodes:
    """Graph API `error.code` values that map to specific exceptions."""

    INVALID_OAUTH_TOKEN = 190
    PERMISSION_DENIED = 10

    RATE_LIMIT_CODES: Set[int] = {4, 17, 32, 613}
    AUTH_CODES: Set[int] = {INVALID_OAUTH_TOKEN, PERMISSION_DENIED}


# Validation Patterns
class ValidationPatterns:
    """Regular expression patterns for validation."""

    # Also matches scheme-less hosts such as example.com/a.png
    URL_PATTERN = (
        r'(http(s)?://.)?(www\.)?[-a-zA-Z0-9@:%._+~#=]{2,256}'
        r'\.[a-z]{2,6}\b([-a-zA-Z0-9@:%_+.~#?&/=]*)'
    )


# Environment Variable Names
class EnvVars:
    """Environment variable names."""

    PAGE_TOKEN = "MESSENGER_PAGE_TOKEN"
    API_VERSION = "MESSENGER_API_VERSION"
    PROXY_HOST = "MESSENGER_PROXY_HOST"
    PROXY_PORT = "MESSENGER_PROXY_PORT"
    TIMEOUT = "MESSENGER_TIMEOUT"
    LOG_LEVEL = "MESSENGER_LOG_LEVEL"


# Logging Configuration
class LogConfig:
    """Logging configuration constants."""

    DEFAULT_LOG_LEVEL = "INFO"
    DEFAULT_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


# HTTP Headers
class Headers:
    """Standard HTTP headers used by the SDK."""

    ACCEPT = "Accept"
    USER_AGENT = "User-Agent"

    JSON_CONTENT_TYPE = "application/json"

    DEFAULT_HEADERS: Dict[str, str] = {
        ACCEPT: JSON_CONTENT_TYPE,
        USER_AGENT: "messenger-send-methods-sdk/1.0.0",
    }


# Status Codes
class StatusCodes:
    """HTTP status codes."""

    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500


# Common Error Messages
class ErrorMessages:
    """Common error messages."""

    INVALID_PROXY = "Invalid Proxy object given, expected hostname and port"
    INVALID_RECIPIENT = "Recipient id must be a non-empty string or integer."
    EMPTY_MESSAGE = "Message text cannot be empty."
    MESSAGE_TOO_LONG = "Message exceeds maximum length of {max_length} characters."
    INVALID_RESPONSE_BODY = "Could not parse response body as JSON."
    NETWORK_ERROR = "Network error occurred: {error}"
    TOO_MANY_ITEMS = "{field} accepts at most {limit} items, got {count}."
    EMPTY_LIST = "{field} must be a non-empty list."
    INVALID_TAG = "Messaging tag requires both messaging_type and tag."
