"""
Messenger Send Methods SDK

A Python SDK for the Messenger Platform Send API: text, media, buttons,
templates, quick replies, sender actions and user profile lookups.

Usage:
    from messenger_send_methods import MessengerClient

    client = MessengerClient("your_page_token", version="3.1")

    # Every call returns a Future
    client.send_text_message("1254459154682919", "Hello!").result()
    client.send_image_message("1254459154682919", "https://example.com/cat.png")

    # Or pass a callback(error, body)
    client.toggle_typing("1254459154682919", True, callback=print)
"""

__version__ = "1.0.0"
__description__ = "SDK for the Messenger Platform Send API"

from .models import (
    AttachmentPayload,
    AttachmentType,
    Button,
    ClientMessage,
    GenericElement,
    GenericTemplate,
    MessagePayload,
    MessageTag,
    ProxyData,
    QuickReply,
    RequestData,
    RequestOptions,
    SenderAction,
)
from .exceptions import (
    MessengerError,
    AuthenticationError,
    RateLimitError,
    ValidationError,
    ProxyConfigError,
    NetworkError,
    APIError,
)
from .config import MessengerConfig, setup_logging
from .request_utils import RequestUtility
from .client import MessengerClient

__all__ = [
    "MessengerClient",
    "RequestUtility",
    "MessengerConfig",
    "setup_logging",
    "AttachmentPayload",
    "AttachmentType",
    "Button",
    "ClientMessage",
    "GenericElement",
    "GenericTemplate",
    "MessagePayload",
    "MessageTag",
    "ProxyData",
    "QuickReply",
    "RequestData",
    "RequestOptions",
    "SenderAction",
    "MessengerError",
    "AuthenticationError",
    "RateLimitError",
    "ValidationError",
    "ProxyConfigError",
    "NetworkError",
    "APIError",
]
