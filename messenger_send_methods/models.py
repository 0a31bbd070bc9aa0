"""
Request and payload models for Messenger Send Methods SDK.

This module defines the dataclasses mirroring the Send API JSON schema:
request options, the outgoing message envelope, attachments, and the
structured objects (quick replies, buttons, templates) carried inside them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any, List, Union

from .constants import (
    AttachmentTypes,
    ButtonTypes,
    Headers,
    MessagingTypes,
    QuickReplyContentTypes,
    SenderActions,
    TemplateTypes,
)


class AttachmentType(Enum):
    """Enumeration of attachment types."""
    IMAGE = AttachmentTypes.IMAGE
    AUDIO = AttachmentTypes.AUDIO
    VIDEO = AttachmentTypes.VIDEO
    FILE = AttachmentTypes.FILE
    TEMPLATE = AttachmentTypes.TEMPLATE


class SenderAction(Enum):
    """Enumeration of sender actions."""
    MARK_SEEN = SenderActions.MARK_SEEN
    TYPING_ON = SenderActions.TYPING_ON
    TYPING_OFF = SenderActions.TYPING_OFF


def serialize(value: Any) -> Any:
    """Render models, nested in lists or dicts, into plain JSON-ready values."""
    if isinstance(value, dict):
        return {key: serialize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


@dataclass
class ProxyData:
    """Proxy host and port."""
    hostname: str
    port: Union[int, str]


@dataclass
class RequestData:
    """
    Per-client data attached to every request.

    Attributes:
        token: Page access token
        proxy: Normalised proxy URL (e.g. http://10.0.0.1:3128)
    """
    token: str
    proxy: Optional[str] = None


@dataclass
class RequestOptions:
    """
    Options for a single Graph API call.

    Attributes:
        url: Target URL
        qs: Query string parameters (access_token, fields)
        method: HTTP method
        proxy: Proxy URL, if any
        json: JSON body
    """
    url: str
    qs: Dict[str, Any] = field(default_factory=lambda: {"access_token": None})
    method: Optional[str] = None
    proxy: Optional[str] = None
    json: Optional[Dict[str, Any]] = None

    def to_request_kwargs(self, timeout: Optional[float] = None) -> Dict[str, Any]:
        """Render into keyword arguments for ``requests.request``."""
        kwargs: Dict[str, Any] = {
            "method": self.method,
            "url": self.url,
            "params": {key: value for key, value in self.qs.items() if value is not None},
            "headers": dict(Headers.DEFAULT_HEADERS),
            "timeout": timeout,
        }
        if self.json is not None:
            kwargs["json"] = self.json
        if self.proxy:
            kwargs["proxies"] = {"http": self.proxy, "https": self.proxy}
        return kwargs


@dataclass
class MessageTag:
    """Messaging type / tag pair classifying a message."""
    messaging_type: str
    tag: str

    @classmethod
    def for_tag(cls, tag: str) -> "MessageTag":
        """Tagged message sent outside the standard messaging window."""
        return cls(messaging_type=MessagingTypes.MESSAGE_TAG, tag=tag)

    @classmethod
    def from_value(cls, value: Union["MessageTag", Dict[str, str]]) -> "MessageTag":
        """Accept either a MessageTag or a dict with the same keys."""
        if isinstance(value, cls):
            return value
        return cls(messaging_type=value["messaging_type"], tag=value["tag"])

    def to_dict(self) -> Dict[str, str]:
        return {"messaging_type": self.messaging_type, "tag": self.tag}


@dataclass
class AttachmentPayload:
    """Attachment: a type tag plus a type-specific payload."""
    type: AttachmentType
    payload: Any

    def to_dict(self) -> Dict[str, Any]:
        return {"type": serialize(self.type), "payload": serialize(self.payload)}


@dataclass
class MessagePayload:
    """The `message` object: text and/or quick replies and/or one attachment."""
    text: Optional[str] = None
    quick_replies: Optional[List[Any]] = None
    attachment: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.text is not None:
            data["text"] = self.text
        if self.attachment is not None:
            data["attachment"] = serialize(self.attachment)
        if self.quick_replies is not None:
            data["quick_replies"] = serialize(self.quick_replies)
        return data


@dataclass
class ClientMessage:
    """
    Send API request body.

    Attributes:
        recipient_id: Page-scoped id of the recipient
        message: Message payload (mutually exclusive with sender_action)
        sender_action: Sender action
        messaging_type: Messaging type of a tagged message
        tag: Message tag
    """
    recipient_id: str
    message: Optional[MessagePayload] = None
    sender_action: Optional[SenderAction] = None
    messaging_type: Optional[str] = None
    tag: Optional[str] = None

    def apply_tag(self, tag: Optional[Union[MessageTag, Dict[str, str]]]) -> "ClientMessage":
        if tag:
            message_tag = MessageTag.from_value(tag)
            self.messaging_type = message_tag.messaging_type
            self.tag = message_tag.tag
        return self

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"recipient": {"id": self.recipient_id}}
        if self.message is not None:
            data["message"] = self.message.to_dict()
        if self.sender_action is not None:
            data["sender_action"] = serialize(self.sender_action)
        if self.messaging_type is not None:
            data["messaging_type"] = self.messaging_type
        if self.tag is not None:
            data["tag"] = self.tag
        return data


@dataclass
class QuickReply:
    """
    Quick reply shown above the composer.

    Attributes:
        content_type: text, user_phone_number or user_email
        title: Button caption (text replies only)
        payload: Postback payload (text replies only)
        image_url: Optional icon
    """
    content_type: str = QuickReplyContentTypes.TEXT
    title: Optional[str] = None
    payload: Optional[str] = None
    image_url: Optional[str] = None

    @classmethod
    def text(cls, title: str, payload: str, image_url: Optional[str] = None) -> "QuickReply":
        return cls(QuickReplyContentTypes.TEXT, title=title, payload=payload, image_url=image_url)

    @classmethod
    def user_phone_number(cls) -> "QuickReply":
        return cls(QuickReplyContentTypes.USER_PHONE_NUMBER)

    @classmethod
    def user_email(cls) -> "QuickReply":
        return cls(QuickReplyContentTypes.USER_EMAIL)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"content_type": self.content_type}
        if self.title is not None:
            data["title"] = self.title
        if self.payload is not None:
            data["payload"] = self.payload
        if self.image_url is not None:
            data["image_url"] = self.image_url
        return data


@dataclass
class Button:
    """
    Button used by button and generic templates.

    Only the fields relevant to `type` are serialized.
    """
    type: str
    title: Optional[str] = None
    url: Optional[str] = None
    payload: Optional[str] = None
    webview_height_ratio: Optional[str] = None
    messenger_extensions: Optional[bool] = None
    fallback_url: Optional[str] = None

    @classmethod
    def web_url(cls, title: str, url: str, webview_height_ratio: Optional[str] = None) -> "Button":
        return cls(ButtonTypes.WEB_URL, title=title, url=url, webview_height_ratio=webview_height_ratio)

    @classmethod
    def postback(cls, title: str, payload: str) -> "Button":
        return cls(ButtonTypes.POSTBACK, title=title, payload=payload)

    @classmethod
    def phone_number(cls, title: str, phone_number: str) -> "Button":
        return cls(ButtonTypes.PHONE_NUMBER, title=title, payload=phone_number)

    @classmethod
    def element_share(cls) -> "Button":
        return cls(ButtonTypes.ELEMENT_SHARE)

    @classmethod
    def account_link(cls, url: str) -> "Button":
        return cls(ButtonTypes.ACCOUNT_LINK, url=url)

    @classmethod
    def account_unlink(cls) -> "Button":
        return cls(ButtonTypes.ACCOUNT_UNLINK)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type}
        for key in ("title", "url", "payload", "webview_height_ratio",
                    "messenger_extensions", "fallback_url"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


@dataclass
class GenericElement:
    """One element (card) of a generic template."""
    title: str
    subtitle: Optional[str] = None
    image_url: Optional[str] = None
    default_action: Optional[Dict[str, Any]] = None
    buttons: List[Any] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"title": self.title}
        if self.subtitle is not None:
            data["subtitle"] = self.subtitle
        if self.image_url is not None:
            data["image_url"] = self.image_url
        if self.default_action is not None:
            data["default_action"] = self.default_action
        if self.buttons:
            data["buttons"] = serialize(self.buttons)
        return data


@dataclass
class GenericTemplate:
    """Generic template payload (horizontal carousel of elements)."""
    elements: List[GenericElement] = field(default_factory=list)
    image_aspect_ratio: Optional[str] = None
    sharable: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "template_type": TemplateTypes.GENERIC,
            "elements": serialize(self.elements),
        }
        if self.image_aspect_ratio is not None:
            data["image_aspect_ratio"] = self.image_aspect_ratio
        if self.sharable is not None:
            data["sharable"] = self.sharable
        return data
