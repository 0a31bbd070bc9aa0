"""
Main Messenger client for Messenger Send Methods SDK.

This module contains the MessengerClient class that assembles Send API
payloads (text, media, buttons, templates, quick replies, sender actions)
and fetches user profiles through the Graph API.
"""

import logging
from concurrent.futures import Executor, Future
from typing import Optional, Dict, Any, List, Union, Mapping, Sequence

from .config import MessengerConfig, setup_logging
from .constants import (
    DEFAULT_PROFILE_FIELD,
    Endpoints,
    HttpMethods,
    TemplateTypes,
)
from .models import (
    AttachmentPayload,
    AttachmentType,
    ClientMessage,
    MessagePayload,
    MessageTag,
    ProxyData,
    RequestData,
    RequestOptions,
    SenderAction,
    serialize,
)
from .request_utils import Callback, RequestUtility
from .validators import (
    is_url,
    validate_buttons,
    validate_message_text,
    validate_messaging_tag,
    validate_quick_replies,
    validate_recipient_id,
)

# Set up logging
logger = logging.getLogger(__name__)

Tag = Optional[Union[MessageTag, Dict[str, str]]]


class MessengerClient:
    """
    Send API client for Messenger.

    Every send method accepts an optional messaging tag and an optional
    ``callback(error, body)``, and returns a Future resolving with the
    Graph API response body. Media can be sent by URL or by the id of a
    previously uploaded attachment.

    Example:
        client = MessengerClient("PAGE_TOKEN", proxy_data={"hostname": "10.0.0.1", "port": 3128})

        # Block for the result
        body = client.send_text_message("1254459154682919", "Hello!").result()

        # Or get called back
        client.mark_seen("1254459154682919", callback=lambda err, body: print(err, body))
    """

    def __init__(
        self,
        token: str,
        proxy_data: Optional[Union[ProxyData, Mapping[str, Any]]] = None,
        version: Optional[str] = None,
        *,
        request_utility: Optional[RequestUtility] = None,
        executor: Optional[Executor] = None,
        timeout: Optional[float] = None,
        enable_validation: bool = True,
        enable_logging: bool = True
    ):
        """
        Initialize Messenger client.

        Args:
            token: Page access token
            proxy_data: Proxy hostname/port if behind a proxy
            version: Graph API version (e.g. "3.1")
            request_utility: Share a RequestUtility between clients
            executor: Run requests on this executor
            timeout: Request timeout in seconds
            enable_validation: Enable input validation
            enable_logging: Enable request/response logging

        Raises:
            ProxyConfigError: If proxy_data lacks hostname or port
        """
        self.request_data = RequestUtility.get_proxy_data(RequestData(token=token), proxy_data)

        if request_utility is None:
            request_utility = RequestUtility(
                executor=executor,
                timeout=timeout,
                enable_logging=enable_logging
            )
        self.request_utility = request_utility

        if version:
            self.request_utility.set_api_version(version)

        self.enable_validation = enable_validation
        self.enable_logging = enable_logging

        if self.enable_logging:
            logger.info(f"Messenger client initialized - API: {self.request_utility.base_url}")

    @classmethod
    def from_config(
        cls,
        config: MessengerConfig,
        configure_logging: bool = False,
        **kwargs
    ) -> "MessengerClient":
        """
        Create a client from a MessengerConfig.

        Args:
            config: Client configuration
            configure_logging: Also apply ``config.log_level`` through setup_logging
        """
        if configure_logging:
            setup_logging(config.log_level)
        return cls(
            config.token,
            proxy_data=config.proxy,
            version=config.api_version,
            timeout=config.timeout,
            **kwargs
        )

    def mark_seen(self, id: str, callback: Optional[Callback] = None) -> Future:
        """
        Mark the latest message from the user as seen.

        Args:
            id: Recipient id
            callback: Optional callback(error, body)
        """
        return self._send_action(id, SenderAction.MARK_SEEN, callback)

    def toggle_typing(
        self,
        id: str,
        toggle: Union[bool, Callback] = False,
        callback: Optional[Callback] = None
    ) -> Future:
        """
        Turn the typing indicator on or off.

        ``toggle`` may itself be the callback, in which case typing is
        turned off.

        Args:
            id: Recipient id
            toggle: True for typing_on, False for typing_off, or a callback
            callback: Optional callback(error, body)
        """
        if callable(toggle):
            return self._send_action(id, SenderAction.TYPING_OFF, toggle)

        action = SenderAction.TYPING_ON if toggle else SenderAction.TYPING_OFF
        return self._send_action(id, action, callback)

    def send_text_message(
        self,
        id: str,
        text: str,
        tag: Tag = None,
        callback: Optional[Callback] = None
    ) -> Future:
        """
        Send a simple text message.

        Raises:
            ValidationError: If text is empty or too long

        Example:
            client.send_text_message(
                "1254459154682919",
                "Your order has shipped",
                tag={"messaging_type": "MESSAGE_TAG", "tag": "POST_PURCHASE_UPDATE"}
            )
        """
        if self.enable_validation:
            validate_message_text(text, strict=True)
        return self._send_display_message(id, MessagePayload(text=text), tag, callback)

    def send_image_message(
        self,
        id: str,
        image_url_or_id: str,
        tag: Tag = None,
        callback: Optional[Callback] = None
    ) -> Future:
        """Send an image by URL or by id of a previously uploaded one."""
        return self._send_url_or_id_based_message(id, AttachmentType.IMAGE, image_url_or_id, tag, callback)

    def send_audio_message(
        self,
        id: str,
        audio_url_or_id: str,
        tag: Tag = None,
        callback: Optional[Callback] = None
    ) -> Future:
        """Send an audio clip by URL or by id of a previously uploaded one."""
        return self._send_url_or_id_based_message(id, AttachmentType.AUDIO, audio_url_or_id, tag, callback)

    def send_video_message(
        self,
        id: str,
        video_url_or_id: str,
        tag: Tag = None,
        callback: Optional[Callback] = None
    ) -> Future:
        """Send a video by URL or by id of a previously uploaded one."""
        return self._send_url_or_id_based_message(id, AttachmentType.VIDEO, video_url_or_id, tag, callback)

    def send_file_message(
        self,
        id: str,
        file_url_or_id: str,
        tag: Tag = None,
        callback: Optional[Callback] = None
    ) -> Future:
        """Send a file by URL or by id of a previously uploaded one."""
        return self._send_url_or_id_based_message(id, AttachmentType.FILE, file_url_or_id, tag, callback)

    def send_buttons_message(
        self,
        id: str,
        text: str,
        buttons: Sequence[Any],
        tag: Tag = None,
        callback: Optional[Callback] = None
    ) -> Future:
        """
        Send a button template: text followed by up to three buttons.

        Args:
            id: Recipient id
            text: Text shown above the buttons
            buttons: Button objects or dicts
            tag: Optional messaging tag
            callback: Optional callback(error, body)

        Example:
            client.send_buttons_message("1254459154682919", "Pick one", [
                Button.web_url("Website", "https://example.com"),
                Button.postback("Start", "GET_STARTED"),
            ])
        """
        if self.enable_validation:
            validate_message_text(text, strict=True)
            validate_buttons(buttons, strict=True)

        payload = AttachmentPayload(
            type=AttachmentType.TEMPLATE,
            payload={"template_type": TemplateTypes.BUTTON, "text": text, "buttons": list(buttons)}
        )
        return self._send_attachment_message(id, payload, tag, callback)

    def send_template_message(
        self,
        id: str,
        template_payload: Any,
        tag: Tag = None,
        callback: Optional[Callback] = None
    ) -> Future:
        """
        Send any template message.

        Args:
            id: Recipient id
            template_payload: Template payload (dict or e.g. GenericTemplate),
                including its ``template_type``
            tag: Optional messaging tag
            callback: Optional callback(error, body)
        """
        payload = AttachmentPayload(type=AttachmentType.TEMPLATE, payload=template_payload)
        return self._send_attachment_message(id, payload, tag, callback)

    def send_quick_reply_message(
        self,
        id: str,
        text_or_attachment: Union[str, AttachmentPayload, Dict[str, Any]],
        quick_replies: List[Any],
        tag: Tag = None,
        callback: Optional[Callback] = None
    ) -> Future:
        """
        Send text or an attachment together with quick replies.

        Args:
            id: Recipient id
            text_or_attachment: Message text, or an attachment object
            quick_replies: QuickReply objects or dicts
            tag: Optional messaging tag
            callback: Optional callback(error, body)
        """
        if self.enable_validation:
            validate_quick_replies(quick_replies, strict=True)

        if isinstance(text_or_attachment, str):
            payload = MessagePayload(text=text_or_attachment, quick_replies=quick_replies)
        else:
            payload = MessagePayload(attachment=text_or_attachment, quick_replies=quick_replies)
        return self._send_display_message(id, payload, tag, callback)

    def get_user_profile(
        self,
        id: str,
        fields: Optional[Sequence[str]] = None,
        callback: Optional[Callback] = None
    ) -> Future:
        """
        Fetch profile fields for a user.

        Args:
            id: User id
            fields: Field names; anything other than a list or tuple falls
                back to ``first_name``
            callback: Optional callback(error, body)

        Example:
            profile = client.get_user_profile("1254459154682919", ["first_name", "last_name"]).result()
        """
        if self.enable_validation:
            validate_recipient_id(id, strict=True)

        options = self.request_utility.get_request_options()
        options.url += str(id)
        if isinstance(fields, (list, tuple)):
            options.qs["fields"] = ",".join(fields)
        else:
            options.qs["fields"] = DEFAULT_PROFILE_FIELD
        options.method = HttpMethods.GET
        return self.request_utility.send_message(options, self.request_data, callback)

    def get_client_info(self) -> Dict[str, Any]:
        """
        Get client configuration information.

        Returns:
            Dictionary with client configuration
        """
        return {
            "base_url": self.request_utility.base_url,
            "proxy": self.request_data.proxy,
            "timeout": self.request_utility.timeout,
            "executor": type(self.request_utility.executor).__name__ if self.request_utility.executor else None,
            "validation_enabled": self.enable_validation,
            "logging_enabled": self.enable_logging,
        }

    def _send_url_or_id_based_message(
        self,
        id: str,
        attachment_type: AttachmentType,
        url_or_id: str,
        tag: Tag = None,
        callback: Optional[Callback] = None
    ) -> Future:
        if is_url(url_or_id):
            media = {"is_reusable": True, "url": url_or_id}
        else:
            media = {"attachment_id": url_or_id}
        return self._send_attachment_message(id, AttachmentPayload(type=attachment_type, payload=media), tag, callback)

    def _send_attachment_message(
        self,
        id: str,
        payload: AttachmentPayload,
        tag: Tag = None,
        callback: Optional[Callback] = None
    ) -> Future:
        return self._send_display_message(id, MessagePayload(attachment=payload), tag, callback)

    def _send_display_message(
        self,
        id: str,
        payload: MessagePayload,
        tag: Tag = None,
        callback: Optional[Callback] = None
    ) -> Future:
        if self.enable_validation:
            validate_messaging_tag(tag, strict=True)

        message = ClientMessage(recipient_id=id, message=payload).apply_tag(tag)
        return self._send(message, callback)

    def _send_action(self, id: str, action: SenderAction, callback: Optional[Callback] = None) -> Future:
        return self._send(ClientMessage(recipient_id=id, sender_action=action), callback)

    def _send(self, message: ClientMessage, callback: Optional[Callback] = None) -> Future:
        if self.enable_validation:
            validate_recipient_id(message.recipient_id, strict=True)

        options = self._generate_basic_request_options()
        options.json = serialize(message)
        return self.request_utility.send_message(options, self.request_data, callback)

    def _generate_basic_request_options(self) -> RequestOptions:
        options = self.request_utility.get_request_options()
        options.url += Endpoints.SEND_API
        options.method = HttpMethods.POST
        return options
