"""
Input validation functions for Messenger Send Methods SDK.

Each validator returns True/False, or raises ValidationError when called
with ``strict=True``. ``is_url`` implements the heuristic used to tell an
attachment URL apart from the id of a previously uploaded attachment.
"""

import re
import logging
from typing import Any, Mapping, Optional

from .constants import ErrorMessages, MessageLimits, ValidationPatterns
from .exceptions import ValidationError
from .models import MessageTag

# Set up logging
logger = logging.getLogger(__name__)

_URL_RE = re.compile(ValidationPatterns.URL_PATTERN)


def is_url(url_or_id: str) -> bool:
    """
    Tell whether an attachment reference looks like a URL.

    The pattern is searched anywhere in the string, so a bare host name such
    as ``example.com/cat.png`` counts as a URL while a numeric attachment id
    does not.

    Args:
        url_or_id: URL or attachment id

    Returns:
        True if the value should be sent as ``{"url": ...}``
    """
    return bool(_URL_RE.search(url_or_id))


def validate_recipient_id(recipient_id: Any, strict: bool = False) -> bool:
    """
    Validate a page-scoped recipient id.

    Raises:
        ValidationError: If the id is empty and strict validation
    """
    is_valid = (
        isinstance(recipient_id, int) and not isinstance(recipient_id, bool)
    ) or (isinstance(recipient_id, str) and bool(recipient_id.strip()))

    if not is_valid and strict:
        raise ValidationError(
            ErrorMessages.INVALID_RECIPIENT,
            field="recipient_id",
            value=recipient_id
        )
    return is_valid


def validate_message_text(text: Any, strict: bool = False) -> bool:
    """
    Validate message text content.

    Args:
        text: Message text to validate
        strict: Raise exception if invalid

    Returns:
        True if valid, False otherwise

    Raises:
        ValidationError: If text is empty or too long and strict validation
    """
    if not text or not isinstance(text, str) or not text.strip():
        if strict:
            raise ValidationError(ErrorMessages.EMPTY_MESSAGE, field="text", value=text)
        return False

    if len(text) > MessageLimits.MAX_TEXT_LENGTH:
        if strict:
            raise ValidationError(
                ErrorMessages.MESSAGE_TOO_LONG.format(max_length=MessageLimits.MAX_TEXT_LENGTH),
                field="text",
                value=f"{len(text)} characters"
            )
        return False

    return True


def _validate_list(items: Any, field_name: str, limit: int, strict: bool) -> bool:
    if not isinstance(items, (list, tuple)) or not items:
        if strict:
            raise ValidationError(
                ErrorMessages.EMPTY_LIST.format(field=field_name),
                field=field_name,
                value=items
            )
        return False

    if len(items) > limit:
        if strict:
            raise ValidationError(
                ErrorMessages.TOO_MANY_ITEMS.format(field=field_name, limit=limit, count=len(items)),
                field=field_name,
                value=len(items)
            )
        return False

    return True


def validate_quick_replies(quick_replies: Any, strict: bool = False) -> bool:
    """Validate the quick reply list (1 to 13 entries)."""
    return _validate_list(quick_replies, "quick_replies", MessageLimits.MAX_QUICK_REPLIES, strict)


def validate_buttons(buttons: Any, strict: bool = False) -> bool:
    """Validate the button list of a button template (1 to 3 entries)."""
    return _validate_list(buttons, "buttons", MessageLimits.MAX_BUTTONS, strict)


def validate_messaging_tag(tag: Optional[Any], strict: bool = False) -> bool:
    """
    Validate a messaging type / tag pair.

    ``None`` is valid (untagged message). Otherwise a MessageTag or a mapping
    with non-empty ``messaging_type`` and ``tag`` is required.
    """
    if tag is None:
        return True

    if isinstance(tag, MessageTag):
        is_valid = bool(tag.messaging_type) and bool(tag.tag)
    elif isinstance(tag, Mapping):
        is_valid = bool(tag.get("messaging_type")) and bool(tag.get("tag"))
    else:
        is_valid = False

    if not is_valid:
        logger.debug(f"Rejected messaging tag: {tag!r}")
        if strict:
            raise ValidationError(ErrorMessages.INVALID_TAG, field="tag", value=tag)

    return is_valid
