"""
Utility functions
"""
import re
import json
import uuid
from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Current time as a timezone-aware UTC datetime

    Returns:
        datetime object
    """
    return datetime.now(timezone.utc)


PERSONAL_FIELDS = ("customer_name",)

_PERSONAL_FIELD_PATTERN = re.compile(
    r'("(?:' + "|".join(PERSONAL_FIELDS) + r')"\s*:\s*")((?:[^"\\]|\\.)*)(")'
)


def mask_name(name: str, mask_char: str = "*") -> str:
    """
    Mask a display name, keeping its first character

    Args:
        name: customer name
        mask_char: mask character

    Returns:
        masked name ("Jan Levinson" -> "J***")
    """
    if not name:
        return name
    return name[0] + mask_char * 3


def mask_personal_info(text: str, mask_char: str = "*") -> str:
    """
    Mask personal fields in a logged request body

    JSON objects have their personal fields replaced. Malformed JSON is
    masked by pattern.

    Args:
        text: request body
        mask_char: mask character

    Returns:
        masked text
    """
    try:
        payload = json.loads(text)
    except ValueError:
        return _PERSONAL_FIELD_PATTERN.sub(
            lambda match: match.group(1) + mask_name(match.group(2), mask_char) + match.group(3),
            text
        )

    if not isinstance(payload, dict):
        return text

    for field in PERSONAL_FIELDS:
        if isinstance(payload.get(field), str):
            payload[field] = mask_name(payload[field], mask_char)
    return json.dumps(payload, ensure_ascii=False)


def generate_session_id() -> str:
    """
    Generate a session ID (with sess_ prefix)

    Returns:
        session ID string
    """
    return f"sess_{uuid.uuid4().hex}"


def generate_message_id() -> str:
    """Generate a chat message ID (with msg_ prefix)"""
    return f"msg_{uuid.uuid4().hex}"

