from pydantic import BaseModel
from typing import Any, Optional

from contact_relay.core.exceptions import SubmissionRejected

MESSAGE_MAX_LENGTH = 1000
NAME_MIN_LENGTH = 2
MESSAGE_MIN_LENGTH = 10

REQUIRED_FIELDS_MISSING = "Name and message are required."
INVALID_DATA_FORMAT = "Invalid data format."
NAME_TOO_SHORT = f"Name must be at least {NAME_MIN_LENGTH} characters."
MESSAGE_TOO_SHORT = f"Message must be at least {MESSAGE_MIN_LENGTH} characters."
MESSAGE_TOO_LONG = f"Message must be {MESSAGE_MAX_LENGTH} characters or fewer."


class ContactSubmission(BaseModel):
    """A validated, trimmed contact form submission"""
    name: str
    message: str
    phone: Optional[str] = None


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def validate_submission(payload: Any, strict: bool = True) -> ContactSubmission:
    """
    Validate a raw contact form payload.

    Checks run in a fixed order and the first failure wins. The strict
    variant also enforces types and minimum lengths.

    Args:
        payload: Parsed request body (usually a dict)
        strict: Apply the strict rule set

    Returns:
        ContactSubmission: name, message and phone trimmed

    Raises:
        SubmissionRejected: with the human-readable reason
    """
    if not isinstance(payload, dict):
        payload = {}

    name = payload.get("name")
    message = payload.get("message")
    phone = payload.get("phone")

    if not name or not message:
        raise SubmissionRejected(REQUIRED_FIELDS_MISSING)

    if strict:
        if not isinstance(name, str) or not isinstance(message, str):
            raise SubmissionRejected(INVALID_DATA_FORMAT)
        if len(name.strip()) < NAME_MIN_LENGTH:
            raise SubmissionRejected(NAME_TOO_SHORT)
        if len(message.strip()) < MESSAGE_MIN_LENGTH:
            raise SubmissionRejected(MESSAGE_TOO_SHORT)
    else:
        name = _as_text(name)
        message = _as_text(message)
        if not name.strip() or not message.strip():
            raise SubmissionRejected(REQUIRED_FIELDS_MISSING)

    # Spam guard: length is measured on the raw message
    if len(message) > MESSAGE_MAX_LENGTH:
        raise SubmissionRejected(MESSAGE_TOO_LONG)

    phone = (_as_text(phone).strip() or None) if phone else None

    return ContactSubmission(name=name.strip(), message=message.strip(), phone=phone)
