"""
Contact form endpoint.

Validates the submission, relays it to Pushover and reports the outcome.
A rejected submission never triggers a notification; an accepted one
triggers exactly one delivery attempt.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from typing import Any, Dict
from urllib.parse import parse_qsl
import json
import logging

from contact_relay.api.deps import get_app_settings, get_notifier
from contact_relay.core.config import Settings
from contact_relay.core.errors import CONTACT_FAILED, PAYLOAD_TOO_LARGE, error_response
from contact_relay.core.exceptions import NotificationDeliveryError, SubmissionRejected
from contact_relay.core.notifier import PushoverNotifier
from contact_relay.core.utils import iso_timestamp
from contact_relay.models.contact import INVALID_DATA_FORMAT, validate_submission

router = APIRouter()
logger = logging.getLogger(__name__)

MAX_BODY_BYTES = 10 * 1024 * 1024
CONTACT_SENT = "Your inquiry was sent successfully."


def preview(text: Any, length: int = 50) -> Any:
    """Shorten long text for log lines"""
    if not isinstance(text, str):
        return text
    return text[:length] + "..." if len(text) > length else text


async def read_payload(request: Request) -> Any:
    """
    Parse the request body as JSON or as a url-encoded form.

    Raises:
        HTTPException: 413 when the body exceeds MAX_BODY_BYTES
        SubmissionRejected: when a JSON body cannot be decoded
    """
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > MAX_BODY_BYTES:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=PAYLOAD_TOO_LARGE)

    # Chunked uploads carry no Content-Length; stop reading once over the cap
    chunks = []
    received = 0
    async for chunk in request.stream():
        received += len(chunk)
        if received > MAX_BODY_BYTES:
            raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=PAYLOAD_TOO_LARGE)
        chunks.append(chunk)
    body = b"".join(chunks)
    if not body.strip():
        return {}

    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/x-www-form-urlencoded"):
        return dict(parse_qsl(body.decode("utf-8", errors="replace"), keep_blank_values=True))

    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise SubmissionRejected(INVALID_DATA_FORMAT)


@router.post("/contact")
async def submit_contact(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    notifier: PushoverNotifier = Depends(get_notifier),
) -> Dict[str, Any]:
    """
    Relay a contact form submission as a push notification.

    Body: {"name": str, "message": str, "phone": str (optional)}

    Returns:
        dict: success flag, confirmation text and ISO timestamp
    """
    try:
        payload = await read_payload(request)
        fields = payload if isinstance(payload, dict) else {}
        logger.info(
            f"📨 Contact submission received - name: {fields.get('name')}, "
            f"phone: {fields.get('phone')}, message: {preview(fields.get('message'))}"
        )

        submission = validate_submission(payload, strict=settings.strict_mode)
        logger.info(
            f"Contact submission validated - name: {submission.name}, "
            f"phone: {submission.phone or 'none'}, message: {preview(submission.message)}"
        )

        receipt = await notifier.send(submission.name, submission.message, submission.phone)
        logger.info(f"✅ Contact notification sent for {submission.name} (request {receipt.request})")

        return {
            "success": True,
            "message": CONTACT_SENT,
            "timestamp": iso_timestamp(),
        }

    except SubmissionRejected as e:
        logger.info(f"Contact submission rejected: {e.reason}")
        raise
    except (HTTPException, NotificationDeliveryError):
        raise
    except Exception as e:
        logger.exception(f"Error processing contact submission: {str(e)}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, CONTACT_FAILED)
