"""
JSON error payloads and the application-wide exception handlers.

Every failure leaves the service as {"success": false, "error": <text>}.
Internal details are logged here and never sent to the client.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from contact_relay.core.exceptions import (
    NotificationDeliveryError,
    OriginDenied,
    SubmissionRejected,
)

logger = logging.getLogger(__name__)

NOT_FOUND = "API endpoint not found."
ACCESS_DENIED = "Access from this origin is not allowed."
INTERNAL_ERROR = "Internal server error."
CONTACT_FAILED = "A server error occurred while processing your inquiry. Please try again later."
PAYLOAD_TOO_LARGE = "Request body is too large."


def error_response(status_code: int, error: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error},
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unknown paths and unsupported methods on known paths look the same to callers
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND)
    detail = exc.detail if isinstance(exc.detail, str) else INTERNAL_ERROR
    return error_response(exc.status_code, detail, headers=getattr(exc, "headers", None))


async def submission_rejected_handler(request: Request, exc: SubmissionRejected):
    return error_response(status.HTTP_400_BAD_REQUEST, exc.reason)


async def origin_denied_handler(request: Request, exc: OriginDenied):
    logger.warning(f"❌ CORS denied: {exc.origin}")
    return error_response(status.HTTP_403_FORBIDDEN, ACCESS_DENIED)


async def notification_error_handler(request: Request, exc: NotificationDeliveryError):
    logger.error(f"Notification delivery error on {request.url.path}: {exc.detail}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, CONTACT_FAILED)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SubmissionRejected, submission_rejected_handler)
    app.add_exception_handler(OriginDenied, origin_denied_handler)
    app.add_exception_handler(NotificationDeliveryError, notification_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
