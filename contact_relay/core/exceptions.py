"""
Error types raised while relaying a contact submission.

Routes and middleware translate these into JSON error payloads; see
contact_relay.core.errors for the status code mapping.
"""

from typing import Optional


class ContactRelayError(Exception):
    """Base class for all contact relay errors"""


class SubmissionRejected(ContactRelayError):
    """The submitted form failed validation. Always client-caused."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class OriginDenied(ContactRelayError):
    """The request's Origin header is not on the allow-list"""

    def __init__(self, origin: str):
        super().__init__(f"CORS not allowed for origin: {origin}")
        self.origin = origin


class NotificationDeliveryError(ContactRelayError):
    """The push notification provider did not accept the message"""

    def __init__(self, detail: str, status_code: Optional[int] = None):
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code
