"""
Pushover notification sender.

One PushoverNotifier is built at startup and shared by every request. It owns a
single httpx.AsyncClient so connections to the Pushover API are reused.
Delivery is attempted exactly once per call: failures are logged and raised,
never retried.
"""

import httpx
import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel

from contact_relay.core.config import Settings
from contact_relay.core.exceptions import NotificationDeliveryError

logger = logging.getLogger(__name__)

NOTIFICATION_TITLE = "New inquiry"
NOTIFICATION_HEADER = "📩 New inquiry received"
PHONE_PLACEHOLDER = "not provided"


class PushoverReceipt(BaseModel):
    """Acknowledgement returned by Pushover for an accepted message"""
    status: int
    request: Optional[str] = None


def format_notification_body(name: str, message: str, phone: Optional[str] = None) -> str:
    return (
        f"{NOTIFICATION_HEADER}\n"
        f"Name: {name}\n"
        f"Phone: {phone or PHONE_PLACEHOLDER}\n"
        f"\n"
        f"{message}"
    )


class PushoverNotifier:
    def __init__(
        self,
        user_key: Optional[str],
        api_token: Optional[str],
        api_url: str = "https://api.pushover.net/1/messages.json",
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.user_key = user_key
        self.api_token = api_token
        self.api_url = api_url
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    @classmethod
    def from_settings(cls, settings: Settings) -> "PushoverNotifier":
        return cls(
            user_key=settings.pushover_user_key,
            api_token=settings.pushover_api_token,
            api_url=settings.pushover_api_url,
            timeout=settings.pushover_timeout,
        )

    @property
    def configured(self) -> bool:
        return bool(self.user_key and self.api_token)

    async def send(self, name: str, message: str, phone: Optional[str] = None) -> PushoverReceipt:
        """
        Deliver one contact submission as a push notification.

        Args:
            name: Sender name
            message: Message text, sent unmodified below the header lines
            phone: Optional phone number, replaced by a placeholder when missing

        Returns:
            PushoverReceipt: Provider acknowledgement

        Raises:
            NotificationDeliveryError: If Pushover rejects the message or cannot be reached
        """
        if not self.configured:
            logger.error("❌ Pushover send failed: PUSHOVER_USER_KEY / PUSHOVER_API_TOKEN not configured")
            raise NotificationDeliveryError("Pushover credentials are not configured")

        payload = {
            "token": self.api_token,
            "user": self.user_key,
            "title": NOTIFICATION_TITLE,
            "message": format_notification_body(name, message, phone),
        }

        try:
            response = await self._client.post(self.api_url, data=payload)
        except httpx.HTTPError as e:
            logger.error(f"❌ Pushover send failed: {type(e).__name__}: {str(e)}")
            raise NotificationDeliveryError(f"Pushover request failed: {str(e)}") from e

        body = self._parse_body(response)

        if not response.is_success or body.get("status") != 1:
            errors = body.get("errors") or [response.text]
            logger.error(f"❌ Pushover send failed - Status: {response.status_code}, errors: {errors}")
            raise NotificationDeliveryError(
                f"Pushover rejected the message: {errors}",
                status_code=response.status_code,
            )

        receipt = PushoverReceipt(status=body["status"], request=body.get("request"))
        logger.debug(f"Pushover accepted message (request {receipt.request})")
        return receipt

    @staticmethod
    def _parse_body(response: httpx.Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    async def aclose(self):
        await self._client.aclose()
