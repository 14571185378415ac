"""
Twilio WhatsApp messaging client.
"""

import json
from typing import Dict, Optional

import httpx

from repairtrack.application.interfaces.notifications import (
    MessageSenderInterface,
    OutboundMessage,
)
from repairtrack.config.logging import get_logger
from repairtrack.config.settings import Settings
from repairtrack.domain.exceptions.notification_error import (
    NotificationConfigurationError,
    NotificationDeliveryError,
)
from repairtrack.domain.value_objects.whatsapp_number import to_whatsapp_address
from repairtrack.infrastructure.external.http_client import HTTPClient

logger = get_logger(__name__)

SANDBOX_SENDER = "+14155238886"


class TwilioWhatsAppClient(MessageSenderInterface):
    """Send WhatsApp messages through the Twilio Messages API.

    Credentials are only checked when a message is sent, so the service
    starts without them and notification attempts fail individually.
    """

    def __init__(
        self,
        account_sid: Optional[str],
        auth_token: Optional[str],
        from_number: str = SANDBOX_SENDER,
        base_url: str = "https://api.twilio.com",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.account_sid = account_sid
        self.auth_token = auth_token
        self.from_number = from_number
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(
        cls,
        app_settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "TwilioWhatsAppClient":
        return cls(
            account_sid=app_settings.TWILIO_ACCOUNT_SID,
            auth_token=app_settings.TWILIO_AUTH_TOKEN,
            from_number=app_settings.TWILIO_WHATSAPP_FROM,
            base_url=app_settings.TWILIO_API_BASE_URL,
            timeout=app_settings.NOTIFICATION_TIMEOUT_SECONDS,
            transport=transport,
        )

    @property
    def name(self) -> str:
        return "twilio"

    @property
    def messages_url(self) -> str:
        return f"{self.base_url}/2010-04-01/Accounts/{self.account_sid}/Messages.json"

    def build_payload(self, message: OutboundMessage) -> Dict[str, str]:
        """Form fields for the Messages resource."""
        payload = {
            "From": to_whatsapp_address(self.from_number),
            "To": to_whatsapp_address(message.to),
        }
        if message.content_sid:
            payload["ContentSid"] = message.content_sid
            if message.content_variables:
                payload["ContentVariables"] = json.dumps(message.content_variables)
        else:
            payload["Body"] = message.body
        return payload

    async def send(self, message: OutboundMessage) -> str:
        """Send a message and return its Twilio sid."""
        if not self.account_sid or not self.auth_token:
            raise NotificationConfigurationError("Twilio credentials not configured")

        payload = self.build_payload(message)

        try:
            async with HTTPClient(
                timeout=self.timeout,
                auth=(self.account_sid, self.auth_token),
                transport=self.transport,
            ) as client:
                response = await client.post(self.messages_url, form=payload)
        except httpx.TimeoutException:
            raise NotificationDeliveryError(408, "Request timeout")
        except httpx.RequestError as e:
            raise NotificationDeliveryError(0, f"Network error: {str(e)}")

        if response.status_code not in (200, 201):
            raise NotificationDeliveryError(
                response.status_code, self._error_message(response)
            )

        sid = response.json().get("sid")
        if not sid:
            raise NotificationDeliveryError(response.status_code, "Response has no message sid")
        return sid

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            return response.json().get("message") or response.text
        except ValueError:
            return response.text
