"""
Best-effort WhatsApp notification dispatch.

Notifications are a courtesy to the customer, never a step the job lifecycle
depends on: failures are logged and counted, not raised.
"""

import asyncio
import time
from typing import Set

from repairtrack.application.interfaces.notifications import (
    MessageSenderInterface,
    OutboundMessage,
)
from repairtrack.config.logging import get_logger
from repairtrack.domain.value_objects.whatsapp_number import (
    DEFAULT_COUNTRY_CODE,
    normalize_whatsapp_number,
)
from repairtrack.infrastructure.monitoring.metrics import record_notification

logger = get_logger(__name__)


class NotificationDispatcher:
    """Send one-shot messages through a provider without failing the caller."""

    def __init__(
        self,
        sender: MessageSenderInterface,
        default_country_code: str = DEFAULT_COUNTRY_CODE,
    ):
        self.sender = sender
        self.default_country_code = default_country_code
        self._pending: Set[asyncio.Task] = set()

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    async def dispatch(self, message: OutboundMessage) -> bool:
        """Send ``message`` once. Returns ``False`` instead of raising."""
        to = normalize_whatsapp_number(message.to, self.default_country_code)
        start_time = time.time()

        try:
            sid = await self.sender.send(message.addressed_to(to))
        except Exception as e:
            duration = time.time() - start_time
            record_notification(message.kind, "failed", duration)
            logger.warning(
                "WhatsApp notification failed",
                provider=self.sender.name,
                kind=message.kind,
                to=to,
                error=str(e),
            )
            return False

        duration = time.time() - start_time
        record_notification(message.kind, "sent", duration)
        logger.info(
            "WhatsApp notification sent",
            provider=self.sender.name,
            kind=message.kind,
            to=to,
            sid=sid,
            duration_ms=duration * 1000,
        )
        return True

    def dispatch_detached(self, message: OutboundMessage) -> asyncio.Task:
        """Start ``dispatch`` in the background and return without awaiting it.

        The caller never joins the task; its outcome only reaches the logs.
        """
        task = asyncio.get_running_loop().create_task(self.dispatch(message))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def drain(self) -> None:
        """Wait for in-flight notifications, used at shutdown."""
        if not self._pending:
            return
        logger.info("Waiting for pending notifications", count=len(self._pending))
        await asyncio.gather(*list(self._pending), return_exceptions=True)
