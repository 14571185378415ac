"""
Unit tests for NotificationDispatcher.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from repairtrack.application.interfaces.notifications import (
    MessageSenderInterface,
    OutboundMessage,
)
from repairtrack.application.services.notification_dispatcher import (
    NotificationDispatcher,
)
from repairtrack.domain.exceptions.notification_error import (
    NotificationConfigurationError,
    NotificationDeliveryError,
)
from repairtrack.domain.exceptions.validation_error import RequiredFieldError


class BlockingSender(MessageSenderInterface):
    """Sender that waits until the test releases it."""

    def __init__(self):
        self.release = asyncio.Event()
        self.started = asyncio.Event()
        self.sent = []

    @property
    def name(self) -> str:
        return "blocking"

    async def send(self, message: OutboundMessage) -> str:
        self.started.set()
        await self.release.wait()
        self.sent.append(message)
        return "SM-blocking"


class TestNotificationDispatcher:
    """Test cases for NotificationDispatcher."""

    @pytest.fixture
    def sender(self):
        mock_sender = AsyncMock(spec=MessageSenderInterface)
        mock_sender.name = "mock"
        mock_sender.send = AsyncMock(return_value="SM123")
        return mock_sender

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("9876543210", "+919876543210"),
            ("+919876543210", "+919876543210"),
            ("abc", "abc"),
        ],
    )
    async def test_dispatch_normalizes_destination(self, sender, raw, expected):
        dispatcher = NotificationDispatcher(sender)

        result = await dispatcher.dispatch(OutboundMessage(to=raw, body="Hello"))

        assert result is True
        sent = sender.send.call_args.args[0]
        assert sent.to == expected
        assert sent.body == "Hello"

    @pytest.mark.asyncio
    async def test_dispatch_sends_once(self, sender):
        dispatcher = NotificationDispatcher(sender)

        await dispatcher.dispatch(OutboundMessage(to="9876543210", body="Hello"))

        sender.send.assert_called_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            NotificationConfigurationError("Twilio credentials not configured"),
            NotificationDeliveryError(500, "provider down"),
            RuntimeError("unexpected"),
        ],
    )
    async def test_dispatch_swallows_failures(self, sender, error):
        sender.send = AsyncMock(side_effect=error)
        dispatcher = NotificationDispatcher(sender)

        result = await dispatcher.dispatch(OutboundMessage(to="9876543210", body="Hello"))

        assert result is False
        sender.send.assert_called_once()

    @pytest.mark.asyncio
    async def test_dispatch_detached_does_not_wait_for_send(self):
        sender = BlockingSender()
        dispatcher = NotificationDispatcher(sender)

        task = dispatcher.dispatch_detached(OutboundMessage(to="9876543210", body="Hello"))
        await sender.started.wait()

        assert not task.done()
        assert dispatcher.pending_count == 1

        sender.release.set()
        assert await task is True
        assert dispatcher.pending_count == 0
        assert sender.sent[0].to == "+919876543210"

    @pytest.mark.asyncio
    async def test_dispatch_detached_failure_stays_in_task(self, sender):
        sender.send = AsyncMock(side_effect=NotificationDeliveryError(503, "unavailable"))
        dispatcher = NotificationDispatcher(sender)

        task = dispatcher.dispatch_detached(OutboundMessage(to="9876543210", body="Hello"))

        assert await task is False

    @pytest.mark.asyncio
    async def test_drain_waits_for_pending_sends(self):
        sender = BlockingSender()
        dispatcher = NotificationDispatcher(sender)

        for _ in range(3):
            dispatcher.dispatch_detached(OutboundMessage(to="9876543210", body="Hello"))

        drain = asyncio.ensure_future(dispatcher.drain())
        await asyncio.sleep(0)
        assert not drain.done()

        sender.release.set()
        await drain

        assert len(sender.sent) == 3
        assert dispatcher.pending_count == 0

    @pytest.mark.asyncio
    async def test_drain_without_pending_sends(self, sender):
        await NotificationDispatcher(sender).drain()


class TestOutboundMessage:
    """Test OutboundMessage validation."""

    def test_requires_destination(self):
        with pytest.raises(RequiredFieldError):
            OutboundMessage(to=" ", body="Hello")

    def test_requires_body_or_template(self):
        with pytest.raises(RequiredFieldError):
            OutboundMessage(to="+919876543210")

        message = OutboundMessage(to="+919876543210", content_sid="HX123")
        assert message.uses_template is True
