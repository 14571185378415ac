"""
Notification interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from repairtrack.domain.exceptions.validation_error import RequiredFieldError


@dataclass(frozen=True)
class OutboundMessage:
    """A WhatsApp message to a single recipient.

    Either free-form ``body`` text or an approved template (``content_sid``
    plus positional ``content_variables``) must be given.
    """

    to: str
    body: Optional[str] = None
    content_sid: Optional[str] = None
    content_variables: Optional[Dict[str, Any]] = None
    kind: str = "custom"

    def __post_init__(self):
        if not self.to or not self.to.strip():
            raise RequiredFieldError("to")
        if not self.body and not self.content_sid:
            raise RequiredFieldError("body")

    @property
    def uses_template(self) -> bool:
        return bool(self.content_sid)

    def addressed_to(self, to: str) -> "OutboundMessage":
        """Copy of the message with a different recipient."""
        return replace(self, to=to)


class MessageSenderInterface(ABC):
    """Interface for messaging providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name."""
        pass

    @abstractmethod
    async def send(self, message: OutboundMessage) -> str:
        """Send a message and return the provider message id."""
        pass
