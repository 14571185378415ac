"""
Notification-related domain exceptions.
"""


class NotificationError(Exception):
    """Base exception for outbound notification errors."""

    pass


class NotificationConfigurationError(NotificationError):
    """Raised when the messaging provider is not configured."""

    pass


class NotificationDeliveryError(NotificationError):
    """Raised when the messaging provider rejects or never receives a message."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"WhatsApp delivery failed ({status_code}): {message}")
