"""
Messaging providers package.
"""

from .twilio_client import TwilioWhatsAppClient

__all__ = [
    "TwilioWhatsAppClient",
]
