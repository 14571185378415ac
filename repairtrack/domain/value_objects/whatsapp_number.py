"""
WhatsApp number helpers.

Customer contacts are typed in by hand, so numbers arrive as bare local
mobile numbers, full international numbers, or anything else.
"""

import re

DEFAULT_COUNTRY_CODE = "+91"

_LOCAL_MOBILE = re.compile(r"^[6-9]\d{9}$")
_INDIAN_MOBILE = re.compile(r"^(\+91)?[6-9]\d{9}$")
_WHATSAPP_SCHEME = "whatsapp:"


def _compact(number: str) -> str:
    return re.sub(r"\s+", "", number or "")


def normalize_whatsapp_number(number: str, country_code: str = DEFAULT_COUNTRY_CODE) -> str:
    """Coerce a contact number into international format.

    A bare 10-digit local mobile number gets ``country_code`` prepended,
    numbers already starting with ``+`` pass through, and anything else is
    returned unchanged for the provider to accept or reject.
    """
    compact = _compact(number)
    if compact.startswith("+"):
        return compact
    if _LOCAL_MOBILE.match(compact):
        return f"{country_code}{compact}"
    return compact


def is_valid_indian_mobile(number: str) -> bool:
    """Check a number against the local mobile format, with or without +91."""
    return bool(_INDIAN_MOBILE.match(_compact(number)))


def to_whatsapp_address(number: str) -> str:
    """Prefix a number with the ``whatsapp:`` channel scheme."""
    if number.startswith(_WHATSAPP_SCHEME):
        return number
    return f"{_WHATSAPP_SCHEME}{number}"
