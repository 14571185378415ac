"""
Printable receipt data.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from urllib.parse import quote

from repairtrack.domain.entities.job import Job
from repairtrack.domain.entities.profile import DEFAULT_SHOP_NAME, Profile

CURRENCY_SYMBOL = "₹"


def build_track_url(base_url: str, job_code: str) -> str:
    """Public tracking link printed on receipts and sent in templates."""
    return f"{base_url.rstrip('/')}/track/{quote(job_code or '', safe='')}"


def format_price(price: Decimal) -> str:
    return f"{CURRENCY_SYMBOL} {Decimal(price or 0):.2f}"


@dataclass(frozen=True)
class Receipt:
    """Everything a ticket printer needs for one job."""

    shop_name: str
    job_code: str
    customer_name: str
    customer_whatsapp: str
    item_name: str
    problem: str
    price: str
    status: str
    track_url: str
    issued_at: datetime


def build_receipt(
    job: Job,
    profile: Optional[Profile],
    base_url: str,
    issued_at: Optional[datetime] = None,
) -> Receipt:
    return Receipt(
        shop_name=profile.display_shop_name if profile else DEFAULT_SHOP_NAME,
        job_code=job.job_code or "",
        customer_name=job.customer_name,
        customer_whatsapp=job.customer_whatsapp,
        item_name=job.item_name or "-",
        problem=job.problem or "-",
        price=format_price(job.price),
        status=job.status.value,
        track_url=build_track_url(base_url, job.job_code),
        issued_at=issued_at or datetime.now(timezone.utc),
    )
