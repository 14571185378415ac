"""
Session API schemas.
"""

from datetime import datetime

from pydantic import BaseModel


class SessionResponse(BaseModel):
    """Signed-in session schema."""

    token: str
    user_id: str
    has_profile: bool
    job_count: int
    signed_in_at: datetime
