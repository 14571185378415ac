"""
Notification API schemas.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class SendWhatsAppRequest(BaseModel):
    """Outbound WhatsApp request.

    Field presence is checked by the endpoint so that an incomplete request
    is answered with 400 rather than a schema error.
    """

    to: Optional[str] = None
    body: Optional[str] = None
    content_sid: Optional[str] = Field(None, alias="contentSid")
    content_variables: Optional[Dict[str, Any]] = Field(None, alias="contentVariables")

    model_config = {"populate_by_name": True}


class SendWhatsAppResponse(BaseModel):
    """Provider message id."""

    sid: str


class SendWhatsAppError(BaseModel):
    """Provider or configuration failure."""

    error: str
