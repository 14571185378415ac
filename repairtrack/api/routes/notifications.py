"""
Outbound WhatsApp send endpoint.
"""

from typing import Optional

from fastapi import APIRouter, Body, status
from fastapi.responses import JSONResponse

from repairtrack.api.dependencies import MessageSenderDep
from repairtrack.api.schemas.notification import (
    SendWhatsAppError,
    SendWhatsAppRequest,
    SendWhatsAppResponse,
)
from repairtrack.application.interfaces.notifications import OutboundMessage
from repairtrack.config.logging import get_logger
from repairtrack.domain.exceptions.notification_error import NotificationError

logger = get_logger(__name__)
router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.post(
    "/whatsapp",
    response_model=SendWhatsAppResponse,
    responses={400: {"model": SendWhatsAppError}, 500: {"model": SendWhatsAppError}},
)
async def send_whatsapp(
    sender: MessageSenderDep,
    request: Optional[SendWhatsAppRequest] = Body(None),
):
    """Send one WhatsApp message, either free text or a content template.

    Unlike the lifecycle notifications, provider failures are returned to the
    caller here.
    """
    if request is None or not request.to or not (request.body or request.content_sid):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Missing to and message content"},
        )

    message = OutboundMessage(
        to=request.to,
        body=request.body,
        content_sid=request.content_sid,
        content_variables=request.content_variables,
    )

    try:
        sid = await sender.send(message)
    except NotificationError as e:
        logger.error("WhatsApp send failed", to=request.to, error=str(e))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(e)},
        )

    return SendWhatsAppResponse(sid=sid)
