"""Customer-facing WhatsApp message texts."""

from typing import Optional

from repairtrack.application.interfaces.notifications import OutboundMessage
from repairtrack.application.services.receipts import build_track_url
from repairtrack.config.settings import Settings
from repairtrack.domain.entities.job import Job

JOB_RECEIVED = "job_received"
STATUS_CHANGED = "status_changed"


class NotificationTemplates:
    """Build the messages sent when a job is received or changes status.

    Free-form bodies only reach customers inside WhatsApp's 24 hour session
    window; configure approved template sids to message outside it.
    """

    def __init__(
        self,
        public_base_url: str,
        job_received_content_sid: Optional[str] = None,
        status_update_content_sid: Optional[str] = None,
    ):
        self.public_base_url = public_base_url
        self.job_received_content_sid = job_received_content_sid
        self.status_update_content_sid = status_update_content_sid

    @classmethod
    def from_settings(cls, app_settings: Settings) -> "NotificationTemplates":
        return cls(
            public_base_url=app_settings.PUBLIC_BASE_URL,
            job_received_content_sid=app_settings.TWILIO_JOB_RECEIVED_CONTENT_SID,
            status_update_content_sid=app_settings.TWILIO_STATUS_UPDATE_CONTENT_SID,
        )

    def job_received(self, job: Job) -> OutboundMessage:
        if self.job_received_content_sid:
            return OutboundMessage(
                to=job.customer_whatsapp,
                content_sid=self.job_received_content_sid,
                content_variables={
                    "1": job.customer_name,
                    "2": job.item_name,
                    "3": job.job_code,
                },
                kind=JOB_RECEIVED,
            )
        return OutboundMessage(
            to=job.customer_whatsapp,
            body=(
                f"Hi {job.customer_name}, we’ve received your {job.item_name}. "
                f"Job: {job.job_code}."
            ),
            kind=JOB_RECEIVED,
        )

    def status_changed(self, job: Job) -> OutboundMessage:
        if self.status_update_content_sid:
            return OutboundMessage(
                to=job.customer_whatsapp,
                content_sid=self.status_update_content_sid,
                content_variables={
                    "1": job.job_code,
                    "2": job.status.value,
                    "3": build_track_url(self.public_base_url, job.job_code),
                },
                kind=STATUS_CHANGED,
            )
        return OutboundMessage(
            to=job.customer_whatsapp,
            body=f'Update for Job {job.job_code}: Status changed to "{job.status.value}".',
            kind=STATUS_CHANGED,
        )
