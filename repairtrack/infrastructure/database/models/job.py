"""
Job SQLAlchemy model.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)

from .base import BaseModel


class JobModel(BaseModel):
    """Job database model."""

    __tablename__ = "jobs"
    __table_args__ = (
        UniqueConstraint("user_id", "job_code", name="uq_jobs_user_id_job_code"),
        UniqueConstraint("user_id", "request_id", name="uq_jobs_user_id_request_id"),
        CheckConstraint("price >= 0", name="ck_jobs_price_non_negative"),
        CheckConstraint(
            "status IN ('Received', 'Awaiting Parts', 'In Progress', 'Completed')",
            name="ck_jobs_status",
        ),
        Index("ix_jobs_user_id_created_at", "user_id", "created_at"),
    )

    user_id = Column(String(64), nullable=False, index=True)
    job_code = Column(String(32), nullable=False)

    # Customer contact info
    customer_name = Column(String(255), nullable=False)
    customer_whatsapp = Column(String(32), nullable=False)

    item_name = Column(String(255), nullable=False)
    problem = Column(Text, nullable=False)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    notes = Column(Text)
    status = Column(String(32), nullable=False, default="Received", index=True)
    request_id = Column(String(64))

    def __repr__(self) -> str:
        return f"<Job(id={self.id}, job_code={self.job_code})>"
