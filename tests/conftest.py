"""
Pytest configuration and fixtures.
"""

import asyncio
from typing import AsyncGenerator, List, Optional
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from repairtrack.application.interfaces.notifications import (
    MessageSenderInterface,
    OutboundMessage,
)
from repairtrack.application.interfaces.repositories import JobRepositoryInterface
from repairtrack.application.session import SessionContext
from repairtrack.config.settings import Settings
from repairtrack.domain.entities.job import Job
from repairtrack.domain.entities.profile import Profile
from repairtrack.infrastructure.database.models import Base
from repairtrack.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class RecordingSender(MessageSenderInterface):
    """Message sender that keeps what it was asked to send."""

    def __init__(self, error: Optional[Exception] = None, delay: float = 0):
        self.error = error
        self.delay = delay
        self.sent: List[OutboundMessage] = []

    @property
    def name(self) -> str:
        return "recording"

    async def send(self, message: OutboundMessage) -> str:
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        self.sent.append(message)
        return f"SM{len(self.sent):04d}"


@pytest.fixture
def test_settings():
    """Test settings configuration."""
    return Settings(
        ENVIRONMENT="test",
        DATABASE_URL=TEST_DATABASE_URL,
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        PUBLIC_BASE_URL="https://repairtrack.example.com",
        TWILIO_ACCOUNT_SID="ACtest",
        TWILIO_AUTH_TOKEN="test-token",
    )


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async_session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def make_sender():
    """Factory for senders that fail or stall."""
    return RecordingSender


@pytest.fixture
def recording_sender():
    return RecordingSender()


@pytest.fixture
def mock_job_repository():
    """Mock job repository."""
    mock_repo = AsyncMock(spec=JobRepositoryInterface)

    mock_repo.get_by_request_id = AsyncMock(return_value=None)
    mock_repo.count_for_user = AsyncMock(return_value=0)
    mock_repo.list_for_user = AsyncMock(return_value=[])
    mock_repo.create = AsyncMock(side_effect=lambda job: job)

    return mock_repo


@pytest.fixture
def mock_transaction():
    """Mock transaction service."""
    return AsyncMock(spec=TransactionService)


@pytest.fixture
def sample_profile():
    return Profile(
        user_id="user-1",
        full_name="Ravi Kumar",
        phone="9876543210",
        shop_name="Ravi Mobile Repairs",
    )


@pytest.fixture
def session_context(sample_profile):
    """Signed-in session with a saved profile and no jobs."""
    return SessionContext(user_id="user-1", profile=sample_profile)


@pytest.fixture
def sample_job():
    return Job(
        user_id="user-1",
        job_code="RT-2025-000001",
        customer_name="Asha",
        customer_whatsapp="9876543210",
        item_name="Phone",
        problem="Cracked screen",
        price="500",
    )


@pytest.fixture
def sample_job_data():
    """Sample job payload for the API."""
    return {
        "customer_name": "Asha",
        "customer_whatsapp": "9876543210",
        "item_name": "Phone",
        "problem": "Cracked screen",
        "price": 500,
        "notes": "Back cover scratched",
    }
