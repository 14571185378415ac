"""
FastAPI dependency injection container.
"""

from typing import Annotated, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from repairtrack.application.interfaces.notifications import MessageSenderInterface
from repairtrack.application.interfaces.services import JobCodeGeneratorInterface
from repairtrack.application.services.job_code_generator import (
    AtomicJobCodeGenerator,
    CountingJobCodeGenerator,
)
from repairtrack.application.services.message_templates import NotificationTemplates
from repairtrack.application.services.notification_dispatcher import (
    NotificationDispatcher,
)
from repairtrack.application.session import SessionContext, SessionManager
from repairtrack.application.use_cases.job_lifecycle import JobLifecycleController
from repairtrack.application.use_cases.save_profile import SaveProfileUseCase
from repairtrack.config.database import get_db_session
from repairtrack.config.logging import get_logger
from repairtrack.config.settings import Settings
from repairtrack.domain.exceptions.session_error import SessionNotFoundError
from repairtrack.infrastructure.database.repositories.job_repository import JobRepository
from repairtrack.infrastructure.database.repositories.job_sequence_repository import (
    JobSequenceRepository,
)
from repairtrack.infrastructure.database.repositories.profile_repository import (
    ProfileRepository,
)
from repairtrack.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


# Application state
def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_session_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


def get_notification_dispatcher(request: Request) -> NotificationDispatcher:
    return request.app.state.dispatcher


def get_message_sender(request: Request) -> MessageSenderInterface:
    return request.app.state.message_sender


# Database Dependencies
async def get_job_repository(
    db: AsyncSession = Depends(get_db_session),
) -> JobRepository:
    """Get job repository instance."""
    return JobRepository(db)


async def get_job_sequence_repository(
    db: AsyncSession = Depends(get_db_session),
) -> JobSequenceRepository:
    """Get job sequence repository instance."""
    return JobSequenceRepository(db)


async def get_profile_repository(
    db: AsyncSession = Depends(get_db_session),
) -> ProfileRepository:
    """Get profile repository instance."""
    return ProfileRepository(db)


async def get_transaction_service(
    db: AsyncSession = Depends(get_db_session),
) -> TransactionService:
    """Get transaction service bound to the request's database session."""
    return TransactionService(db)


# Session Dependencies
async def get_session_context(
    session_manager: SessionManager = Depends(get_session_manager),
    x_session_token: Optional[str] = Header(None),
) -> SessionContext:
    """Resolve the signed-in session from the ``X-Session-Token`` header."""
    if not x_session_token:
        raise SessionNotFoundError()
    return session_manager.get(x_session_token)


# Service Dependencies
async def get_job_code_generator(
    app_settings: Settings = Depends(get_app_settings),
    job_repo: JobRepository = Depends(get_job_repository),
    sequence_repo: JobSequenceRepository = Depends(get_job_sequence_repository),
) -> JobCodeGeneratorInterface:
    """Get the configured job code generator."""
    if app_settings.JOB_CODE_STRATEGY == "count":
        return CountingJobCodeGenerator(job_repo, prefix=app_settings.JOB_CODE_PREFIX)
    return AtomicJobCodeGenerator(sequence_repo, prefix=app_settings.JOB_CODE_PREFIX)


async def get_job_lifecycle_controller(
    session: SessionContext = Depends(get_session_context),
    app_settings: Settings = Depends(get_app_settings),
    job_repo: JobRepository = Depends(get_job_repository),
    code_generator: JobCodeGeneratorInterface = Depends(get_job_code_generator),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
    transaction: TransactionService = Depends(get_transaction_service),
) -> JobLifecycleController:
    """Get a lifecycle controller for the signed-in session."""
    return JobLifecycleController(
        session=session,
        job_repo=job_repo,
        code_generator=code_generator,
        dispatcher=dispatcher,
        transaction=transaction,
        templates=NotificationTemplates.from_settings(app_settings),
        enforce_transitions=app_settings.ENFORCE_STATUS_TRANSITIONS,
    )


async def get_save_profile_use_case(
    session: SessionContext = Depends(get_session_context),
    profile_repo: ProfileRepository = Depends(get_profile_repository),
    transaction: TransactionService = Depends(get_transaction_service),
) -> SaveProfileUseCase:
    return SaveProfileUseCase(session, profile_repo, transaction)


# Type aliases for cleaner dependency injection
AppSettingsDep = Annotated[Settings, Depends(get_app_settings)]
SessionManagerDep = Annotated[SessionManager, Depends(get_session_manager)]
SessionContextDep = Annotated[SessionContext, Depends(get_session_context)]
MessageSenderDep = Annotated[MessageSenderInterface, Depends(get_message_sender)]
JobRepositoryDep = Annotated[JobRepository, Depends(get_job_repository)]
ProfileRepositoryDep = Annotated[ProfileRepository, Depends(get_profile_repository)]
JobLifecycleControllerDep = Annotated[
    JobLifecycleController, Depends(get_job_lifecycle_controller)
]
SaveProfileUseCaseDep = Annotated[SaveProfileUseCase, Depends(get_save_profile_use_case)]
