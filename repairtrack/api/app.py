"""
FastAPI application factory.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from repairtrack.api.middleware.error_handler import add_error_handlers
from repairtrack.api.middleware.logging import LoggingMiddleware
from repairtrack.api.routes import health, jobs, notifications, profile, session
from repairtrack.application.interfaces.notifications import MessageSenderInterface
from repairtrack.application.services.notification_dispatcher import (
    NotificationDispatcher,
)
from repairtrack.application.session import SessionManager
from repairtrack.config.database import close_database_connections
from repairtrack.config.logging import configure_logging, get_logger
from repairtrack.config.settings import Settings, settings
from repairtrack.infrastructure.messaging.twilio_client import TwilioWhatsAppClient

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Application startup", environment=app.state.settings.ENVIRONMENT)

    yield

    logger.info("Application shutdown")
    await app.state.dispatcher.drain()
    await close_database_connections()


def create_app(
    app_settings: Optional[Settings] = None,
    sender: Optional[MessageSenderInterface] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    ``sender`` replaces the Twilio client, which tests use to observe
    outbound messages.
    """
    app_settings = app_settings or settings
    configure_logging(app_settings)

    app = FastAPI(
        title=app_settings.APP_NAME,
        version=app_settings.APP_VERSION,
        description="Repair job tracking with WhatsApp customer notifications",
        openapi_url=f"{app_settings.API_PREFIX}/openapi.json" if app_settings.DEBUG else None,
        docs_url=f"{app_settings.API_PREFIX}/docs" if app_settings.DEBUG else None,
        redoc_url=f"{app_settings.API_PREFIX}/redoc" if app_settings.DEBUG else None,
        lifespan=lifespan,
    )

    sender = sender or TwilioWhatsAppClient.from_settings(app_settings)

    app.state.settings = app_settings
    app.state.session_manager = SessionManager(
        idle_timeout_seconds=app_settings.SESSION_IDLE_TIMEOUT_SECONDS
    )
    app.state.message_sender = sender
    app.state.dispatcher = NotificationDispatcher(
        sender, default_country_code=app_settings.WHATSAPP_DEFAULT_COUNTRY_CODE
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_error_handlers(app)
    LoggingMiddleware(app)

    app.include_router(health.router, prefix=app_settings.API_PREFIX)
    app.include_router(session.router, prefix=app_settings.API_PREFIX)
    app.include_router(profile.router, prefix=app_settings.API_PREFIX)
    app.include_router(jobs.router, prefix=app_settings.API_PREFIX)
    app.include_router(notifications.router, prefix=app_settings.API_PREFIX)

    return app
