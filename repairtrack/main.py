"""
Main application entry point.
"""

from repairtrack.api.app import create_app
from repairtrack.config.logging import get_logger
from repairtrack.config.settings import settings

logger = get_logger(__name__)

app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting RepairTrack service", environment=settings.ENVIRONMENT)

    uvicorn.run(
        "repairtrack.main:app",
        host="0.0.0.0",
        port=8000,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )
