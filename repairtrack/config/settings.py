"""
Application settings using Pydantic BaseSettings.
"""

from typing import List, Optional, Union

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Application
    APP_NAME: str = "RepairTrack Service"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # API Configuration
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_PREFIX: str = "/api/v1"
    CORS_ORIGINS: Union[str, List[str]] = ["*"]
    PUBLIC_BASE_URL: str = "http://localhost:3000"

    # Database
    POSTGRES_USER: str = "repairtrack"
    POSTGRES_PASSWORD: str = "repairtrack"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_DB: str = "repairtrack"
    DATABASE_URL: Optional[str] = None
    DATABASE_POOL_SIZE: int = 10
    DATABASE_MAX_OVERFLOW: int = 20
    DATABASE_ECHO: bool = False
    DATABASE_POOL_TIMEOUT: int = 30
    DATABASE_POOL_RECYCLE: int = 3600

    # Jobs
    JOB_CODE_PREFIX: str = "RT"
    JOB_CODE_STRATEGY: str = "atomic"
    ENFORCE_STATUS_TRANSITIONS: bool = False

    # Sessions
    SESSION_IDLE_TIMEOUT_SECONDS: int = 3600  # 0 keeps sessions until sign out

    # Twilio WhatsApp
    TWILIO_ACCOUNT_SID: Optional[str] = None
    TWILIO_AUTH_TOKEN: Optional[str] = None
    TWILIO_API_BASE_URL: str = "https://api.twilio.com"
    TWILIO_WHATSAPP_FROM: str = "+14155238886"  # sandbox sender
    TWILIO_JOB_RECEIVED_CONTENT_SID: Optional[str] = None
    TWILIO_STATUS_UPDATE_CONTENT_SID: Optional[str] = None
    WHATSAPP_DEFAULT_COUNTRY_CODE: str = "+91"
    NOTIFICATION_TIMEOUT_SECONDS: float = 10.0

    # Monitoring
    ENABLE_METRICS: bool = True

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            if v == "*":
                return ["*"]
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, list):
            return v
        return ["*"]

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        if v not in ["development", "staging", "production", "test"]:
            raise ValueError(
                "Environment must be one of: development, staging, production, test"
            )
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("JOB_CODE_STRATEGY")
    @classmethod
    def validate_job_code_strategy(cls, v: str) -> str:
        if v not in ["atomic", "count"]:
            raise ValueError("Job code strategy must be one of: atomic, count")
        return v

    @field_validator("PUBLIC_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @model_validator(mode="after")
    def assemble_db_connection(self) -> "Settings":
        # Build from individual components if DATABASE_URL is not provided
        if not self.DATABASE_URL:
            self.DATABASE_URL = (
                f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
                f"@{self.POSTGRES_SERVER}:5432/{self.POSTGRES_DB}"
            )
        return self

    @property
    def twilio_configured(self) -> bool:
        return bool(self.TWILIO_ACCOUNT_SID and self.TWILIO_AUTH_TOKEN)

    model_config = {"env_file": ".env", "case_sensitive": True, "extra": "ignore"}


# Global settings instance
settings = Settings()
