"""
Application settings using Pydantic BaseSettings.
"""

from typing import Any, List, Optional, Union

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Application
    APP_NAME: str = "FieldOps Job Service"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    # API Configuration
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_PREFIX: str = "/api/v1"
    CORS_ORIGINS: Union[str, List[str]] = "*"

    # Database
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_SERVER: Optional[str] = None
    POSTGRES_DB: Optional[str] = None
    DATABASE_URL: Optional[str] = None
    DATABASE_POOL_SIZE: int = 10
    DATABASE_MAX_OVERFLOW: int = 20
    DATABASE_ECHO: bool = False
    DATABASE_POOL_TIMEOUT: int = 30
    DATABASE_POOL_RECYCLE: int = 3600

    # Security
    JWT_SECRET_KEY: str = "your-jwt-secret-key-here-change-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 15

    # Job lifecycle
    JOB_TRANSITION_POLICY: str = "permissive"
    JOB_FEED_SIZE: int = 5

    # Monitoring
    ENABLE_METRICS: bool = True
    HEALTH_CHECK_TIMEOUT: int = 5

    # Development
    ENABLE_SWAGGER: bool = True

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

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def assemble_db_connection(cls, v: Optional[str], info: ValidationInfo) -> Any:
        if isinstance(v, str):
            return v
        # Build from individual components if DATABASE_URL is not provided
        user = info.data.get("POSTGRES_USER") or "fieldops_user"
        password = info.data.get("POSTGRES_PASSWORD") or "fieldops_pass"
        host = info.data.get("POSTGRES_SERVER") or "localhost"
        db = info.data.get("POSTGRES_DB") or "fieldops"
        return f"postgresql+asyncpg://{user}:{password}@{host}:5432/{db}"

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

    @field_validator("JOB_TRANSITION_POLICY")
    @classmethod
    def validate_transition_policy(cls, v: str) -> str:
        if v.lower() not in ["permissive", "strict"]:
            raise ValueError("Job transition policy must be one of: permissive, strict")
        return v.lower()

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
        "extra": "ignore",
        "validate_default": True,
    }


# Global settings instance
settings = Settings()
