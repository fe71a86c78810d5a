"""Application configuration management.

This module handles environment-specific configuration loading, parsing, and management
for the application. It includes environment detection, .env file loading, and
configuration value parsing.
"""

import os
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import (
    Field,
    field_validator,
)
from pydantic_settings import (
    BaseSettings,
    SettingsConfigDict,
)

from translation_hub.constants.auth import (
    BCRYPT_ROUNDS_DEFAULT,
    SESSION_EXPIRATION_SECONDS_DEFAULT,
    SESSION_SECRET_MIN_LENGTH,
)
from translation_hub.constants.database import (
    CONNECTION_TIMEOUT,
    DATABASE_URL_TEMPLATES,
    DEFAULT_MAX_OVERFLOW,
    DEFAULT_POOL_SIZE,
)


class Environment(str, Enum):
    """Application environment types.

    Defines the possible environments the application can run in:
    development, staging, production, and test.
    """

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


def parse_environment(value: str) -> Environment:
    """Map an APP_ENV value, including short aliases, to an Environment."""
    match value.lower():
        case "production" | "prod":
            return Environment.PRODUCTION
        case "staging" | "stage":
            return Environment.STAGING
        case "test":
            return Environment.TEST
        case _:
            return Environment.DEVELOPMENT


def get_environment() -> Environment:
    """Get the current environment.

    Returns:
        Environment: The current environment (development, staging, production, or test)
    """
    return parse_environment(os.getenv("APP_ENV", "development"))


def load_env_file():
    """Load .env file."""
    if Path(".env").exists():
        load_dotenv(".env")


load_env_file()


class ConfigurationError(RuntimeError):
    """Raised at startup when required configuration is missing or unsafe."""


class Settings(BaseSettings):
    """Application settings.

    This class defines all configuration settings for the application,
    including the storage backend toggle, database connection, session
    signing and the translation provider.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Application Settings
    APP_ENV: Environment = Field(default_factory=get_environment)
    PROJECT_NAME: str = "Translation Hub API"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Session-authenticated text and voice translation service"
    API_V1_STR: str = "/api/v1"
    DEBUG: bool = False

    # CORS Settings
    ALLOWED_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    @field_validator("APP_ENV", mode="before")
    @classmethod
    def _parse_app_env(cls, value):
        if isinstance(value, str):
            return parse_environment(value)
        return value

    @property
    def ALLOWED_ORIGINS_LIST(self) -> list[str]:
        """Parse ALLOWED_ORIGINS string into a list."""
        origins = [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]
        if not origins:
            return ["*"]
        return origins

    # Storage Backend
    USE_MOCK_DB: bool = False

    # Database Configuration
    DATABASE_URL: Optional[str] = None
    DB_DRIVER: str = "postgresql"
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "translation_hub"
    DB_USER: str = "translation_hub"
    DB_PASSWORD: str = ""
    DATABASE_POOL_SIZE: int = DEFAULT_POOL_SIZE
    DATABASE_MAX_OVERFLOW: int = DEFAULT_MAX_OVERFLOW
    DATABASE_CONNECT_TIMEOUT: float = CONNECTION_TIMEOUT
    DATABASE_ECHO: bool = False
    DATABASE_CREATE_SCHEMA: bool = True

    @property
    def SQLALCHEMY_DATABASE_URL(self) -> str:
        """Resolve the database URL, preferring an explicit DATABASE_URL.

        Otherwise the URL is built from the DB_* parts using the template
        for DB_DRIVER ("postgresql" or "sqlite").
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return DATABASE_URL_TEMPLATES[self.DB_DRIVER].format(
            user=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )

    # Session Configuration
    SESSION_SECRET: Optional[str] = None
    SESSION_EXPIRATION: int = Field(default=SESSION_EXPIRATION_SECONDS_DEFAULT, gt=0)
    BCRYPT_ROUNDS: int = Field(default=BCRYPT_ROUNDS_DEFAULT, ge=4, le=31)

    # Translation Provider
    USE_MOCK_TRANSLATION_API: bool = False
    GOOGLE_TRANSLATE_API_KEY: str = ""
    GOOGLE_SPEECH_API_KEY: str = ""
    TRANSLATION_API_TIMEOUT: float = 15.0

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"

    # Rate Limiting
    RATE_LIMIT_DEFAULT: str = "1000 per day,200 per hour"
    RATE_LIMIT_REGISTER: str = "20 per hour"
    RATE_LIMIT_LOGIN: str = "50 per minute"

    @property
    def RATE_LIMIT_ENDPOINTS(self) -> dict:
        """Get rate limit configuration for endpoints."""
        return {
            "default": [self.RATE_LIMIT_DEFAULT],
            "register": [self.RATE_LIMIT_REGISTER],
            "login": [self.RATE_LIMIT_LOGIN],
        }

    def validate_security(self) -> None:
        """Fail fast when the session signing configuration is unusable.

        A missing secret never falls back to a built-in default: every
        signed session id would otherwise be forgeable.

        Raises:
            ConfigurationError: If SESSION_SECRET is unset, or too short
                outside development and test.
        """
        if not self.SESSION_SECRET:
            raise ConfigurationError("SESSION_SECRET is required but not configured")

        if self.APP_ENV in (Environment.STAGING, Environment.PRODUCTION):
            if len(self.SESSION_SECRET) < SESSION_SECRET_MIN_LENGTH:
                raise ConfigurationError(
                    f"SESSION_SECRET must be at least {SESSION_SECRET_MIN_LENGTH} characters"
                )
            if self.USE_MOCK_DB:
                raise ConfigurationError(
                    f"USE_MOCK_DB cannot be enabled in the {self.APP_ENV.value} environment"
                )


@lru_cache
def get_settings() -> Settings:
    """Get the cached application settings.

    Returns:
        Settings: The settings instance built from the environment
    """
    return Settings()
