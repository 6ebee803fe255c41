import logging
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

# Load .env file if it exists
for env_path in [Path(".env"), Path("/etc/secrets/.env")]:
    if env_path.exists():
        load_dotenv(env_path)
        logger.info(f"Loaded environment from {env_path}")
        break
else:
    load_dotenv()


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = Field("sqlite:///./task_tracker.db")

    # Identity provider (JWT bearer tokens)
    JWT_SECRET: str = Field(...)
    JWT_ALGORITHM: str = Field("HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(60)
    JWT_LEEWAY_SECONDS: int = Field(10)  # clock skew

    # Report foreign tasks as not-found on update/delete instead of 403
    HIDE_FOREIGN_TASKS: bool = Field(False)

    # General App Settings
    TESTING_MODE: bool = Field(False)
    LOG_LEVEL: str = Field("INFO")
    ENABLE_SECURE_LOGGING: bool = Field(True)
    PORT: int = Field(8000)

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("JWT_SECRET")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("JWT_SECRET must not be empty")
        return v

    # Property aliases for consistent case access
    @property
    def database_url(self) -> str:
        return self.DATABASE_URL

    @property
    def jwt_secret(self) -> str:
        return self.JWT_SECRET

    @property
    def jwt_algorithm(self) -> str:
        return self.JWT_ALGORITHM

    @property
    def hide_foreign_tasks(self) -> bool:
        return self.HIDE_FOREIGN_TASKS

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra fields from environment


# Create a single instance for easy import
settings = Settings()
