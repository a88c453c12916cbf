"""Application configuration management."""

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "Membership Intake"

    # Database
    database_url: str = "sqlite+aiosqlite:///./applications.db"
    sql_echo: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Submission timestamps are rendered the way the fr-FR locale prints them
    submitted_at_format: str = "%d/%m/%Y %H:%M:%S"
    submitted_at_timezone: str = "Europe/Paris"

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
