"""
Reader client settings.

Remote service location, upload constraints and local handle storage.
Every field can be overridden with a PDF_READER_* environment variable.

Dependencies: pydantic, pydantic_settings
System role: Central configuration for the reader controller and its HTTP surface
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReaderSettings(BaseSettings):
    """Configuration for the reader controller."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PDF_READER_",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    host: str = Field(default="localhost", description="Bind address of the local HTTP surface")
    port: int = Field(default=8082, description="Port of the local HTTP surface")

    api_url: str = Field(
        default="http://localhost:3001",
        description="Base URL of the processing and question-answering service",
    )
    upload_path: str = Field(default="/api/upload", description="Upload endpoint path")
    chat_path: str = Field(default="/api/chat", description="Chat endpoint path")
    upload_field_name: str = Field(
        default="pdf",
        description="Multipart field carrying the document bytes",
    )
    accepted_media_type: str = Field(
        default="application/pdf",
        description="Only media type accepted at selection time",
    )
    max_upload_bytes: int = Field(
        default=50 * 1024 * 1024,
        description="Largest document accepted at selection time",
    )
    request_timeout_seconds: float = Field(
        default=120.0,
        description="Timeout for each remote call",
    )
    handle_dir: str | None = Field(
        default=None,
        description="Directory for local document handles (system temp dir if unset)",
    )

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("accepted_media_type")
    @classmethod
    def normalize_media_type(cls, value: str) -> str:
        return value.strip().lower()

    @property
    def upload_url(self) -> str:
        """Absolute URL of the upload endpoint."""
        return f"{self.api_url}{self.upload_path}"

    @property
    def chat_url(self) -> str:
        """Absolute URL of the chat endpoint."""
        return f"{self.api_url}{self.chat_path}"


@lru_cache
def get_settings() -> ReaderSettings:
    """
    Get application settings singleton.

    Returns ReaderSettings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        ReaderSettings: Application settings instance

    Usage:
        from pdf_reader.configs import get_settings
        settings = get_settings()
    """
    return ReaderSettings()
