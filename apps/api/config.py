"""Application configuration using pydantic-settings."""

from enum import Enum
from functools import lru_cache
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BackendType(str, Enum):
    """Available media storage backends."""

    FILESYSTEM = "filesystem"
    S3 = "s3"


class FilesystemBackendSettings(BaseModel):
    """Local disk storage."""

    upload_path: str = "./uploads"

    @field_validator("upload_path")
    @classmethod
    def upload_path_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("upload_path must not be empty")
        return value


class S3BackendSettings(BaseModel):
    """S3-compatible object store (AWS S3, MinIO, ...)."""

    end_point: str | None = None
    access_key_id: str | None = None
    secret_access_key: str | None = None
    bucket: str | None = None
    region: str = "us-east-1"
    path_style: bool = False


class BackendSettings(BaseModel):
    """Backend selection plus per-backend parameters."""

    use: BackendType = BackendType.FILESYSTEM
    filesystem: FilesystemBackendSettings = Field(
        default_factory=FilesystemBackendSettings
    )
    s3: S3BackendSettings = Field(default_factory=S3BackendSettings)

    @model_validator(mode="after")
    def check_selected_backend(self) -> "BackendSettings":
        """Only the selected backend's parameters are required."""
        if self.use is not BackendType.S3:
            return self

        required = ("end_point", "access_key_id", "secret_access_key", "bucket")
        missing = [name for name in required if not getattr(self.s3, name)]
        if missing:
            raise ValueError(
                f"S3 media backend requires: {', '.join(missing)}"
            )

        parsed = urlparse(self.s3.end_point)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            raise ValueError(
                "S3 end_point must be an http(s) URL with a host, "
                f"got '{self.s3.end_point}'"
            )
        return self


class MediaSettings(BaseModel):
    """Media upload settings."""

    backend: BackendSettings = Field(default_factory=BackendSettings)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Media Storage"
    app_version: str = "0.1.0"
    debug: bool = False

    # Media storage, e.g. MEDIA__BACKEND__USE=s3
    media: MediaSettings = Field(default_factory=MediaSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
