from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # make it absolute so reload/CWD doesn't break it
        env_file=Path(__file__).resolve().parents[1] / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Blob Storage API", validation_alias="APP_NAME")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        validation_alias="APP_ENV",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_dir: Path = Field(
        default=Path(__file__).resolve().parents[1] / "logs",
        validation_alias="LOG_DIR",
    )

    # API
    api_host: str = Field(default="127.0.0.1", validation_alias="API_HOST")
    api_port: int = Field(default=8000, validation_alias="API_PORT")

    # Blob Storage
    blob_base_url: str = Field(
        default="file://" + str(Path(__file__).resolve().parents[1] / "blobs"),
        validation_alias="BLOB_BASE_URL",
    )
    blob_storage_options: dict = {}
    blob_public_base_url: str | None = Field(
        default=None,
        validation_alias="BLOB_PUBLIC_BASE_URL",
        description="Base used to build blobUrl in responses. Falls back to BLOB_BASE_URL.",
    )
    blob_containers: str = Field(
        default="uploads",
        validation_alias="BLOB_CONTAINERS",
        description="Comma-separated containers created at startup when missing.",
    )

    @property
    def container_names(self) -> list[str]:
        return [item.strip() for item in self.blob_containers.split(",") if item.strip()]


# Global settings instance
settings = Settings()
