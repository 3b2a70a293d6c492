"""Document mapper settings."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_URI = "mongodb://localhost:27017/test"


class Settings(BaseSettings):
    """Settings read from ``DOCUMENT_MAPPER_*`` environment variables or a .env file."""

    model_config = SettingsConfigDict(env_prefix="DOCUMENT_MAPPER_", env_file=".env", extra="ignore")

    # Database settings
    database_url: str = DEFAULT_URI
    database_name: Optional[str] = None
    server_selection_timeout_ms: int = 30000

    # Timestamp keys stamped on save
    created_at_key: str = "createdAt"
    updated_at_key: str = "updatedAtKey"

    # Logging
    logging_level: str = "INFO"


settings = Settings()
