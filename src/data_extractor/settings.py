import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Manages extractor settings using Pydantic.
    Values can be overridden by DATA_EXTRACTOR_* environment variables or a .env file.
    """

    # --- Parsing ---
    HTML_PARSER: str = "lxml"
    ENCODING: str = "utf-8"

    # --- Directory extraction ---
    FILE_SUFFIX: str = ".html"
    MAX_WORKERS: int = Field(default_factory=lambda: os.cpu_count() or 1, ge=1)

    # Pydantic settings configuration
    model_config = SettingsConfigDict(
        env_prefix="DATA_EXTRACTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Default instance, extractors accept their own instance as well
settings = Settings()
