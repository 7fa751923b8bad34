"""Site settings, loaded from FROQ_SITE_* environment variables or .env."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Bundled docs directory, next to this file
DOCS_DIR = Path(__file__).parent / "docs"


class Settings(BaseSettings):
    docs_dir: Path = Field(default=DOCS_DIR, description="Directory holding <slug>.md files")
    site_title: str = "Froq! Framework"
    site_description: str = "Froq! Hassle-free PHP framework."
    docs_title: str = Field(default="Docs", description="Base title for every docs page")

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)
    debug: bool = False
    log_level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    model_config = SettingsConfigDict(
        env_prefix="FROQ_SITE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
