"""Configuration management for darktriad."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-wide settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DARKTRIAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Bundled data lives beside the traits package
    package_dir: Path = Field(default_factory=lambda: Path(__file__).parent)

    # Lexicon data
    lexicon_dir: Optional[Path] = Field(default=None)
    catalog_path: Optional[Path] = Field(default=None)

    # Logging
    log_level: str = "WARNING"

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        if self.lexicon_dir is None:
            self.lexicon_dir = self.package_dir / "traits" / "data"
        if self.catalog_path is None:
            self.catalog_path = self.package_dir / "traits" / "traits_catalog.json"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
