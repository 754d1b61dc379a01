"""
Centralized configuration management for Semantic Canvas.

All options are loaded from environment variables (prefix ``SEMANTIC_CANVAS_``)
or a ``.env`` file so the command line and library callers share one source of
truth.
"""

from enum import Enum
from functools import lru_cache
from typing import Any, Dict, FrozenSet, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class NewFileLocation(str, Enum):
    """Where newly synthesized canvases are saved."""
    ROOT = "root"
    SAME_FOLDER = "same_folder"
    CUSTOM = "custom"


class Settings(BaseSettings):
    """
    Centralized settings for Semantic Canvas.

    Uses Pydantic for validation and type safety.
    """

    # === Connection categories ===
    use_cards: bool = Field(default=True, description="Cards connected to a note become properties")
    use_urls: bool = Field(default=True, description="Links connected to a note become properties")
    use_files: bool = Field(default=True, description="Notes connected to a note become properties")
    use_groups: bool = Field(default=True, description="Groups containing a note become properties")

    # === Default property keys for unlabelled connections ===
    card_default: str = Field(default="cards", description="Property key for unlabelled card edges")
    url_default: str = Field(default="urls", description="Property key for unlabelled link edges")
    file_default: str = Field(default="files", description="Property key for unlabelled note edges")
    group_default: str = Field(default="groups", description="Property key for group membership")

    # === Exclusions ===
    exclude_keys: str = Field(
        default="aliases,tags,cssclasses",
        description="Comma separated, case-insensitive property keys never synced",
    )

    # === New canvas location ===
    new_file_location: NewFileLocation = Field(default=NewFileLocation.ROOT, description="Where new canvases are saved")
    custom_file_location: str = Field(default="", description="Folder used when new_file_location is 'custom'")

    # === Logging ===
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")

    model_config = SettingsConfigDict(
        env_prefix="SEMANTIC_CANVAS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @field_validator("custom_file_location")
    @classmethod
    def validate_custom_file_location(cls, v):
        return v.strip().strip("/")

    @property
    def excluded_keys(self) -> FrozenSet[str]:
        """Lowercased property keys that are never treated as canvas-derived."""
        return frozenset(
            key.strip().lower() for key in self.exclude_keys.split(",") if key.strip()
        )

    @property
    def logging_config(self) -> Dict[str, Any]:
        """Get logging configuration."""
        return {
            'level': self.log_level,
            'file': self.log_file,
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to ensure settings are only loaded once per process.
    """
    return Settings()
