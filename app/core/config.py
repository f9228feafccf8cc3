"""Translation resolver configuration settings."""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import structlog

logger = structlog.stdlib.get_logger().bind(component="config")


class I18nSettings(BaseSettings):
    """Translation configuration settings.

    Environment Variables:
        DEFAULT_LANGUAGE: Language used when no language is requested (default: en)
        TRANSLATIONS_DIRS: Comma-separated list of translation directories.
            Empty means the bundled ``locales`` directory.
        TRANSLATIONS_FORMAT: Resource file format, ``yaml`` or ``json``
        TRANSLATIONS_LOADER_CACHE: Whether loaders keep parsed files in memory
    """

    DEFAULT_LANGUAGE: str = Field(default="en", alias="DEFAULT_LANGUAGE")
    TRANSLATIONS_DIRS: str = Field(default="", alias="TRANSLATIONS_DIRS")
    TRANSLATIONS_FORMAT: str = Field(default="yaml", alias="TRANSLATIONS_FORMAT")
    LOADER_CACHE: bool = Field(default=True, alias="TRANSLATIONS_LOADER_CACHE")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("TRANSLATIONS_FORMAT", mode="before")
    @classmethod
    def validate_translations_format(cls, v: str) -> str:
        """Normalize the format name and reject unknown formats."""
        value = (v or "yaml").strip().lower()
        if value == "yml":
            value = "yaml"
        if value not in ("yaml", "json"):
            raise ValueError(f"Unsupported translations format: {v}")
        return value

    @property
    def translations_dirs(self) -> List[str]:
        """Configured translation directories in priority order."""
        return [
            directory.strip()
            for directory in self.TRANSLATIONS_DIRS.split(",")
            if directory.strip()
        ]


class Settings(BaseSettings):
    """Translation resolver configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    # Translation settings
    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the settings instance
settings = Settings()
