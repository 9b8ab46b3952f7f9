"""
Configuration settings for fspec.

This module provides a settings class for fspec, with support for loading
configuration from TOML files and environment variables.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

DEFAULT_FSPEC_DIRECTORY = Path(".fspec")
DEFAULT_DATABASE_FILE_NAME = "fspec.db"


class Settings(BaseSettings):
    """Main settings class for fspec.

    Values come from init arguments, ``FSPEC_`` environment variables and
    ``fspec.toml``/``fspec.custom.toml`` in the working directory, in that order.
    """

    model_config = SettingsConfigDict(
        toml_file=["fspec.toml", "fspec.custom.toml"], env_prefix="FSPEC_", extra="ignore"
    )

    # Catalog location
    fspec_directory: Path = DEFAULT_FSPEC_DIRECTORY
    database_file_name: str = DEFAULT_DATABASE_FILE_NAME
    database_echo: bool = False

    # Logging settings
    log_level: str = "WARNING"
    log_format: str | None = None  # Use default if None
    log_to_file: bool = False
    log_dir: str | None = None  # If None, will use {fspec_directory}/logs
    log_rotation: str = "20 MB"
    log_retention: str = "1 week"
    log_serialize: bool = False  # JSON lines in the log file

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize the sources for settings.

        Priority order: init arguments, environment variables, then TOML config files
        """
        return init_settings, env_settings, TomlConfigSettingsSource(settings_cls)

    @property
    def database_path(self) -> Path:
        """Path of the catalog database file."""
        return self.fspec_directory / self.database_file_name

    @property
    def database_url(self) -> str:
        """Get the database URL for SQLAlchemy."""
        return f"sqlite:///{self.database_path}"

    def get_log_dir(self) -> Path:
        """Get the log directory path.

        Returns:
            Path to the log directory. Uses log_dir if specified,
            otherwise a logs directory inside the catalog directory.
        """
        if self.log_dir:
            return Path(self.log_dir)
        return self.fspec_directory / "logs"


@lru_cache
def get_settings() -> Settings:
    """Get the settings instance, with caching.

    Returns:
        Cached Settings instance
    """
    return Settings()
