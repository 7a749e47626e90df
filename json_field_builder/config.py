"""Settings for the builder UI."""

import os
from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from .errors import ConfigException
from .io_utils import DEFAULT_EXPORT_NAME

ENV_PREFIX = "FIELD_BUILDER_"
CONFIG_PATH_ENV = f"{ENV_PREFIX}CONFIG"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings, read from the environment and an optional TOML file."""

    server_name: str = Field(default="127.0.0.1")
    server_port: int = Field(default=7860, ge=1, le=65535)
    export_filename: str = Field(default=DEFAULT_EXPORT_NAME, min_length=1)
    export_dir: Optional[str] = None
    log_file: str = Field(default="data/json_field_builder.log")
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX)

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: '{v}'. Use one of {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )

    @classmethod
    def load(cls, **overrides) -> "Settings":
        try:
            return cls(**overrides)
        except ValidationError as e:
            raise ConfigException(_format_errors(e)) from e

    @classmethod
    def load_from_file(cls, config_path: str) -> "Settings":
        """Load settings from a TOML file; environment variables still take precedence."""
        path = Path(config_path)
        if not path.exists():
            raise ConfigException(f"Configuration file not found: {config_path}")

        class _Settings(cls):
            model_config = SettingsConfigDict(toml_file=str(path), env_prefix=ENV_PREFIX)

        try:
            return _Settings()
        except ValidationError as e:
            raise ConfigException(_format_errors(e)) from e


def _format_errors(e: ValidationError) -> str:
    error_lines = ["Configuration validation failed:"]
    for error in e.errors():
        loc = " -> ".join(str(item) for item in error["loc"])
        error_lines.append(f"  - {loc}: {error['msg']}")
    return "\n".join(error_lines)


def load_settings() -> Settings:
    """Settings for the app: from the TOML file named by FIELD_BUILDER_CONFIG, else the environment."""
    config_path = os.environ.get(CONFIG_PATH_ENV, "").strip()
    if config_path:
        return Settings.load_from_file(config_path)
    return Settings.load()
