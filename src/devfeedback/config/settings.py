"""Settings and configuration management using Pydantic."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Tuple, Type

import yaml
from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

CONFIG_FILE = Path("config.yaml")


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """
    Settings source that loads values from ``config.yaml`` in the
    current working directory.
    """

    def get_field_value(self, field: Any, field_name: str) -> Tuple[Any, str, bool]:
        return self().get(field_name), field_name, False

    def __call__(self) -> Dict[str, Any]:
        if not CONFIG_FILE.exists():
            return {}

        encoding = self.config.get("env_file_encoding")
        try:
            file_content = yaml.safe_load(CONFIG_FILE.read_text(encoding))
        except (OSError, yaml.YAMLError) as e:
            print(f"Warning: Failed to load {CONFIG_FILE}: {e}")
            return {}

        return dict(file_content) if isinstance(file_content, dict) else {}


class Settings(BaseSettings):
    """Developer Feedback Loop configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="DEVFB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # First source wins: env and .env override config.yaml
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    # Store
    database_url: str = Field(
        default="sqlite:///~/.devfeedback/feedbackLoopDB.db",
        description="Store connection URL",
    )
    reject_duplicate_developers: bool = Field(
        default=False,
        description="Refuse to register a developer whose ID is already known",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Log file path",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode (DEBUG logging and SQL echo)",
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def expand_db_url(cls, v: str) -> str:
        """Expand ``~`` and environment variables in sqlite file URLs."""
        if v.startswith("sqlite:///") and v != "sqlite:///:memory:":
            path_part = v.replace("sqlite:///", "", 1)
            expanded_path = os.path.expandvars(os.path.expanduser(path_part))
            return f"sqlite:///{expanded_path}"
        return v

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_log_file(cls, v: Any) -> Any:
        if isinstance(v, str):
            if not v:
                return None
            return Path(os.path.expandvars(os.path.expanduser(v)))
        return v

    def ensure_directories(self) -> None:
        """Ensure directories for the sqlite file and the log file exist."""
        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)

        if self.database_url.startswith("sqlite:///") and ":memory:" not in self.database_url:
            db_path = Path(self.database_url.replace("sqlite:///", "", 1))
            db_path.parent.mkdir(parents=True, exist_ok=True)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
