import logging
import os
import sys
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource
from typing_extensions import Self

DEFAULT_DATA_DIR = "~/.pkgledger"


def data_dir() -> Path:
    """Resolve the data directory from PKGLEDGER_DATA_DIR (default ~/.pkgledger)."""
    return Path(os.environ.get("PKGLEDGER_DATA_DIR", DEFAULT_DATA_DIR)).expanduser()


# =============================================================================
# Application Configuration
# =============================================================================


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load settings from YAML file specified by PKGLEDGER_CONFIG_FILE env var."""

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get the value for a field from the YAML config."""
        yaml_data = self._load_yaml_config()
        field_value = yaml_data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all settings from YAML file."""
        return self._load_yaml_config()

    def _load_yaml_config(self) -> dict[str, Any]:
        """Load config from YAML file if specified."""
        config_file = os.environ.get("PKGLEDGER_CONFIG_FILE")
        if config_file:
            path = Path(config_file)
            if path.exists():
                return yaml.safe_load(path.read_text()) or {}
        return {}


class DatabaseConfig(BaseModel):
    """Record store configuration (nested in Config, uses env_nested_delimiter).

    backend "sql" persists through SQLAlchemy; "memory" keeps everything in
    process and is meant for tests and dry runs.

    The url field uses empty string as sentinel to indicate "derive from the
    data directory". An explicit PKGLEDGER_DATABASE__URL is used as-is.
    """

    backend: Literal["sql", "memory"] = "sql"
    url: str = ""
    echo: bool = False
    auto_migrate: bool = True  # Create missing tables on startup


class LoggingConfig(BaseModel):
    """Logging configuration (nested in Config, uses env_nested_delimiter)."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Get log file path from PKGLEDGER_LOG_FILE env var."""
        return os.environ.get("PKGLEDGER_LOG_FILE")


class OutboxConfig(BaseModel):
    """Event delivery settings for consumers draining the outbox."""

    batch_size: int = 100  # Maximum events handed out per fetch


class Config(BaseSettings):
    database: DatabaseConfig = DatabaseConfig()
    logging: LoggingConfig = LoggingConfig()
    outbox: OutboxConfig = OutboxConfig()

    model_config = {
        "env_prefix": "PKGLEDGER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # Allows PKGLEDGER_DATABASE__URL override
        "extra": "ignore",
    }

    @model_validator(mode="after")
    def derive_database_url(self) -> Self:
        """Derive the SQLite URL from the data directory if not explicitly set."""
        if self.database.backend == "sql" and not self.database.url:
            self.database = DatabaseConfig(
                backend=self.database.backend,
                url=f"sqlite+aiosqlite:///{data_dir() / 'registry.db'}",
                echo=self.database.echo,
                auto_migrate=self.database.auto_migrate,
            )
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include YAML config.

        Priority (highest to lowest):
        1. init_settings - values passed to Config()
        2. env_settings - environment variables
        3. dotenv_settings - .env file
        4. yaml_settings - PKGLEDGER_CONFIG_FILE yaml
        5. file_secret_settings - secrets from files
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def configure_logging(config: LoggingConfig) -> None:
    """Configure Python logging based on config.

    Should be called early in application startup so all module loggers
    pick up the configuration.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(config.format, datefmt=config.date_format)

    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(config.level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Reduce noise from third-party libraries
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
