import logging
import os
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from erplookup.cli.util.paths import ERPLookupPaths
from erplookup.domain.shared.error import ConfigurationError

CONFIG_FILE_ENV = "ERPLOOKUP_CONFIG_FILE"


# =============================================================================
# Sources
# =============================================================================


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load settings from YAML.

    Uses the file named by ERPLOOKUP_CONFIG_FILE, else the user config file
    (~/.config/erplookup/config.yaml).
    """

    def get_field_value(
        self, field: Any, field_name: str
    ) -> tuple[Any, str, bool]:
        """Get the value for a field from the YAML config."""
        yaml_data = self._load_yaml_config()
        field_value = yaml_data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all settings from YAML file."""
        return self._load_yaml_config()

    def _load_yaml_config(self) -> dict[str, Any]:
        config_file = os.environ.get(CONFIG_FILE_ENV)
        path = Path(config_file).expanduser() if config_file else ERPLookupPaths().config_file
        if path.exists():
            return yaml.safe_load(path.read_text()) or {}
        return {}


# =============================================================================
# Sections
# =============================================================================


class ERPNextConfig(BaseModel):
    url: str = ""  # e.g. https://erp.example.com
    api_key: str = ""
    api_secret: str = ""
    timeout: float = 30.0
    retries: int = 3  # Retries for connection/read errors

    @property
    def base_url(self) -> str:
        return self.url.rstrip("/")

    def require_credentials(self) -> None:
        """Raise ConfigurationError unless url, key and secret are all set."""
        missing = [
            name for name in ("url", "api_key", "api_secret") if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(
                f"Missing ERPNext setting(s): {', '.join(missing)}",
                code="MISSING_CREDENTIALS",
            )


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    file: str | None = None  # Log to this file instead of stderr


# =============================================================================
# Application Configuration
# =============================================================================


class Config(BaseSettings):
    erpnext: ERPNextConfig = ERPNextConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix="ERPLOOKUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows ERPLOOKUP_ERPNEXT__URL override
        extra="ignore",
    )

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
        4. yaml_settings - ERPLOOKUP_CONFIG_FILE or ~/.config/erplookup/config.yaml
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

    Called once by the CLI entry point before any command runs.
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
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
