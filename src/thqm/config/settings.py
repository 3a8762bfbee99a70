"""Configuration management for thqm.

Loads settings from a YAML configuration file with environment variable
overrides (``THQM_`` prefix). Command-line flags are applied on top by
the CLI.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings

from thqm.utils.paths import get_config_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "thqm.yaml"


class LoggingConfig(BaseModel):
    level: str = Field(default="WARNING")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for thqm.

    Priority: env vars > .env file > YAML file > defaults.
    """

    model_config = {
        "env_prefix": "THQM_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    # Server
    host: str = Field(default="0.0.0.0", description="Address to bind")
    port: int = Field(default=2222, ge=1, le=65535)
    interface: str | None = Field(default=None, description="Network interface for the page URL")
    oneshot: bool = Field(default=False)

    # Basic auth, enforced only when a password is set
    username: str = Field(default="thqm")
    password: SecretStr | None = Field(default=None)

    # Page
    separator: str = Field(default="\n", min_length=1)
    title: str = Field(default="thqm")
    style: str = Field(default="default")
    custom_input: bool = Field(default=False)
    no_shutdown: bool = Field(default=False)
    no_qrcode: bool = Field(default=False)

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # YAML values arrive as init kwargs; the environment wins over them.
        return env_settings, dotenv_settings, init_settings, file_secret_settings

    @property
    def credentials(self) -> tuple[str, str] | None:
        """The (login, password) pair, or None when auth is disabled."""
        if not self.username or self.password is None:
            return None
        return self.username, self.password.get_secret_value()


def default_config_path() -> Path:
    return get_config_dir() / CONFIG_FILE_NAME


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables."""
    path = Path(config_path) if config_path else default_config_path()

    yaml_data = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        if not isinstance(yaml_data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        logger.info("Loaded configuration from %s", path)
    elif config_path:
        logger.warning("Config file %s not found, using defaults + env vars", path)

    return Settings(**yaml_data)
