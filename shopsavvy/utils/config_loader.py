"""
Configuration loader for the ShopSavvy client
"""

from __future__ import annotations

import logging
import os
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from shopsavvy.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.shopsavvy.com/v1"
DEFAULT_TIMEOUT = 30.0

ENV_API_KEY = "SHOPSAVVY_API_KEY"
ENV_BASE_URL = "SHOPSAVVY_BASE_URL"
ENV_TIMEOUT = "SHOPSAVVY_TIMEOUT"


class Config(BaseModel):
    """
    Client configuration.

    Immutable; ``with_*`` methods return an updated copy. The API key format
    is not checked here, only when a client is built from this config.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)  # seconds

    @classmethod
    def new(cls, api_key: str) -> "Config":
        return cls(api_key=api_key)

    def with_api_key(self, api_key: str) -> "Config":
        return self._replace(api_key=api_key)

    def with_base_url(self, base_url: str) -> "Config":
        return self._replace(base_url=base_url)

    def with_timeout(self, timeout: Union[float, timedelta]) -> "Config":
        if isinstance(timeout, timedelta):
            timeout = timeout.total_seconds()
        return self._replace(timeout=float(timeout))

    def _replace(self, **updates: Any) -> "Config":
        return _build_config({**self.model_dump(), **updates}, source="override")

    @classmethod
    def from_env(cls, dotenv_path: Optional[Path] = None) -> "Config":
        """
        Build a config from SHOPSAVVY_* environment variables.

        A .env file is loaded first (without overriding variables already set).
        """
        load_dotenv(dotenv_path=dotenv_path)
        values: Dict[str, Any] = {"api_key": os.getenv(ENV_API_KEY, "")}

        base_url = os.getenv(ENV_BASE_URL)
        if base_url:
            values["base_url"] = base_url

        timeout = os.getenv(ENV_TIMEOUT)
        if timeout:
            try:
                values["timeout"] = float(timeout)
            except ValueError as exc:
                raise ConfigError(f"{ENV_TIMEOUT} must be a number of seconds; got {timeout!r}") from exc

        return _build_config(values, source="environment")


def load_config(config_path: Path) -> Config:
    """
    Load and validate client configuration from a YAML file

    Args:
        config_path: Path to a YAML file with api_key, base_url and timeout keys

    Returns:
        Validated Config object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigError: If the file is not a mapping or doesn't match the schema
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Could not parse {config_path}: {exc}") from exc

    if not isinstance(config_data, dict):
        raise ConfigError(f"{config_path} must contain a mapping, got {type(config_data).__name__}")

    if not config_data.get("api_key"):
        config_data["api_key"] = os.getenv(ENV_API_KEY, "")

    return _build_config(config_data, source=str(config_path))


def _build_config(values: Dict[str, Any], source: str) -> Config:
    try:
        config = Config(**values)
    except ValidationError as exc:
        logger.error("Invalid ShopSavvy configuration from %s: %s", source, exc)
        raise ConfigError(f"Invalid configuration from {source}: {exc}") from exc
    logger.debug("Loaded ShopSavvy configuration from %s (base_url=%s)", source, config.base_url)
    return config
