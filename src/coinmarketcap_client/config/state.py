"""
Client configuration state.

Single source of truth for client settings, combining an optional YAML file
with environment overrides, type validation and sensible defaults.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from coinmarketcap_client.cache.expiring import validate_expiry

logger = logging.getLogger(__name__)

MINUTE_MS = 60 * 1000


# =============================================================================
# PYDANTIC MODELS - Type-Safe Configuration
# =============================================================================


class ApiConfig(BaseModel):
    """Upstream endpoints and transport settings."""

    model_config = ConfigDict(extra="allow")

    api_uri: str = Field(default="https://api.coinmarketcap.com/v1")
    site_uri: str = Field(default="https://coinmarketcap.com")
    timeout: float = Field(default=30.0, gt=0)
    retries: int = Field(default=0, ge=0, le=10)
    user_agent: str = Field(default="coinmarketcap-client")

    @field_validator("api_uri", "site_uri")
    @classmethod
    def validate_uri(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URI must start with http:// or https://")
        return v.rstrip("/")


class CacheConfig(BaseModel):
    """Cache expiry per group, in milliseconds."""

    model_config = ConfigDict(extra="allow")

    expiry: dict[str, float] = Field(
        default_factory=lambda: {
            "assets": 5 * MINUTE_MS,
            "assetpage": 5 * MINUTE_MS,
            "global": 10 * MINUTE_MS,
            "default": 5 * MINUTE_MS,
        }
    )

    @field_validator("expiry")
    @classmethod
    def check_expiry(cls, v: dict[str, float]) -> dict[str, float]:
        validate_expiry(v)
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="allow")

    level: str = Field(default="INFO")
    json_logs: bool = Field(default=False)


class ClientConfig(BaseModel):
    """
    Root configuration for the CoinMarketCap client.

    ``plain_numbers`` makes every public operation return floats instead of
    Decimal values.
    """

    model_config = ConfigDict(extra="allow")

    api: ApiConfig = Field(default_factory=ApiConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    plain_numbers: bool = Field(default=False)

    env: str = Field(default="dev")
    config_dir: str = Field(default="./config")


# =============================================================================
# CONFIG LOADER
# =============================================================================


_TRUE_VALUES = ("1", "true", "yes", "on")


class ConfigLoader:
    """
    Load and validate configuration.

    Merges:
      1. Defaults (ClientConfig)
      2. client.yaml from config_dir
      3. env/<env>.yaml from config_dir
      4. Environment variable overrides
    """

    def __init__(self, config_dir: str = "./config"):
        self.config_dir = Path(config_dir)
        self._yaml_cache: dict[Path, Any] = {}
        self.env = os.getenv("CMC_ENV", "dev")

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """Load YAML file with caching. A missing file means defaults."""
        if path in self._yaml_cache:
            return self._yaml_cache[path]

        if not path.exists():
            logger.debug(f"Config file not found (using defaults): {path}")
            return {}

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        self._yaml_cache[path] = data
        logger.debug(f"Loaded config: {path}")
        return data

    def _apply_env_overrides(self, config: dict[str, Any]) -> dict[str, Any]:
        """Apply environment variable overrides to config."""
        if api_uri := os.getenv("CMC_API_URI"):
            config.setdefault("api", {})["api_uri"] = api_uri

        if site_uri := os.getenv("CMC_SITE_URI"):
            config.setdefault("api", {})["site_uri"] = site_uri

        if retries := os.getenv("CMC_RETRIES"):
            config.setdefault("api", {})["retries"] = int(retries)

        if timeout := os.getenv("CMC_TIMEOUT"):
            config.setdefault("api", {})["timeout"] = float(timeout)

        if plain := os.getenv("CMC_PLAIN_NUMBERS"):
            config["plain_numbers"] = plain.strip().lower() in _TRUE_VALUES

        if log_level := os.getenv("LOG_LEVEL"):
            config.setdefault("logging", {})["level"] = log_level

        return config

    def _merge_dicts(self, base: dict, override: dict) -> dict:
        """Deep merge override into base dict."""
        result = base.copy()
        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_dicts(result[key], value)
            else:
                result[key] = value
        return result

    def load(self) -> ClientConfig:
        """
        Load complete configuration.

        Raises:
            pydantic.ValidationError: If configuration is invalid
        """
        logger.info(f"Loading configuration from {self.config_dir} (env: {self.env})")

        config = self._load_yaml(self.config_dir / "client.yaml")
        env_config = self._load_yaml(self.config_dir / "env" / f"{self.env}.yaml")
        config = self._merge_dicts(config, env_config)
        config = self._apply_env_overrides(config)

        try:
            state = ClientConfig(env=self.env, config_dir=str(self.config_dir), **config)
        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            raise

        logger.info(
            f"Configuration loaded: api={state.api.api_uri} "
            f"retries={state.api.retries} plain_numbers={state.plain_numbers}"
        )
        return state


def get_config(config_dir: str | None = None) -> ClientConfig:
    """
    Load and return the client configuration.

    Args:
        config_dir: Override config directory. Defaults to $CMC_CONFIG_DIR or ./config
    """
    if config_dir is None:
        config_dir = os.getenv("CMC_CONFIG_DIR", "./config")

    return ConfigLoader(config_dir=config_dir).load()


__all__ = [
    "ApiConfig",
    "CacheConfig",
    "ClientConfig",
    "ConfigLoader",
    "LoggingConfig",
    "get_config",
]
