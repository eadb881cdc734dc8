"""Application settings loaded from environment variables and config files.

Configuration is loaded from (highest priority first):
1. Environment variables (prefix: ``WALLETD_``, nested via ``__``)
2. YAML config file (``WALLETD_CONFIG_PATH`` env var or ``AppConfig.from_yaml``)
3. Defaults defined here
"""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Native asset id, used to pay transaction fees.
FEE_ASSET_ID = "f" * 64

DEFAULT_GAS = 20_000_000

# ---------------------------------------------------------------------------
# Enums for validated choices
# ---------------------------------------------------------------------------


class LogLevel(enum.StrEnum):
    """Log levels accepted by the server and the CLI."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


# ---------------------------------------------------------------------------
# Sub-config models
# ---------------------------------------------------------------------------


class ServerConfig(BaseSettings):
    """HTTP server settings."""

    model_config = SettingsConfigDict(
        env_prefix="WALLETD_SERVER__",
        case_sensitive=False,
    )

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 9888


class APIConfig(BaseSettings):
    """RPC dispatch settings."""

    model_config = SettingsConfigDict(
        env_prefix="WALLETD_API__",
        case_sensitive=False,
    )

    max_body_bytes: int = Field(
        default=10 << 20,
        ge=1,
        description="Largest request body accepted before the handler runs",
    )


class MetricsConfig(BaseSettings):
    """Prometheus metrics settings."""

    model_config = SettingsConfigDict(
        env_prefix="WALLETD_METRICS__",
        case_sensitive=False,
    )

    enabled: bool = True


class ClientConfig(BaseSettings):
    """Settings for the ``walletd-cli`` client."""

    model_config = SettingsConfigDict(
        env_prefix="WALLETD_CLIENT__",
        case_sensitive=False,
    )

    node_url: str = "http://127.0.0.1:9888"
    timeout: float = 30.0
    default_gas: int = Field(default=DEFAULT_GAS, ge=0)


# ---------------------------------------------------------------------------
# Top-level config
# ---------------------------------------------------------------------------


def _load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a YAML configuration file and return its contents as a dict.

    Returns an empty dict if the file doesn't exist or is empty.
    """
    p = Path(path)
    if not p.exists():
        return {}
    text = p.read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    return data if isinstance(data, dict) else {}


class AppConfig(BaseSettings):
    """Top-level application configuration.

    Loads settings from environment variables (``WALLETD_`` prefix),
    an optional YAML file, and built-in defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="WALLETD_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    debug: bool = False
    log_level: LogLevel = LogLevel.INFO
    config_path: str = ""

    server: ServerConfig = Field(default_factory=ServerConfig)
    api: APIConfig = Field(default_factory=APIConfig)
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)
    client: ClientConfig = Field(default_factory=ClientConfig)

    @model_validator(mode="before")
    @classmethod
    def _merge_yaml(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Merge YAML config file contents under the env var overrides."""
        config_path = values.get("config_path", "")
        if not config_path:
            return values
        yaml_data = _load_yaml(config_path)
        for key, val in yaml_data.items():
            if key not in values or values[key] is None:
                values[key] = val
            elif isinstance(val, dict) and isinstance(values.get(key), dict):
                # YAML fills in keys the environment left unset
                values[key] = {**val, **values[key]}
        return values

    @classmethod
    def from_yaml(cls, path: str | Path) -> Self:
        """Construct ``AppConfig`` loading defaults from a YAML file.

        Environment variables still override YAML values.
        """
        return cls(config_path=str(path))
