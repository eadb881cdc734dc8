"""Configuration — environment + YAML backed settings."""

from __future__ import annotations

from walletd.config.settings import AppConfig

__all__ = ["AppConfig"]
