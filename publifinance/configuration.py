"""Mini README: Centralised configuration for the PubliFinance dashboard.

Structure:
    * PubliFinanceSettings - pydantic-settings model describing runtime options.
    * get_settings - cached accessor so validation happens once per process.

Usage:
    Values are read from ``PUBLIFINANCE_*`` environment variables or a local
    ``.env`` file. ``seed_demo_data`` controls whether a fresh ledger starts
    with the demonstration transactions and goals.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PubliFinanceSettings(BaseSettings):
    """Runtime configuration for the dashboard."""

    model_config = SettingsConfigDict(
        env_prefix="PUBLIFINANCE_",
        env_file=".env",
        case_sensitive=False,
    )

    environment: str = Field(
        "development",
        description="Environment label; \"production\" disables auto-reload in the launcher.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the dashboard server to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the dashboard server exposes.",
        ge=1,
        le=65535,
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied by the entry points.",
    )
    currency_symbol: str = Field(
        "R$",
        description="Symbol prefixed to monetary values in rendered views.",
    )
    seed_demo_data: bool = Field(
        True,
        description="Populate new ledgers with the demonstration data set.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        """Accept any casing for level names."""

        normalised = value.strip().upper()
        if normalised not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unsupported log level: {value}")
        return normalised


@lru_cache()
def get_settings() -> PubliFinanceSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return PubliFinanceSettings()
