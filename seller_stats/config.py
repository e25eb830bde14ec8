"""
Centralized configuration for seller sales statistics.

Configuration is loaded from environment variables with sensible defaults.

Usage:
    from seller_stats.config import config

    limit = config.analysis.top_products_limit
    rate = config.bonus.top_rate
"""

import os
from dataclasses import dataclass, field
from typing import Tuple

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    """Integer from the environment, or ``default`` when invalid or below ``minimum``."""
    value = os.getenv(name, "").strip()
    if not value.lstrip("-").isdigit() or int(value) < minimum:
        return default
    return int(value)


@dataclass(frozen=True)
class AnalysisConfig:
    """Aggregation and projection settings."""

    top_products_limit: int = field(
        default_factory=lambda: _env_int("SELLER_STATS_TOP_PRODUCTS", 10, minimum=1)
    )
    decimal_places: int = 2


@dataclass(frozen=True)
class BonusConfig:
    """Rates used by the tiered bonus strategy (fractions of profit)."""

    top_rate: float = 0.15
    podium_rate: float = 0.10
    default_rate: float = 0.05
    podium_ranks: Tuple[int, ...] = (1, 2)


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    slow_threshold_ms: float = field(
        default_factory=lambda: _env_int("SELLER_STATS_SLOW_MS", 1000, minimum=0)
    )


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""

    version: str = "1.0.0"
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    bonus: BonusConfig = field(default_factory=BonusConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global config instance
config = AppConfig()


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


def validate_config(app_config: AppConfig = None) -> None:
    """
    Validate configuration values.

    Call this on application startup to fail fast with clear error messages.

    Args:
        app_config: Configuration to check (defaults to the global config)

    Raises:
        ConfigurationError: If any value is invalid
    """
    app_config = app_config or config
    errors = []

    if app_config.analysis.top_products_limit < 1:
        errors.append("SELLER_STATS_TOP_PRODUCTS must be a positive integer")

    if app_config.analysis.decimal_places < 0:
        errors.append("decimal_places cannot be negative")

    bonus = app_config.bonus
    for name in ("top_rate", "podium_rate", "default_rate"):
        if getattr(bonus, name) < 0:
            errors.append(f"Bonus {name} cannot be negative")

    if app_config.logging.slow_threshold_ms < 0:
        errors.append("SELLER_STATS_SLOW_MS cannot be negative")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)
