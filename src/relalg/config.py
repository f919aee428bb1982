"""
Configuration management for relalg.

Loads from environment variables and .env file.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class RelalgConfig:
    """Library configuration"""
    log_level: str = "WARNING"
    # Strict Relation.from_pairs raises instead of dropping out-of-base pairs
    strict_links: bool = False
    # Cap on ref_closure passes in transitive_closure; 0 runs to fixpoint
    max_closure_passes: int = 0


def load_config() -> RelalgConfig:
    """Load configuration from environment."""
    load_dotenv()

    return RelalgConfig(
        log_level=os.getenv("RELALG_LOG_LEVEL", "WARNING").upper(),
        strict_links=_parse_bool(os.getenv("RELALG_STRICT_LINKS", "false")),
        max_closure_passes=int(os.getenv("RELALG_MAX_CLOSURE_PASSES", "0")),
    )


@lru_cache(maxsize=1)
def get_config() -> RelalgConfig:
    """Configuration shared by the library, loaded once."""
    return load_config()


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def validate_config(config: RelalgConfig) -> list[str]:
    """
    Validate configuration values.
    Returns list of warning messages (empty if all OK).
    """
    warnings = []

    if config.log_level not in LOG_LEVELS:
        warnings.append(
            f"Unknown log level {config.log_level!r}. "
            f"Expected one of: {', '.join(LOG_LEVELS)}."
        )

    if config.max_closure_passes < 0:
        warnings.append(
            f"max_closure_passes={config.max_closure_passes} is negative. "
            "Use 0 to run closures to a fixpoint."
        )

    return warnings


def configure_logging(config: RelalgConfig | None = None) -> None:
    """Apply the configured log level to the relalg logger hierarchy."""
    config = config or get_config()
    level = config.log_level if config.log_level in LOG_LEVELS else "WARNING"
    logging.getLogger("relalg").setLevel(level)
