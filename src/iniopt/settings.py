"""
Settings for iniopt.

Loads from environment variables and .env file.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .schema import SchemaMode


@dataclass
class Settings:
    """Package-wide defaults"""
    list_delimiter: str = ","
    # Relaxed by default: unknown options pass, known ones are checked
    default_mode: SchemaMode = SchemaMode.RELAXED
    log_level: str = "WARNING"


def load_settings() -> Settings:
    """
    Load settings from environment.

    Raises:
        ValueError: If INIOPT_SCHEMA_MODE or INIOPT_LIST_DELIMITER is invalid
    """
    load_dotenv(find_dotenv(usecwd=True))

    delimiter = os.getenv("INIOPT_LIST_DELIMITER", ",")
    if len(delimiter) != 1 or delimiter == "\\":
        raise ValueError(f"INIOPT_LIST_DELIMITER must be a single non-backslash character, got {delimiter!r}")

    mode_name = os.getenv("INIOPT_SCHEMA_MODE", SchemaMode.RELAXED.value).strip().lower()
    try:
        mode = SchemaMode(mode_name)
    except ValueError:
        raise ValueError(f"INIOPT_SCHEMA_MODE must be 'strict' or 'relaxed', got {mode_name!r}")

    return Settings(
        list_delimiter=delimiter,
        default_mode=mode,
        log_level=os.getenv("INIOPT_LOG_LEVEL", "WARNING").upper(),
    )


def configure_logging(settings: Settings) -> logging.Logger:
    """Set the level of the package logger; the root logger is left alone."""
    logger = logging.getLogger("iniopt")
    logger.setLevel(settings.log_level)
    return logger
