"""Configuration settings for the manday tracker."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# 1 manday = 8 work-hours. Not user-adjustable.
HOURS_PER_DAY = 8

DEFAULT_TASK = "default"

DATA_FILE_ENV_VAR = "MD_DATA_FILE"
LOG_FILE_ENV_VAR = "MD_LOG_FILE"
LOG_LEVEL_ENV_VAR = "MD_LOG_LEVEL"


@dataclass
class Config:
    """Application configuration settings.

    Centralized configuration to avoid hardcoded values throughout the codebase.
    The data file and log settings can be overridden from the environment;
    the workday length cannot.
    """
    # File system
    data_file: Path = Path("~/.mandays/mandays.json").expanduser()
    log_file: Optional[Path] = None
    log_level: str = "WARNING"

    # Ledger
    hours_per_day: int = HOURS_PER_DAY
    default_task: str = DEFAULT_TASK

    # Colors
    color_primary: str = "#0abdc6"  # Cyan - primary accent
    color_accent: str = "#ff006e"  # Pink - selection highlight
    color_secondary: str = "#8b5cf6"  # Purple - active task marker
    color_bg_dark: str = "#1a1a2e"  # Dark background
    color_bg_medium: str = "#2d2d44"  # Medium background
    color_text: str = "#e2e8f0"  # Light text

    @classmethod
    def load(cls) -> 'Config':
        """
        Load configuration from the environment.

        Recognized variables:
            MD_DATA_FILE: path of the ledger JSON file
            MD_LOG_FILE: optional path of a debug log file
            MD_LOG_LEVEL: console log level name (e.g. DEBUG, INFO)

        Returns:
            Config instance with default or overridden values
        """
        settings = cls()

        data_file = os.getenv(DATA_FILE_ENV_VAR)
        if data_file:
            settings.data_file = Path(data_file).expanduser()

        log_file = os.getenv(LOG_FILE_ENV_VAR)
        if log_file:
            settings.log_file = Path(log_file).expanduser()

        log_level = os.getenv(LOG_LEVEL_ENV_VAR)
        if log_level:
            settings.log_level = log_level.strip().upper()

        return settings


# Global config instance
config = Config.load()
