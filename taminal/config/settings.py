"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from taminal.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_level: str = self._get_log_level("TAMINAL_LOG_LEVEL", "WARNING")
        self.ui_theme: str = self._get_choice("TAMINAL_UI_THEME", "dark", ("dark", "light"))
        self.scrollback_lines: int = self._get_positive_int("TAMINAL_SCROLLBACK_LINES", 1000)
        self.color_enabled: bool = not os.getenv("NO_COLOR")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_log_level(self, key: str, default: str) -> str:
        value = self._get_env(key, default).strip().upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ConfigurationError(f"{key} must be a logging level name, got {value!r}")
        return value

    def _get_choice(self, key: str, default: str, choices: tuple[str, ...]) -> str:
        value = self._get_env(key, default).strip().lower()
        if value not in choices:
            raise ConfigurationError(f"{key} must be one of {', '.join(choices)}, got {value!r}")
        return value

    def _get_positive_int(self, key: str, default: int) -> int:
        raw = self._get_env(key, str(default)).strip()
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be an integer, got {raw!r}")
        if value <= 0:
            raise ConfigurationError(f"{key} must be positive, got {value}")
        return value


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
