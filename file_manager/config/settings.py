"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from file_manager.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_USERNAME = "Anonymous"
DEFAULT_CHUNK_SIZE = 64 * 1024
DEFAULT_BROTLI_QUALITY = 11


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self, username: str | None = None):
        self.username: str = username or self._get_env("FM_USERNAME", DEFAULT_USERNAME)
        self.start_dir: str = self._get_start_dir()
        self.log_level: int = self._get_log_level()
        self.chunk_size: int = self._get_int_env(
            "FM_CHUNK_SIZE", DEFAULT_CHUNK_SIZE, minimum=1
        )
        self.brotli_quality: int = self._get_int_env(
            "FM_BROTLI_QUALITY", DEFAULT_BROTLI_QUALITY, minimum=0, maximum=11
        )

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        value = os.getenv(key)
        return value if value else default

    def _get_int_env(
        self, key: str, default: int, minimum: int, maximum: int | None = None
    ) -> int:
        """Get an integer environment variable, raise error if malformed or out of range."""
        raw = os.getenv(key)
        if not raw:
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be an integer, got {raw!r}")
        if value < minimum or (maximum is not None and value > maximum):
            bounds = f">= {minimum}" if maximum is None else f"in {minimum}..{maximum}"
            raise ConfigurationError(f"{key} must be {bounds}, got {value}")
        return value

    def _get_start_dir(self) -> str:
        """Get the initial directory, defaulting to the user's home directory."""
        start_dir = os.path.abspath(
            os.path.expanduser(self._get_env("FM_START_DIR", "~"))
        )
        if not os.path.isdir(start_dir):
            raise ConfigurationError(f"FM_START_DIR is not a directory: {start_dir}")
        return start_dir

    def _get_log_level(self) -> int:
        """Map FM_LOG_LEVEL to a logging level."""
        name = self._get_env("FM_LOG_LEVEL", "WARNING").upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigurationError(f"Unknown FM_LOG_LEVEL: {name}")
        return level
