"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from bundlecmd.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.sdmc_root: str = os.path.abspath(
            os.path.expanduser(self._get_env("BUNDLECMD_SDMC_ROOT", "./sdmc"))
        )
        self.download_timeout: int = self._get_int_env(
            "BUNDLECMD_DOWNLOAD_TIMEOUT", 30
        )
        self.user_agent: str = self._get_env(
            "BUNDLECMD_USER_AGENT", "bundlecmd/0.1 (+https://example.local)"
        )
        self.reboot_command: str = self._get_env("BUNDLECMD_REBOOT_COMMAND", "")
        self.shutdown_command: str = self._get_env("BUNDLECMD_SHUTDOWN_COMMAND", "")
        self.log_level: str = self._get_env("BUNDLECMD_LOG_LEVEL", "INFO").upper()

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int_env(self, key: str, default: int) -> int:
        """Get a positive integer environment variable, raise error if malformed."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(
                f"Environment variable {key} must be an integer, got {raw!r}"
            )
        if value <= 0:
            raise ConfigurationError(f"Environment variable {key} must be positive")
        return value


# Global settings instance
settings = Settings()
