"""
Configuration management for pb-async
"""
from typing import Literal

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pb_async import __version__
from pb_async.exceptions import ConfigurationException

DEFAULT_API_ROOT = "https://api.pushbullet.com/v2/"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class PushbulletConfig(BaseSettings):
    """Client configuration with environment variable support."""

    # Authentication
    pushbullet_token: str = ""

    # API settings
    api_root: str = DEFAULT_API_ROOT
    default_timeout: int = 30
    user_agent: str = f"pb-async/{__version__}"

    # Logging settings
    log_level: LogLevel = "INFO"
    log_response_limit: int = 1200  # Characters of response body kept in debug logs

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def has_token(self) -> bool:
        """Check if an access token is configured."""
        return bool(self.pushbullet_token)


# Global configuration instance - lazily initialized to avoid import-time errors
_config = None


def get_config() -> PushbulletConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        try:
            _config = PushbulletConfig()
        except ValidationError as e:
            raise ConfigurationException(f"Invalid pb-async configuration: {e}") from e
    return _config
