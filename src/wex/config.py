"""Configuration system using pydantic-settings with environment variable loading.

Credentials can be given either flat (``WEX_API_KEY``) or nested under the
root settings (``WEX__API_KEY``), in the environment or in a ``.env`` file.
"""

from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TAPI_URL = "https://wex.nz/tapi"


class WexSettings(BaseSettings):
    """WEX Trade API connection settings."""

    model_config = SettingsConfigDict(
        env_prefix="WEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: SecretStr = SecretStr("")
    api_secret: SecretStr = SecretStr("")
    tapi_url: str = DEFAULT_TAPI_URL
    timeout: float = 10.0  # seconds per HTTP round trip
    user_agent: str = "wex-tapi-python/1.0"

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key.get_secret_value() and self.api_secret.get_secret_value())


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    # Built per instance so WEX_* values are read when AppSettings is created
    wex: WexSettings = Field(default_factory=WexSettings)
