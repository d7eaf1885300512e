"""Environment-driven configuration for the Events API.

Every value can be overridden with an ``EVENTS_API_``-prefixed environment
variable (or a ``.env`` file next to ``manage.py``), e.g.::

    EVENTS_API_DEBUG=true
    EVENTS_API_LOG_FORMAT=console
    EVENTS_API_ALLOWED_HOSTS=api.example.com,localhost

``config.settings`` reads this once at import time.
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"


class Settings(BaseSettings):
    """Strictly typed settings validated by pydantic."""

    model_config = SettingsConfigDict(
        env_prefix="EVENTS_API_",
        env_file=".env",
        extra="ignore",
    )

    DEBUG: bool = False
    SECRET_KEY: str = "change-me-for-production"
    ALLOWED_HOSTS: str = "*"
    DATABASE_PATH: str = "db.sqlite3"
    TIME_ZONE: str = "UTC"

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.JSON

    PAGE_SIZE: int = Field(default=20, ge=1)
    MAX_PAGE_SIZE: int = Field(default=2000, ge=1)

    @property
    def allowed_hosts(self) -> list[str]:
        return [host.strip() for host in self.ALLOWED_HOSTS.split(",") if host.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
