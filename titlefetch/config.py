"""Pydantic Settings — loads configuration from environment variables."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings

DEFAULT_TEMPLATE = "%title <%url>"
DEFAULT_FALLBACK_TITLE = "@@@ NO TITLE @@@"
DEFAULT_USER_AGENT = "load title tags"


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_prefix": "TITLEFETCH_", "extra": "ignore"}

    template: str = DEFAULT_TEMPLATE
    skip_when_no_title: bool = False
    fallback_title: str = DEFAULT_FALLBACK_TITLE
    keep_going: bool = False

    concurrency: int = 10
    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT

    log_level: str = "WARNING"
    log_json: bool = False

    @field_validator("concurrency")
    @classmethod
    def _positive_concurrency(cls, value: int) -> int:
        if value < 1:
            raise ValueError("concurrency must be at least 1")
        return value

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be positive")
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
