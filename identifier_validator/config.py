"""Application configuration via environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from IDENTIFIER_VALIDATOR_* environment variables."""

    # Logging
    LOG_LEVEL: str = "warning"
    LOG_JSON: bool = False

    # Shell
    TRIM_INPUT: bool = True
    EXIT_COMMAND: str = "exit"
    DEFAULT_CATEGORY: str = "generic"

    model_config = {
        "env_prefix": "IDENTIFIER_VALIDATOR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
