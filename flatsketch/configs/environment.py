""" Environment settings """
import os
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


@lru_cache
def get_settings() -> str:
    runtime_env = os.getenv("ENV")
    return f".env.{runtime_env}" if runtime_env else ".env"

class EnvironmentSettings(BaseSettings):
    # ANTHROPIC (reasoning model)
    ANTHROPIC_API_KEY: str | None = None
    ANTHROPIC_MODEL: str = "claude-3-5-sonnet-20241022"
    ANTHROPIC_BASE_URL: str = "https://api.anthropic.com"
    REASONING_TIMEOUT_SEC: float = 60.0

    # HUGGING FACE (image model)
    HUGGINGFACE_API_KEY: str | None = None
    HUGGINGFACE_MODEL: str = "stabilityai/stable-diffusion-xl-base-1.0"
    HUGGINGFACE_BASE_URL: str = "https://router.huggingface.co/hf-inference/models"
    IMAGE_TIMEOUT_SEC: float = 120.0
    IMAGE_CALLS_CONCURRENT: bool = True

    # LOGGING
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = "logs/app.log"

    model_config = SettingsConfigDict(
        env_file=get_settings(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

@lru_cache
def get_environment_settings() -> EnvironmentSettings:
    """Возвращает EnvironmentSettings

    :return: EnvironmentSettings
    :rtype: EnvironmentSettings
    """
    return EnvironmentSettings()
