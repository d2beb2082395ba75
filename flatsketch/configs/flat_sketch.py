""" Flat sketch pipeline config """
from __future__ import annotations

from dataclasses import dataclass

from flatsketch.configs.environment import EnvironmentSettings


@dataclass(frozen=True)
class FlatSketchConfig:
    """ Flat sketch pipeline config """
    anthropic_api_key: str | None
    huggingface_api_key: str | None
    anthropic_model: str = "claude-3-5-sonnet-20241022"
    anthropic_base_url: str = "https://api.anthropic.com"
    huggingface_model: str = "stabilityai/stable-diffusion-xl-base-1.0"
    huggingface_base_url: str = "https://router.huggingface.co/hf-inference/models"
    reasoning_timeout_sec: float = 60.0
    image_timeout_sec: float = 120.0
    image_calls_concurrent: bool = True

    @classmethod
    def from_environment(cls, env: EnvironmentSettings) -> FlatSketchConfig:
        return cls(
            anthropic_api_key=env.ANTHROPIC_API_KEY or None,
            huggingface_api_key=env.HUGGINGFACE_API_KEY or None,
            anthropic_model=env.ANTHROPIC_MODEL,
            anthropic_base_url=env.ANTHROPIC_BASE_URL,
            huggingface_model=env.HUGGINGFACE_MODEL,
            huggingface_base_url=env.HUGGINGFACE_BASE_URL,
            reasoning_timeout_sec=env.REASONING_TIMEOUT_SEC,
            image_timeout_sec=env.IMAGE_TIMEOUT_SEC,
            image_calls_concurrent=env.IMAGE_CALLS_CONCURRENT,
        )
