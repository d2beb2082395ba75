""" Рендер вариантов flat sketch через text-to-image модель """
from __future__ import annotations

import base64
from functools import partial
from typing import Any

from flatsketch.clients.interfaces import ImageModelClient
from flatsketch.configs.logging import get_logger
from flatsketch.schemas.errors.flat_sketch import (
    MissingCredentialError,
    UpstreamImageGenerationError,
)
from flatsketch.utils.concurrency import gather_fail_fast


class ImageSynthesizerService:
    """
    Три вызова image-модели с одним и тем же техническим промптом.
    - количество, шаблон и параметры фиксированы
    - порядок результата = порядок выдачи вызовов
    - любая ошибка роняет весь батч, частичных результатов нет
    """

    NUM_IMAGES = 3
    TECHNICAL_PROMPT_TEMPLATE = (
        "professional technical flat sketch, {prompt}, black and white line art, "
        "clean lines, no background, no model, fashion design illustration, "
        "CAD drawing style, technical drawing, front view"
    )
    NEGATIVE_PROMPT = (
        "blurry, low quality, photograph, realistic, 3d render, model, background, "
        "messy lines, sketchy, rough, colorful, painting"
    )
    NUM_INFERENCE_STEPS = 30
    GUIDANCE_SCALE = 7.5
    WIDTH = 768
    HEIGHT = 1024
    DATA_URI_PREFIX = "data:image/png;base64,"

    def __init__(self, client: ImageModelClient, *, concurrent: bool = True) -> None:
        self.log = get_logger(__name__)
        self._client = client
        self._concurrent = concurrent

    @classmethod
    def build_technical_prompt(cls, prompt: str) -> str:
        return cls.TECHNICAL_PROMPT_TEMPLATE.format(prompt=prompt)

    @classmethod
    def generation_parameters(cls) -> dict[str, Any]:
        return {
            "negative_prompt": cls.NEGATIVE_PROMPT,
            "num_inference_steps": cls.NUM_INFERENCE_STEPS,
            "guidance_scale": cls.GUIDANCE_SCALE,
            "width": cls.WIDTH,
            "height": cls.HEIGHT,
        }

    async def synthesize(self, enhanced_prompt: str) -> list[str]:
        call = partial(
            self._client.text_to_image,
            prompt=self.build_technical_prompt(enhanced_prompt),
            parameters=self.generation_parameters(),
        )
        try:
            if self._concurrent:
                raw_images = await gather_fail_fast(*[call] * self.NUM_IMAGES)
            else:
                raw_images = [await call() for _ in range(self.NUM_IMAGES)]
        except MissingCredentialError:
            raise
        except Exception as e:
            self.log.error("Hugging Face generation error: {}", e)
            raise UpstreamImageGenerationError(
                f"Failed to generate images with Hugging Face: {e}"
            ) from e

        self.log.info("Rendered {} flat sketch variants", len(raw_images))
        return [self._to_data_uri(raw) for raw in raw_images]

    @classmethod
    def _to_data_uri(cls, raw: bytes) -> str:
        return cls.DATA_URI_PREFIX + base64.b64encode(raw).decode("ascii")
