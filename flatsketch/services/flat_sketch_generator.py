""" Пайплайн генерации flat sketch: validate -> enhance -> {images, details} """
from __future__ import annotations

from functools import partial
from uuid import uuid4

from flatsketch.clients.anthropic_client import AnthropicMessagesClient
from flatsketch.clients.huggingface_client import HuggingFaceInferenceClient
from flatsketch.clients.interfaces import ImageModelClient, ReasoningModelClient
from flatsketch.configs.flat_sketch import FlatSketchConfig
from flatsketch.configs.logging import get_logger
from flatsketch.schemas.pydantic.flat_sketch import (
    GenerationRequest,
    GenerationResponse,
)
from flatsketch.services.construction_details import ConstructionDetailService
from flatsketch.services.image_synthesizer import ImageSynthesizerService
from flatsketch.services.prompt_enhancer import PromptEnhancerService
from flatsketch.services.request_validator import validate_request
from flatsketch.utils.concurrency import gather_fail_fast


class FlatSketchGeneratorService:
    """
    Оркестратор пайплайна:
      validate
      -> enhance (reasoning model)
      -> images (image model, 3 варианта) || construction details (reasoning model)
      -> assemble
    Политика «всё или ничего»: любая ошибка роняет запрос целиком.
    Клиенты можно подменить (тесты); иначе они создаются из config.
    """

    def __init__(
        self,
        config: FlatSketchConfig,
        *,
        reasoning_client: ReasoningModelClient | None = None,
        image_client: ImageModelClient | None = None,
    ) -> None:
        self.log = get_logger(__name__)
        self._config = config
        self._owned_clients: list[ReasoningModelClient | ImageModelClient] = []

        if reasoning_client is None:
            reasoning_client = AnthropicMessagesClient(
                api_key=config.anthropic_api_key,
                model=config.anthropic_model,
                base_url=config.anthropic_base_url,
                timeout_sec=config.reasoning_timeout_sec,
            )
            self._owned_clients.append(reasoning_client)
        if image_client is None:
            image_client = HuggingFaceInferenceClient(
                api_key=config.huggingface_api_key,
                model=config.huggingface_model,
                base_url=config.huggingface_base_url,
                timeout_sec=config.image_timeout_sec,
            )
            self._owned_clients.append(image_client)

        self._enhancer = PromptEnhancerService(reasoning_client)
        self._synthesizer = ImageSynthesizerService(
            image_client, concurrent=config.image_calls_concurrent
        )
        self._details = ConstructionDetailService(reasoning_client)

    async def aclose(self) -> None:
        for client in self._owned_clients:
            await client.aclose()
        self._owned_clients.clear()

    # -------- Публичный API --------

    async def generate(self, request: GenerationRequest | None) -> GenerationResponse:
        log = self.log.bind(request_id=uuid4().hex[:12])
        log.debug("Flat sketch state: received")
        try:
            request = validate_request(request)
            log.debug("Flat sketch state: validated")

            enhanced_prompt = await self._enhancer.enhance(
                request.prompt, request.image_url
            )
            log.info(
                "Flat sketch state: enhanced",
                enhanced_prompt_length=len(enhanced_prompt),
            )

            # images и details зависят только от enhanced_prompt
            images, details = await gather_fail_fast(
                partial(self._synthesizer.synthesize, enhanced_prompt),
                partial(self._details.generate, enhanced_prompt),
            )
        except Exception as exc:
            log.warning(
                "Flat sketch state: failed",
                error_type=type(exc).__name__,
            )
            raise

        log.info("Flat sketch state: assembled", images=len(images))
        return GenerationResponse(
            images=images,
            construction_details=details,
            enhanced_prompt=enhanced_prompt,
        )
