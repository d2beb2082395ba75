""" Router for Flat Sketch Generator """
from __future__ import annotations

from functools import lru_cache
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from flatsketch.configs.environment import get_environment_settings
from flatsketch.configs.flat_sketch import FlatSketchConfig
from flatsketch.configs.logging import get_logger
from flatsketch.schemas.errors.flat_sketch import InvalidRequestError
from flatsketch.schemas.pydantic.flat_sketch import (
    ErrorResponse,
    GenerationRequest,
    GenerationResponse,
)
from flatsketch.services.flat_sketch_generator import FlatSketchGeneratorService

FlatSketchRouter = APIRouter(prefix="/api", tags=["flat-sketch"])
logger = get_logger(__name__)

GENERATION_FAILED = "Failed to generate flat sketch"


@lru_cache
def get_flat_sketch_service() -> FlatSketchGeneratorService:
    """
    Один сервис на процесс; конфиг читается из окружения один раз.
    """
    env = get_environment_settings()
    return FlatSketchGeneratorService(FlatSketchConfig.from_environment(env))


def _map_exception(exc: Exception) -> tuple[int, dict[str, Any]]:
    """
    Переводит исключения пайплайна в HTTP-код и payload.
    """
    if isinstance(exc, InvalidRequestError):
        return (status.HTTP_400_BAD_REQUEST, {"error": str(exc)})
    # всё остальное (upstream, credentials, неожиданное) -> 500 с исходным сообщением
    return (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        {"error": GENERATION_FAILED, "message": str(exc) or type(exc).__name__},
    )


@FlatSketchRouter.post(
    "/generate",
    response_model=GenerationResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def generate(
    request: GenerationRequest | None = Body(None),
    service: FlatSketchGeneratorService = Depends(get_flat_sketch_service),
) -> GenerationResponse | JSONResponse:
    """
    Генерирует три варианта flat sketch и конструкторскую спецификацию.
    """
    logger.info(
        "Flat sketch request received",
        extra={
            "prompt_length": len(request.prompt or "") if request else 0,
            "has_image": bool(request and request.image_url),
        },
    )

    try:
        result = await service.generate(request)
    except Exception as exc:
        code, payload = _map_exception(exc)
        if code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.opt(exception=exc).error(
                "Flat sketch generate failed",
                extra={"error_type": type(exc).__name__, "error_message": str(exc)},
            )
        else:
            logger.info("Flat sketch request rejected", extra=payload)
        return JSONResponse(status_code=code, content=payload)

    logger.info("Flat sketch request completed successfully")
    return result
