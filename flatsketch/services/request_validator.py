""" Проверка входящего запроса на генерацию """
from __future__ import annotations

from flatsketch.schemas.errors.flat_sketch import InvalidRequestError
from flatsketch.schemas.pydantic.flat_sketch import GenerationRequest

INVALID_REQUEST_MESSAGE = "Either prompt or imageUrl is required"


def _is_present(value: str | None) -> bool:
    return bool(value and value.strip())


def validate_request(request: GenerationRequest | None) -> GenerationRequest:
    """
    Пропускает запрос, если есть непустой prompt или imageUrl;
    иначе InvalidRequestError. Пробельные строки считаются пустыми.
    """
    if request is None or not (
        _is_present(request.prompt) or _is_present(request.image_url)
    ):
        raise InvalidRequestError(INVALID_REQUEST_MESSAGE)
    return request
