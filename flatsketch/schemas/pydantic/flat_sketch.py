""" Pydantic schemas for FlatSketchGenerator """
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GenerationRequest(BaseModel):
    """
    Запрос на генерацию flat sketch.

    - prompt: текстовое описание изделия.
    - imageUrl: ссылка на референс (http(s) или data:image/...;base64).
    Хотя бы одно из полей должно быть непустым; проверку делает сервис.
    """
    prompt: str | None = Field(None, description="Описание изделия")
    image_url: str | None = Field(
        None, alias="imageUrl", description="Ссылка на изображение-референс"
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "prompt": "Design a casual hoodie with kangaroo pocket",
            }
        },
    )


class GenerationResponse(BaseModel):
    """
    Ответ: три варианта скетча, конструкторская спецификация и улучшенный промпт.
    """
    success: bool = True
    images: list[str] = Field(
        ..., min_length=3, max_length=3,
        description="data:image/png;base64 URI в порядке генерации",
    )
    construction_details: str = Field(..., alias="constructionDetails")
    enhanced_prompt: str = Field(..., alias="enhancedPrompt")

    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(BaseModel):
    """
    Тело ошибки: error: короткое описание, message: исходное сообщение.
    """
    error: str
    message: str | None = None
