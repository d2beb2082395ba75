""" Конструкторская спецификация изделия через reasoning-модель """
from __future__ import annotations

from flatsketch.clients.anthropic_client import first_text_block
from flatsketch.clients.interfaces import ReasoningModelClient
from flatsketch.configs.logging import get_logger
from flatsketch.schemas.errors.flat_sketch import (
    MissingCredentialError,
    UpstreamDetailGenerationError,
)


class ConstructionDetailService:
    SYSTEM_PROMPT = (
        "You are a fashion technical designer. Generate detailed construction "
        "specifications for the garment described.\n"
        "\n"
        "Include:\n"
        "- Fabric recommendations\n"
        "- Key measurements (if applicable)\n"
        "- Construction techniques\n"
        "- Special finishes or details\n"
        "- Care instructions\n"
        "\n"
        "Format as a bulleted list. Be concise and technical."
    )
    USER_TEMPLATE = "Generate construction details for this garment: {prompt}"
    UNAVAILABLE = "Construction details unavailable."
    MAX_TOKENS = 800

    def __init__(self, client: ReasoningModelClient) -> None:
        self.log = get_logger(__name__)
        self._client = client

    async def generate(self, enhanced_prompt: str) -> str:
        try:
            blocks = await self._client.complete(
                system=self.SYSTEM_PROMPT,
                content=self.USER_TEMPLATE.format(prompt=enhanced_prompt),
                max_tokens=self.MAX_TOKENS,
            )
        except MissingCredentialError:
            raise
        except Exception as e:
            raise UpstreamDetailGenerationError(
                f"Failed to generate construction details with Claude: {e}"
            ) from e

        details = first_text_block(blocks)
        if details is None:
            self.log.warning("Detail generation returned no text block")
            return self.UNAVAILABLE
        return details
