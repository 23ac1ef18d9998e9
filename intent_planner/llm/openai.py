"""OpenAI LLM adapter.

OpenAI exposes chat completions at https://api.openai.com/v1. Structured
output uses ``response_format`` of type ``json_schema``. The same wire
format is served by OpenAI-compatible providers (see ``groq.py``).
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from intent_planner.errors import GenerationError
from intent_planner.schemas import LLMMessage
from intent_planner.llm.base import LLMAdapter
from intent_planner.llm.json_schema import model_schema


logger = logging.getLogger(__name__)

OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"


class OpenAICompatibleAdapter(LLMAdapter):
    """Adapter for any endpoint speaking the OpenAI chat completions API."""

    def _default_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _build_request(
        self,
        schema: type[BaseModel],
        messages: list[LLMMessage],
        model: str,
    ) -> dict[str, Any]:
        """Build the chat completions payload with a JSON schema constraint."""
        return {
            "model": model,
            "messages": [m.model_dump(exclude_none=True) for m in messages],
            "max_completion_tokens": self.max_tokens,
            "response_format": {
                "type": "json_schema",
                "json_schema": {
                    "name": schema.__name__,
                    "schema": model_schema(schema),
                    "strict": False,
                },
            },
        }

    async def _request_object(
        self,
        schema: type[BaseModel],
        messages: list[LLMMessage],
        model: str,
    ) -> Any:
        payload = self._build_request(schema, messages, model)

        response = await self._client.post("/chat/completions", json=payload)
        response.raise_for_status()
        data = response.json()

        choices = data.get("choices") or [{}]
        message = choices[0].get("message") or {}

        if message.get("refusal"):
            raise GenerationError(
                f"{self.provider_name} refused the request: {message['refusal']}",
                provider=self.provider_name,
            )

        content = message.get("content")
        if not content:
            raise GenerationError(
                f"{self.provider_name} returned no content "
                f"(finish_reason={choices[0].get('finish_reason')})",
                provider=self.provider_name,
            )

        logger.debug(f"{self.provider_name} usage: {data.get('usage', {})}")
        return content


class OpenAIAdapter(OpenAICompatibleAdapter):
    """OpenAI API adapter."""

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(api_key, base_url or OPENAI_DEFAULT_BASE_URL, **kwargs)

    @property
    def provider_name(self) -> str:
        return "openai"
