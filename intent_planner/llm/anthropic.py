"""Anthropic LLM adapter.

Anthropic's Messages API lives at https://api.anthropic.com/v1/messages.
Structured output is obtained by forcing a single tool call whose
``input_schema`` is the requested JSON schema; the tool input is the object.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from intent_planner.errors import GenerationError
from intent_planner.schemas import LLMMessage
from intent_planner.llm.base import LLMAdapter
from intent_planner.llm.json_schema import model_schema


TOOL_NAME = "json"


class AnthropicAdapter(LLMAdapter):
    """Anthropic Messages API adapter."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        api_version: str = "2023-06-01",
        **kwargs: Any,
    ):
        self.api_version = api_version
        super().__init__(api_key, base_url, **kwargs)

    @property
    def provider_name(self) -> str:
        return "anthropic"

    def _default_headers(self) -> dict[str, str]:
        return {
            "x-api-key": self.api_key,
            "anthropic-version": self.api_version,
            "Content-Type": "application/json",
        }

    def _build_request(
        self,
        schema: type[BaseModel],
        messages: list[LLMMessage],
        model: str,
    ) -> dict[str, Any]:
        system = "\n\n".join(m.content for m in messages if m.role == "system")
        payload: dict[str, Any] = {
            "model": model,
            "max_tokens": self.max_tokens,
            "messages": [
                {"role": m.role, "content": m.content}
                for m in messages
                if m.role != "system"
            ],
            "tools": [
                {
                    "name": TOOL_NAME,
                    "description": "Respond with a JSON object.",
                    "input_schema": model_schema(schema),
                }
            ],
            "tool_choice": {"type": "tool", "name": TOOL_NAME},
        }
        if system:
            payload["system"] = system
        return payload

    async def _request_object(
        self,
        schema: type[BaseModel],
        messages: list[LLMMessage],
        model: str,
    ) -> Any:
        payload = self._build_request(schema, messages, model)

        response = await self._client.post("/messages", json=payload)
        response.raise_for_status()
        data = response.json()

        for block in data.get("content", []):
            if block.get("type") == "tool_use" and block.get("name") == TOOL_NAME:
                return block.get("input")

        raise GenerationError(
            f"anthropic returned no structured output "
            f"(stop_reason={data.get('stop_reason')})",
            provider=self.provider_name,
        )
