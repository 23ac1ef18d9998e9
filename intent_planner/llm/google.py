"""Google Generative AI (Gemini) adapter.

Uses the ``models/{model}:generateContent`` REST endpoint with
``responseMimeType=application/json`` and a ``responseSchema``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from intent_planner.errors import GenerationError
from intent_planner.schemas import LLMMessage
from intent_planner.llm.base import LLMAdapter
from intent_planner.llm.json_schema import to_gemini_schema


class GoogleAdapter(LLMAdapter):
    """Gemini API adapter."""

    @property
    def provider_name(self) -> str:
        return "google"

    def _default_headers(self) -> dict[str, str]:
        return {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }

    def _build_request(
        self,
        schema: type[BaseModel],
        messages: list[LLMMessage],
    ) -> dict[str, Any]:
        system = [m.content for m in messages if m.role == "system"]
        payload: dict[str, Any] = {
            "contents": [
                {
                    "role": "model" if m.role == "assistant" else "user",
                    "parts": [{"text": m.content}],
                }
                for m in messages
                if m.role != "system"
            ],
            "generationConfig": {
                "maxOutputTokens": self.max_tokens,
                "responseMimeType": "application/json",
                "responseSchema": to_gemini_schema(schema),
            },
        }
        if system:
            payload["systemInstruction"] = {
                "parts": [{"text": text} for text in system],
            }
        return payload

    async def _request_object(
        self,
        schema: type[BaseModel],
        messages: list[LLMMessage],
        model: str,
    ) -> Any:
        payload = self._build_request(schema, messages)

        response = await self._client.post(f"/models/{model}:generateContent", json=payload)
        response.raise_for_status()
        data = response.json()

        candidates = data.get("candidates") or []
        if not candidates:
            reason = (data.get("promptFeedback") or {}).get("blockReason", "no candidates")
            raise GenerationError(
                f"google returned no output ({reason})",
                provider=self.provider_name,
            )

        parts = (candidates[0].get("content") or {}).get("parts") or []
        text = "".join(part.get("text", "") for part in parts)
        if not text:
            raise GenerationError(
                f"google returned no content "
                f"(finishReason={candidates[0].get('finishReason')})",
                provider=self.provider_name,
            )
        return text
