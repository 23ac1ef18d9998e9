"""Abstract base class for LLM adapters."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from intent_planner.errors import GenerationError
from intent_planner.schemas import LLMMessage


logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class LLMAdapter(ABC):
    """Abstract base class for LLM provider adapters.

    Every provider (Groq, OpenAI, Anthropic, Google) implements
    ``generate_structured`` so the planner can ask any of them for an
    object conforming to a pydantic schema without knowing how the provider
    constrains its output.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = 120.0,
        max_tokens: int = 4096,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_tokens = max_tokens

        # Missing keys are not rejected here; the provider refuses the call later.
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._default_headers(),
            timeout=timeout,
            transport=transport,
        )

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider name (e.g., 'groq', 'anthropic')."""
        ...

    @property
    def configured(self) -> bool:
        """Whether an API key was supplied for this provider."""
        return bool(self.api_key)

    def _default_headers(self) -> dict[str, str]:
        return {"Content-Type": "application/json"}

    @abstractmethod
    async def _request_object(
        self,
        schema: type[BaseModel],
        messages: list[LLMMessage],
        model: str,
    ) -> Any:
        """Run one constrained-generation call and return the raw object.

        The result is either a decoded JSON value or a JSON string; it is
        validated against ``schema`` by ``generate_structured``.
        """
        ...

    async def generate_structured(
        self,
        schema: type[SchemaT],
        messages: list[LLMMessage],
        model: str,
    ) -> SchemaT:
        """Ask ``model`` for an object conforming to ``schema``.

        Args:
            schema: Pydantic model describing the expected object
            messages: Conversation messages (system + user)
            model: Provider-specific model id

        Returns:
            A validated instance of ``schema``

        Raises:
            GenerationError: on transport, auth, timeout or validation failure
        """
        try:
            raw = await self._request_object(schema, messages, model)
        except GenerationError:
            raise
        except httpx.HTTPStatusError as e:
            raise GenerationError(
                f"{self.provider_name} request failed with status "
                f"{e.response.status_code}: {self._error_detail(e.response)}",
                provider=self.provider_name,
            ) from e
        except httpx.TimeoutException as e:
            raise GenerationError(
                f"{self.provider_name} request timed out after {self.timeout}s",
                provider=self.provider_name,
            ) from e
        except httpx.HTTPError as e:
            raise GenerationError(
                f"{self.provider_name} request failed: {e}",
                provider=self.provider_name,
            ) from e

        return self._validate(schema, raw)

    def _validate(self, schema: type[SchemaT], raw: Any) -> SchemaT:
        """Validate provider output, applying schema defaults."""
        try:
            if isinstance(raw, (str, bytes)):
                return schema.model_validate_json(raw)
            return schema.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"{self.provider_name} returned output that failed validation")
            raise GenerationError(
                f"{self.provider_name} response did not match schema: {e}",
                provider=self.provider_name,
            ) from e

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        """Extract the provider's error message from a failed response."""
        try:
            data = response.json()
        except (json.JSONDecodeError, ValueError):
            return response.text or response.reason_phrase
        error = data.get("error") if isinstance(data, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str):
            return error
        return response.text

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
