"""LLM Router for backend selection.

Strategy (first match wins):
- ``anthropic/<id>``: Anthropic with ``<id>``
- ``openai/<id>``: Groq with the full string when ``<id>`` names a gpt-oss
  model, otherwise OpenAI with ``<id>``
- ``google/<id>``: Google Generative AI with ``<id>``
- anything else: Groq with the full string
"""

from __future__ import annotations

import logging
from enum import Enum

from intent_planner.config import Settings, get_settings
from intent_planner.llm.anthropic import AnthropicAdapter
from intent_planner.llm.base import LLMAdapter
from intent_planner.llm.google import GoogleAdapter
from intent_planner.llm.groq import GroqAdapter
from intent_planner.llm.openai import OpenAIAdapter


logger = logging.getLogger(__name__)


class BackendKind(str, Enum):
    """LLM providers the router can dispatch to."""
    GROQ = "groq"
    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    GOOGLE = "google"


ANTHROPIC_PREFIX = "anthropic/"
OPENAI_PREFIX = "openai/"
GOOGLE_PREFIX = "google/"
GROQ_HOSTED_OPENAI_MARKER = "gpt-oss"


def select_backend(model_id: str) -> tuple[BackendKind, str]:
    """Map a ``provider/model`` id to a backend and provider-side model id.

    Returns:
        Tuple of (backend, resolved_model_id)
    """
    if not isinstance(model_id, str):
        raise TypeError(f"model must be a string, got {type(model_id).__name__}")

    if model_id.startswith(ANTHROPIC_PREFIX):
        return (BackendKind.ANTHROPIC, model_id[len(ANTHROPIC_PREFIX):])

    if model_id.startswith(OPENAI_PREFIX):
        remainder = model_id[len(OPENAI_PREFIX):]
        # Open-weight OpenAI models are hosted on Groq under their full id
        if GROQ_HOSTED_OPENAI_MARKER in remainder:
            return (BackendKind.GROQ, model_id)
        return (BackendKind.OPENAI, remainder)

    if model_id.startswith(GOOGLE_PREFIX):
        return (BackendKind.GOOGLE, model_id[len(GOOGLE_PREFIX):])

    return (BackendKind.GROQ, model_id)


class ModelRouter:
    """Holds one adapter per backend and resolves model ids to them."""

    def __init__(
        self,
        adapters: dict[BackendKind, LLMAdapter] | None = None,
        settings: Settings | None = None,
    ):
        self._settings = settings or get_settings()
        self._adapters = adapters if adapters is not None else self._build_adapters(self._settings)

    @staticmethod
    def _build_adapters(settings: Settings) -> dict[BackendKind, LLMAdapter]:
        """Create every provider adapter from settings."""
        common = {
            "timeout": settings.llm_timeout_seconds,
            "max_tokens": settings.llm_max_tokens,
        }
        return {
            BackendKind.GROQ: GroqAdapter(
                api_key=settings.groq_api_key,
                base_url=settings.groq_base_url,
                **common,
            ),
            BackendKind.ANTHROPIC: AnthropicAdapter(
                api_key=settings.anthropic_api_key,
                base_url=settings.anthropic_base_url,
                api_version=settings.anthropic_version,
                **common,
            ),
            BackendKind.OPENAI: OpenAIAdapter(
                api_key=settings.openai_api_key,
                base_url=settings.openai_base_url,
                **common,
            ),
            BackendKind.GOOGLE: GoogleAdapter(
                api_key=settings.google_api_key,
                base_url=settings.google_base_url,
                **common,
            ),
        }

    @property
    def default_model(self) -> str:
        return self._settings.default_model

    def get_adapter(self, backend: BackendKind) -> LLMAdapter:
        """Get the adapter for a backend."""
        if backend not in self._adapters:
            raise ValueError(f"Unknown provider: {backend.value}")
        return self._adapters[backend]

    def resolve(self, model_id: str) -> tuple[LLMAdapter, str]:
        """Select the adapter and provider-side model id for ``model_id``."""
        backend, resolved = select_backend(model_id)
        logger.info(f"Routing {model_id} to {backend.value}/{resolved}")
        return (self.get_adapter(backend), resolved)

    def provider_status(self) -> dict[str, bool]:
        """Report which providers have credentials configured."""
        return {kind.value: adapter.configured for kind, adapter in self._adapters.items()}

    async def close(self) -> None:
        """Close all adapters."""
        for adapter in self._adapters.values():
            await adapter.close()


# Singleton instance
_router: ModelRouter | None = None


def get_router() -> ModelRouter:
    """Get the global model router instance."""
    global _router
    if _router is None:
        _router = ModelRouter()
    return _router


async def close_router() -> None:
    """Close and drop the global router, if one was created."""
    global _router
    if _router is not None:
        await _router.close()
        _router = None
