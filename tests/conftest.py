"""Shared pytest fixtures for all tests."""

from __future__ import annotations

from typing import Any, Generator

import pytest
from fastapi.testclient import TestClient
from pydantic import BaseModel

from intent_planner.api.main import app
from intent_planner.config import Settings
from intent_planner.llm.base import LLMAdapter
from intent_planner.llm.router import BackendKind, ModelRouter, get_router
from intent_planner.schemas import LLMMessage


VALID_PLAN: dict[str, Any] = {
    "editType": "UPDATE_STYLE",
    "reasoning": "The header colour lives in the Header component styles.",
    "searchTerms": ["Header", "bg-blue"],
    "regexPatterns": ["className=.*header"],
    "expectedMatches": 2,
}


class StubAdapter(LLMAdapter):
    """Adapter that returns a canned object (or raises) without network I/O."""

    def __init__(self, name: str, result: Any = None, error: Exception | None = None):
        self._name = name
        self.result = VALID_PLAN if result is None else result
        self.error = error
        self.calls: list[tuple[type[BaseModel], list[LLMMessage], str]] = []
        super().__init__(api_key=f"{name}-key", base_url=f"https://{name}.invalid")

    @property
    def provider_name(self) -> str:
        return self._name

    async def _request_object(self, schema, messages, model):
        self.calls.append((schema, messages, model))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def settings() -> Settings:
    """Settings with every provider configured and no .env lookup."""
    return Settings(
        _env_file=None,
        groq_api_key="groq-key",
        anthropic_api_key="anthropic-key",
        openai_api_key="openai-key",
        google_api_key="google-key",
    )


@pytest.fixture
def stub_adapters() -> dict[BackendKind, StubAdapter]:
    return {kind: StubAdapter(kind.value) for kind in BackendKind}


@pytest.fixture
def stub_router(stub_adapters, settings) -> ModelRouter:
    return ModelRouter(adapters=stub_adapters, settings=settings)


@pytest.fixture
def client(stub_router) -> Generator[TestClient, None, None]:
    """HTTP client whose router dispatches to stub adapters."""
    app.dependency_overrides[get_router] = lambda: stub_router
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
