"""LLM provider adapters and backend routing."""

from intent_planner.llm.base import LLMAdapter
from intent_planner.llm.router import BackendKind, ModelRouter, get_router, select_backend

__all__ = ["LLMAdapter", "BackendKind", "ModelRouter", "get_router", "select_backend"]
