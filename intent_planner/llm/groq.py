"""Groq LLM adapter.

Groq provides an OpenAI-compatible API at https://api.groq.com/openai/v1.
Model ids are passed through untouched, including vendor prefixes such as
``openai/gpt-oss-20b``.
"""

from __future__ import annotations

from intent_planner.llm.openai import OpenAICompatibleAdapter


class GroqAdapter(OpenAICompatibleAdapter):
    """Groq API adapter using OpenAI-compatible endpoint."""

    @property
    def provider_name(self) -> str:
        return "groq"
