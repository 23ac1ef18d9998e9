"""Error types raised while planning an edit search."""

from __future__ import annotations


MISSING_INPUT_MESSAGE = "prompt and manifest are required"


class PlannerError(Exception):
    """Base class for planner failures that map onto an HTTP response."""

    status_code: int = 500


class MissingInputError(PlannerError):
    """Raised when a request lacks a prompt or a manifest."""

    status_code = 400

    def __init__(self, message: str = MISSING_INPUT_MESSAGE) -> None:
        super().__init__(message)


class GenerationError(PlannerError):
    """Raised when the upstream structured-generation call fails.

    Covers transport errors, rejected credentials, timeouts and model output
    that does not satisfy the requested schema.
    """

    status_code = 500

    def __init__(self, message: str, provider: str | None = None) -> None:
        super().__init__(message)
        self.provider = provider
