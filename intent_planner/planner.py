"""Planner module.

Responsibilities:
- Validate that an edit request carries a prompt and a manifest
- Turn the prompt into a structured SearchPlan via one routed LLM call
"""

from __future__ import annotations

import logging
from typing import Any

from intent_planner.errors import GenerationError, MissingInputError
from intent_planner.llm.router import ModelRouter
from intent_planner.prompts import SEARCH_PLAN_SYSTEM_PROMPT, SEARCH_PLAN_USER_PROMPT
from intent_planner.schemas import AnalyzeEditIntentRequest, LLMMessage, SearchPlan


logger = logging.getLogger(__name__)


def _is_missing(value: Any) -> bool:
    # Containers count as present even when empty; only null and empty scalars are missing
    if value is None:
        return True
    if isinstance(value, (str, bool, int, float)):
        return not value
    return False


def require_inputs(request: AnalyzeEditIntentRequest) -> None:
    """Raise MissingInputError unless both prompt and manifest are present.

    The manifest is required but not otherwise inspected or sent upstream.
    """
    if _is_missing(request.prompt) or _is_missing(request.manifest):
        raise MissingInputError()


def build_messages(prompt: Any) -> list[LLMMessage]:
    """Build the system + user messages for a search plan request."""
    return [
        LLMMessage(role="system", content=SEARCH_PLAN_SYSTEM_PROMPT),
        LLMMessage(role="user", content=SEARCH_PLAN_USER_PROMPT.format(prompt=prompt)),
    ]


async def generate_search_plan(
    router: ModelRouter,
    prompt: Any,
    model: str,
) -> SearchPlan:
    """Generate a search plan for ``prompt`` with the routed backend.

    Args:
        router: Router holding the provider adapters
        prompt: The user's edit request
        model: ``provider/model`` id

    Returns:
        A schema-validated SearchPlan

    Raises:
        GenerationError: if the upstream call fails for any reason
    """
    adapter, resolved_model = router.resolve(model)

    try:
        plan = await adapter.generate_structured(
            SearchPlan,
            build_messages(prompt),
            resolved_model,
        )
    except GenerationError as e:
        logger.error(f"Search plan generation failed on {adapter.provider_name}: {e}")
        raise
    except Exception as e:
        logger.error(f"Unexpected error from {adapter.provider_name}: {e}")
        raise GenerationError(str(e), provider=adapter.provider_name) from e

    logger.info(
        f"Generated {plan.edit_type.value} plan with "
        f"{len(plan.search_terms)} search terms via {adapter.provider_name}"
    )
    return plan


async def analyze_edit_intent(
    router: ModelRouter,
    request: AnalyzeEditIntentRequest,
) -> SearchPlan:
    """Validate a request and produce its search plan.

    An omitted ``model`` falls back to the router default; an explicit
    ``null`` is passed through and rejected by routing.
    """
    require_inputs(request)
    model = request.model if "model" in request.model_fields_set else router.default_model
    return await generate_search_plan(router, request.prompt, model)
