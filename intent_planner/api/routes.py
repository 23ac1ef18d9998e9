"""FastAPI routes for the planner API.

Endpoints:
- POST /analyze-edit-intent  - Turn an edit request into a search plan
- GET  /health               - Service and provider status
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from intent_planner.config import get_settings
from intent_planner.errors import PlannerError
from intent_planner.llm.router import ModelRouter, get_router
from intent_planner.planner import analyze_edit_intent
from intent_planner.schemas import (
    AnalyzeEditIntentRequest,
    AnalyzeEditIntentResponse,
    ErrorResponse,
)


logger = logging.getLogger(__name__)
router = APIRouter()

settings = get_settings()


# =============================================================================
# Health Check
# =============================================================================

@router.get("/health")
async def health(model_router: ModelRouter = Depends(get_router)) -> dict:
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": settings.app_version,
        "environment": settings.environment,
        "providers": model_router.provider_status(),
    }


# =============================================================================
# Edit Intent
# =============================================================================

@router.post("/analyze-edit-intent")
async def analyze_edit_intent_endpoint(
    request: Request,
    model_router: ModelRouter = Depends(get_router),
) -> JSONResponse:
    """Analyze an edit request and return a code search plan.

    Body: ``{prompt, manifest, model?}``. Responds 200 with
    ``{success, searchPlan}``, 400 when prompt or manifest is missing and
    500 for any other failure.
    """
    try:
        body = await request.json()
        if body is None:
            raise TypeError("request body must be a JSON object, got null")
        # Arrays and scalars carry no fields; they fail the presence check below
        edit_request = AnalyzeEditIntentRequest.model_validate(body if isinstance(body, dict) else {})
        plan = await analyze_edit_intent(model_router, edit_request)

    except PlannerError as e:
        if e.status_code == 400:
            logger.warning(f"Rejected edit intent request: {e}")
            return JSONResponse(ErrorResponse(error=str(e)).to_wire(), status_code=400)
        return JSONResponse(
            ErrorResponse(success=False, error=str(e)).to_wire(),
            status_code=e.status_code,
        )
    except Exception as e:
        logger.error(f"Error analyzing edit intent: {e}")
        return JSONResponse(
            ErrorResponse(success=False, error=str(e)).to_wire(),
            status_code=500,
        )

    return JSONResponse(AnalyzeEditIntentResponse(search_plan=plan).to_wire())
