"""Pydantic schemas for the planner I/O contracts.

These schemas define the contracts between:
- The HTTP endpoint and its clients
- LLM provider adapters and the structured output they must produce
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from pydantic.alias_generators import to_camel


DEFAULT_FILE_TYPES = [".jsx", ".tsx", ".js", ".ts"]


# =============================================================================
# Enums
# =============================================================================

class EditType(str, Enum):
    """Kind of edit the user is asking for."""
    UPDATE_COMPONENT = "UPDATE_COMPONENT"
    ADD_FEATURE = "ADD_FEATURE"
    FIX_ISSUE = "FIX_ISSUE"
    UPDATE_STYLE = "UPDATE_STYLE"
    REFACTOR = "REFACTOR"
    ADD_DEPENDENCY = "ADD_DEPENDENCY"
    REMOVE_ELEMENT = "REMOVE_ELEMENT"


class CamelModel(BaseModel):
    """Base model that speaks camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# =============================================================================
# Search Plan Schemas
# =============================================================================

class FallbackSearch(CamelModel):
    """Secondary search to run when the primary terms find nothing."""
    terms: list[StrictStr] = Field(..., description="Fallback search terms")
    # Optional but not nullable: an explicit null fails validation
    patterns: list[StrictStr] = Field(default=None, description="Fallback regex patterns")


class SearchPlan(CamelModel):
    """Structured output describing how to locate code before an edit."""
    edit_type: EditType = Field(..., description="Category of the requested edit")
    reasoning: StrictStr = Field(..., description="Why this search strategy was chosen")
    search_terms: list[StrictStr] = Field(..., description="Search terms, highest priority first")
    regex_patterns: list[StrictStr] = Field(default=None, description="Regex patterns to search with")
    file_types_to_search: list[StrictStr] = Field(
        default_factory=lambda: list(DEFAULT_FILE_TYPES),
        json_schema_extra={"default": DEFAULT_FILE_TYPES},
        description="File extensions to search",
    )
    expected_matches: StrictInt = Field(default=1, ge=1, le=10, description="Number of matches expected")
    fallback_search: FallbackSearch = Field(default=None, description="Search to try if nothing matches")

    def to_wire(self) -> dict[str, Any]:
        """Serialize with camelCase keys, omitting unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# =============================================================================
# API Request/Response Schemas
# =============================================================================

class AnalyzeEditIntentRequest(BaseModel):
    """Body of an analyze-edit-intent call.

    Fields are loosely typed so that presence checks, not type coercion,
    decide whether a request is rejected as incomplete.
    """
    prompt: Any = Field(default=None, description="Natural language edit request")
    manifest: Any = Field(default=None, description="Project file manifest")
    model: Any = Field(default=None, description="provider/model identifier")

    class Config:
        json_schema_extra = {
            "example": {
                "prompt": "Make the header background dark blue",
                "manifest": {"files": {"src/components/Header.jsx": {"type": "component"}}},
                "model": "openai/gpt-oss-20b",
            }
        }


class AnalyzeEditIntentResponse(BaseModel):
    """Successful planner response."""
    success: Literal[True] = True
    search_plan: SearchPlan = Field(..., serialization_alias="searchPlan")

    def to_wire(self) -> dict[str, Any]:
        return {"success": True, "searchPlan": self.search_plan.to_wire()}


class ErrorResponse(BaseModel):
    """Failed planner response."""
    success: bool | None = None
    error: str

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


# =============================================================================
# LLM Schemas
# =============================================================================

class LLMMessage(BaseModel):
    """A single message in an LLM conversation."""
    role: Literal["system", "user", "assistant"] = Field(...)
    content: str = Field(...)
