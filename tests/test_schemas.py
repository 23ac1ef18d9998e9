"""Tests for the SearchPlan contract and provider schema conversion."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from intent_planner.llm.json_schema import inline_refs, model_schema, to_gemini_schema
from intent_planner.schemas import DEFAULT_FILE_TYPES, EditType, SearchPlan


class TestSearchPlan:
    def test_defaults(self):
        plan = SearchPlan.model_validate(
            {"editType": "FIX_ISSUE", "reasoning": "bug", "searchTerms": ["onClick"]}
        )

        assert plan.edit_type is EditType.FIX_ISSUE
        assert plan.file_types_to_search == DEFAULT_FILE_TYPES
        assert plan.expected_matches == 1
        assert plan.regex_patterns is None
        assert plan.fallback_search is None

    def test_default_file_types_are_not_shared(self):
        first = SearchPlan(edit_type=EditType.REFACTOR, reasoning="r", search_terms=[])
        first.file_types_to_search.append(".vue")

        second = SearchPlan(edit_type=EditType.REFACTOR, reasoning="r", search_terms=[])
        assert second.file_types_to_search == DEFAULT_FILE_TYPES

    def test_to_wire_uses_camel_case_and_drops_unset_optionals(self):
        plan = SearchPlan.model_validate(
            {
                "editType": "REMOVE_ELEMENT",
                "reasoning": "drop the banner",
                "searchTerms": ["Banner"],
                "fallbackSearch": {"terms": ["banner"]},
            }
        )

        assert plan.to_wire() == {
            "editType": "REMOVE_ELEMENT",
            "reasoning": "drop the banner",
            "searchTerms": ["Banner"],
            "fileTypesToSearch": DEFAULT_FILE_TYPES,
            "expectedMatches": 1,
            "fallbackSearch": {"terms": ["banner"]},
        }

    @pytest.mark.parametrize(
        "override",
        [
            {"editType": "DELETE_EVERYTHING"},
            {"expectedMatches": 0},
            {"expectedMatches": 11},
            {"expectedMatches": 2.5},
            {"expectedMatches": "3"},
            {"expectedMatches": True},
            {"reasoning": 42},
            {"searchTerms": ["Header", 7]},
            {"regexPatterns": None},
            {"fallbackSearch": None},
            {"fallbackSearch": {"terms": ["x"], "patterns": None}},
            {"searchTerms": "Header"},
            {"fallbackSearch": {"patterns": ["x"]}},
        ],
    )
    def test_rejects_out_of_schema_values(self, override):
        data = {"editType": "ADD_FEATURE", "reasoning": "r", "searchTerms": [], **override}

        with pytest.raises(ValidationError):
            SearchPlan.model_validate(data)

    def test_search_terms_required(self):
        with pytest.raises(ValidationError):
            SearchPlan.model_validate({"editType": "ADD_FEATURE", "reasoning": "r"})

    def test_search_term_order_preserved(self):
        plan = SearchPlan.model_validate(
            {"editType": "UPDATE_COMPONENT", "reasoning": "r", "searchTerms": ["c", "a", "b"]}
        )

        assert plan.search_terms == ["c", "a", "b"]


class TestJsonSchema:
    def test_model_schema_uses_wire_names(self):
        schema = model_schema(SearchPlan)

        assert set(schema["required"]) == {"editType", "reasoning", "searchTerms"}
        assert "fileTypesToSearch" in schema["properties"]
        assert schema["properties"]["expectedMatches"]["minimum"] == 1
        assert schema["properties"]["expectedMatches"]["maximum"] == 10

    def test_inline_refs_removes_defs(self):
        schema = inline_refs(model_schema(SearchPlan))

        assert "$defs" not in schema
        assert "$ref" not in str(schema)
        assert all(e.value in str(schema["properties"]["editType"]) for e in EditType)

    def test_gemini_schema(self):
        schema = to_gemini_schema(SearchPlan)

        assert schema["type"] == "OBJECT"
        assert "title" not in schema
        regex = schema["properties"]["regexPatterns"]
        assert regex["type"] == "ARRAY"
        assert "nullable" not in regex
        assert regex["items"] == {"type": "STRING"}
        fallback = schema["properties"]["fallbackSearch"]
        assert fallback["type"] == "OBJECT"
        assert fallback["required"] == ["terms"]
        assert "default" not in schema["properties"]["fileTypesToSearch"]


@pytest.mark.parametrize("raw_value", ["true", '"3"', "null"])
def test_raw_json_expected_matches_not_coerced(raw_value):
    raw = (
        '{"editType": "REFACTOR", "reasoning": "r", "searchTerms": [], '
        f'"expectedMatches": {raw_value}}}'
    )

    with pytest.raises(ValidationError):
        SearchPlan.model_validate_json(raw)
