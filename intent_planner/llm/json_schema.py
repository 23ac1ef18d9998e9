"""JSON schema helpers for provider structured-output APIs."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from pydantic import BaseModel


# Keys the Gemini response schema (an OpenAPI 3.0 subset) does not accept
_GEMINI_DROPPED_KEYS = {"title", "default", "additionalProperties", "$defs", "examples"}


def model_schema(schema: type[BaseModel]) -> dict[str, Any]:
    """Return the wire-level (camelCase) JSON schema for a model."""
    return schema.model_json_schema(by_alias=True, mode="validation")


def inline_refs(schema: dict[str, Any]) -> dict[str, Any]:
    """Replace local ``#/$defs/...`` references with their definitions."""
    defs = schema.get("$defs", {})

    def resolve(node: Any) -> Any:
        if isinstance(node, dict):
            ref = node.get("$ref")
            if isinstance(ref, str) and ref.startswith("#/$defs/"):
                target = deepcopy(defs[ref.split("/")[-1]])
                siblings = {k: v for k, v in node.items() if k != "$ref"}
                target.update(siblings)
                return resolve(target)
            return {k: resolve(v) for k, v in node.items() if k != "$defs"}
        if isinstance(node, list):
            return [resolve(item) for item in node]
        return node

    return resolve(schema)


def to_gemini_schema(schema: type[BaseModel]) -> dict[str, Any]:
    """Reduce a pydantic JSON schema to the subset Gemini accepts.

    Optional fields (``anyOf: [X, null]``) collapse to ``X`` with
    ``nullable: true``; types are upper-cased.
    """

    def convert(node: Any) -> Any:
        if isinstance(node, list):
            return [convert(item) for item in node]
        if not isinstance(node, dict):
            return node

        wrapped = node.get("allOf")
        if isinstance(wrapped, list) and len(wrapped) == 1:
            merged = {k: v for k, v in node.items() if k != "allOf"}
            merged.update(wrapped[0])
            return convert(merged)

        variants = node.get("anyOf")
        if isinstance(variants, list):
            non_null = [v for v in variants if v.get("type") != "null"]
            if len(non_null) == 1:
                merged = {k: v for k, v in node.items() if k != "anyOf"}
                merged.update(non_null[0])
                if len(non_null) < len(variants):
                    merged["nullable"] = True
                return convert(merged)

        out: dict[str, Any] = {}
        for key, value in node.items():
            if key in _GEMINI_DROPPED_KEYS:
                continue
            if key == "type" and isinstance(value, str):
                out[key] = value.upper()
            elif key == "properties" and isinstance(value, dict):
                out[key] = {name: convert(prop) for name, prop in value.items()}
            else:
                out[key] = convert(value)
        return out

    return convert(inline_refs(model_schema(schema)))
