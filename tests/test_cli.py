"""Tests for the Typer CLI."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from intent_planner import cli
from intent_planner.llm.router import BackendKind

from tests.conftest import StubAdapter


runner = CliRunner()


@pytest.mark.parametrize(
    "model, expected",
    [
        ("openai/gpt-oss-20b", "groq\topenai/gpt-oss-20b"),
        ("openai/gpt-4o", "openai\tgpt-4o"),
        ("anthropic/claude-sonnet-4", "anthropic\tclaude-sonnet-4"),
    ],
)
def test_route(model, expected):
    result = runner.invoke(cli.app, ["route", model])

    assert result.exit_code == 0
    assert result.stdout.strip() == expected


def test_plan_prints_response(tmp_path, monkeypatch, stub_router):
    manifest = tmp_path / "manifest.json"
    manifest.write_text(json.dumps({"files": {}}), encoding="utf-8")
    monkeypatch.setattr(cli, "ModelRouter", lambda: stub_router)

    result = runner.invoke(cli.app, ["plan", "make it blue", "--manifest", str(manifest)])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["success"] is True
    assert data["searchPlan"]["editType"] == "UPDATE_STYLE"


def test_plan_reports_generation_error(tmp_path, monkeypatch, stub_adapters, stub_router):
    manifest = tmp_path / "manifest.json"
    manifest.write_text("{}", encoding="utf-8")
    stub_adapters[BackendKind.GOOGLE] = StubAdapter("google", error=RuntimeError("quota exceeded"))
    monkeypatch.setattr(cli, "ModelRouter", lambda: stub_router)

    result = runner.invoke(
        cli.app,
        ["plan", "make it blue", "--manifest", str(manifest), "--model", "google/gemini-1.5"],
    )

    assert result.exit_code == 1
