"""CLI entrypoint (Typer).

Commands:
- ``intent-planner serve``: run the HTTP API
- ``intent-planner route MODEL``: show which backend a model id resolves to
- ``intent-planner plan "<edit request>" --manifest FILE``: plan one request locally
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer

from intent_planner.config import get_settings
from intent_planner.errors import PlannerError
from intent_planner.llm.router import ModelRouter, select_backend
from intent_planner.planner import analyze_edit_intent
from intent_planner.schemas import AnalyzeEditIntentRequest, ErrorResponse, AnalyzeEditIntentResponse

app = typer.Typer(help="Edit Intent Planner CLI.")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address"),
    port: Optional[int] = typer.Option(None, help="Bind port"),
):
    """Run the planner API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "intent_planner.api.main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=settings.debug,
    )


@app.command()
def route(model: str):
    """Print the backend and provider model id MODEL routes to."""
    backend, resolved = select_backend(model)
    typer.echo(f"{backend.value}\t{resolved}")


@app.command()
def plan(
    prompt: str,
    manifest: Path = typer.Option(..., "--manifest", exists=True, dir_okay=False, help="Manifest JSON file"),
    model: Optional[str] = typer.Option(None, "--model", help="provider/model id"),
):
    """Generate a search plan for PROMPT and print the JSON response."""
    fields = {
        "prompt": prompt,
        "manifest": json.loads(manifest.read_text(encoding="utf-8")),
    }
    if model is not None:
        fields["model"] = model
    request = AnalyzeEditIntentRequest.model_validate(fields)

    async def _run() -> int:
        model_router = ModelRouter()
        try:
            search_plan = await analyze_edit_intent(model_router, request)
        except PlannerError as e:
            typer.echo(json.dumps(ErrorResponse(success=False, error=str(e)).to_wire()), err=True)
            return 1
        finally:
            await model_router.close()
        typer.echo(json.dumps(AnalyzeEditIntentResponse(search_plan=search_plan).to_wire(), indent=2))
        return 0

    raise typer.Exit(code=asyncio.run(_run()))


if __name__ == "__main__":
    app()
