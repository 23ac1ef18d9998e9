"""FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from intent_planner.config import Settings, get_settings
from intent_planner.llm.router import close_router, get_router
from intent_planner.api.routes import router


logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the provider router on startup and close its clients on shutdown."""
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    unconfigured = [name for name, ok in get_router().provider_status().items() if not ok]
    if unconfigured:
        logger.warning(f"No API key configured for: {', '.join(unconfigured)}")

    yield

    logger.info("Closing provider clients")
    await close_router()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the planner API application."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Plans code searches for natural-language edit requests",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        if response.status_code >= 400:
            logger.warning(f"{request.method} {request.url.path} -> {response.status_code}")
        else:
            logger.debug(f"{request.method} {request.url.path} -> {response.status_code}")
        return response

    app.include_router(router, prefix="/api")

    @app.get("/")
    async def root() -> dict:
        """Service name, version and docs location."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "intent_planner.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
