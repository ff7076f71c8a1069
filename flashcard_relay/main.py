from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from flashcard_relay.config import Settings, get_settings
from flashcard_relay.core.completion import CompletionGateway
from flashcard_relay.core.logging import setup_logging
from flashcard_relay.dependencies import register_exception_handlers
from flashcard_relay.internal import health
from flashcard_relay.routers import study


def create_app(
    settings: Settings | None = None,
    gateway: CompletionGateway | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    owns_gateway = gateway is None
    if gateway is None:
        gateway = CompletionGateway.from_settings(settings)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        try:
            yield
        finally:
            if owns_gateway:
                await gateway.aclose()

    app = FastAPI(
        title="flashcard-relay",
        version="0.1.0",
        docs_url="/docs",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.gateway = gateway

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(study.router)
    app.include_router(health.router)

    # Mounted last so the API routes take precedence
    if settings.static_dir:
        app.mount(
            "/",
            StaticFiles(directory=settings.static_dir, html=True),
            name="frontend",
        )

    return app


app = create_app()
