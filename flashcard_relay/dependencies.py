from __future__ import annotations

from typing import Annotated

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from flashcard_relay.config import Settings
from flashcard_relay.core.completion import CompletionGateway
from flashcard_relay.core.errors import RelayError, validation_failure_from_errors


def get_gateway(request: Request) -> CompletionGateway:
    return request.app.state.gateway


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


Gateway = Annotated[CompletionGateway, Depends(get_gateway)]
AppSettings = Annotated[Settings, Depends(get_app_settings)]


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RelayError)
    async def handle_relay_error(
        _request: Request,
        exc: RelayError,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_envelope(),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        _request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        failure = validation_failure_from_errors(list(exc.errors()))
        return JSONResponse(
            status_code=failure.status_code,
            content=failure.to_envelope(),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(
        _request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        message = "Method not allowed" if exc.status_code == 405 else str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": message},
            headers=getattr(exc, "headers", None),
        )
