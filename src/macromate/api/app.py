"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from macromate.api.meals import router as meals_router
from macromate.api.profile import router as profile_router
from macromate.api.workouts import router as workouts_router
from macromate.app_logging import configure_logging
from macromate.containers import AppContainer
from macromate.services.ai import (
    AIGatewayError,
    CreditsExhaustedError,
    RateLimitedError,
)
from macromate.services.errors import NotFoundError
from macromate.services.parsing import ParseError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="MacroMate", lifespan=lifespan)
    app.state.container = container

    app.include_router(meals_router)
    app.include_router(profile_router)
    app.include_router(workouts_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return _error(exc.status_code, message)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Invalid request",
                "details": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(RateLimitedError)
    async def handle_rate_limited(
        request: Request, exc: RateLimitedError
    ) -> JSONResponse:
        return _error(status.HTTP_429_TOO_MANY_REQUESTS, str(exc))

    @app.exception_handler(CreditsExhaustedError)
    async def handle_credits_exhausted(
        request: Request, exc: CreditsExhaustedError
    ) -> JSONResponse:
        return _error(status.HTTP_402_PAYMENT_REQUIRED, str(exc))

    @app.exception_handler(AIGatewayError)
    async def handle_gateway_error(
        request: Request, exc: AIGatewayError
    ) -> JSONResponse:
        logger.error("AI request failed on %s", request.url.path, exc_info=exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    @app.exception_handler(ParseError)
    async def handle_parse_error(request: Request, exc: ParseError) -> JSONResponse:
        logger.warning("Unparseable AI response on %s: %s", request.url.path, exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    @app.exception_handler(ValueError)
    async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    return app


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})
