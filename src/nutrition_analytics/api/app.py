"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from nutrition_analytics.api.analytics import router as analytics_router
from nutrition_analytics.app_logging import configure_logging
from nutrition_analytics.containers import AppContainer
from nutrition_analytics.errors import InvalidDateRangeError, TrendDataUnavailableError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Nutrition analytics starting (environment=%s)",
            app.state.container.settings.environment,
        )
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(analytics_router)

    @app.exception_handler(TrendDataUnavailableError)
    async def trend_data_unavailable(
        request: Request, exc: TrendDataUnavailableError
    ) -> JSONResponse:
        logger.warning("Trend data unavailable for %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Trend data unavailable"},
        )

    @app.exception_handler(InvalidDateRangeError)
    async def invalid_date_range(
        request: Request, exc: InvalidDateRangeError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
