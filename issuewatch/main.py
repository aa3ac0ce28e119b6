from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from issuewatch.config import get_settings
from issuewatch.domain.exceptions import (
    NotFoundError,
    NotificationPermissionError,
    StoreFailureError,
)
from issuewatch.infrastructure.database import engine, initialize_database
from issuewatch.interfaces.api.routes import register_routes
from issuewatch.logging_config import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables on startup and release the pool on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotFoundError)
    async def _not_found(_: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

    @app.exception_handler(NotificationPermissionError)
    async def _forbidden(_: Request, exc: NotificationPermissionError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"detail": str(exc)})

    @app.exception_handler(StoreFailureError)
    async def _store_failure(_: Request, exc: StoreFailureError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Storage failure"},
        )


def create_app() -> FastAPI:
    """Build the FastAPI application."""

    configure_logging(get_settings().log_level)
    app = FastAPI(title="issuewatch", lifespan=lifespan)
    register_exception_handlers(app)
    register_routes(app)
    return app
