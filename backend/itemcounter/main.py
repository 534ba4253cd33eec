"""Item Counter FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from itemcounter import __version__
from itemcounter.config import Settings, load_cors_origins
from itemcounter.counting.router import get_counting_service
from itemcounter.counting.router import router as counting_router
from itemcounter.counting.schemas import ApiResponse
from itemcounter.counting.service import CountingService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Wire services into the dependency placeholders."""
    service = CountingService()
    app.dependency_overrides[get_counting_service] = lambda: service
    yield
    app.dependency_overrides.pop(get_counting_service, None)


async def invalid_request_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Keep validator internals out of the response body.
    logger.info("Rejected malformed request to %s: %d errors", request.url.path, len(exc.errors()))
    body = ApiResponse[dict](success=False, message="Invalid request data.")
    return JSONResponse(status_code=400, content=body.model_dump(mode="json"))


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app. Without explicit settings only the CORS origins are read,
    so importing this module never fails on server-only configuration.
    """
    cors_origins = settings.cors_origins if settings else load_cors_origins()

    app = FastAPI(
        title="Item Counter API",
        description="API for counting occurrences of items across multiple data types",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, invalid_request_handler)
    app.include_router(counting_router)

    @app.get("/")
    async def root() -> dict:
        return {
            "message": "Welcome to Item Counter API",
            "documentation": "/docs",
            "health": "/api/itemcounter/health",
        }

    return app


app = create_app()
