"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from realestate.api.routes import health, owners, properties, seed
from realestate.core.config import settings
from realestate.core.database import close_client, ensure_indexes, get_database
from realestate.core.exceptions import register_exception_handlers
from realestate.core.logging import get_logger, setup_logging
from realestate.web.routes import web_router

# Static files directory
BASE_DIR = Path(__file__).resolve().parent

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    ensure_indexes(get_database())
    logger.info("application_started", version=settings.VERSION)
    yield
    close_client()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Property listings over MongoDB",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")

    # Include API routers
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(properties.router, prefix="/api")
    app.include_router(owners.router, prefix="/api")
    if settings.ENABLE_SEED_ENDPOINTS:
        app.include_router(seed.router, prefix="/api")

    # Include web routes (Jinja2 frontend)
    app.include_router(web_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "realestate.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
