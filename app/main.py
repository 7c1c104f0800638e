"""Demo catalog API — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.adapters.persistence import database
from app.config import settings
from app.infrastructure.api.error_handlers import register_error_handlers
from app.infrastructure.api.routes_demo import router as demo_router
from app.infrastructure.api.routes_health import router as health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    if database.engine is None:
        # Keep serving: data endpoints answer 500 until this is fixed.
        logger.error("DATABASE_URL is not set; all data operations will fail")
    else:
        try:
            async with database.engine.begin():
                pass  # Connection pool warmed up
            logger.info("Database connection established")
        except Exception as e:
            logger.warning("Database not available on startup: %s", e)
    yield
    if database.engine is not None:
        await database.engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Demo catalog API",
        description="CRUD over Demo records with sequence-allocated ids",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(demo_router)

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(levelname)s | %(message)s",
    )
    logger.info("Server is running on http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
