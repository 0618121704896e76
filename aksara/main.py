"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, uvicorn, aksara.api, aksara.observability, aksara.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from aksara import __version__
from aksara.configs import Settings, get_settings
from aksara.api.routers import (
    chats_router,
    health_router,
    thoughts_router,
    users_router,
)
from aksara.api.routers.router_utils import register_exception_handlers
from aksara.boundary.db.connection import (
    create_tables,
    get_async_engine,
    get_async_session_factory,
)
from aksara.observability.logger import configure_logging
from aksara.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    Builds the database engine and session factory shared by all requests.
    """
    settings: Settings = app.state.settings

    # Startup
    configure_logging(settings.log_level)
    logger.info(
        "Application startup: logging configured",
        extra={"environment": settings.environment},
    )

    engine = get_async_engine(settings.database)
    try:
        if settings.store.create_tables:
            await create_tables(engine)
            logger.info("Key-value table ready")
    except Exception as e:
        logger.exception(
            "Failed to initialize backing store",
            extra={"error": str(e)},
        )
        await engine.dispose()
        raise

    app.state.engine = engine
    app.state.session_factory = get_async_session_factory(engine)
    logger.info("Application startup complete")

    yield

    # Shutdown
    await engine.dispose()
    logger.info("Application shutdown: engine disposed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Explicit settings; environment-loaded singleton when None

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Aksara API",
        description="Anonymous thought board with a paginated entity store",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Add observability middleware (added first = innermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Register routers under /api
    app.include_router(health_router, prefix="/api")
    app.include_router(thoughts_router, prefix="/api")
    app.include_router(users_router, prefix="/api")
    app.include_router(chats_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "aksara.main:app",
        host="0.0.0.0",
        port=8000,
    )
