"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware and exception
handlers, and configures lifespan.

Dependencies: fastapi, marketplace.api, marketplace.observability, marketplace.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marketplace import __version__
from marketplace.api import api_router
from marketplace.api.deps import get_service_cache
from marketplace.api.errors import register_exception_handlers
from marketplace.configs import get_settings
from marketplace.observability.logger import configure_logging
from marketplace.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging on startup and drops cached clients on shutdown.
    Clients are built lazily on first use.
    """
    # Startup
    configure_logging(get_settings().log_level)
    logger.info("Application startup: logging configured")

    yield

    # Shutdown
    get_service_cache().clear()
    logger.info("Application shutdown: service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title="Course Marketplace API",
        description="Course storefront, Stripe purchases and learner progress tracking",
        version=__version__,
        lifespan=lifespan,
    )

    # Added first = innermost, so request logs carry the correlation ID
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # __session cookie auth requires credentialed CORS with explicit origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "marketplace.main:app",
        host="0.0.0.0",
        port=8001,
    )
