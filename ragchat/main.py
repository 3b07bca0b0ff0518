"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, ragchat.api, ragchat.observability, ragchat.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ragchat.api import api_router
from ragchat.api.deps import ServiceCache
from ragchat.api.routers.router_utils import register_exception_handlers
from ragchat.configs import get_settings
from ragchat.observability.logger import configure_logging
from ragchat.observability.middleware import (
    CorrelationMiddleware,
    REQUEST_ID_HEADER,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


def create_app(services: ServiceCache | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        services: Pre-built service container; built from settings when omitted

    Returns:
        FastAPI: Configured application instance
    """
    resolved_settings = services.settings if services is not None else get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan context manager.

        Builds shared resources once at startup and releases them on shutdown.
        """
        container = services or ServiceCache(resolved_settings)
        configure_logging(container.settings.log_level)
        logger.info("Application startup: logging configured")

        try:
            await container.startup()
        except Exception as e:
            logger.exception(
                "Failed to initialize application resources",
                extra={"error": str(e)},
            )
            raise

        app.state.services = container
        logger.info(
            "Application startup complete: all resources initialized",
            extra={
                "model": container.settings.provider.model,
                "db_path": container.settings.database.path,
            },
        )

        yield

        logger.info("Application shutdown")
        await container.aclose()

    app = FastAPI(
        title="RAG Chat API",
        description="Chat completions grounded in a local retrieval corpus",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Added first = innermost; correlation wraps request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=resolved_settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER, "X-Latency-Ms", "X-Model"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "ragchat.main:app",
        host=settings.host,
        port=settings.port,
    )
