"""
FastAPI application setup with dependency injection.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from contextlib import asynccontextmanager
from typing import Optional

from author_dict.config.loader import load_config_for_environment
from author_dict.config.settings import Settings, get_settings
from author_dict.core.dependencies import ServiceContainer
from author_dict.core.error_handlers import setup_error_handlers
from author_dict.core.logging import configure_logging
from author_dict.middleware import BodySizeLimitMiddleware, RequestContextMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management with service container.
    Creates the sentence table on startup and releases the engine on shutdown.
    """
    logger.info(f"Starting {app.title} v{app.version}")
    service_container: ServiceContainer = app.state.service_container

    try:
        await service_container.initialize_services()
        logger.info("Application startup complete")

        yield

    except Exception as e:
        logger.error(f"Application startup failed: {e}", exc_info=True)
        raise

    finally:
        logger.info("Shutting down application")
        await service_container.cleanup_services()
        logger.info("Application shutdown complete")


def create_app(
    settings: Optional[Settings] = None,
    service_container: Optional[ServiceContainer] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Application settings; the process-wide settings by default
        service_container: Prebuilt services; a SQL-backed container built
            from ``settings`` by default

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()
    configure_logging(
        level=settings.log_level.value,
        json_format=settings.log_json,
        log_file=settings.log_file,
    )

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.service_container = service_container or ServiceContainer.from_settings(settings)

    app.add_middleware(
        BodySizeLimitMiddleware,
        max_body_bytes=settings.max_request_size_bytes
    )
    app.add_middleware(RequestContextMiddleware)
    # Added last so CORS headers also land on rejected requests
    app.add_middleware(
        CORSMiddleware,
        **settings.get_cors_config()
    )

    setup_error_handlers(app)

    from author_dict.api import search_router, ingestion_router, health_router
    app.include_router(search_router)
    app.include_router(ingestion_router)
    app.include_router(health_router)

    return app


# Application instance for import-string servers (uvicorn --reload, workers);
# ENVIRONMENT selects the .env.<environment> file
app = create_app(load_config_for_environment())

# For local running: uvicorn author_dict.main:app --reload --port 3000
