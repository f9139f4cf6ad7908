"""Application lifespan management (startup/shutdown hooks)."""

from __future__ import annotations

from contextlib import asynccontextmanager

from .config.settings import get_settings
from .observability.logger import configure_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan_manager(app=None):
    """Manage application lifespan (startup and shutdown)."""
    settings = get_settings()

    configure_logging(settings)
    logger.info("starting_application", service_name=settings.service_name)

    # Credentials are only checked per request; an unconfigured server still starts.
    missing = settings.missing_credentials()
    if missing:
        logger.warning("completion_credentials_missing", missing=missing)
    else:
        logger.info(
            "completion_provider_configured",
            endpoint=settings.azure_openai_endpoint,
            deployment_id=settings.azure_openai_deployment_id,
            api_version=settings.azure_openai_api_version,
        )

    logger.info("application_started")
    try:
        yield
    finally:
        logger.info("application_shutdown_complete")
