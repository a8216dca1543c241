"""
Application factory shared by the uvicorn server (main.py) and the
Lambda handler (lambda_handler.py).
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from typing import Optional
import logging

from contact_relay import __version__
from contact_relay.api.api_router import api_router
from contact_relay.api.endpoints import health
from contact_relay.core.config import Settings, get_settings
from contact_relay.core.errors import register_exception_handlers
from contact_relay.core.notifier import PushoverNotifier
from contact_relay.core.origin_policy import OriginPolicy

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings):
    logging.basicConfig(
        level=settings.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_app(
    settings: Optional[Settings] = None,
    notifier: Optional[PushoverNotifier] = None,
    deployment_mode: Optional[str] = None,
) -> FastAPI:
    """
    Build the contact API.

    Args:
        settings: Configuration; loaded from the environment when omitted
        notifier: Shared notification sender; built from settings when omitted
        deployment_mode: Overrides settings.deployment_mode ("server" or "serverless")

    Returns:
        FastAPI: the configured application
    """
    settings = settings or get_settings()
    if deployment_mode:
        settings = settings.model_copy(update={"deployment_mode": deployment_mode})
    notifier = notifier or PushoverNotifier.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"✅ Contact API started ({settings.deployment_mode} mode)")
        yield
        await notifier.aclose()
        logger.info("Notification client closed")

    app = FastAPI(title="Contact API", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.notifier = notifier

    OriginPolicy(settings).install(app)
    register_exception_handlers(app)

    app.include_router(health.router)
    if not settings.is_serverless:
        app.include_router(health.health_router)
    app.include_router(api_router)

    logger.info(f"✅ Environment: {settings.environment}")
    logger.info(f"✅ Pushover configured: {'YES' if settings.pushover_configured else 'NO'}")
    return app
