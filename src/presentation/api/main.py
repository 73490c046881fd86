"""
Main - Factory FastAPI.

Responsabilite unique:
----------------------
Creer l'application FastAPI et y attacher le Container.

Usage:
------
    # Development
    uvicorn src.presentation.api.main:app --reload

    # Production
    LOG_JSON=true uvicorn src.presentation.api.main:app --host 0.0.0.0 --port 8000
"""

from typing import Optional

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware

from src import __version__
from src.infrastructure.config.settings import MailerSettings
from src.infrastructure.container import Container
from src.infrastructure.logging import RequestLogger, configure_logging, get_logger
from src.presentation.api.health.router import router as health_router


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Factory pour creer l'application FastAPI.

    Args:
        container: Dependances pre-construites (defaut: depuis l'env).

    Returns:
        Application FastAPI configuree.
    """
    settings = container.settings if container else MailerSettings()
    configure_logging(json_logs=settings.json_logs, log_level=settings.log_level)
    logger = get_logger("api")

    container = container or Container.create(settings)

    app = FastAPI(
        title="Veggie Store Mailer",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
    )
    app.state.container = container

    app.add_middleware(BaseHTTPMiddleware, dispatch=RequestLogger())
    app.include_router(health_router)

    logger.info(
        "app_started",
        version=__version__,
        email_configured=container.mailer.is_configured,
    )
    return app


# Instance pour uvicorn
app = create_app()
