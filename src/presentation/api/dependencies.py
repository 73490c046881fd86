"""
Dependencies - Injection de dependances FastAPI.

Responsabilite unique:
----------------------
Fournir le Container (construit par create_app) aux endpoints.

Usage:
------
    @router.get("/health/email")
    async def email_health(mailer: NotificationMailer = Depends(get_mailer)):
        ...
"""

from fastapi import Depends, Request

from src.infrastructure.container import Container
from src.infrastructure.email.service import NotificationMailer


def get_container(request: Request) -> Container:
    """Retourne le Container attache a l'application."""
    return request.app.state.container


def get_mailer(container: Container = Depends(get_container)) -> NotificationMailer:
    """Retourne le NotificationMailer."""
    return container.mailer
