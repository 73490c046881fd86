"""Health Router - Etat du serveur et du service email."""

from src.presentation.api.health.router import router

__all__ = ["router"]
