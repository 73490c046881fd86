"""
API REST - FastAPI.

Routers disponibles:
--------------------
- health: Etat du serveur et du transport email

Usage:
------
    uvicorn src.presentation.api.main:app --reload
"""

from src.presentation.api.main import create_app

__all__ = ["create_app"]
