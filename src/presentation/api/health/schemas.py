"""
Health Schemas - Modeles Pydantic pour les endpoints de sante.
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Etat du serveur."""

    status: str


class EmailHealthResponse(BaseModel):
    """Etat du transport email."""

    email: str
    configured: bool
