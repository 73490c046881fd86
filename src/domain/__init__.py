"""
Domain Layer - Coeur metier de l'application.

Ce module contient:
    - entities/: Demandes d'email transitoires (Recipient, ResetEmailRequest)
    - exceptions: Exceptions metier

Principes:
    - AUCUNE dependance vers les couches externes
    - Testable sans infrastructure
"""

from src.domain.exceptions import (
    ConfigurationError,
    DeliveryError,
    DomainException,
)

__all__ = [
    "DomainException",
    "ConfigurationError",
    "DeliveryError",
]
