"""
Ports (Interfaces) de l'application.

Les ports definissent les contrats que les adapters
de l'infrastructure doivent implementer.

Types de ports:
    - services/: Interfaces pour les services externes
"""

from src.application.ports.services import MailTransport

__all__ = [
    "MailTransport",
]
