"""
Entites du domaine.

Objets transitoires construits par appel d'envoi:
    - Recipient: Destinataire (nom, email)
    - ResetEmailRequest: Demande d'email de reset
"""

from src.domain.entities.reset_email import Recipient, ResetEmailRequest

__all__ = [
    "Recipient",
    "ResetEmailRequest",
]
