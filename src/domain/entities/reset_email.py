"""
Entites ResetEmail - Demande d'email de reinitialisation.

Objets transitoires construits a chaque appel d'envoi, puis jetes.
Aucune persistence, aucun etat partage.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Recipient:
    """
    Destinataire d'une notification.

    Attributes:
        name: Nom affiche dans le corps de l'email.
        email: Adresse email du destinataire.
    """

    name: str
    email: str


@dataclass(frozen=True)
class ResetEmailRequest:
    """
    Demande d'envoi d'un email de reset de mot de passe.

    Note: reset_token est recu mais jamais rendu dans l'email,
    le lien reset_url le contient deja.

    Attributes:
        recipient: Destinataire.
        reset_url: Lien de reinitialisation pre-construit.
        reset_token: Token brut (non affiche).
    """

    recipient: Recipient
    reset_url: str
    reset_token: str
