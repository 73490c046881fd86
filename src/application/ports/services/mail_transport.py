"""
Interface du transport d'emails sortants.
"""

from abc import ABC, abstractmethod
from email.message import EmailMessage


class MailTransport(ABC):
    """
    Port du handle de transport SMTP.

    Un transport est soit entierement utilisable, soit absent:
    il n'existe pas d'etat partiellement initialise.
    Les implementations doivent supporter des appels concurrents.
    """

    @abstractmethod
    async def send(self, message: EmailMessage) -> str:
        """
        Soumet un message au serveur.

        Args:
            message: Message MIME complet (From, To, Subject, corps).

        Returns:
            Identifiant du message accepte.

        Raises:
            Exception: Toute erreur du transport (auth, reseau, destinataire).
        """
        pass

    @abstractmethod
    async def verify(self) -> None:
        """
        Verifie la connexion et l'authentification aupres du serveur.

        Raises:
            Exception: Si le serveur est injoignable ou refuse l'auth.
        """
        pass
