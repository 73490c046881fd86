"""
NotificationMailer - Envoi des notifications email via SMTP.

Responsabilite unique:
----------------------
Posseder le handle de transport (initialise une seule fois) et
envoyer l'email de reset de mot de passe.

Usage:
------
    config = MailerConfig.from_settings(MailerSettings())
    mailer = NotificationMailer(config)
    result = await mailer.send_password_reset_email(
        Recipient(name="John", email="john@example.com"),
        reset_url="https://shop.example.com/reset-password/abc",
        reset_token="abc",
    )
"""

from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import formataddr

from src.domain.entities.reset_email import Recipient, ResetEmailRequest
from src.domain.exceptions import ConfigurationError, DeliveryError
from src.infrastructure.config.settings import MailerConfig
from src.infrastructure.email.templates import EmailContent, EmailTemplate
from src.infrastructure.email.transport import (
    Configured,
    TransportFactory,
    TransportState,
    Unconfigured,
    build_smtp_transport,
    initialize_transport,
)
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)


@dataclass
class SendResult:
    """
    Resultat d'envoi d'email.

    Attributes:
        success: True si le serveur a accepte le message.
        message_id: Message-ID retourne par le transport.
    """

    success: bool
    message_id: str


class NotificationMailer:
    """
    Service d'envoi des notifications email.

    L'etat (Configured / Unconfigured) est fixe a la construction
    et ne change plus. Les appels concurrents sont sans risque:
    seul le handle immuable est lu.
    """

    def __init__(
        self,
        config: MailerConfig,
        transport_factory: TransportFactory = build_smtp_transport,
    ):
        """
        Initialise le mailer.

        Args:
            config: Configuration immuable.
            transport_factory: Constructeur du transport (tests).
        """
        self._config = config
        self._state: TransportState = initialize_transport(config, transport_factory)

    @property
    def state(self) -> TransportState:
        """Etat d'initialisation du transport."""
        return self._state

    @property
    def is_configured(self) -> bool:
        """Retourne True si le transport est disponible."""
        return isinstance(self._state, Configured)

    def build_message(self, recipient: Recipient, content: EmailContent) -> EmailMessage:
        """
        Construit le message MIME multipart/alternative.

        Args:
            recipient: Destinataire.
            content: Sujet et corps rendus.

        Returns:
            EmailMessage avec alternatives texte et HTML.
        """
        message = EmailMessage()
        sender = self._config.sender_address or self._config.auth_user
        message["From"] = formataddr((self._config.sender_name, sender))
        message["To"] = recipient.email
        message["Subject"] = content.subject
        message.set_content(content.text)
        message.add_alternative(content.html, subtype="html")
        return message

    async def send_password_reset_email(
        self,
        recipient: Recipient,
        reset_url: str,
        reset_token: str,
    ) -> SendResult:
        """
        Envoie l'email de reset de mot de passe.

        Une seule tentative, sans retry.

        Args:
            recipient: Destinataire (nom, email).
            reset_url: Lien de reset, contient deja le token.
            reset_token: Token brut, non affiche dans l'email.

        Returns:
            SendResult avec le Message-ID.

        Raises:
            ConfigurationError: Transport absent, aucun envoi tente.
            DeliveryError: Construction du message ou envoi en echec.
        """
        return await self.send_reset(ResetEmailRequest(recipient, reset_url, reset_token))

    async def send_reset(self, request: ResetEmailRequest) -> SendResult:
        """Variante de send_password_reset_email prenant une ResetEmailRequest."""
        if isinstance(self._state, Unconfigured):
            raise ConfigurationError(self._state.reason)

        try:
            content = EmailTemplate.password_reset(
                name=request.recipient.name,
                reset_url=request.reset_url,
            )
            message = self.build_message(request.recipient, content)
            message_id = await self._state.transport.send(message)
        except Exception as e:
            logger.error(
                "password_reset_email_failed",
                to=request.recipient.email,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise DeliveryError(str(e) or type(e).__name__) from e

        logger.info(
            "password_reset_email_sent",
            to=request.recipient.email,
            message_id=message_id,
        )
        return SendResult(success=True, message_id=message_id)

    async def verify_connection(self) -> bool:
        """
        Verifie la connexion au serveur SMTP.

        Health check uniquement: ne leve jamais.

        Returns:
            True si connexion et authentification reussissent.
        """
        if isinstance(self._state, Unconfigured):
            return False

        try:
            await self._state.transport.verify()
        except Exception as e:
            logger.error(
                "email_service_connection_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return False

        logger.info("email_service_ready")
        return True
