"""
Transport SMTP - Adapter aiosmtplib.

Responsabilite unique:
----------------------
Construire le handle de transport depuis MailerConfig et
exposer l'etat d'initialisation sous forme de resultat tague.

Modes:
------
- gmail-preset: smtp.gmail.com:465, TLS implicite, seuls les identifiants varient
- generic-smtp: host/port/TLS depuis la config, STARTTLS opportuniste sinon

Usage:
------
    state = initialize_transport(config)
    if isinstance(state, Configured):
        await state.transport.send(message)
"""

from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import make_msgid
from typing import Callable, Optional, Union

import aiosmtplib

from src.application.ports.services.mail_transport import MailTransport
from src.infrastructure.config.settings import MailerConfig, TransportMode
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

GMAIL_HOST = "smtp.gmail.com"
GMAIL_PORT = 465


class SmtpTransport(MailTransport):
    """
    Transport SMTP asynchrone.

    Chaque envoi ouvre sa propre session SMTP: aucun etat
    mutable n'est partage entre appels concurrents.
    """

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        use_tls: bool = False,
        timeout: Optional[float] = None,
    ):
        """
        Initialise le transport.

        Args:
            host: Serveur SMTP.
            port: Port SMTP.
            username: Identifiant d'authentification.
            password: Secret d'authentification.
            use_tls: TLS implicite des la connexion.
            timeout: Timeout socket (defaut: celui d'aiosmtplib).
        """
        self.host = host
        self.port = port
        self.use_tls = use_tls
        self.timeout = timeout
        self._username = username
        self._password = password

    def _client_options(self) -> dict:
        options = {
            "hostname": self.host,
            "port": self.port,
            "use_tls": self.use_tls,
        }
        if self.timeout is not None:
            options["timeout"] = self.timeout
        return options

    async def send(self, message: EmailMessage) -> str:
        """Envoie le message et retourne son Message-ID."""
        if "Message-ID" not in message:
            message["Message-ID"] = make_msgid(domain=self._sender_domain(message))

        await aiosmtplib.send(
            message,
            username=self._username,
            password=self._password,
            **self._client_options(),
        )
        return message["Message-ID"]

    async def verify(self) -> None:
        """Connexion + EHLO + AUTH, puis QUIT."""
        client = aiosmtplib.SMTP(**self._client_options())
        async with client:
            await client.login(self._username, self._password)

    @staticmethod
    def _sender_domain(message: EmailMessage) -> Optional[str]:
        sender = str(message.get("From", ""))
        if "@" not in sender:
            return None
        return sender.rsplit("@", 1)[1].strip(" >") or None

    def __repr__(self) -> str:
        return (
            f"SmtpTransport(host={self.host!r}, port={self.port}, "
            f"use_tls={self.use_tls}, username={self._username!r})"
        )


def build_smtp_transport(config: MailerConfig) -> SmtpTransport:
    """
    Construit le transport selon le mode configure.

    Args:
        config: Configuration complete (identifiants presents).

    Returns:
        SmtpTransport pret a l'emploi.
    """
    if config.transport_mode is TransportMode.GMAIL_PRESET:
        return SmtpTransport(
            host=GMAIL_HOST,
            port=GMAIL_PORT,
            username=config.auth_user,
            password=config.auth_secret,
            use_tls=True,
        )

    return SmtpTransport(
        host=config.host,
        port=config.port,
        username=config.auth_user,
        password=config.auth_secret,
        use_tls=config.use_tls,
    )


@dataclass(frozen=True)
class Configured:
    """Transport initialise et utilisable."""

    transport: MailTransport


@dataclass(frozen=True)
class Unconfigured:
    """Transport absent, avec la raison."""

    reason: str


TransportState = Union[Configured, Unconfigured]
TransportFactory = Callable[[MailerConfig], MailTransport]


def initialize_transport(
    config: MailerConfig,
    factory: TransportFactory = build_smtp_transport,
) -> TransportState:
    """
    Initialise le transport une seule fois.

    Identifiants manquants: warning et Unconfigured (non fatal).
    Les identifiants ne sont pas verifies ici, seulement a l'usage.

    Args:
        config: Configuration du mailer.
        factory: Constructeur du transport (injectable pour les tests).

    Returns:
        Configured(transport) ou Unconfigured(reason).
    """
    if not config.is_complete:
        missing = ", ".join(config.missing_credentials)
        logger.warning(
            "email_transport_unconfigured",
            missing=missing,
            hint="Set EMAIL_USER and EMAIL_PASSWORD in your .env file",
        )
        return Unconfigured(reason=f"missing {missing}")

    transport = factory(config)
    logger.info(
        "email_transport_configured",
        mode=config.transport_mode.value,
        transport=repr(transport),
    )
    return Configured(transport=transport)
