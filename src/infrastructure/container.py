"""
Container d'injection de dependances.

Ce module construit une seule fois settings -> config -> mailer
et les passe explicitement a l'API et aux scripts.
"""

from dataclasses import dataclass
from typing import Optional

from src.infrastructure.config.settings import MailerConfig, MailerSettings
from src.infrastructure.email.service import NotificationMailer
from src.infrastructure.email.transport import TransportFactory, build_smtp_transport


@dataclass
class Container:
    """
    Conteneur d'injection de dependances.

    Example:
        >>> container = Container.create()
        >>> await container.mailer.verify_connection()
    """

    settings: MailerSettings
    config: MailerConfig
    mailer: NotificationMailer

    @classmethod
    def create(
        cls,
        settings: Optional[MailerSettings] = None,
        transport_factory: TransportFactory = build_smtp_transport,
    ) -> "Container":
        """
        Factory pour creer un conteneur avec toutes les dependances.

        Args:
            settings: Settings explicites (defaut: charges depuis l'env).
            transport_factory: Constructeur du transport (tests).

        Returns:
            Container configure.
        """
        settings = settings or MailerSettings()
        config = MailerConfig.from_settings(settings)
        mailer = NotificationMailer(config, transport_factory=transport_factory)

        return cls(settings=settings, config=config, mailer=mailer)
