"""
Configuration de l'application.

Settings Pydantic charges depuis l'environnement et
configuration immuable du mailer.
"""

from src.infrastructure.config.settings import (
    BRAND_NAME,
    MailerConfig,
    MailerSettings,
    TransportMode,
    parse_port,
)

__all__ = [
    "BRAND_NAME",
    "MailerConfig",
    "MailerSettings",
    "TransportMode",
    "parse_port",
]
