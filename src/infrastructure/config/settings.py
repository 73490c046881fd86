"""
Configuration du mailer - Settings Pydantic.

Responsabilite unique:
----------------------
Charger la configuration email depuis les variables d'env (ou .env)
et la figer dans un MailerConfig immuable.

Variables:
----------
- EMAIL_USER: Identifiant SMTP et adresse expediteur (requis)
- EMAIL_PASSWORD / EMAIL_PASS: Secret SMTP, le premier non vide gagne (requis)
- EMAIL_SERVICE: "gmail" pour le preset Gmail, sinon SMTP generique
- SMTP_HOST: Serveur SMTP (defaut: smtp.gmail.com)
- SMTP_PORT: Port SMTP (defaut: 587)
- SMTP_SECURE: TLS implicite uniquement si exactement "true"
- EMAIL_FROM_NAME: Nom affiche (defaut: Veggie Store)
- LOG_LEVEL / LOG_JSON: Logging
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

BRAND_NAME = "Veggie Store"
DEFAULT_SMTP_HOST = "smtp.gmail.com"
DEFAULT_SMTP_PORT = 587

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class MailerSettings(BaseSettings):
    """
    Variables d'environnement brutes du mailer.

    Les valeurs restent des chaines: une valeur invalide
    (ex: SMTP_PORT=abc) ne doit jamais empecher le demarrage.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Identifiants
    email_user: Optional[str] = None
    email_password: Optional[str] = None
    email_pass: Optional[str] = None

    # Transport
    email_service: Optional[str] = None
    smtp_host: Optional[str] = None
    smtp_port: Optional[str] = None
    smtp_secure: Optional[str] = None

    # Expediteur
    email_from_name: Optional[str] = None

    # Logging
    log_level: str = "INFO"
    log_json: Optional[str] = None

    @property
    def auth_secret(self) -> Optional[str]:
        """Secret SMTP: EMAIL_PASSWORD prioritaire sur EMAIL_PASS."""
        return self.email_password or self.email_pass or None

    @property
    def json_logs(self) -> bool:
        """LOG_JSON active le rendu JSON (true, 1 ou yes)."""
        return (self.log_json or "").strip().lower() in ("true", "1", "yes")


class TransportMode(str, Enum):
    """Mode de transport SMTP."""

    GMAIL_PRESET = "gmail-preset"
    GENERIC_SMTP = "generic-smtp"


def parse_port(raw: Optional[str], default: int = DEFAULT_SMTP_PORT) -> int:
    """
    Parse un port SMTP.

    Lit l'entier en tete de chaine ("2525abc" -> 2525).
    Une valeur absente, non numerique ou nulle retombe sur le defaut.

    Args:
        raw: Valeur brute de SMTP_PORT.
        default: Port par defaut.

    Returns:
        Port entier.
    """
    if not raw:
        return default
    match = _LEADING_INT.match(raw)
    if not match:
        return default
    return int(match.group(1)) or default


@dataclass(frozen=True)
class MailerConfig:
    """
    Configuration immuable du mailer.

    Construite une seule fois au demarrage et passee explicitement
    au NotificationMailer.

    Attributes:
        sender_address: Adresse du header From.
        sender_name: Nom affiche du header From.
        auth_user: Identifiant SMTP.
        auth_secret: Secret SMTP.
        transport_mode: Preset Gmail ou SMTP generique.
        host: Serveur SMTP (mode generique).
        port: Port SMTP (mode generique).
        use_tls: TLS implicite (mode generique).
    """

    sender_address: Optional[str] = None
    sender_name: str = BRAND_NAME
    auth_user: Optional[str] = None
    auth_secret: Optional[str] = None
    transport_mode: TransportMode = TransportMode.GENERIC_SMTP
    host: str = DEFAULT_SMTP_HOST
    port: int = DEFAULT_SMTP_PORT
    use_tls: bool = False

    @property
    def is_complete(self) -> bool:
        """True si identifiant et secret sont presents."""
        return bool(self.auth_user and self.auth_secret)

    @property
    def missing_credentials(self) -> list[str]:
        """Noms des variables manquantes."""
        missing = []
        if not self.auth_user:
            missing.append("EMAIL_USER")
        if not self.auth_secret:
            missing.append("EMAIL_PASSWORD")
        return missing

    @classmethod
    def from_settings(cls, settings: MailerSettings) -> "MailerConfig":
        """
        Construit la configuration depuis les settings.

        Args:
            settings: Settings charges depuis l'environnement.

        Returns:
            MailerConfig fige.
        """
        if settings.email_service == "gmail":
            mode = TransportMode.GMAIL_PRESET
        else:
            mode = TransportMode.GENERIC_SMTP

        return cls(
            sender_address=settings.email_user or None,
            sender_name=settings.email_from_name or BRAND_NAME,
            auth_user=settings.email_user or None,
            auth_secret=settings.auth_secret,
            transport_mode=mode,
            host=settings.smtp_host or DEFAULT_SMTP_HOST,
            port=parse_port(settings.smtp_port),
            use_tls=settings.smtp_secure == "true",
        )
