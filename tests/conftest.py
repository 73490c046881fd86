"""
Configuration et fixtures pytest.
"""

import logging
import sys
from email.message import EmailMessage
from pathlib import Path

import pytest
import structlog
from structlog.testing import LogCapture

# Ajouter le repertoire racine au path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.application.ports.services.mail_transport import MailTransport
from src.domain.entities.reset_email import Recipient
from src.infrastructure.config.settings import MailerConfig, TransportMode
from src.infrastructure.email import service as service_module
from src.infrastructure.email import transport as transport_module

MAILER_ENV_VARS = (
    "EMAIL_USER",
    "EMAIL_PASSWORD",
    "EMAIL_PASS",
    "EMAIL_SERVICE",
    "SMTP_HOST",
    "SMTP_PORT",
    "SMTP_SECURE",
    "EMAIL_FROM_NAME",
    "LOG_LEVEL",
    "LOG_JSON",
)


# ═══════════════════════════════════════════════════════════════════════════════
# FAKES
# ═══════════════════════════════════════════════════════════════════════════════

class FakeTransport(MailTransport):
    """Transport en memoire: enregistre les messages, peut echouer sur demande."""

    def __init__(self, send_error: Exception | None = None, verify_error: Exception | None = None):
        self.sent: list[EmailMessage] = []
        self.verify_calls = 0
        self.send_error = send_error
        self.verify_error = verify_error

    async def send(self, message: EmailMessage) -> str:
        if self.send_error:
            raise self.send_error
        self.sent.append(message)
        return f"<fake-{len(self.sent)}@veggie.test>"

    async def verify(self) -> None:
        self.verify_calls += 1
        if self.verify_error:
            raise self.verify_error


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - ENVIRONNEMENT
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def clean_env(monkeypatch) -> pytest.MonkeyPatch:
    """Environnement sans aucune variable du mailer."""
    for name in MAILER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - CONFIG & TRANSPORT
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def complete_config() -> MailerConfig:
    """Configuration avec identifiants."""
    return MailerConfig(
        sender_address="shop@veggie.test",
        sender_name="Veggie Store",
        auth_user="shop@veggie.test",
        auth_secret="app-password",
        transport_mode=TransportMode.GENERIC_SMTP,
        host="smtp.veggie.test",
        port=587,
        use_tls=False,
    )


@pytest.fixture
def empty_config() -> MailerConfig:
    """Configuration sans identifiants."""
    return MailerConfig()


@pytest.fixture
def fake_transport() -> FakeTransport:
    """Transport factice qui reussit."""
    return FakeTransport()


@pytest.fixture
def recipient() -> Recipient:
    """Destinataire pour les tests."""
    return Recipient(name="Jane Doe", email="jane@example.com")


@pytest.fixture
def transport_cls() -> type[FakeTransport]:
    """Classe du transport factice, pour les cas d'echec."""
    return FakeTransport


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - LOGS
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def log_output(monkeypatch) -> LogCapture:
    """
    Capture les evenements structlog du transport et du mailer.

    Les loggers de module sont remplaces: ceux deja mis en cache
    par configure_logging ne voient pas une reconfiguration globale.
    """
    capture = LogCapture()
    for module in (transport_module, service_module):
        monkeypatch.setattr(
            module,
            "logger",
            structlog.wrap_logger(
                logging.getLogger(module.__name__),
                processors=[capture],
                wrapper_class=structlog.stdlib.BoundLogger,
            ),
        )
    return capture
