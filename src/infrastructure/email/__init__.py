"""
Email Infrastructure - Notifications email via SMTP.

Templates disponibles:
----------------------
- password_reset: Reset mot de passe
"""

from src.infrastructure.email.service import NotificationMailer, SendResult
from src.infrastructure.email.templates import EmailContent, EmailTemplate
from src.infrastructure.email.transport import (
    Configured,
    SmtpTransport,
    Unconfigured,
    build_smtp_transport,
    initialize_transport,
)

__all__ = [
    "Configured",
    "EmailContent",
    "EmailTemplate",
    "NotificationMailer",
    "SendResult",
    "SmtpTransport",
    "Unconfigured",
    "build_smtp_transport",
    "initialize_transport",
]
