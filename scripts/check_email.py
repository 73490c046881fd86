#!/usr/bin/env python3
"""
Script de verification du service email.
Verifie la connexion SMTP et envoie optionnellement un email de reset de test.

Usage:
    python scripts/check_email.py
    python scripts/check_email.py --send-to jane@example.com --name Jane

Options:
    --send-to     Adresse qui recoit un email de reset de test
    --name        Nom du destinataire (defaut: Test User)
    --reset-url   Lien de reset a inclure (defaut: lien factice)
"""

import sys
import asyncio
import argparse
from pathlib import Path

# Ajouter le dossier parent au path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
load_dotenv(Path(__file__).parent.parent / ".env")

from src.domain.entities.reset_email import Recipient
from src.domain.exceptions import DomainException
from src.infrastructure.config.settings import MailerSettings
from src.infrastructure.container import Container
from src.infrastructure.logging import configure_logging

DEFAULT_RESET_URL = "http://localhost:5173/reset-password/test-token"


async def run(container, send_to=None, name="Test User", reset_url=DEFAULT_RESET_URL):
    """
    Verifie le transport puis envoie l'email de test si demande.

    Returns:
        Code de sortie (0 = ok, 1 = echec).
    """
    mailer = container.mailer
    config = container.config

    print(f"📧 Mode: {config.transport_mode.value}")
    print(f"📧 Expediteur: {config.sender_name} <{config.sender_address or '-'}>")

    if not mailer.is_configured:
        print("❌ Email non configure: definir EMAIL_USER et EMAIL_PASSWORD dans .env")
        return 1

    if not await mailer.verify_connection():
        print("❌ Connexion SMTP impossible (voir logs)")
        return 1
    print("✅ Connexion SMTP OK")

    if not send_to:
        return 0

    try:
        result = await mailer.send_password_reset_email(
            Recipient(name=name, email=send_to),
            reset_url=reset_url,
            reset_token=reset_url.rstrip("/").rsplit("/", 1)[-1],
        )
    except DomainException as e:
        print(f"❌ {e}")
        return 1

    print(f"✅ Email envoye a {send_to} (Message-ID: {result.message_id})")
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Verifie la configuration SMTP du service email"
    )
    parser.add_argument(
        "--send-to",
        help="Envoie un email de reset de test a cette adresse"
    )
    parser.add_argument(
        "--name",
        default="Test User",
        help="Nom du destinataire"
    )
    parser.add_argument(
        "--reset-url",
        default=DEFAULT_RESET_URL,
        help="Lien de reset a inclure"
    )
    args = parser.parse_args()

    settings = MailerSettings()
    configure_logging(json_logs=settings.json_logs, log_level=settings.log_level)
    container = Container.create(settings)

    print("🔍 VERIFICATION DU SERVICE EMAIL")
    print("=" * 60)

    sys.exit(asyncio.run(run(
        container,
        send_to=args.send_to,
        name=args.name,
        reset_url=args.reset_url,
    )))


if __name__ == "__main__":
    main()
