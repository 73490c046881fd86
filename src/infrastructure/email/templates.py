"""
EmailTemplate - Templates d'emails.

Responsabilite unique:
----------------------
Rendre les corps HTML et texte des emails transactionnels.

Usage:
------
    content = EmailTemplate.password_reset(name="John", reset_url=url)
    message = build_message(content, ...)
"""

import html
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from src.infrastructure.config.settings import BRAND_NAME

RESET_LINK_TTL_MINUTES = 15


@dataclass
class EmailContent:
    """
    Contenu d'un email.

    Attributes:
        subject: Sujet de l'email.
        html: Corps HTML.
        text: Corps texte (alternative sans balises).
    """

    subject: str
    html: str
    text: str


class EmailTemplate:
    """
    Factory pour les templates d'emails.

    Chaque methode retourne un EmailContent pret a envoyer.
    """

    _BASE_HTML = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <style>
    body {{ font-family: Arial, sans-serif; line-height: 1.6; color: #333; }}
    .container {{ max-width: 600px; margin: 0 auto; padding: 20px; }}
    .header {{ background: linear-gradient(135deg, #4CAF50 0%, #66BB6A 100%); padding: 30px; text-align: center; border-radius: 10px 10px 0 0; }}
    .content {{ background: #ffffff; padding: 30px; border: 1px solid #e0e0e0; border-top: none; }}
    .button {{ display: inline-block; padding: 12px 30px; background: #4CAF50; color: white; text-decoration: none; border-radius: 25px; margin: 20px 0; }}
    .info-box {{ background: #f8f9fa; padding: 15px; border-radius: 5px; margin: 20px 0; border-left: 4px solid #4CAF50; }}
    .footer {{ background: #f8f9fa; padding: 20px; text-align: center; border-radius: 0 0 10px 10px; font-size: 12px; color: #666; }}
    .warning {{ color: #ff9800; font-weight: bold; }}
  </style>
</head>
<body>
  <div class="container">
    <div class="header">
      <h1 style="color: white; margin: 0;">&#127793; {brand}</h1>
      <p style="color: #e8f5e9; margin: 10px 0 0 0;">{tagline}</p>
    </div>
    <div class="content">
      {content}
      <p style="margin-top: 30px;">Best regards,<br>
      <strong>The {brand} Team</strong></p>
    </div>
    <div class="footer">
      <p>This is an automated email. Please do not reply to this message.</p>
      <p>&copy; {year} {brand}. All rights reserved.</p>
    </div>
  </div>
</body>
</html>
"""

    @classmethod
    def _render(cls, tagline: str, content: str, year: Optional[int] = None) -> str:
        return cls._BASE_HTML.format(
            brand=BRAND_NAME,
            tagline=tagline,
            content=content,
            year=year or datetime.now().year,
        )

    @classmethod
    def password_reset(
        cls,
        name: str,
        reset_url: str,
        expires_minutes: int = RESET_LINK_TTL_MINUTES,
        year: Optional[int] = None,
    ) -> EmailContent:
        """
        Email de reset mot de passe.

        Le nom est echappe dans le HTML. L'URL est inseree telle quelle,
        elle est construite par le flux de reset et non par l'utilisateur.

        Args:
            name: Nom du destinataire.
            reset_url: URL de reset (contient deja le token).
            expires_minutes: Duree de validite annoncee du lien.
            year: Annee du copyright (defaut: annee courante).

        Returns:
            EmailContent pret a envoyer.
        """
        safe_name = html.escape(name)

        html_content = f"""<h2 style="color: #4CAF50;">Hello {safe_name},</h2>
      <p>You requested to reset your password for your {BRAND_NAME} account.</p>

      <div class="info-box">
        <p style="margin: 0;"><strong>Click the button below to reset your password:</strong></p>
      </div>

      <div style="text-align: center;">
        <a href="{reset_url}" class="button">Reset Password</a>
      </div>

      <p>Or copy and paste this link into your browser:</p>
      <p style="word-break: break-all; color: #4CAF50;">{reset_url}</p>

      <div class="info-box">
        <p class="warning" style="margin: 0;">&#9888;&#65039; This link will expire in {expires_minutes} minutes.</p>
        <p style="margin: 10px 0 0 0;">If you did not request this password reset, please ignore this email or contact support if you have concerns.</p>
      </div>"""

        text = (
            f"Hello {name},\n"
            "\n"
            f"You requested to reset your password for your {BRAND_NAME} account.\n"
            "\n"
            "Click the link below to reset your password:\n"
            f"{reset_url}\n"
            "\n"
            f"This link will expire in {expires_minutes} minutes.\n"
            "\n"
            "If you did not request this password reset, please ignore this email.\n"
            "\n"
            "Best regards,\n"
            f"The {BRAND_NAME} Team\n"
        )

        return EmailContent(
            subject=f"Password Reset Request - {BRAND_NAME}",
            html=cls._render("Password Reset Request", html_content, year),
            text=text,
        )
