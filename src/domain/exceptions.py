"""
Exceptions metier du domaine.

Ces exceptions representent les echecs de l'envoi des notifications
et sont independantes de l'infrastructure (SMTP, settings).
"""


class DomainException(Exception):
    """Exception de base pour toutes les erreurs du domaine."""

    def __init__(self, message: str, code: str | None = None) -> None:
        """
        Initialise une exception du domaine.

        Args:
            message: Message d'erreur descriptif.
            code: Code d'erreur optionnel pour identification programmatique.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigurationError(DomainException):
    """
    Leve quand le service email n'a pas d'identifiants.

    Erreur de deploiement: l'appelant ne doit pas reessayer.
    """

    def __init__(self, reason: str | None = None) -> None:
        message = (
            "Email service not configured. "
            "Please set EMAIL_USER and EMAIL_PASSWORD in .env"
        )
        if reason:
            message += f" ({reason})"
        super().__init__(message, code="EMAIL_NOT_CONFIGURED")
        self.reason = reason


class DeliveryError(DomainException):
    """Leve quand le transport refuse ou echoue a envoyer un email."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            f"Failed to send password reset email: {detail}",
            code="EMAIL_DELIVERY_FAILED"
        )
        self.detail = detail
