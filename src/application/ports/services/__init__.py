"""
Interfaces des services externes.

Ces interfaces definissent les operations des services
externes que les adapters doivent implementer.
"""

from src.application.ports.services.mail_transport import MailTransport

__all__ = [
    "MailTransport",
]
