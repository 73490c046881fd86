"""
Veggie Store Mailer - Architecture Hexagonale

Structure:
    - domain/: Coeur metier (entites, exceptions)
    - application/: Ports (interfaces)
    - infrastructure/: Adapters (SMTP, settings, logging)
    - presentation/: API de health check
"""

__version__ = "1.0.0"
