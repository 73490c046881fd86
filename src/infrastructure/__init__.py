"""
Infrastructure Layer - Adapters pour les services externes.

Cette couche contient les implementations concretes des ports definis
dans la couche application:
- Transport SMTP (aiosmtplib)
- Configuration (pydantic-settings)
- Logging (structlog)
"""
