"""
Logging Config - Configuration structlog.

Responsabilite unique:
----------------------
Configurer structlog pour les diagnostics du mailer.

Modes:
------
- Development: Pretty print, couleurs
- Production: JSON, timestamp ISO (LOG_JSON=true)

Les secrets SMTP ne sont jamais rendus: toute cle sensible
d'un evenement est masquee avant le rendu.

Usage:
------
    from src.infrastructure.logging import configure_logging, get_logger

    configure_logging(json_logs=True)
    logger = get_logger("mailer")
    logger.info("email_service_ready", host="smtp.gmail.com")
"""

import logging
import sys
import time
from typing import Any, Optional

import structlog

SECRET_KEYS = frozenset({"password", "auth_secret", "email_password", "email_pass"})
REDACTED = "***"


def redact_secrets(_logger: Any, _method_name: str, event_dict: dict) -> dict:
    """Processor structlog: masque les valeurs des cles sensibles."""
    for key in SECRET_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def resolve_level(log_level: Optional[str]) -> int:
    """Convertit LOG_LEVEL en niveau stdlib, INFO si inconnu."""
    level = logging.getLevelName((log_level or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    json_logs: bool = False,
    log_level: Optional[str] = "INFO",
) -> None:
    """
    Configure le logging global.

    Args:
        json_logs: True pour JSON (production), False pour pretty.
        log_level: Niveau minimum (DEBUG, INFO, WARNING, ERROR).
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        redact_secrets,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if json_logs:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=resolve_level(log_level))
    # aiosmtplib logge chaque commande SMTP en DEBUG
    logging.getLogger("aiosmtplib").setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Retourne un logger structure (nom du module)."""
    return structlog.get_logger(name)


class RequestLogger:
    """
    Middleware de logging pour FastAPI.

    Une ligne par requete: chemin, status et duree.
    """

    def __init__(self, logger: Optional[structlog.stdlib.BoundLogger] = None):
        self._logger = logger or get_logger("api.requests")

    async def __call__(self, request, call_next):
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(path=request.url.path)
        start = time.perf_counter()

        response = await call_next(request)

        self._logger.info(
            "request_completed",
            method=request.method,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return response
