"""
Logging Infrastructure - Logging structure avec structlog.

Usage:
------
    from src.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("password_reset_email_sent", message_id="<abc@host>")
"""

from src.infrastructure.logging.config import RequestLogger, configure_logging, get_logger

__all__ = ["RequestLogger", "configure_logging", "get_logger"]
