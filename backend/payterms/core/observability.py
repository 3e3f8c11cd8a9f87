"""
Observability hooks used by the exception handlers.
"""

from fastapi import Request
import logging

from payterms.core.config import settings

logger = logging.getLogger(__name__)


def setup_observability() -> None:
    """Announce the service identity to the log stream on startup."""
    logger.info(
        "Setting up observability",
        extra={
            "service_name": settings.PROJECT_NAME,
            "version": settings.VERSION,
        },
    )


def record_exception(exc: Exception, request: Request) -> None:
    """
    Record an exception raised while serving a request.

    Args:
        exc: The exception that occurred
        request: The FastAPI request object
    """
    logger.error(
        f"Exception recorded: {type(exc).__name__}",
        extra={
            "exception_message": str(exc),
            "path": request.url.path,
        },
    )
