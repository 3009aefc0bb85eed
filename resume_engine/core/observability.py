import logging

import sentry_sdk

from .config import settings

logger = logging.getLogger(__name__)


def configure_logging() -> bool:
    """Configure root logging and, when a DSN is set, Sentry error reporting.

    Returns True when Sentry was initialized.
    """
    logging.basicConfig(level=settings.log_level, format="%(message)s")
    if not settings.sentry_dsn:
        return False
    sentry_sdk.init(dsn=settings.sentry_dsn)
    logger.info("sentry_initialized")
    return True
