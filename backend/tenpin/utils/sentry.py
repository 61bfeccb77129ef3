"""Error reporting for the command-line harness."""

import logging
from typing import Optional

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

from ..config import SentrySettings, sentry_settings

logger = logging.getLogger(__name__)


def init_sentry(settings: Optional[SentrySettings] = None) -> bool:
    """Report ``ERROR`` logs to Sentry when a DSN is configured."""
    settings = settings or sentry_settings()
    if settings.dsn is None:
        logger.debug("SENTRY_DSN not set; error reporting disabled")
        return False

    sentry_sdk.init(
        dsn=settings.dsn,
        integrations=[
            LoggingIntegration(level=logging.INFO, event_level=logging.ERROR)
        ],
        environment=settings.environment,
        traces_sample_rate=settings.traces_sample_rate,
    )
    logger.info("Error reporting enabled (environment=%s)", settings.environment)
    return True
