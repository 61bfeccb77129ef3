import logging
import os
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)

_DEFAULT_LOG_LEVEL = "WARNING"


def _canon_log_level(val):
    """
    Normalize a log level name to what ``logging`` understands:
      - defaults to 'WARNING' when unset/empty
      - upper-cases the name
      - falls back to the default for unknown names
    """
    val = (val or _DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(val), int):
        return _DEFAULT_LOG_LEVEL
    return val


def _canon_sample_rate(name: str, raw: Optional[str], default: float = 0.0) -> float:
    """Parse a Sentry sample rate, clamping bad input back to ``default``."""
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("%s=%r is not a number; using %.2f", name, raw, default)
        return default
    if not 0.0 <= value <= 1.0:
        logger.warning("%s=%r is outside [0, 1]; using %.2f", name, raw, default)
        return default
    return value


class SentrySettings(NamedTuple):
    dsn: Optional[str]
    environment: Optional[str]
    traces_sample_rate: float


def sentry_settings() -> SentrySettings:
    """Read the Sentry settings from the environment at call time."""
    return SentrySettings(
        dsn=(os.getenv("SENTRY_DSN") or "").strip() or None,
        environment=(os.getenv("SENTRY_ENVIRONMENT") or "").strip() or None,
        traces_sample_rate=_canon_sample_rate(
            "SENTRY_TRACES_SAMPLE_RATE", os.getenv("SENTRY_TRACES_SAMPLE_RATE")
        ),
    )


LOG_LEVEL = _canon_log_level(os.getenv("LOG_LEVEL"))
