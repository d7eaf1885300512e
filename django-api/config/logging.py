"""structlog setup shared by Django's ``LOGGING`` and application loggers.

Application code logs through ``structlog.get_logger(__name__)``; records
from Django and other libraries go through the stdlib ``logging`` tree.
Both end up in the same ``ProcessorFormatter`` so every line is rendered
as JSON (production) or coloured key/value text (development).
"""

from typing import Any

import structlog

from config.env import LogFormat

SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
]


def _renderer(log_format: LogFormat) -> Any:
    if log_format == LogFormat.CONSOLE:
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def build_logging_config(level: str, log_format: LogFormat) -> dict[str, Any]:
    """Return a ``logging.config.dictConfig`` mapping for Django's ``LOGGING``."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structured": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processors": [
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.format_exc_info,
                    _renderer(log_format),
                ],
                "foreign_pre_chain": SHARED_PROCESSORS,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "structured",
            },
        },
        "root": {"handlers": ["console"], "level": level.upper()},
        "loggers": {
            "django": {"handlers": ["console"], "level": level.upper(), "propagate": False},
        },
    }


def configure_logging() -> None:
    """Route structlog loggers into the stdlib handlers configured above."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *SHARED_PROCESSORS,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
