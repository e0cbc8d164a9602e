import logging
from typing import Optional

import structlog
from input_validator.settings import get_settings


def setup_logging(level: Optional[int] = None):
    """Configure stdlib logging and structlog. Call once from the host application."""
    settings = get_settings()
    if level is None:
        level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(format="%(message)s", level=level)

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def get_logger(name: str = "input_validator", **kwargs):
    """Bound logger over a stdlib logger, so nothing is emitted unless the host enables the level."""
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    ).bind(**kwargs)
