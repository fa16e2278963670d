import logging
import structlog
import sys
from typing import Union

from cubesearch.config import settings


def _renderer():
    if settings.log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


# Configure structlog
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        _renderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

# Standard logging goes to stderr; stdout is reserved for program output
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr)
    ]
)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)


def set_log_level(level: Union[int, str]):
    """Change the root log level, e.g. for a --verbose flag"""
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    logging.getLogger().setLevel(level)
