"""
Structured logging for account operations.

Loggers wrap standard library loggers, so the host application's logging
levels decide what is emitted and an unconfigured host sees nothing.
Importing the package never touches structlog's global configuration;
applications that want the JSON pipeline call ``configure_logging()``.
"""

import logging

import structlog


def configure_logging() -> None:
    """Install the default structlog pipeline (JSON lines via stdlib logging)."""
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
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str):
    """Return a structlog logger over the stdlib logger ``name``."""
    return structlog.wrap_logger(logging.getLogger(name))
