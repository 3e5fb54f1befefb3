"""Logging configuration for the Orders domain.

The deployment environment is read from ``PROTEAN_ENV`` (falling back to
``ENVIRONMENT``) and drives both the log level and the renderer: JSON lines in
production and staging, coloured console output everywhere else. Rotating log
files are written outside of test runs only.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

import structlog

LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}
JSON_ENVIRONMENTS = ("production", "staging")
QUIET_LOGGERS = ("protean", "multipart", "asyncio")


def current_environment() -> str:
    return (os.getenv("PROTEAN_ENV") or os.getenv("ENVIRONMENT") or "development").lower()


def get_log_level(env: str | None = None) -> str:
    """Log level for ``env``; ``LOG_LEVEL`` wins when set."""
    env = env or current_environment()
    return os.getenv("LOG_LEVEL", LEVELS.get(env, "INFO")).upper()


def _rotating_handler(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def setup_stdlib_logging(env: str, log_dir: str, log_file_prefix: str) -> None:
    log_level = get_log_level(env)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    if env != "test":
        log_path = Path(log_dir)
        log_path.mkdir(exist_ok=True)
        root_logger.addHandler(_rotating_handler(log_path / f"{log_file_prefix}.log", log_level))
        root_logger.addHandler(_rotating_handler(log_path / f"{log_file_prefix}_error.log", logging.ERROR))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def setup_structlog(env: str) -> None:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if env in JSON_ENVIRONMENTS:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=4),
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(log_dir: str = "logs", log_file_prefix: str = "orderflow") -> None:
    """Configure stdlib logging and structlog for the current environment."""
    env = current_environment()
    setup_stdlib_logging(env, log_dir, log_file_prefix)
    setup_structlog(env)


def bind_request_context(**values) -> None:
    """Attach ``values`` to every log line emitted by the current request."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**values)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
