"""
Structured logging configuration using structlog.
"""
import logging
import sys
from pathlib import Path
from typing import Optional
import structlog
from structlog.processors import JSONRenderer, TimeStamper, StackInfoRenderer, format_exc_info
from structlog.stdlib import add_log_level, ProcessorFormatter


def setup_logging(
    log_file: Optional[Path] = None,
    level: str = "INFO",
    json_logs: bool = True
) -> structlog.stdlib.BoundLogger:
    """
    Configure structured logging for rule post-processing.

    Args:
        log_file: Path to log file (optional, uses stdout if None)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Whether to use JSON format (True) or human-readable (False)

    Returns:
        Configured logger instance
    """
    log_level = getattr(logging, level.upper())

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        add_log_level,
        TimeStamper(fmt="iso", utc=True),
        StackInfoRenderer(),
        format_exc_info,
    ]

    console_renderer = JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(colors=True)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        ProcessorFormatter(
            processor=console_renderer,
            foreign_pre_chain=shared_processors,
        )
    )

    handlers = [console_handler]
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setFormatter(
            ProcessorFormatter(
                processor=JSONRenderer(),
                foreign_pre_chain=shared_processors,
            )
        )
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    structlog.configure(
        processors=shared_processors + [
            ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger()


def get_logger(name: str = None) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance backed by the stdlib logger of the same name.

    Events go through stdlib logging, so nothing is printed until
    setup_logging() (or the host application) adds handlers.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger bound to the given name
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def bind_context(**kwargs) -> None:
    """
    Bind context variables for all subsequent log calls in this thread.

    Example:
        bind_context(run="faers-2014q3", pipeline="default")
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
