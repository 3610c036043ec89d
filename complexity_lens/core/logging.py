"""
Logging for Complexity Lens.

Every record is stamped with the analysis it was emitted in: the document,
its language and, inside the engine, the function being classified. The
context is held in a ContextVar, so analyses of different documents running
side by side never see each other's fields.
"""

import logging
import time
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import Dict, Iterator, Optional

from rich.console import Console
from rich.logging import RichHandler

from complexity_lens.core.formatting import format_time

# Log output goes to stderr so stdout stays clean for JSON and lens output
console = Console(stderr=True)

LOGGER_NAME = "complexity_lens"

CONTEXT_FIELDS = ("document", "language", "function")

CONSOLE_FORMAT = "%(analysis)s%(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(analysis)s%(message)s"

_analysis_context: ContextVar[Dict[str, str]] = ContextVar("analysis_context", default={})


def describe_context(context: Dict[str, str]) -> str:
    """Render context fields as a `[document=..., language=...] ` prefix."""
    parts = [f"{field}={context[field]}" for field in CONTEXT_FIELDS if context.get(field)]
    return f"[{', '.join(parts)}] " if parts else ""


class AnalysisContextFilter(logging.Filter):
    """Copies the current analysis context onto each log record."""

    def filter(self, record):
        context = _analysis_context.get()
        for field in CONTEXT_FIELDS:
            setattr(record, field, context.get(field))
        record.analysis = describe_context(context)
        return True


def _console_level(debug: bool, verbose: bool) -> int:
    if debug:
        return logging.DEBUG
    return logging.INFO if verbose else logging.WARNING


def configure_logging(
    debug: bool = False, verbose: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    (Re)build the package logger from CLI options.

    Args:
        debug: Show debug records, with source paths and locals in tracebacks
        verbose: Show info records
        log_file: Also write every record, with its context, to this file

    Returns:
        The configured `complexity_lens` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for filter_ in list(logger.filters):
        logger.removeFilter(filter_)
    logger.addFilter(AnalysisContextFilter())

    console_handler = RichHandler(
        console=console,
        show_time=False,
        show_path=debug,
        rich_tracebacks=True,
        tracebacks_show_locals=debug,
        markup=False,
    )
    console_handler.setLevel(_console_level(debug, verbose))
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(Path(log_file))
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger() -> logging.Logger:
    """The package logger, configured with defaults on first use."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        configure_logging()
    return logger


@contextmanager
def log_context(**fields: Optional[str]) -> Iterator[None]:
    """
    Add context fields for the duration of a block.

    Fields given as None keep the enclosing value.

    Example:
        with log_context(document="src/sort.js", language="javascript"):
            log_info("Building inventory")
    """
    context = dict(_analysis_context.get())
    context.update({key: str(value) for key, value in fields.items() if value is not None})
    token = _analysis_context.set(context)
    try:
        yield
    finally:
        _analysis_context.reset(token)


def log_debug(message: str, **fields):
    with log_context(**fields):
        get_logger().debug(message)


def log_info(message: str, **fields):
    with log_context(**fields):
        get_logger().info(message)


def log_warning(message: str, **fields):
    with log_context(**fields):
        get_logger().warning(message)


@contextmanager
def timed(operation: str, level: int = logging.DEBUG) -> Iterator[None]:
    """
    Log how long a block took, or how long it ran before failing.

    Example:
        with log_context(document=path), timed("analysis", logging.INFO):
            ...
    """
    logger = get_logger()
    start_time = time.perf_counter()
    try:
        yield
    except Exception as e:
        duration = format_time(time.perf_counter() - start_time)
        logger.error(f"{operation} failed after {duration}: {e}")
        raise
    logger.log(level, f"{operation} took {format_time(time.perf_counter() - start_time)}")
