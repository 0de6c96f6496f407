"""Logging utilities backed by rich for the checkstyle-report CLI.

Each module logs through its own named logger with a rich handler;
nothing configures the root logger.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("Decoded %d files", count)
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from common.env import env

# Shared console so log records and report output interleave correctly
console = Console()
error_console = Console(stderr=True)


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        markup=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a configured logger with rich output.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses LOG_LEVEL from the environment or INFO.
        show_time: Show timestamp in log output
        show_path: Show file path in log output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel((level or env.log_level()).upper())
    logger.addHandler(_rich_handler(show_time=show_time, show_path=show_path))

    # Keep propagation on so pytest's caplog sees the records
    logger.propagate = True

    return logger


def success(message: str) -> None:
    """Print a success message with a green checkmark."""
    console.print(f"[green]✓[/green] {message}")


def error(message: str) -> None:
    """Print an error message with a red cross to stderr."""
    error_console.print(f"[red]✗[/red] {message}")
