"""User-facing progress feedback for CLI operations.

All output goes to stderr so that stdout carries only the proposed version
(or its JSON form) and stays pipeable.

Usage::

    from apibump.core.progress import spinner, status

    status("Baseline tag: 1.2.3")

    with spinner("Building public interface"):
        run_build()  # structlog console output suppressed during this block

    status("Proposed 1.3.0", style="success")
"""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger

_console = Console(stderr=True)

_STYLES = {
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]![/yellow] ",
    "info": "  ",
    "none": "",
}

_suppress_console_logs = threading.local()


def is_console_suppressed() -> bool:
    """Check if console logging is currently suppressed."""
    return getattr(_suppress_console_logs, "active", False)


@contextmanager
def suppress_console_logs() -> Iterator[None]:
    """Suppress structlog console output; file handlers still receive logs."""
    _suppress_console_logs.active = True
    try:
        yield
    finally:
        _suppress_console_logs.active = False


def _get_logger() -> BoundLogger:
    """Get logger lazily to respect runtime config."""
    from apibump.core.logging import get_logger

    return get_logger("progress")


def _is_tty() -> bool:
    """Check if stderr is a TTY."""
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


def get_console() -> Console:
    """Get the shared Rich console instance."""
    return _console


def status(message: str, *, style: str = "info", indent: int = 0) -> None:
    """Print a styled status message to stderr."""
    prefix = _STYLES.get(style, "")
    padding = " " * indent
    _console.print(f"{padding}{prefix}{message}", highlight=False)

    _get_logger().debug("status", message=message, style=style)


@contextmanager
def spinner(message: str, *, indent: int = 0) -> Iterator[None]:
    """Spinner with log suppression for long-running collaborator steps.

    Non-TTY output (CI logs, pipes) gets a single line instead.
    """
    padding = " " * indent
    if _is_tty():
        with (
            suppress_console_logs(),
            _console.status(f"{padding}[cyan]{message}[/cyan]", spinner="dots"),
        ):
            yield
    else:
        _console.print(f"{padding}{message}...", highlight=False)
        yield


@contextmanager
def task(name: str) -> Iterator[None]:
    """Named task with timing.

    Usage::

        with task("Building interface at 1.2.3"):
            ...
        # Prints: ✓ Building interface at 1.2.3 (41.2s)
    """
    log = _get_logger()
    log.debug("task_start", task=name)
    start = time.perf_counter()

    try:
        with spinner(name):
            yield
    except Exception as e:
        elapsed = time.perf_counter() - start
        status(f"{name} failed", style="error")
        log.error("task_failed", task=name, elapsed_s=elapsed, error=str(e))
        raise

    elapsed = time.perf_counter() - start
    status(f"{name} ({elapsed:.1f}s)", style="success")
    log.debug("task_done", task=name, elapsed_s=elapsed)
