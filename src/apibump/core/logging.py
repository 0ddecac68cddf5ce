"""Logging for a single apibump run.

Every event is a structlog event rendered by stdlib handlers. A run id is
bound once per CLI invocation so the lines of one proposal can be picked out
of a shared log file. stdout belongs to the proposed version, so console
output defaults to stderr and goes quiet while a spinner owns the terminal.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, TextIO
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from apibump.config.models import LoggingConfig, LogOutputConfig

_RUN_ID_KEY = "run_id"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
]


def get_run_id() -> str | None:
    value = structlog.contextvars.get_contextvars().get(_RUN_ID_KEY)
    return str(value) if value is not None else None


def set_run_id(run_id: str | None = None) -> str:
    """Bind the run id to every event logged from here on."""
    rid = run_id or uuid4().hex[:12]
    structlog.contextvars.bind_contextvars(**{_RUN_ID_KEY: rid})
    return rid


def clear_run_id() -> None:
    structlog.contextvars.unbind_contextvars(_RUN_ID_KEY)


def _to_level(name: str | None, fallback: int) -> int:
    if not name:
        return fallback
    return logging.getLevelNamesMapping().get(name.upper(), fallback)


class ConsoleSuppressingFilter(logging.Filter):
    """Drop terminal records while a spinner is on screen.

    Only attached to stdout/stderr handlers; log files see every record.
    """

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: ARG002
        from apibump.core.progress import is_console_suppressed

        return not is_console_suppressed()


def configure_logging(
    *,
    config: LoggingConfig | None = None,
    json_format: bool = False,
    level: str = "INFO",
) -> None:
    """(Re)configure logging for this process.

    The CLI calls this twice: once with ``level`` before configuration is
    loaded, then with the loaded ``config``. A config replaces the simple
    parameters entirely.
    """
    from apibump.config.models import LoggingConfig, LogOutputConfig

    if config is None:
        config = LoggingConfig(
            level=level,
            outputs=[LogOutputConfig(format="json" if json_format else "console")],
        )

    root_level = _to_level(config.level, logging.INFO)

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Reconfiguration must reach loggers created at import time
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for old in root.handlers:
        old.close()
    root.handlers.clear()
    root.setLevel(root_level)

    for output in config.outputs:
        handler = _build_handler(output)
        handler.setLevel(_to_level(output.level, root_level))
        root.addHandler(handler)


def _build_handler(output: LogOutputConfig) -> logging.Handler:
    """Handler for one configured output: a terminal stream or an append-mode file."""
    handler: logging.Handler
    stream: TextIO | None = {"stderr": sys.stderr, "stdout": sys.stdout}.get(output.destination)
    if stream is not None:
        handler = logging.StreamHandler(stream)
        handler.addFilter(ConsoleSuppressingFilter())
    else:
        path = Path(output.destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, mode="a")

    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=stream is not None and stream.isatty(),
            pad_event_to=0,
            pad_level=False,
        )
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=_SHARED_PROCESSORS,
        )
    )
    return handler


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger=name)
    return logger  # type: ignore[no-any-return]
