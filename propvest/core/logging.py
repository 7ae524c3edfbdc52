"""structlog setup for propvest.

Events go to stdout, plus a rotating file under logs/ outside test runs.
Level and renderer come from AppSettings (PROPVEST_LOG_LEVEL,
PROPVEST_JSON_LOGS) unless passed explicitly.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any

import structlog

LOG_FILE = Path(__file__).resolve().parents[2] / "logs" / "propvest.log"
LOG_FILE_MAX_BYTES = 2 * 1024 * 1024
LOG_FILE_BACKUPS = 5

_configured: bool = False


def _under_pytest() -> bool:
    return "pytest" in sys.modules


def _handlers() -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if _under_pytest():
        return handlers
    try:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                LOG_FILE,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )
    except OSError as e:
        # Read-only install: keep stdout only
        print(f"propvest: file logging disabled ({e})", file=sys.stderr)
    return handlers


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Install the stdlib handlers and the structlog processor chain.

    Args:
        level: Level name; unknown names fall back to INFO.
        json_output: JSON lines instead of the console renderer.
    """
    global _configured

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=_handlers(),
        force=True,
    )

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Logger for a propvest module, configuring logging on first use."""
    if not _configured:
        from propvest.core.settings import get_settings

        settings = get_settings()
        configure_logging(level=settings.log_level, json_output=settings.json_logs)

    logger = structlog.get_logger()
    return logger.bind(logger_name=name) if name else logger
