"""Logging setup for board builds, using loguru."""

import os
import sys
from pathlib import Path

from loguru import logger
from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "OMNIBOARD_LOG_LEVEL"


def setup_logger(
    level: str | None = None,
    log_file: Path | None = None,
    rotation: str = "10 MB",
    retention: str = "1 week",
    use_rich: bool = True,
) -> None:
    """
    Configure loguru sinks for a board build.

    The board core only emits messages (column registration, admission counts
    on ``add``, grouping rebuilds, global configuration changes), almost all at
    DEBUG. Call this once from the entry point that drives the build.

    Args:
        level: Minimum logging level. Defaults to ``$OMNIBOARD_LOG_LEVEL``, then INFO
        log_file: Optional path to log file. If None, only logs to console
        rotation: When to rotate log files (e.g., "10 MB", "1 day")
        retention: How long to keep log files (e.g., "1 week", "30 days")
        use_rich: Whether to log through a Rich handler
    """
    level = (level or os.environ.get(LOG_LEVEL_ENV) or "INFO").upper()

    logger.remove()

    if use_rich:
        handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=level == "DEBUG",
        )
        logger.add(handler, level=level, format="{message}")
    else:
        logger.add(
            sys.stderr,
            format=(
                "<green>{time:HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan> | "
                "<level>{message}</level>"
            ),
            level=level,
            colorize=True,
        )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
            level=level,
            rotation=rotation,
            retention=retention,
        )
        logger.info(f"Logging to file: {log_file}")
