"""
Unified logging utilities for the astroconst package.

Exports:
    - logger: Global Loguru logger (ready for use/import).
    - configure_console: (Re)install the stderr sink at a given level.
    - setup_logfile: Add file logging with rotation/compression.
    - setup_json_logfile: Add a JSON-format log file for machine parsing.
"""

import os
import sys
from typing import Optional

from loguru import logger

__all__ = [
    "logger",
    "configure_console",
    "setup_logfile",
    "setup_json_logfile",
    "LOG_LEVEL_ENV",
]

LOG_LEVEL_ENV = "ASTROCONST_LOG_LEVEL"

_console_sink_id: Optional[int] = None


def _stderr_sink(message) -> None:
    # Looked up per message so redirected/captured stderr is honoured
    sys.stderr.write(message)


def _resolve_level(level: Optional[str]) -> str:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    level = str(level).upper()
    try:
        logger.level(level)
    except ValueError:
        level = "INFO"
    return level


def configure_console(level: Optional[str] = None) -> int:
    """
    Replace the console (stderr) sink.

    Args:
        level (str, optional): Logging level. If None, reads ASTROCONST_LOG_LEVEL,
            else INFO. Unknown level names fall back to INFO.

    Returns:
        int: Loguru handler id of the new sink.
    """
    global _console_sink_id
    if _console_sink_id is None:
        # First call drops loguru's default handler
        logger.remove()
    else:
        logger.remove(_console_sink_id)
    _console_sink_id = logger.add(
        _stderr_sink,
        level=_resolve_level(level),
        colorize=sys.stderr.isatty(),
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    return _console_sink_id


def setup_logfile(
    log_path: str,
    rotation: str = "10 MB",
    retention: str = "10 days",
    compression: str = "zip",
    level: str = "INFO",
    colorize: bool = False
) -> int:
    """
    Add a rotating file handler to the global logger.

    Args:
        log_path (str): Path to the log file.
        rotation (str): Size or time string for log rotation.
        retention (str): How long to keep old logs.
        compression (str): Compression method for rotated logs.
        level (str): Logging level (DEBUG, INFO, etc.).
        colorize (bool): Colorize file output (default: False).
    """
    log_dir = os.path.dirname(log_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    sink_id = logger.add(
        log_path,
        rotation=rotation,
        retention=retention,
        compression=compression,
        level=level.upper(),
        colorize=colorize,
        backtrace=True,
        diagnose=False,
    )
    logger.info(f"Loguru file logging initialized: {log_path}")
    return sink_id


def setup_json_logfile(log_path: str, **kwargs) -> int:
    """
    Add a JSON-format log file (for machine parsing).
    Args:
        log_path (str): Path to JSON log file.
        **kwargs: Passed to logger.add().
    """
    sink_id = logger.add(
        log_path,
        serialize=True,
        **kwargs
    )
    logger.info(f"Loguru JSON logging initialized: {log_path}")
    return sink_id
