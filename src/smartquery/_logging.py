"""Logging configuration for smartquery.

smartquery logs through loguru and is silent by default, as a library should
be. Enable it while debugging a filter:

    from smartquery import LogConfig, disable_logging, enable_logging

    handler_ids = enable_logging(LogConfig(level="DEBUG"))
    ...
    disable_logging(handler_ids)

Only records from the smartquery namespace reach the sinks added here.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Literal

from loguru import logger

type LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


@dataclass(frozen=True, slots=True)
class LogConfig:
    """Logging configuration.

    Attributes:
        level: Minimum log level for the console sink.
        file: Path to a log file. If provided, DEBUG and above is written there.
        console: Whether to log to stderr.
    """

    level: LogLevel = "INFO"
    file: str | None = None
    console: bool = True


def enable_logging(config: LogConfig | bool = True) -> list[int]:
    """Enable smartquery logging and return the handler IDs that were added.

    ``True`` uses LogConfig() defaults. ``False`` changes nothing.
    """
    if config is False:
        return []
    if config is True:
        config = LogConfig()

    logger.enable("smartquery")
    handler_ids: list[int] = []

    if config.console:
        hid = logger.add(
            sys.stderr,
            level=config.level,
            format=CONSOLE_FORMAT,
            colorize=True,
            filter="smartquery",
        )
        handler_ids.append(hid)

    if config.file:
        hid = logger.add(
            config.file,
            level="DEBUG",
            format=FILE_FORMAT,
            filter="smartquery",
        )
        handler_ids.append(hid)

    return handler_ids


def disable_logging(handler_ids: list[int]) -> None:
    """Remove the given handlers and silence smartquery again."""
    for hid in handler_ids:
        logger.remove(hid)
    logger.disable("smartquery")
