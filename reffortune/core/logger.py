"""Loguru sinks for REFFORTUNE.

Modules log an event name with keyword fields, e.g.
``logger.info("rag_retrieval", query=query, chunks_returned=3)``. The fields
land in ``record["extra"]`` and are rendered after the message.
"""

import sys
from pathlib import Path

from loguru import logger

from reffortune.config.settings import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level> {extra}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} {extra}"


def setup_logger(
    level: str | None = None,
    log_file: str | Path | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    *,
    serialize: bool = False,
) -> None:
    """Replace all loguru sinks with a stderr sink and an optional file sink.

    Args:
        level: Minimum level (defaults to ``settings.log_level``)
        log_file: File sink path (defaults to ``settings.log_file``; None disables it)
        rotation: File rotation trigger (e.g., "10 MB", "1 day")
        retention: How long rotated files are kept (e.g., "7 days")
        serialize: Write the file sink as one JSON record per line
    """
    level = (level or settings.log_level).upper()
    log_file = log_file or settings.log_file

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
            serialize=serialize,
            backtrace=True,
            diagnose=False,
        )

    logger.debug("logger_configured", level=level, log_file=str(log_file) if log_file else None)


setup_logger()
