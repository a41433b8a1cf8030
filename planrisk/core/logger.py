"""Logging for planrisk.

One call to setup_logger configures every sink. The API configures it from
Settings at import; the CLI configures it per command so its stdout stays
clean for --json output.
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(
    level: str = "INFO",
    log_file: str | Path | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    serialize: bool = False,
) -> None:
    """Replace all loguru sinks with a stderr sink and an optional file sink.

    Args:
        level: Minimum level for every sink
        log_file: Optional log file path; parent directories are created
        rotation: File rotation size or interval (e.g., "10 MB", "1 day")
        retention: How long rotated files are kept (e.g., "7 days")
        serialize: Write one JSON record per line instead of formatted text
    """
    logger.remove()

    if serialize:
        logger.add(sys.stderr, level=level, serialize=True)
    else:
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
            encoding="utf-8",
        )

    logger.debug(f"Logging configured: level={level} file={log_file} serialize={serialize}")
