import os
import sys
from pathlib import Path

from loguru import logger

from enhanced_file.define import (
    DEFAULT_LOG_LEVEL,
    ENCODING,
    LOG_DIR_ENV,
    LOG_FILENAME,
    LOG_LEVEL_ENV,
    LOG_ROTATION,
)


def setup_logging(
    level: str | None = None,
    log_dir: str | Path | None = None,
) -> list[int]:
    """Replace loguru's default handler with the enhanced file sinks.

    Args:
        level: Minimum level, falls back to `ENHANCED_FILE_LOG_LEVEL`.
        log_dir: Directory of the rotating log file, falls back to
            `ENHANCED_FILE_LOG_DIR`. No file sink when both are unset.

    Returns:
        The ids of the added handlers.
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    if log_dir is None:
        log_dir = os.getenv(LOG_DIR_ENV)

    logger.remove()
    handler_ids = [logger.add(sys.stderr, level=level.upper())]

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        handler_ids.append(
            logger.add(
                log_path / LOG_FILENAME,
                level=level.upper(),
                rotation=LOG_ROTATION,
                encoding=ENCODING,
            )
        )

    logger.debug(f"Logging configured at level {level.upper()}.")
    return handler_ids
