"""Logging configuration."""

import sys

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL, LOG_TO_FILE

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{extra[cmd]}</cyan> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {extra[cmd]} | {name}:{function}:{line} | {message}"


def setup_logging(level: str = LOG_LEVEL, to_file: bool = LOG_TO_FILE, cmd: str = "vote"):
    """Console sink at `level`, plus a debug file sink per day when `to_file` is set.

    Every record carries the CLI command in `extra["cmd"]`.
    """
    logger.remove()
    logger.configure(extra={"cmd": cmd})

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level.upper(), colorize=True)

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / "vote_{time:YYYY-MM-DD}.log",
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="00:00",
            retention="14 days",
            compression="gz",
        )
        logger.debug("Logging {} to {}", cmd, LOG_DIR)

    return logger
