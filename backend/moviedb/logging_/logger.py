import os
import sys
from datetime import datetime
from typing import Any

from loguru import logger
from loguru._logger import Logger

from moviedb.core.config import Settings, settings


def dynamic_formatter(record: Any) -> str:
    base = "[{time:HH:mm:ss}] [{level}] {module}:{function}:{line} - {message}"

    extras = record.get("extra", {})
    if extras:
        # Braces doubled so loguru does not treat extra values as fields
        pairs = ", ".join(f"{key}={value}" for key, value in extras.items())
        base += " (" + pairs.replace("{", "{{").replace("}", "}}") + ")"
    base += "\n"

    if record["exception"]:
        base += "{exception}"

    return base


def dynamic_console_formatter(record: Any) -> str:
    base = "[<green>{time:HH:mm:ss}</green>] <level>[{level}]</level> {module}:{function}:<blue>{line}</blue> - {message}\n"

    if record["exception"]:
        base += "{exception}"

    return base


def _add_file_sinks(log_path: str, debug: bool) -> None:
    if debug:
        logger.add(
            os.path.join(log_path, "debug.log"),
            format=dynamic_formatter,
            level="DEBUG",
            rotation="00:00",  # Rotate daily at midnight
            compression="zip",
            enqueue=True,
            backtrace=True,
            diagnose=True,
            retention="7 days",
        )

    logger.add(
        os.path.join(log_path, "error.log"),
        format=dynamic_formatter,
        level="ERROR",
        rotation="00:00",
        compression="zip",
        enqueue=True,
        backtrace=True,
        diagnose=True,
        retention="30 days",
    )

    logger.add(
        os.path.join(log_path, "info.log"),
        format=dynamic_formatter,
        level="INFO",
        rotation="00:00",
        compression="zip",
        enqueue=True,
    )


def setup_logger(name: str, config: Settings = settings) -> Logger:
    """
    Replace loguru's default handler with a console sink and, when
    LOG_DIR is configured, daily rotated files under LOG_DIR/<date>/<name>/.
    """
    logger.remove()  # Remove default handler

    if config.LOG_DIR:
        today = datetime.now().strftime("%Y-%m-%d")
        log_path = os.path.join(config.LOG_DIR, today, name)
        os.makedirs(log_path, exist_ok=True)
        _add_file_sinks(log_path, config.DEBUG)

    logger.add(
        sys.stderr,
        format=dynamic_console_formatter,
        level="DEBUG" if config.DEBUG else "INFO",
        backtrace=True,
        diagnose=config.DEBUG,
        colorize=True,
    )

    return logger  # type: ignore
