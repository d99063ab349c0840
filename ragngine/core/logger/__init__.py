"""
ragngine logger: console + rotating JSON file.

Usage:
    from ragngine.core.logger import LoggerConfig, configure, get_logger

    configure(LoggerConfig(level="DEBUG", log_dir="/var/log/ragngine"))
    # or from env: LOG_LEVEL, LOG_DIR, LOG_FILE_BASENAME, LOG_MAX_BYTES, ...
    configure()

    logger = get_logger(__name__)
    logger.info("Started")
"""
from ragngine.core.logger.config import LoggerConfig
from ragngine.core.logger.formatters import JsonFormatter, PlainConsoleFormatter
from ragngine.core.logger.setup import (
    build_console_handler,
    build_rotating_file_handler,
    configure,
    get_logger,
)

__all__ = [
    "LoggerConfig",
    "JsonFormatter",
    "PlainConsoleFormatter",
    "configure",
    "get_logger",
    "build_rotating_file_handler",
    "build_console_handler",
]
