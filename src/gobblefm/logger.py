import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

import colorlog

LOG_COLORS = {
    'DEBUG': 'bold_blue',
    'INFO': 'bold_green',
    'WARNING': 'bold_yellow',
    'ERROR': 'bold_red',
    'CRITICAL': 'bold_purple'
}


def setup_logging(logger_name: Optional[str] = None) -> logging.Logger:
    """Configure console and optional rotating file logging for applications.

    The library itself only emits records; call this from application code
    to see them. Calling it again leaves existing handlers in place.

    Environment:
        GOBBLEFM_LOG_LEVEL: Level name, defaults to INFO
        GOBBLEFM_LOG_FILE: Path of a rotating log file (optional)
        LOG_FILE_MAX_BYTES: Rotation size, defaults to 10 MB
        LOG_FILE_BACKUP_COUNT: Rotated files kept, defaults to 5

    Args:
        logger_name: Logger to configure, the root logger by default

    Returns:
        The configured logger
    """
    log_level = os.getenv('GOBBLEFM_LOG_LEVEL', 'INFO').upper()
    log_file = os.getenv('GOBBLEFM_LOG_FILE')
    max_bytes = int(os.getenv('LOG_FILE_MAX_BYTES', '10485760'))  # 10 MB
    backup_count = int(os.getenv('LOG_FILE_BACKUP_COUNT', '5'))

    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_formatter = colorlog.ColoredFormatter(
            "%(log_color)s%(levelname)s:%(name)s:%(message)s",
            log_colors=LOG_COLORS
        )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

        if log_file:
            file_handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count)
            file_formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s - (%(filename)s:%(lineno)d)'
            )
            file_handler.setFormatter(file_formatter)
            logger.addHandler(file_handler)

    return logger
