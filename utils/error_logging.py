"""
Error logging configuration for the configuration registry.

This module sets up a dedicated logger for registry errors and conversion
diagnostics so operators can spot schema drift without the reading call
site ever failing.
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union


CONFIG_ERROR_LOGGER_NAME = 'errors.config'


def setup_error_loggers(log_dir: Optional[Union[str, Path]] = None) -> logging.Logger:
    """
    Set up the dedicated logger for configuration errors.

    Diagnostics always go to stderr. A rotating file log is added only when
    a log directory is given; nothing is written to disk otherwise.

    Args:
        log_dir: Optional directory for a persistent ``config_errors.log``

    Returns:
        logging.Logger: the configured ``errors.config`` logger
    """
    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    config_logger = logging.getLogger(CONFIG_ERROR_LOGGER_NAME)
    config_logger.setLevel(logging.WARNING)

    # Repeated setup must not stack duplicate stderr handlers
    if not any(getattr(h, '_zirv_stderr', False) for h in config_logger.handlers):
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(detailed_formatter)
        stream_handler._zirv_stderr = True
        config_logger.addHandler(stream_handler)

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path / 'config_errors.log',
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5
        )
        file_handler.setFormatter(detailed_formatter)
        config_logger.addHandler(file_handler)

    return config_logger


# Create singleton instance
config_error_logger = setup_error_loggers()
