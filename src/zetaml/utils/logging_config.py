"""Logging configuration for applications using zetaml.

The library only emits records through module loggers under ``zetaml``.
Applications and the example drivers call ``setup_logging`` to decide where
they go; the root logger is left to the application.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER_NAME = "zetaml"
LOG_FILE_NAME = "zetaml.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_dir: Optional[Path] = None,
    log_level: int = logging.INFO,
) -> logging.Logger:
    """Configure the ``zetaml`` package logger.

    Handlers installed by an earlier call are closed and replaced, so calling
    this twice does not duplicate output.

    Args:
        log_dir: Optional directory to save log files
        log_level: Logging level (default: INFO)

    Returns:
        The configured package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler()]
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_dir / LOG_FILE_NAME))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    package_logger.setLevel(log_level)
    return package_logger
