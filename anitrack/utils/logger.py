import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logging(level=logging.INFO, log_file: Optional[Path] = None):
    """
    Sets up a centralized logging system for anitrack.
    Logs to console and optionally to a file.
    """
    # Define formatting
    log_format = '%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d) - %(message)s'
    formatter = logging.Formatter(log_format)

    # Root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    # Console Handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File Handler
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Silence noisy third-party loggers
    logging.getLogger("dotenv").setLevel(logging.WARNING)

    logging.info(f"Logging initialized. Level: {logging.getLevelName(level)}, File: {log_file}")


def get_logger(name):
    """Returns a logger with the given name."""
    return logging.getLogger(name)
