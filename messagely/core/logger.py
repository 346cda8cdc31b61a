"""
Centralized logging configuration for Messagely
"""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_DIR = Path(__file__).parent.parent.parent / "logs"


def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger instance.

    Handlers are attached once on the root logger by configure_app_logging(),
    so module loggers only need a name.

    Args:
        name: Logger name (typically __name__ of the calling module)
    """
    return logging.getLogger(name)


def configure_app_logging(
    level: int = logging.INFO,
    log_to_file: bool = True,
    log_file: str = "messagely.log",
) -> None:
    """
    Configure application-wide logging settings.

    This should be called once at application startup.

    Args:
        level: Root logging level (default: INFO)
        log_to_file: Whether to enable file logging (default: True)
        log_file: Log file name (default: "messagely.log")
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            LOG_DIR / log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
