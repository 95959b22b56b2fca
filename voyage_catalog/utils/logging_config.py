"""
Logging configuration for the catalog pipeline.
"""
import os
import logging
from datetime import datetime
import threading

# Track if logging has been initialized
_logging_initialized = False
_logging_lock = threading.Lock()

DEFAULT_LOG_DIR = os.environ.get("CATALOG_LOG_DIR", "logs")
LOG_TO_FILE = os.environ.get("CATALOG_LOG_TO_FILE", "1") not in ("0", "false", "no")


def setup_logging(log_level=logging.INFO, log_dir=DEFAULT_LOG_DIR, log_to_file=LOG_TO_FILE):
    """
    Set up logging configuration.

    Args:
        log_level: Logging level (default: INFO)
        log_dir: Directory for log files (default: CATALOG_LOG_DIR or "logs")
        log_to_file: Whether to write a timestamped log file next to console output

    Returns:
        logging.Logger: Configured logger
    """
    global _logging_initialized

    # Use lock to prevent race conditions when multiple threads try to initialize logging
    with _logging_lock:
        if _logging_initialized:
            logger = logging.getLogger()
            logger.setLevel(log_level)
            for handler in logger.handlers:
                handler.setLevel(log_level)
            return logger

        # Configure root logger
        logger = logging.getLogger()
        logger.setLevel(log_level)

        # Clear any existing handlers
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        # Create a console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        log_file = None
        if log_to_file:
            # Create logs directory if it doesn't exist
            os.makedirs(log_dir, exist_ok=True)

            # Generate a timestamp for the log file
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = os.path.join(log_dir, f"catalog_{timestamp}.log")

            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        if log_file:
            logger.info(f"Logging initialized. Log file: {log_file}")
        else:
            logger.info("Logging initialized (console only).")

        _logging_initialized = True

        return logger


def get_logger(name):
    """
    Get a logger for a specific module.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        logging.Logger: Logger instance
    """
    # Initialize root logger if not done already
    if not _logging_initialized:
        setup_logging()

    return logging.getLogger(name)
