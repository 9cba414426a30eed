"""
Logging configuration for the analytics service.
"""
import logging
import threading

_logging_initialized = False
_logging_lock = threading.Lock()


def setup_logging(log_level=logging.INFO):
    """
    Configure the root logger with a single console handler.

    Args:
        log_level: Level name or number (default: INFO)

    Returns:
        logging.Logger: The root logger
    """
    global _logging_initialized

    with _logging_lock:
        logger = logging.getLogger()
        if _logging_initialized:
            return logger

        logger.setLevel(log_level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(
            logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        )
        logger.addHandler(console_handler)

        _logging_initialized = True
        return logger
