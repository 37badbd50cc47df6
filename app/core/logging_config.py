"""
Logging configuration for the API
"""
import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name="app", level="INFO"):
    """Setup logger with consistent formatting"""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    return logger


def log_user_action(logger, user_id, action, details=None):
    """Log user actions for audit trail"""
    log_msg = f"User {user_id} performed: {action}"
    if details:
        log_msg += f" | Details: {details}"
    logger.info(log_msg)
