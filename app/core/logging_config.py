import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stream handler to the ``app`` logger once and set its level."""
    logger = logging.getLogger("app")
    logger.setLevel(level.upper())
    if not any(getattr(handler, "_app_handler", False) for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._app_handler = True
        logger.addHandler(handler)
    return logger
