"""Package-wide logger."""
import logging
import sys

LOGGER_NAME = "arithmetic_http_server"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(verbose: bool = False) -> None:
    """
    Attach a stream handler to the package logger.

    Calling it again only updates the level, so handlers are never duplicated.

    :param bool verbose: Log at DEBUG level instead of INFO
    """
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
