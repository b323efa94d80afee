import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(log_level: str = "INFO"):
    """Send all logs to stderr, stdout is reserved for MCP messages."""
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper()))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    if not logger.handlers:
        logger.addHandler(handler)

    # one line per request is too chatty for a stdio server
    logging.getLogger("httpx").setLevel(logging.WARNING)
