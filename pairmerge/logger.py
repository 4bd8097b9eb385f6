import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

_logger = logging.getLogger("pairmerge")


def configure(level=logging.INFO):
    """Log to console. Called by scripts, never on import."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def info(*args):
    _logger.info(*args)


def debug(*args):
    _logger.debug(*args)
