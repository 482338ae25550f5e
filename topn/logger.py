import logging

LOGGER_NAME = "topn"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LEVEL = logging.WARNING
VERBOSE_LEVEL = logging.INFO


def configure(verbose: bool = False) -> logging.Logger:
    """Set up stderr logging for a command-line run and return the package logger."""
    level = VERBOSE_LEVEL if verbose else DEFAULT_LEVEL
    logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    log = logger()
    log.setLevel(level)
    return log


def logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)
