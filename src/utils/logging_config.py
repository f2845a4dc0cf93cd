"""Console logging setup."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)-20s - %(levelname)-8s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Libraries that are chatty at DEBUG level
EXTERNAL_LOGGERS = ("numba", "matplotlib")


def configure_logging(level="INFO", stream=None, suppress_external=True):
    """Send log records of every module to the console.

    Parameters
    ----------
    level : str or int, optional
        Logging level. Default is INFO.
    stream : file-like, optional
        Target stream. Default is stderr.
    suppress_external : bool, optional
        Keep third-party loggers at WARNING. Default is True.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT, stream=stream, force=True)

    if suppress_external:
        for name in EXTERNAL_LOGGERS:
            logging.getLogger(name).setLevel(max(level, logging.WARNING))
