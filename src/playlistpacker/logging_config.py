"""Logging configuration for the playlistpacker package."""

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(debug: bool = False) -> None:
    """Configure logging for the package.

    Args:
        debug: Log at DEBUG level instead of INFO
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        force=True,  # Force reconfiguration to avoid duplicates
    )
    # googleapiclient logs every discovery/cache lookup at INFO
    logging.getLogger("googleapiclient.discovery_cache").setLevel(logging.ERROR)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Name for the logger, typically __name__

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
