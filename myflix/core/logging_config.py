"""
Logging Setup
=============

Configures the root logger once for the whole application.
"""
import logging
import sys

from myflix.core.config import get_settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging() -> None:
    """
    Configure the root logger from LOG_LEVEL.

    Uses a single stdout handler so container runtimes capture the output.
    """
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # uvicorn's own access log duplicates the request-logging middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)
