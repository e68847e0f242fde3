"""
Log setup for the local Istek API process.

The desktop shell captures the API's stdout, so every logger writes one
pipe-separated line there. Only method, path and error code/message of a
failed request are logged (see the error handlers); request and response
bodies may hold environment variables and integration secrets and are
never logged.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers held at WARNING regardless of the configured level.
QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error", "slowapi")


def configure_logging(level: str = "INFO") -> None:
    """Route all API logging to stdout at ``level``.

    Safe to call more than once: ``create_app`` calls it for every app it
    builds and the previous handlers are replaced.

    Args:
        level: Level name from ``settings.log_level``; unknown names mean INFO.
    """
    root_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=root_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(root_level, logging.WARNING))
