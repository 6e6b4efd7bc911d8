"""Logging setup for the CLI"""

from logging.config import dictConfig


def setup_logging(level: str = "WARNING") -> None:
    """Send all records at or above level to stderr with a plain formatter."""
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "plain": {
                    "format": "%(asctime)s %(levelname)-5s %(name)s: %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                },
            },
            "handlers": {
                "stream": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "level": level,
                    "formatter": "plain",
                }
            },
            "root": {"level": level, "handlers": ["stream"]},
        }
    )
