import logging.config
from typing import Optional

from sitegen.config import get_settings


def configure_logging(level: Optional[str] = None) -> None:
    """Install the JSON-line console logging used by the API and every CLI."""
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    # stdout is reserved for sitemap XML and check reports
                    "stream": "ext://sys.stderr",
                },
            },
            "root": {"level": level or get_settings().log_level, "handlers": ["console"]},
        }
    )
