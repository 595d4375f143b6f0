"""Logging setup shared by the API process and the maintenance scripts."""
import logging.config
from typing import Optional

from attendance.config import settings


def configure_logging(level: Optional[str] = None) -> None:
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "[%(asctime)s] %(levelname)s %(name)s: %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
            },
        },
        "loggers": {
            "": {
                "handlers": ["console"],
                "level": (level or settings.LOG_LEVEL).upper(),
            },
        },
    })
