"""Process-wide logging setup.

One stdout handler on the root logger; uvicorn's loggers are routed to the
same handler so access and application logs share a format.
"""
import logging
from logging.config import dictConfig

def _dict_config(level: str) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": "%(asctime)s %(levelname)s:%(name)s:%(message)s"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "default",
                "stream": "ext://sys.stdout",
            }
        },
        "root": {"level": level, "handlers": ["console"]},
        "loggers": {
            "uvicorn": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.error": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.access": {"level": level, "handlers": ["console"], "propagate": False},
        },
    }

def configure_logging(level: str = "INFO") -> None:
    """Configure logging once; a root logger that already has handlers is left alone."""
    if logging.getLogger().handlers:
        return
    dictConfig(_dict_config(level.upper()))
