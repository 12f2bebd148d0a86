# backend/withapp/core/log.py
import logging.config

from withapp.core.config import settings


def configure_logging() -> None:
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)-7s %(name)s - %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
        },
        "root": {"handlers": ["console"], "level": settings.LOG_LEVEL},
        "loggers": {
            # Requêtes SQL seulement en DEBUG
            "sqlalchemy.engine": {"level": "INFO" if settings.DEBUG else "WARNING"},
        },
    })
