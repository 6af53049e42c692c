"""Logging setup of the soil description service."""

import logging
import logging.config

from app.common.config import config


def setup_logging() -> None:
    """Sends the records of the service and of the soil_description package to stdout.

    Needs to be called at the startup of the app. Level and format come from the `SOILDESC_LOGGING_LEVEL` and
    `SOILDESC_LOGGING_FORMAT` settings.
    """
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"service": {"format": config.logging_format}},
            "handlers": {
                "stdout": {"class": "logging.StreamHandler", "formatter": "service", "stream": "ext://sys.stdout"}
            },
            "root": {"level": config.logging_level, "handlers": ["stdout"]},
        }
    )


def get_app_logger() -> logging.Logger:
    """Returns the logger of the service, named after the `SOILDESC_LOGGER_NAME` setting."""
    return logging.getLogger(config.logger_name)
