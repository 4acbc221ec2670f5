"""
Logging configuration for the Paradex auth client.

Console and rotating-file handlers, all passing through credential redaction.
"""

import copy
import logging
import logging.config
from typing import Optional


DEFAULT_LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "redact_credentials": {
            "()": "paradex_auth.utils.structured_logging.CredentialRedactionFilter"
        }
    },
    "formatters": {
        "standard": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S"
        },
        "detailed": {
            "format": (
                "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d "
                "- %(message)s (%(funcName)s)"
            ),
            "datefmt": "%Y-%m-%d %H:%M:%S"
        },
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s"
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "standard",
            "filters": ["redact_credentials"],
            "stream": "ext://sys.stdout"
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "detailed",
            "filters": ["redact_credentials"],
            "filename": "paradex_auth.log",
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
            "delay": True
        }
    },
    "loggers": {
        "paradex_auth": {
            "level": "INFO",
            "handlers": ["console", "file"],
            "propagate": False
        }
    },
    "root": {
        "level": "WARNING",
        "handlers": ["console"]
    }
}


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    json_format: bool = False
) -> dict:
    """
    Setup logging configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
        json_format: Use JSON formatting

    Returns:
        The applied dictConfig
    """
    config = copy.deepcopy(DEFAULT_LOGGING_CONFIG)

    if level:
        config["loggers"]["paradex_auth"]["level"] = level.upper()

    if log_file:
        config["handlers"]["file"]["filename"] = log_file

    if json_format:
        config["handlers"]["console"]["formatter"] = "json"
        config["handlers"]["file"]["formatter"] = "json"

    logging.config.dictConfig(config)
    return config


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the paradex_auth namespace."""
    return logging.getLogger(f"paradex_auth.{name}")
