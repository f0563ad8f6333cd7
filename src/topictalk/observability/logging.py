"""Logging configuration for TopicTalk."""

import logging
import logging.config
from typing import Any


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """
    Configure logging for TopicTalk.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path of a rotating JSON log file
    """
    level = level.upper()
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structured": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "structured",
                "level": level,
            },
        },
        "loggers": {
            "topictalk": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": "WARNING",
        },
    }

    if log_file:
        config["formatters"]["json"] = {
            "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
        }
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": log_file,
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
            "formatter": "json",
            "level": level,
        }
        config["loggers"]["topictalk"]["handlers"].append("file")

    logging.config.dictConfig(config)


class ContextLogger:
    """Logger with contextual information."""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def with_context(self, **context: Any) -> logging.LoggerAdapter:
        """
        Add context to log messages.

        Args:
            **context: Context key-value pairs

        Returns:
            LoggerAdapter with context
        """
        return logging.LoggerAdapter(self.logger, context)
