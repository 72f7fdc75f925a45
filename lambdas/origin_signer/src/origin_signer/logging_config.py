"""JSON logging configuration for the origin signer."""

import logging
import os
import sys

from pythonjsonlogger import jsonlogger

_LEVEL_NAMES = {
    "WARNING": "warn",
    "CRITICAL": "fatal",
}

# Standard LogRecord attributes that only add noise to CloudWatch lines.
_DROPPED_FIELDS = frozenset(
    {
        "name",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "process",
        "processName",
        "thread",
        "threadName",
        "taskName",
        "created",
        "msecs",
        "relativeCreated",
        "stack_info",
        "args",
        "msg",
        "color_message",
    }
)


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter emitting timestamp, level, message, location and `extra` fields."""

    def add_fields(self, log_record, record, message_dict):
        """Rename and prune fields after the base formatter has populated them.

        Args:
            log_record: Dict to be logged as JSON
            record: LogRecord object from logging framework
            message_dict: Dict containing message and args
        """
        super().add_fields(log_record, record, message_dict)

        levelname = log_record.pop("levelname", record.levelname)
        log_record["level"] = _LEVEL_NAMES.get(levelname, levelname.lower())

        for key in [key for key in log_record if key in _DROPPED_FIELDS]:
            log_record.pop(key)


def _setup_logger() -> logging.Logger:
    """Initialize and configure singleton logger.

    Returns:
        Configured logger with CustomJsonFormatter
    """
    logger = logging.getLogger("origin_signer")

    # Prevent duplicate handlers if module reloaded
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        fmt="%(timestamp)s %(levelname)s %(funcName)s %(lineno)d %(message)s",
        timestamp=True,
    )
    handler.setFormatter(formatter)

    logger.setLevel(os.environ.get("LOG_LEVEL", "INFO").upper())
    logger.addHandler(handler)
    logger.propagate = False

    return logger


LOGGER = _setup_logger()
