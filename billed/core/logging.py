"""Logging setup: JSON lines on stdout, one handler per process."""

import logging
import sys
from pythonjsonlogger import jsonlogger

from billed.config import settings

# Workflow fields components attach through extra=; copied to the JSON line when present
_WORKFLOW_FIELDS = ("bill_id", "file_name", "status_code")


class BillsJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["environment"] = settings.ENVIRONMENT
        log_record["app_name"] = settings.APP_NAME
        for field in _WORKFLOW_FIELDS:
            if hasattr(record, field):
                log_record[field] = getattr(record, field)


class _BilledHandler(logging.StreamHandler):
    """Marks the handler installed by setup_logging so it is installed only once."""


def setup_logging() -> None:
    """
    Send application logs to stdout, as JSON unless LOG_FORMAT says otherwise.
    Calling it again replaces the handler installed by the previous call.
    """
    handler = _BilledHandler(sys.stdout)

    if settings.LOG_FORMAT == "json":
        formatter = BillsJsonFormatter(
            fmt="%(asctime)s %(level)s %(name)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for existing in [h for h in root_logger.handlers if isinstance(h, _BilledHandler)]:
        root_logger.removeHandler(existing)
    root_logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper()))
    root_logger.addHandler(handler)

    # Request lines from the HTTP client are noise at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
