"""
Formatters for log output.

``StructuredFormatter`` writes one JSON object per record for log shippers;
the console format and the rich handler are meant to be read by people.
"""

import json
import logging
from datetime import datetime, timezone

from rich.console import Console
from rich.logging import RichHandler

# Attributes passed through ``extra=`` that JSON records keep
RECORD_FIELDS = ("operation", "error_code", "correlation_id")

CONSOLE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s | %(message)s"
CONSOLE_DATE_FORMAT = "%H:%M:%S"


class StructuredFormatter(logging.Formatter):
    """One JSON object per line, tagged with the emitting service."""

    def __init__(self, service_name: str, version: str):
        super().__init__()
        self.service = {"name": service_name, "version": version}

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service,
        }
        for field in RECORD_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value
        if record.exc_info:
            entry["error"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def console_formatter() -> logging.Formatter:
    return logging.Formatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT)


def rich_handler() -> RichHandler:
    """Colourised stderr output; messages are printed as-is, never parsed as markup."""
    return RichHandler(
        console=Console(stderr=True),
        markup=False,
        show_path=False,
        rich_tracebacks=True,
    )
