"""JSON log formatter for structured logging output."""

import json
import logging
from datetime import UTC, datetime

# Request context attached by the client core through ``extra=``
REQUEST_FIELDS = ("method", "url", "status")


class JSONLogFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Output format::

        {"timestamp": "...", "level": "WARNING", "service": "spotify-catalog",
         "logger": "spotify_catalog.core", "message": "...", "method": "GET",
         "url": "...", "status": 404}
    """

    def __init__(self, service: str = "spotify-catalog") -> None:
        super().__init__()
        self._service = service

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "service": self._service,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in REQUEST_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)
