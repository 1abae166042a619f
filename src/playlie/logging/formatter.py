"""JSON log formatter for the command-line drivers."""

import json
import logging
from datetime import UTC, datetime

# Record attributes set through ``extra=`` by playlie.lastfm.client and playlie.cli
CONTEXT_FIELDS = ("lastfm_operation", "http_status")


class JSONLogFormatter(logging.Formatter):
    """Render each record as one JSON object per line.

    Client records carry the public operation that produced them and, once a
    response has arrived, its HTTP status::

        {"timestamp": "...", "level": "WARNING", "service": "playlie",
         "logger": "playlie.lastfm.client", "message": "Last.fm API error 10 ...",
         "lastfm_operation": "similar_tracks", "http_status": 403}
    """

    def __init__(self, service: str = "playlie") -> None:
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
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)
