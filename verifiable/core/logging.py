"""JSON-formatted logging for the verifiable credential tools.

The library only emits records through module loggers; configure_logging
is called by the CLI, or by an application that wants the same format.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional

# Extra record attributes copied into the JSON payload when present
EXTRA_FIELDS = ("credential_id", "schema_url", "schema_type")


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        payload = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for k in EXTRA_FIELDS:
            if hasattr(record, k):
                payload[k] = getattr(record, k)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(
    log_file: Optional[str] = None,
    log_level: Optional[str] = None,
):
    """Configure root logging with the JSON formatter.

    Args:
        log_file: Path to an additional log file. Defaults to the
            VERIFIABLE_LOG_FILE env var; no file handler when unset.
        log_level: Log level. Defaults to VERIFIABLE_LOG_LEVEL env var or 'INFO'.
    """
    # Console handler on stderr so command output on stdout stays parseable
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(JsonFormatter())
    handlers = [console_handler]

    log_file = log_file or os.getenv("VERIFIABLE_LOG_FILE")
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setFormatter(JsonFormatter())
        handlers.append(file_handler)

    root = logging.getLogger()
    log_level = (log_level or os.getenv("VERIFIABLE_LOG_LEVEL", "INFO")).upper()
    root.setLevel(getattr(logging, log_level, logging.INFO))
    root.handlers = handlers
