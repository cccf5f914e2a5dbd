"""
JSON run logs for park linking scripts.

Console output goes through the root handler configured by
``park_graph.cli.setup_logging``. This module adds an optional
machine-readable file per run: one JSON object per line, carrying the run
context (script, database, linking parameters) and, on the completion
record, the linking summary.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping

# Run context copied from log records when present
RUN_CONTEXT_FIELDS = ("script", "database", "threshold", "max_distance_km")
SUMMARY_FIELD = "summary"
COMPLETION_MESSAGE = "Linking complete"


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with run context and summary payload."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in RUN_CONTEXT_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                entry[key] = value

        summary = getattr(record, SUMMARY_FIELD, None)
        if summary is not None:
            entry[SUMMARY_FIELD] = dict(summary)

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def add_json_run_log(logger: logging.Logger, log_dir: Path, script_name: str) -> Path:
    """
    Attach a JSON-lines file handler to ``logger``.

    Args:
        logger: Script logger; records still propagate to the console handler
        log_dir: Directory for the run log (created if missing)
        script_name: Prefix of the log file name

    Returns:
        Path of the new ``.jsonl`` file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f"{script_name}_{timestamp}.jsonl"

    handler = logging.FileHandler(log_file)
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    return log_file


def log_run_complete(logger: logging.Logger, summary: Mapping[str, Any], **context: Any) -> None:
    """Emit the completion record: the summary payload plus run context."""
    logger.info(COMPLETION_MESSAGE, extra={SUMMARY_FIELD: dict(summary), **context})
