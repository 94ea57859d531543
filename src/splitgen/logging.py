"""Log setup for the recommender CLI.

SPLITGEN_LOG_FORMAT (or --log-format) picks "json" or "text". In JSON mode the
engine's ``splitgen_*`` extras (generation, best fitness, split, policy) are
collected under a single "run" object so a search can be followed generation
by generation.
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone

EXTRA_PREFIX = "splitgen_"

# Libraries that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


class JSONFormatter(logging.Formatter):
    """One JSON object per line; splitgen extras go under "run" without the prefix."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        run = {
            key[len(EXTRA_PREFIX):]: value
            for key, value in record.__dict__.items()
            if key.startswith(EXTRA_PREFIX)
        }
        if run:
            entry["run"] = run

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = "".join(traceback.format_exception(*record.exc_info))

        return json.dumps(entry, default=str)


def setup_logging(log_format: str, level: int = logging.INFO) -> None:
    """Route all logging to stderr so stdout stays free for the workout listing."""
    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
