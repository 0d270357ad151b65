import json
import logging
import sys
import time
from typing import Any, Dict

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        base: Dict[str, Any] = {
            "timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        for key, value in getattr(record, "extra_data", {}).items():
            base[key] = value
        return json.dumps(base, default=str)


def setup_logging(level: str = "INFO", fmt: str = "plain") -> logging.Logger:
    # Log lines go to stderr so they interleave with the child tool's own
    # diagnostics without polluting its stdout.
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter() if fmt == "json" else logging.Formatter(PLAIN_FORMAT))
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)
    return logging.getLogger("kamu_bootstrap")


def log_with_extra(logger: logging.Logger, level: int, message: str, **extra: Any) -> None:
    logger.log(level, message, extra={"extra_data": extra})
