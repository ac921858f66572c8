# src/brokerbot/logging_utils.py
import json
import logging
import logging.handlers
import sys
import time
from typing import Any, Dict

from .config import get_settings

# Keys commonly present on a LogRecord that we don't want to echo as "extra"
_EXCLUDE_KEYS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
}


def _jsonify(value: Any) -> Any:
    """Return a JSON-serializable representation of `value`."""
    try:
        json.dumps(value)
        return value
    except (TypeError, ValueError):
        return str(value)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base: Dict[str, Any] = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(record.created)),
            "level": record.levelname,
            "name": record.name,
            "msg": record.getMessage(),
        }
        # Merge any "extra" attributes that were added to the record
        for k, v in record.__dict__.items():
            if k not in _EXCLUDE_KEYS and k not in base and not k.startswith("_"):
                base[k] = _jsonify(v)
        if record.exc_info:
            base["exc"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


class PlainFormatter(logging.Formatter):
    """Human-readable single-line log formatter with colourised levels."""

    LEVEL_COLOURS = {
        "DEBUG": "\033[36m",  # cyan
        "INFO": "\033[32m",  # green
        "WARNING": "\033[33m",  # yellow
        "ERROR": "\033[31m",  # red
        "CRITICAL": "\033[35m",  # magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        ts = time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(record.created))
        level = record.levelname
        extras: list[str] = []
        for k, v in record.__dict__.items():
            if k not in _EXCLUDE_KEYS and k != "message" and not k.startswith("_"):
                extras.append(f"{k}={_jsonify(v)}")
        extra_str = " " + " ".join(extras) if extras else ""
        colour = self.LEVEL_COLOURS.get(level, "")
        reset = self.RESET if colour else ""
        return f"{ts} {colour}{level:<8}{reset} {record.name}: {record.getMessage()}{extra_str}"


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for BrokerBot.

    When LOG_PLAIN is set to 1 in the environment (see Settings.log_plain), the
    console output uses a human-readable single-line format with colourised
    levels; otherwise console logs are JSON lines. Regardless of this setting,
    a JSON log is written to a rotating file in ``<DATA_DIR>/logs``. The
    ``LOG_LEVEL`` environment variable takes precedence over ``level``.
    """
    settings = get_settings()
    level_upper = (settings.log_level or level or "INFO").upper()

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level_upper)

    try:
        log_dir = settings.data_dir / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "bot.jsonl",
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(JsonFormatter())
        root.addHandler(file_handler)
    except OSError as exc:
        # Unwritable data dir: console logging still works
        sys.stderr.write(f"log file handler disabled: {exc}\n")

    stream_handler = logging.StreamHandler(sys.stdout)
    if settings.log_plain:
        stream_handler.setFormatter(PlainFormatter())
    else:
        stream_handler.setFormatter(JsonFormatter())
    root.addHandler(stream_handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
