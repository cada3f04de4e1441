"""Centralized logging configuration using Loguru.

Usage:
    from rangefix.utils.logging import logger
    logger.info("Message")
    logger.debug("Debug message")  # Only shows if RANGEFIX_LOG_LEVEL=DEBUG

Environment Variables:
    RANGEFIX_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: INFO)
    RANGEFIX_LOG_JSON: 0|1 (default: 0, human-readable)
    RANGEFIX_LOG_FILE: path to log file (optional, always NDJSON)
"""

import json
import os
import sys

from loguru import logger

# Remove default handler
logger.remove()

_log_level = os.environ.get("RANGEFIX_LOG_LEVEL", "INFO").upper()
_json_mode = os.environ.get("RANGEFIX_LOG_JSON", "0") == "1"
_log_file = os.environ.get("RANGEFIX_LOG_FILE")


def _to_ndjson(record) -> str:
    entry = {
        "level": record["level"].name,
        "time": record["time"].isoformat(),
        "msg": record["message"],
        "pid": record["process"].id,
    }
    for key, value in record["extra"].items():
        entry[key] = value
    if record["exception"]:
        entry["err"] = {
            "type": record["exception"].type.__name__ if record["exception"].type else "Error",
            "message": str(record["exception"].value) if record["exception"].value else "",
        }
    return json.dumps(entry, default=str)


def ndjson_sink(message):
    """Write log records as one JSON object per line on stderr."""
    # Never call logger.* inside a sink
    sys.stderr.write(_to_ndjson(message.record) + "\n")
    sys.stderr.flush()


_human_format = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)

_console_handler_id: int | None = None


def _add_console_handler(level: str) -> int:
    if _json_mode:
        return logger.add(ndjson_sink, level=level, colorize=False)
    return logger.add(
        sys.stderr,
        level=level,
        format=_human_format,
        colorize=None,  # Auto-detect: colors if TTY, plain if piped
    )


_console_handler_id = _add_console_handler(_log_level)

if _log_file:
    def _file_sink(message):
        """Append NDJSON records to the configured log file."""
        with open(_log_file, "a", encoding="utf-8") as f:
            f.write(_to_ndjson(message.record) + "\n")

    logger.add(_file_sink, level="DEBUG")


def set_log_level(level: str) -> None:
    """Swap the console handler for one at ``level`` (e.g. for --verbose)."""
    global _console_handler_id

    if _console_handler_id is not None:
        logger.remove(_console_handler_id)
    _console_handler_id = _add_console_handler(level.upper())
