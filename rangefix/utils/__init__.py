"""rangefix utilities package."""

from .constants import ERROR_LOG_FILE, GO_EXTENSION, RANGEFIX_DIR, SKIP_DIRS
from .error_handler import handle_exceptions
from .exit_codes import ExitCodes
from .logging import logger, set_log_level
from .temp_manager import TempManager

__all__ = [
    "ERROR_LOG_FILE",
    "GO_EXTENSION",
    "RANGEFIX_DIR",
    "SKIP_DIRS",
    "handle_exceptions",
    "ExitCodes",
    "logger",
    "set_log_level",
    "TempManager",
]
