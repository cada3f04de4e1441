"""rangefix - rewrite Go counting loops into range-over-int loops."""

__version__ = "0.1.0"

from rangefix.errors import ConfigError, ParseError, PrintError, RangefixError
from rangefix.matcher import match_counting_loop
from rangefix.pipeline import FileResult, FileStatus, fix_file, transform
from rangefix.rewriter import RangeLoopRewriter

__all__ = [
    "__version__",
    "ConfigError",
    "ParseError",
    "PrintError",
    "RangefixError",
    "match_counting_loop",
    "FileResult",
    "FileStatus",
    "fix_file",
    "transform",
    "RangeLoopRewriter",
]
