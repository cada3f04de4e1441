"""Centralized constants for rangefix.

Single source of truth for paths, directory filters and configuration file
names used across modules.
"""

from pathlib import Path

# ============================================================================
# OUTPUT
# ============================================================================

# Directory for rangefix's own artifacts (error log)
RANGEFIX_DIR = Path("./.rangefix")
ERROR_LOG_FILE = RANGEFIX_DIR / "error.log"

# ============================================================================
# DISCOVERY
# ============================================================================

GO_EXTENSION = ".go"

# Directories never walked into when discovering Go files
SKIP_DIRS: set[str] = {
    # Version control
    ".git",
    ".hg",
    ".svn",

    # Go conventions: vendored dependencies, test fixtures ignored by go build
    "vendor",
    "testdata",

    # Other tooling
    "node_modules",
    ".idea",
    ".vscode",
    ".rangefix",
}

# ============================================================================
# CONFIGURATION
# ============================================================================

CONFIG_FILE = "rangefix.toml"
PYPROJECT_FILE = "pyproject.toml"
PYPROJECT_TABLE = "rangefix"
