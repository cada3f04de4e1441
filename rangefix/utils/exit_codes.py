"""Centralized exit codes for the rangefix CLI."""


class ExitCodes:
    """Standard exit codes for rangefix commands."""

    SUCCESS = 0

    # --check found files that would be rewritten
    CHANGES_NEEDED = 1

    # At least one file could not be parsed, printed or written
    FILE_ERRORS = 2
