"""Configuration management for rangefix.

Settings come from ``rangefix.toml`` (top-level keys) or, failing that, the
``[tool.rangefix]`` table of ``pyproject.toml`` in the project root:

    exclude = ["*_gen.go", "internal/legacy"]
    dry_run = false
    guard_mutated_counter = true
    jobs = 4

Command-line flags override whatever is found here.
"""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from .errors import ConfigError
from .utils.constants import CONFIG_FILE, PYPROJECT_FILE, PYPROJECT_TABLE


@dataclass
class RangefixConfig:
    """Effective settings for a run."""

    exclude: list[str] = field(default_factory=list)
    dry_run: bool = False
    guard_mutated_counter: bool = False
    jobs: int = 1
    source: Path | None = None


_EXPECTED_TYPES: dict[str, type] = {
    "exclude": list,
    "dry_run": bool,
    "guard_mutated_counter": bool,
    "jobs": int,
}


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def _validate(data: Any, path: Path) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ConfigError(f"rangefix settings in {path} must be a table")

    unknown = sorted(set(data) - set(_EXPECTED_TYPES))
    if unknown:
        raise ConfigError(
            f"Unknown rangefix setting(s) in {path}: {', '.join(unknown)}",
            details={"unknown": unknown},
        )

    for key, value in data.items():
        expected = _EXPECTED_TYPES[key]
        # bool is a subclass of int; jobs = true is still a mistake
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise ConfigError(
                f"Setting '{key}' in {path} must be of type {expected.__name__}, "
                f"got {type(value).__name__}"
            )

    if "exclude" in data and not all(isinstance(p, str) for p in data["exclude"]):
        raise ConfigError(f"Setting 'exclude' in {path} must be a list of strings")
    if "jobs" in data and data["jobs"] < 1:
        raise ConfigError(f"Setting 'jobs' in {path} must be at least 1")

    return data


def load_config(root: str | Path = ".") -> RangefixConfig:
    """Load settings from ``root``, or defaults if no config file exists."""
    root = Path(root)

    config_path = root / CONFIG_FILE
    if config_path.is_file():
        data = _validate(_read_toml(config_path), config_path)
        return RangefixConfig(**data, source=config_path)

    pyproject_path = root / PYPROJECT_FILE
    if pyproject_path.is_file():
        table = _read_toml(pyproject_path).get("tool", {}).get(PYPROJECT_TABLE)
        if table is not None:
            data = _validate(table, pyproject_path)
            return RangefixConfig(**data, source=pyproject_path)

    return RangefixConfig()


def merge_cli_options(config: RangefixConfig, **overrides: Any) -> RangefixConfig:
    """Apply command-line values on top of ``config``.

    None means "not given on the command line". Exclude patterns from both
    sources are combined.
    """
    values = {f.name: getattr(config, f.name) for f in fields(config)}
    for key, value in overrides.items():
        if value is None:
            continue
        if key == "exclude":
            values["exclude"] = [*config.exclude, *value]
        else:
            values[key] = value
    return RangefixConfig(**values)
