"""Command-line option parsing into an immutable run configuration."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from .formats import OutputFormat, resolve_format

DEFAULT_AGGREGATE_FILE_NAME = "allscenarios.html"
DEFAULT_TITLE = "Scenario Report"

USAGE = (
    "Options: [--format=<format>] [--dir=<dir>] [--todir=<dir>] "
    "[--customcss=<cssfile>] [--verbose]\n"
    "  <format> = html or text, default is html "
    "(gherkin is recognised but not implemented)\n"
)

_PATH_OPTIONS = {
    "--dir": "source_dir",
    "--todir": "target_dir",
    "--customcss": "custom_stylesheet",
}


class UsageError(ValueError):
    """Raised when the command line cannot be interpreted.

    A missing message means usage help was requested explicitly.
    """

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "usage requested")
        self.message = message


@dataclass(frozen=True)
class RunConfig:
    """Settings for a single report run."""

    source_dir: Path = Path(".")
    target_dir: Path = Path(".")
    custom_stylesheet: Optional[Path] = None
    format: OutputFormat = OutputFormat.HTML
    aggregate_file_name: str = DEFAULT_AGGREGATE_FILE_NAME
    title: str = DEFAULT_TITLE
    verbose: bool = False


def parse_args(args: Sequence[str], defaults: RunConfig | None = None) -> RunConfig:
    """Interpret ``args`` left to right; repeated flags keep the last value."""
    overrides: Dict[str, Any] = {}
    for arg in args:
        if arg in ("-h", "--help"):
            raise UsageError()
        if arg in ("-v", "--verbose"):
            overrides["verbose"] = True
            continue
        name, separator, _ = arg.partition("=")
        if separator and name in _PATH_OPTIONS:
            overrides[_PATH_OPTIONS[name]] = Path(_option_value(arg))
        elif separator and name == "--format":
            value = _option_value(arg)
            output_format = resolve_format(value)
            if output_format is None:
                raise UsageError(f"Illegal argument for --format: {value}")
            overrides["format"] = output_format
        else:
            raise UsageError(f"Unknown argument: {arg}")
    return replace(defaults or RunConfig(), **overrides)


def _option_value(arg: str) -> str:
    # Only the text up to the next "=" counts; values cannot contain "=".
    value = arg.split("=")[1]
    if not value:
        raise UsageError(f"Missing value for {arg.split('=')[0]}")
    return value


__all__ = [
    "DEFAULT_AGGREGATE_FILE_NAME",
    "DEFAULT_TITLE",
    "RunConfig",
    "USAGE",
    "UsageError",
    "parse_args",
]
