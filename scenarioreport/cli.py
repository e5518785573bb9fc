"""CLI entrypoint for scenarioreport."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn, Sequence

from .config import ConfigError, load_config
from .logging import configure_logging, get_logger
from .options import USAGE, RunConfig, UsageError, parse_args
from .orchestrator import Orchestrator


def _exit(status: int, message: str | None = None) -> NoReturn:
    if message:
        sys.stderr.write(message)
    raise SystemExit(status)


def _resolve_config(argv: Sequence[str]) -> RunConfig:
    # Help and bad tokens are reported before the settings file is touched.
    try:
        parse_args(argv)
    except UsageError as exc:
        message = f"{exc.message}\n" if exc.message else ""
        _exit(1, message + USAGE)
    try:
        settings = load_config(Path.cwd())
    except ConfigError as exc:
        _exit(1, f"{exc}\n")
    return parse_args(argv, defaults=settings.to_run_config())


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entrypoint for scenarioreport."""
    if argv is None:
        argv = sys.argv[1:]
    config = _resolve_config(argv)

    configure_logging(verbose=config.verbose)
    logger = get_logger("cli")

    try:
        Orchestrator().run(config)
    except Exception as exc:
        logger.debug("Report generation failed", exc_info=True)
        _exit(1, f"scenarioreport failed: {exc}\nRun with --verbose for more details.\n")


if __name__ == "__main__":
    main(sys.argv[1:])
