"""Render captured test scenarios as HTML and plain-text reports."""

from __future__ import annotations

from .formats import OutputFormat, resolve_format
from .options import RunConfig, UsageError, parse_args
from .orchestrator import Orchestrator, RunOutcome, RunState

__version__ = "0.1.0"

__all__ = [
    "Orchestrator",
    "OutputFormat",
    "RunConfig",
    "RunOutcome",
    "RunState",
    "UsageError",
    "parse_args",
    "resolve_format",
]
