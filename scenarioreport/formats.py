"""Supported report output formats."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class OutputFormat(Enum):
    """Closed set of report formats, each matched by a lowercase token."""

    HTML = "html"
    TEXT = "text"
    GHERKIN = "gherkin"

    @property
    def token(self) -> str:
        return self.value


def resolve_format(name: Optional[str]) -> Optional[OutputFormat]:
    """Return the format whose token equals ``name`` ignoring case, else None."""
    if name is None:
        return None
    lowered = name.lower()
    for output_format in OutputFormat:
        if output_format.token == lowered:
            return output_format
    return None


__all__ = ["OutputFormat", "resolve_format"]
