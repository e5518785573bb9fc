"""Report generator implementations."""

from __future__ import annotations

from .base import ReportGenerator, SingleFileReportGenerator, build_environment
from .html import StaticHtmlReportGenerator
from .single_file import SingleFileHtmlReportGenerator
from .text import PlainTextReportGenerator

__all__ = [
    "PlainTextReportGenerator",
    "ReportGenerator",
    "SingleFileHtmlReportGenerator",
    "SingleFileReportGenerator",
    "StaticHtmlReportGenerator",
    "build_environment",
]
