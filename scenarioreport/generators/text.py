"""Plain-text report."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .base import SUMMARY_FILE_NAME, ReportGenerator


class PlainTextReportGenerator(ReportGenerator):
    """Writes one ``<className>.txt`` per report class plus ``summary.txt``."""

    def generate(self, target_dir: Path, source_dir: Path) -> List[Path]:
        models, stats = self._load(source_dir)
        self.logger.info(
            "Writing text report for %d classes to %s", stats.classes, target_dir
        )

        written = [
            self._render_to(target_dir / self.page_name(model, "txt"), "report.txt", model=model)
            for model in models
        ]
        written.append(
            self._render_to(target_dir / SUMMARY_FILE_NAME, "summary.txt", models=models, stats=stats)
        )
        return written
