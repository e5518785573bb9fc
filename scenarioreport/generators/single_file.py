"""Aggregated single-file HTML report."""

from __future__ import annotations

from pathlib import Path

from .base import SingleFileReportGenerator


class SingleFileHtmlReportGenerator(SingleFileReportGenerator):
    """Renders every scenario into one self-contained HTML page."""

    def generate(self, target_dir: Path, file_name: str, source_dir: Path) -> Path:
        models, stats = self._load(source_dir)
        self.logger.info("Writing aggregated HTML report %s", target_dir / file_name)
        return self._render_to(
            target_dir / file_name,
            "allscenarios.html",
            models=models,
            stats=stats,
            stylesheet=self._stylesheet(),
        )
