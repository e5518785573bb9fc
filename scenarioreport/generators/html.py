"""Multi-page static HTML report."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .base import STYLESHEET_NAME, ReportGenerator


class StaticHtmlReportGenerator(ReportGenerator):
    """Writes ``index.html``, one page per report class and ``style.css``.

    Pages link ``custom.css`` after the default stylesheet so a user supplied
    stylesheet can override it. The generator never writes ``custom.css``.
    """

    def generate(self, target_dir: Path, source_dir: Path) -> List[Path]:
        models, stats = self._load(source_dir)
        self.logger.info(
            "Writing HTML report for %d classes to %s", stats.classes, target_dir
        )

        written = [self._render_to(target_dir / "index.html", "index.html", models=models, stats=stats)]
        for model in models:
            written.append(
                self._render_to(target_dir / self.page_name(model), "class.html", model=model)
            )

        stylesheet_path = target_dir / STYLESHEET_NAME
        stylesheet_path.write_text(self._stylesheet(), encoding="utf-8")
        written.append(stylesheet_path)
        return written
