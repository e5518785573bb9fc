"""Base classes and template helpers for report generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import AbstractSet, Iterable, List, Tuple

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from ..logging import get_logger
from ..models import ReportModel, ReportStatistics
from ..reader import ScenarioReader

TEMPLATES_DIR = Path(__file__).with_name("templates")
STYLESHEET_NAME = "style.css"
SUMMARY_FILE_NAME = "summary.txt"

# Fixed output names that a per-class page must never replace.
RESERVED_NAMES = frozenset(
    {"index.html", STYLESHEET_NAME, "custom.css", "allscenarios.html", SUMMARY_FILE_NAME}
)


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return the jinja2 environment used by every generator."""
    env = Environment(
        loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
        autoescape=select_autoescape(enabled_extensions=("html",), default_for_string=False),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["duration"] = format_duration
    env.filters["page_name"] = page_name
    return env


def format_duration(nanos: int) -> str:
    """Render a nanosecond duration the way report readers expect it."""
    millis = nanos / 1_000_000
    if millis < 1000:
        return f"{millis:.0f}ms"
    return f"{millis / 1000:.2f}s"


def page_name(
    model: ReportModel,
    extension: str = "html",
    reserved: AbstractSet[str] = RESERVED_NAMES,
) -> str:
    """File name of the per-class page for ``model``.

    A class whose page would replace one of the ``reserved`` outputs gets a
    ``_class`` suffix instead.
    """
    name = f"{model.class_name}.{extension}"
    taken = {item.lower() for item in reserved}
    if name.lower() in taken:
        name = f"{model.class_name}_class.{extension}"
    return name


class _TemplateGenerator:
    """Shared reading and rendering for the concrete generators."""

    def __init__(
        self,
        reader: ScenarioReader | None = None,
        *,
        title: str = "Scenario Report",
        templates_dir: Path | None = None,
        reserved_names: Iterable[str] = (),
    ) -> None:
        self.reader = reader or ScenarioReader()
        self.title = title
        self.reserved_names = RESERVED_NAMES | frozenset(reserved_names)
        self.env = build_environment(templates_dir)
        self.env.filters["page_name"] = self.page_name
        self.logger = get_logger(f"generators.{type(self).__name__}")

    def page_name(self, model: ReportModel, extension: str = "html") -> str:
        return page_name(model, extension, self.reserved_names)

    def _load(self, source_dir: Path) -> Tuple[List[ReportModel], ReportStatistics]:
        models = self.reader.read(source_dir)
        return models, ReportStatistics.from_models(models)

    def _render_to(self, path: Path, template_name: str, **context: object) -> Path:
        rendered = self.env.get_template(template_name).render(title=self.title, **context)
        path.write_text(rendered, encoding="utf-8")
        self.logger.debug("Wrote %s", path)
        return path

    def _stylesheet(self) -> str:
        return (TEMPLATES_DIR / STYLESHEET_NAME).read_text(encoding="utf-8")


class ReportGenerator(_TemplateGenerator, ABC):
    """Contract for generators that render a whole directory of outputs."""

    @abstractmethod
    def generate(self, target_dir: Path, source_dir: Path) -> List[Path]:
        """Render the scenarios in ``source_dir`` below ``target_dir``."""


class SingleFileReportGenerator(_TemplateGenerator, ABC):
    """Contract for generators that write a single named output file."""

    @abstractmethod
    def generate(self, target_dir: Path, file_name: str, source_dir: Path) -> Path:
        """Render the scenarios in ``source_dir`` into ``target_dir/file_name``."""
