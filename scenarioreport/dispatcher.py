"""Selection and sequencing of report generators per output format."""

from __future__ import annotations

from .formats import OutputFormat
from .generators import (
    PlainTextReportGenerator,
    ReportGenerator,
    SingleFileHtmlReportGenerator,
    SingleFileReportGenerator,
    StaticHtmlReportGenerator,
)
from .logging import get_logger
from .options import RunConfig


class FormatNotImplementedError(NotImplementedError):
    """Raised for recognised formats that have no generator yet."""

    def __init__(self, output_format: OutputFormat) -> None:
        super().__init__(f"Report format '{output_format.token}' is not implemented yet")
        self.format = output_format


class GeneratorDispatcher:
    """Invokes the generators that make up each output format.

    HTML is the multi-page report followed by the aggregated single-file
    report; TEXT is the plain-text report alone. Generator errors propagate.
    """

    def __init__(
        self,
        html_generator: ReportGenerator | None = None,
        single_file_generator: SingleFileReportGenerator | None = None,
        text_generator: ReportGenerator | None = None,
    ) -> None:
        self._html_generator = html_generator
        self._single_file_generator = single_file_generator
        self._text_generator = text_generator
        self.logger = get_logger("dispatcher")

    def dispatch(self, config: RunConfig) -> None:
        self.logger.debug(
            "Dispatching %s report from %s to %s",
            config.format.token,
            config.source_dir,
            config.target_dir,
        )
        if config.format is OutputFormat.HTML:
            self.html_generator(config).generate(config.target_dir, config.source_dir)
            self.single_file_generator(config).generate(
                config.target_dir, config.aggregate_file_name, config.source_dir
            )
        elif config.format is OutputFormat.TEXT:
            self.text_generator(config).generate(config.target_dir, config.source_dir)
        elif config.format is OutputFormat.GHERKIN:
            raise FormatNotImplementedError(config.format)
        else:  # pragma: no cover - OutputFormat is closed
            raise ValueError(f"Unsupported report format: {config.format!r}")

    def html_generator(self, config: RunConfig) -> ReportGenerator:
        return self._html_generator or StaticHtmlReportGenerator(
            title=config.title, reserved_names=(config.aggregate_file_name,)
        )

    def single_file_generator(self, config: RunConfig) -> SingleFileReportGenerator:
        return self._single_file_generator or SingleFileHtmlReportGenerator(title=config.title)

    def text_generator(self, config: RunConfig) -> ReportGenerator:
        return self._text_generator or PlainTextReportGenerator(title=config.title)


__all__ = ["FormatNotImplementedError", "GeneratorDispatcher"]
