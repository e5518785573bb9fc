"""Run orchestration: directory setup, generators, stylesheet."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from .dispatcher import GeneratorDispatcher
from .filesystem import install_stylesheet, prepare_target_dir
from .formats import OutputFormat
from .logging import get_logger
from .options import RunConfig


class RunState(Enum):
    PARSED = "parsed"
    DIRECTORY_READY = "directory_ready"
    ABORTED_DIRECTORY = "aborted_directory"
    GENERATORS_RUN = "generators_run"
    STYLESHEET_INSTALLED = "stylesheet_installed"
    DONE = "done"

@dataclass
class RunOutcome:
    """Result of a report run."""

    state: RunState
    stylesheet: Optional[Path] = None
    states: List[RunState] = field(default_factory=list)

    @property
    def completed(self) -> bool:
        return self.state is RunState.DONE


class Orchestrator:
    """Coordinates a single report run for an already parsed RunConfig."""

    def __init__(self, dispatcher: GeneratorDispatcher | None = None) -> None:
        self.dispatcher = dispatcher or GeneratorDispatcher()
        self.logger = get_logger("orchestrator")
        self.states: List[RunState] = [RunState.PARSED]

    @property
    def state(self) -> RunState:
        return self.states[-1]

    def run(self, config: RunConfig) -> RunOutcome:
        """Generate the configured report; directory failures abort quietly."""
        self.states = [RunState.PARSED]
        self.logger.info(
            "Generating %s report from %s into %s",
            config.format.token,
            config.source_dir,
            config.target_dir,
        )

        if not prepare_target_dir(config.target_dir):
            return self._finish(RunState.ABORTED_DIRECTORY)
        self.states.append(RunState.DIRECTORY_READY)

        self.dispatcher.dispatch(config)
        self.states.append(RunState.GENERATORS_RUN)

        stylesheet = None
        if config.format is OutputFormat.HTML and config.custom_stylesheet is not None:
            stylesheet = install_stylesheet(config.custom_stylesheet, config.target_dir)
            if stylesheet is not None:
                self.states.append(RunState.STYLESHEET_INSTALLED)

        self.logger.info("Report written to %s", config.target_dir)
        return self._finish(RunState.DONE, stylesheet)

    def _finish(self, state: RunState, stylesheet: Optional[Path] = None) -> RunOutcome:
        self.states.append(state)
        return RunOutcome(state=state, stylesheet=stylesheet, states=list(self.states))
