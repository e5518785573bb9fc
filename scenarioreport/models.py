"""Scenario data models shared across report generators."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional


class StepStatus(str, Enum):
    PASSED = "PASSED"
    FAILED = "FAILED"
    SKIPPED = "SKIPPED"
    PENDING = "PENDING"


class ExecutionStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    PENDING = "PENDING"


_SEVERITY = {
    ExecutionStatus.SUCCESS: 0,
    ExecutionStatus.PENDING: 1,
    ExecutionStatus.FAILED: 2,
}


@dataclass
class StepModel:
    """A single executed step, e.g. ``Given a coffee machine``."""

    text: str
    status: StepStatus = StepStatus.PASSED
    duration_nanos: int = 0


@dataclass
class ScenarioCase:
    """One execution of a scenario, possibly with arguments."""

    case_nr: int
    steps: List[StepModel] = field(default_factory=list)
    arguments: List[str] = field(default_factory=list)
    error_message: Optional[str] = None
    duration_nanos: int = 0

    @property
    def status(self) -> ExecutionStatus:
        if self.error_message or any(step.status is StepStatus.FAILED for step in self.steps):
            return ExecutionStatus.FAILED
        if any(step.status is StepStatus.PENDING for step in self.steps):
            return ExecutionStatus.PENDING
        return ExecutionStatus.SUCCESS


@dataclass
class ScenarioModel:
    """A scenario and all of its executed cases."""

    test_method_name: str
    description: str
    tags: List[str] = field(default_factory=list)
    cases: List[ScenarioCase] = field(default_factory=list)

    @property
    def status(self) -> ExecutionStatus:
        if not self.cases:
            return ExecutionStatus.PENDING
        return worst_status(case.status for case in self.cases)

    @property
    def duration_nanos(self) -> int:
        return sum(case.duration_nanos for case in self.cases)


@dataclass
class ReportModel:
    """All scenarios captured for one test class."""

    class_name: str
    name: Optional[str] = None
    description: Optional[str] = None
    scenarios: List[ScenarioModel] = field(default_factory=list)

    @property
    def title(self) -> str:
        return self.name or self.class_name.rsplit(".", 1)[-1]

    @property
    def status(self) -> ExecutionStatus:
        return worst_status(scenario.status for scenario in self.scenarios)


@dataclass
class ReportStatistics:
    """Aggregated counts over a set of report models."""

    classes: int = 0
    scenarios: int = 0
    cases: int = 0
    failed_scenarios: int = 0
    pending_scenarios: int = 0
    duration_nanos: int = 0

    @property
    def successful_scenarios(self) -> int:
        return self.scenarios - self.failed_scenarios - self.pending_scenarios

    @classmethod
    def from_models(cls, models: Iterable[ReportModel]) -> "ReportStatistics":
        stats = cls()
        for model in models:
            stats.classes += 1
            for scenario in model.scenarios:
                stats.scenarios += 1
                stats.cases += len(scenario.cases)
                stats.duration_nanos += scenario.duration_nanos
                if scenario.status is ExecutionStatus.FAILED:
                    stats.failed_scenarios += 1
                elif scenario.status is ExecutionStatus.PENDING:
                    stats.pending_scenarios += 1
        return stats


def worst_status(statuses: Iterable[ExecutionStatus]) -> ExecutionStatus:
    """Return the most severe status, SUCCESS for an empty input."""
    return max(statuses, key=_SEVERITY.__getitem__, default=ExecutionStatus.SUCCESS)
