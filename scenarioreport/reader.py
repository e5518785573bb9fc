"""Reading scenario artifacts from a source directory."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from .logging import get_logger
from .models import ReportModel, ScenarioCase, ScenarioModel, StepModel, StepStatus


class ScenarioReadError(RuntimeError):
    """Raised when scenario artifacts cannot be read or decoded."""


class ScenarioReader:
    """Loads every ``*.json`` scenario artifact found directly in a directory."""

    def __init__(self) -> None:
        self.logger = get_logger("reader")

    def read(self, source_dir: Path) -> List[ReportModel]:
        if not source_dir.is_dir():
            raise ScenarioReadError(f"Scenario directory not found: {source_dir}")

        models: List[ReportModel] = []
        for path in sorted(source_dir.glob("*.json")):
            model = self.read_file(path)
            if model is not None:
                models.append(model)
        self.logger.debug("Read %d scenario reports from %s", len(models), source_dir)
        return sorted(models, key=lambda model: model.class_name)

    def read_file(self, path: Path) -> Optional[ReportModel]:
        """Return the report stored in ``path``, or None for unrelated JSON files."""
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ScenarioReadError(f"Could not read scenario file {path}: {exc}") from exc

        if not isinstance(data, dict) or not isinstance(data.get("scenarios"), list):
            self.logger.debug("Skipping %s: not a scenario report", path.name)
            return None

        try:
            return _report_from_dict(data, default_name=path.stem)
        except (KeyError, TypeError, ValueError) as exc:
            raise ScenarioReadError(f"Invalid scenario file {path}: {exc}") from exc


def _report_from_dict(data: Dict[str, Any], *, default_name: str) -> ReportModel:
    return ReportModel(
        class_name=_checked_class_name(str(data.get("className") or default_name)),
        name=data.get("name"),
        description=data.get("description"),
        scenarios=[_scenario_from_dict(item) for item in data["scenarios"]],
    )


def _checked_class_name(name: str) -> str:
    # Class names become file names below the target directory.
    if name in ("", ".", "..") or any(char in name for char in "/\\\0"):
        raise ValueError(f"invalid class name {name!r}")
    return name


def _scenario_from_dict(data: Dict[str, Any]) -> ScenarioModel:
    method_name = str(data["testMethodName"])
    return ScenarioModel(
        test_method_name=method_name,
        description=str(data.get("description") or method_name.replace("_", " ")),
        tags=[str(tag) for tag in data.get("tags", [])],
        cases=[
            _case_from_dict(item, index)
            for index, item in enumerate(data.get("cases", []), start=1)
        ],
    )


def _case_from_dict(data: Dict[str, Any], index: int) -> ScenarioCase:
    return ScenarioCase(
        case_nr=int(data.get("caseNr", index)),
        steps=[_step_from_dict(item) for item in data.get("steps", [])],
        arguments=[str(argument) for argument in data.get("arguments", [])],
        error_message=data.get("errorMessage"),
        duration_nanos=int(data.get("durationInNanos", 0)),
    )


def _step_from_dict(data: Dict[str, Any]) -> StepModel:
    return StepModel(
        text=str(data["text"]),
        status=StepStatus(str(data.get("status", "PASSED")).upper()),
        duration_nanos=int(data.get("durationInNanos", 0)),
    )


__all__ = ["ScenarioReadError", "ScenarioReader"]
