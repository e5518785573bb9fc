"""Helper utilities for writing scenario artifacts in tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Sequence


class ScenarioBuilder:
    """Utility for writing scenario JSON files into a throwaway source directory."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "scenarios"
        self.root.mkdir()

    def write_report(
        self,
        class_name: str,
        scenarios: Sequence[Dict[str, Any]],
        *,
        name: str | None = None,
        description: str | None = None,
    ) -> Path:
        """Write a report for ``class_name`` and return the file path."""
        payload: Dict[str, Any] = {"className": class_name, "scenarios": list(scenarios)}
        if name is not None:
            payload["name"] = name
        if description is not None:
            payload["description"] = description
        path = self.root / f"{class_name}.json"
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return path

    def write_raw(self, file_name: str, content: str) -> Path:
        path = self.root / file_name
        path.write_text(content, encoding="utf-8")
        return path

    def path(self) -> Path:
        """Return the scenario source directory."""
        return self.root


def scenario(
    method_name: str,
    steps: Sequence[str] | Sequence[Dict[str, Any]],
    *,
    description: str | None = None,
    tags: Sequence[str] = (),
    error_message: str | None = None,
    arguments: Sequence[str] = (),
) -> Dict[str, Any]:
    """Build a single-case scenario dict with passing steps by default."""
    step_dicts: List[Dict[str, Any]] = [
        step if isinstance(step, dict) else {"text": step, "status": "PASSED", "durationInNanos": 1_000_000}
        for step in steps
    ]
    case: Dict[str, Any] = {
        "caseNr": 1,
        "steps": step_dicts,
        "arguments": list(arguments),
        "errorMessage": error_message,
        "durationInNanos": 2_000_000,
    }
    data: Dict[str, Any] = {"testMethodName": method_name, "tags": list(tags), "cases": [case]}
    if description is not None:
        data["description"] = description
    return data


def seed_coffee_reports(builder: ScenarioBuilder) -> None:
    """Write a small, representative set of scenario reports."""
    builder.write_report(
        "org.example.CoffeeMachineTest",
        [
            scenario(
                "a_coffee_is_served",
                ["Given a coffee machine", "When I insert 2 coins", "Then I get a coffee"],
                tags=["Coffee"],
            ),
            scenario(
                "no_coffee_without_coins",
                [
                    "Given a coffee machine",
                    {"text": "Then no coffee is served", "status": "FAILED", "durationInNanos": 0},
                ],
                error_message="expected no coffee but got <espresso>",
            ),
        ],
        name="Coffee machine",
        description="Serving coffee & tea",
    )
    builder.write_report(
        "org.example.TeaTest",
        [
            scenario(
                "tea_is_pending",
                [{"text": "Given a kettle", "status": "PENDING", "durationInNanos": 0}],
            ),
        ],
    )


__all__ = ["ScenarioBuilder", "scenario", "seed_coffee_reports"]
