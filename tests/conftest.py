from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests._fixtures.scenario_builder import ScenarioBuilder


@pytest.fixture
def scenario_builder(tmp_path: Path) -> ScenarioBuilder:
    """Provide a reusable scenario builder rooted at the pytest tmp_path."""
    return ScenarioBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_scenarioreport_logger():
    """Undo configure_logging so caplog keeps seeing scenarioreport records."""
    yield
    logger = logging.getLogger("scenarioreport")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
