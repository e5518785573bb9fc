"""Tests for target directory preparation and stylesheet installation."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import pytest

from scenarioreport.filesystem import CUSTOM_CSS_NAME, install_stylesheet, prepare_target_dir


def test_prepare_target_dir_creates_nested_directories(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "reports"

    assert prepare_target_dir(target) is True
    assert target.is_dir()


def test_prepare_target_dir_is_idempotent(tmp_path: Path) -> None:
    target = tmp_path / "reports"

    assert prepare_target_dir(target) is True
    assert prepare_target_dir(target) is True
    assert target.is_dir()


def test_prepare_target_dir_logs_and_returns_false_on_failure(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    blocker = tmp_path / "occupied"
    blocker.write_text("not a directory", encoding="utf-8")
    caplog.set_level(logging.ERROR, logger="scenarioreport")

    assert prepare_target_dir(blocker / "reports") is False
    assert "Could not create target directory" in caplog.text
    assert str(blocker / "reports") in caplog.text


def test_install_stylesheet_copies_bytes_verbatim(tmp_path: Path) -> None:
    stylesheet = tmp_path / "mine.css"
    payload = b"body { color: #123456; }\r\n/* \xc3\xa9 */\n"
    stylesheet.write_bytes(payload)
    target = tmp_path / "out"
    target.mkdir()

    installed = install_stylesheet(stylesheet, target)

    assert installed == target / CUSTOM_CSS_NAME
    assert installed.read_bytes() == payload


def test_install_stylesheet_overwrites_existing_file(tmp_path: Path) -> None:
    stylesheet = tmp_path / "mine.css"
    stylesheet.write_text("h1 { color: red; }", encoding="utf-8")
    target = tmp_path / "out"
    target.mkdir()
    (target / CUSTOM_CSS_NAME).write_text("old", encoding="utf-8")

    install_stylesheet(stylesheet, target)

    assert (target / CUSTOM_CSS_NAME).read_text(encoding="utf-8") == "h1 { color: red; }"


def test_install_stylesheet_skips_missing_file(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger="scenarioreport")

    assert install_stylesheet(tmp_path / "missing.css", tmp_path) is None
    assert not (tmp_path / CUSTOM_CSS_NAME).exists()
    records = [record for record in caplog.records if "Cannot read custom stylesheet" in record.message]
    assert records and records[0].levelno == logging.INFO


def test_install_stylesheet_skips_directories(tmp_path: Path) -> None:
    target = tmp_path / "out"
    target.mkdir()

    assert install_stylesheet(tmp_path, target) is None
    assert not (target / CUSTOM_CSS_NAME).exists()


@pytest.mark.skipif(
    sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="permission bits are not enforced",
)
def test_install_stylesheet_skips_unreadable_file(tmp_path: Path) -> None:
    stylesheet = tmp_path / "locked.css"
    stylesheet.write_text("body {}", encoding="utf-8")
    stylesheet.chmod(0)
    target = tmp_path / "out"
    target.mkdir()
    try:
        assert install_stylesheet(stylesheet, target) is None
    finally:
        stylesheet.chmod(0o644)
    assert not (target / CUSTOM_CSS_NAME).exists()


def test_install_stylesheet_tolerates_already_installed_file(tmp_path: Path) -> None:
    installed = tmp_path / CUSTOM_CSS_NAME
    installed.write_text("body {}", encoding="utf-8")

    assert install_stylesheet(installed, tmp_path) == installed
    assert installed.read_text(encoding="utf-8") == "body {}"
