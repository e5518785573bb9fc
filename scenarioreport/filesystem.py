"""Target directory setup and custom stylesheet installation."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Optional

from .logging import get_logger

CUSTOM_CSS_NAME = "custom.css"

logger = get_logger("filesystem")


def prepare_target_dir(target_dir: Path) -> bool:
    """Ensure ``target_dir`` exists, creating parents as needed.

    Returns False (after logging an error) when the directory cannot be
    created; the caller is expected to abort the run without raising.
    """
    if target_dir.is_dir():
        return True
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Could not create target directory %s: %s", target_dir, exc)
        return False
    logger.debug("Created target directory %s", target_dir)
    return True


def install_stylesheet(stylesheet: Path, target_dir: Path) -> Optional[Path]:
    """Copy ``stylesheet`` to ``target_dir/custom.css`` if it can be read."""
    if not stylesheet.is_file() or not os.access(stylesheet, os.R_OK):
        logger.info("Cannot read custom stylesheet %s, skipping", stylesheet)
        return None

    destination = target_dir / CUSTOM_CSS_NAME
    try:
        shutil.copyfile(stylesheet, destination)
    except shutil.SameFileError:
        logger.debug("Custom stylesheet %s is already installed", stylesheet)
        return destination
    logger.info("Installed custom stylesheet %s", destination)
    return destination


__all__ = ["CUSTOM_CSS_NAME", "install_stylesheet", "prepare_target_dir"]
