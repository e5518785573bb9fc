"""Configuration loading for scenarioreport (.scenarioreport.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .formats import OutputFormat, resolve_format
from .options import DEFAULT_AGGREGATE_FILE_NAME, DEFAULT_TITLE, RunConfig

CONFIG_FILE_NAME = ".scenarioreport.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ReportSettings:
    """Default run values defined in .scenarioreport.yml."""

    root: Path
    source_dir: Optional[Path] = None
    target_dir: Optional[Path] = None
    custom_stylesheet: Optional[Path] = None
    format: Optional[OutputFormat] = None
    aggregate_file_name: Optional[str] = None
    title: Optional[str] = None

    def to_run_config(self) -> RunConfig:
        """Return a RunConfig seeded with these settings where they are set."""
        return RunConfig(
            source_dir=self.source_dir or Path("."),
            target_dir=self.target_dir or Path("."),
            custom_stylesheet=self.custom_stylesheet,
            format=self.format or OutputFormat.HTML,
            aggregate_file_name=self.aggregate_file_name or DEFAULT_AGGREGATE_FILE_NAME,
            title=self.title or DEFAULT_TITLE,
        )


def load_config(config_path: Path) -> ReportSettings:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ReportSettings(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILE_NAME} must contain a mapping at the root")

    report_data = _as_dict(data.get("report"))
    if not report_data:
        return ReportSettings(root=root)

    format_name = _as_str(report_data.get("format"))
    output_format = None
    if format_name is not None:
        output_format = resolve_format(format_name)
        if output_format is None:
            raise ConfigError(f"Unknown report format in {CONFIG_FILE_NAME}: {format_name}")

    return ReportSettings(
        root=root,
        source_dir=_as_path(report_data.get("dir"), root),
        target_dir=_as_path(report_data.get("todir"), root),
        custom_stylesheet=_as_path(report_data.get("customcss"), root),
        format=output_format,
        aggregate_file_name=_as_str(report_data.get("aggregate_file")),
        title=_as_str(report_data.get("title")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILE_NAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_path(value: Any, root: Path) -> Optional[Path]:
    text = _as_str(value)
    if not text:
        return None
    path = Path(text).expanduser()
    return path if path.is_absolute() else root / path
