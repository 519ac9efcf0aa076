"""Configuration loading for docblockr (.docblockr.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .renderer import DEFAULT_COLUMN_SPACING, RenderOptions

CONFIG_FILENAME = ".docblockr.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class DocBlockrConfig:
    """Represents the settings defined in .docblockr.yml."""

    root: Optional[Path] = None
    column_spacing: Optional[int] = None
    default_return_tag: Optional[bool] = None
    languages: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def render_options(self) -> RenderOptions:
        """Return render options, substituting defaults for unset values."""
        spacing = self.column_spacing
        if spacing is None:
            spacing = DEFAULT_COLUMN_SPACING
        return RenderOptions(
            column_spacing=max(spacing, 0),
            default_return_tag=bool(self.default_return_tag),
        )

    def language_overrides(self, language: str) -> Dict[str, Any]:
        return self.languages.get(language.lower(), {})


def load_config(config_path: Path) -> DocBlockrConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DocBlockrConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    languages: Dict[str, Dict[str, Any]] = {}
    for name, overrides in _as_dict(data.get("languages")).items():
        if isinstance(overrides, dict):
            languages[str(name).lower()] = {
                str(key): value for key, value in overrides.items() if isinstance(value, str)
            }

    return DocBlockrConfig(
        root=root,
        column_spacing=_as_int(data.get("column_spacing")),
        default_return_tag=_as_bool(data.get("default_return_tag")),
        languages=languages,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.suffix not in {".yml", ".yaml"}:
        return (config_path.parent / CONFIG_FILENAME).resolve()
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


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = ["CONFIG_FILENAME", "ConfigError", "DocBlockrConfig", "load_config"]
