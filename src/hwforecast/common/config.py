"""src/hwforecast/common/config.py"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml


def _as_path(p: str | Path) -> Path:
    return p if isinstance(p, Path) else Path(p)


@dataclass(frozen=True)
class AppConfig:
    """Config wrapper with project-root relative paths."""

    raw: Dict[str, Any]
    config_path: Path

    @property
    def project_root(self) -> Path:
        # configs/config.yaml -> project root is parent of "configs"
        return self.config_path.parent.parent.resolve()

    def _section(self, name: str) -> Dict[str, Any]:
        section = self.raw.get(name) or {}
        if not isinstance(section, dict):
            raise ValueError(
                f"{self.config_path}: '{name}' section must be a mapping, got {type(section).__name__}"
            )
        return section

    @property
    def model(self) -> Dict[str, Any]:
        return self._section("model")

    @property
    def logging(self) -> Dict[str, Any]:
        return self._section("logging")

    def resolve(self, maybe_path: str | Path) -> Path:
        p = _as_path(maybe_path)
        return p if p.is_absolute() else (self.project_root / p).resolve()


def load_config(config_path: str | Path) -> AppConfig:
    config_path = _as_path(config_path).resolve()
    with config_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{config_path}: top-level YAML must be a mapping, got {type(raw).__name__}")
    return AppConfig(raw=raw, config_path=config_path)
