"""tests/conftest.py"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml


GOLDEN_SEQUENCE = [3.0] * 8 + [5.0] * 3 + [15.0] * 3 + [45.0]
GOLDEN_PARAMS = {"alpha": 0.5, "beta": 0.3, "gamma": 0.1, "period": 4}


def write_config(project_root: Path, raw: dict[str, Any]) -> Path:
    """Write configs/config.yaml under a temp project root."""
    cfg_dir = project_root / "configs"
    cfg_dir.mkdir(parents=True, exist_ok=True)
    path = cfg_dir / "config.yaml"
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(raw, f)
    return path


@pytest.fixture(name="write_config")
def write_config_fixture():
    return write_config


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    # Emulate repository root in temp dir
    return tmp_path


@pytest.fixture
def config_path(project_root: Path) -> Path:
    return write_config(
        project_root,
        {
            "model": dict(GOLDEN_PARAMS),
            "logging": {"level": "DEBUG", "file": "logs/test.log"},
        },
    )


@pytest.fixture
def golden_sequence() -> list[float]:
    return list(GOLDEN_SEQUENCE)


@pytest.fixture
def golden_params() -> dict[str, Any]:
    return dict(GOLDEN_PARAMS)
