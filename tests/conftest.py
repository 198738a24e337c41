# tests/conftest.py
from pathlib import Path
from typing import Any

import pytest
import yaml


@pytest.fixture(scope="session")
def examples() -> list[dict[str, Any]]:
    data_path = Path(__file__).resolve().parents[1] / "data" / "examples.yaml"
    data = yaml.safe_load(data_path.read_text(encoding="utf-8")) or {}
    items = [item for item in data.get("examples", []) if isinstance(item, dict)]
    assert items, "data/examples.yaml has no examples"
    return items


@pytest.fixture
def settings_path(tmp_path: Path, monkeypatch) -> Path:
    """A settings.yaml location that never touches the real project file."""
    path = tmp_path / "settings.yaml"
    monkeypatch.setenv("HANGUL_FUN_SETTINGS", str(path))
    return path
