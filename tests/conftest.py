"""Shared fixtures for prop_registry tests."""

from pathlib import Path
from typing import Any, Callable, Dict

import orjson
import pytest
from PySide6.QtCore import QSettings

from prop_registry.settings import AppSettings


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Write a JSON value to a path relative to tmp_path and return it."""

    def _write(relative: str, value: Any) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(orjson.dumps(value))
        return path

    return _write


@pytest.fixture
def read_json() -> Callable[[Path], Dict[str, Any]]:
    """Parse a JSON file."""

    def _read(path: Path) -> Dict[str, Any]:
        return orjson.loads(path.read_bytes())

    return _read


@pytest.fixture
def qsettings(tmp_path: Path) -> QSettings:
    """INI-backed QSettings isolated to the test."""
    return QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)


@pytest.fixture
def app_settings(qsettings: QSettings) -> AppSettings:
    """AppSettings on an isolated store."""
    return AppSettings(settings=qsettings)
