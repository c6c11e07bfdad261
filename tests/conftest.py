"""Shared test fixtures."""

import os
from pathlib import Path

import pytest


@pytest.fixture
def round_trip_csv() -> str:
    return (
        "id,fixtureId,description,va\n"
        "1,F1,Downlight,150W\n"
        "2,F1,Downlight,150W\n"
        "3,F2,Wallwasher,75VA\n"
    )


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep CCK_* variables and any .env file out of the tests."""
    for key in list(os.environ):
        if key.startswith("CCK_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def write_csv(tmp_path: Path):
    """Write CSV text to a file under tmp_path and return its path."""

    def _write(text: str, name: str = "input.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8", newline="")
        return path

    return _write
