"""Pytest configuration and fixtures for aar-repackager tests."""
from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from aar_repackager.models import ArtifactSpec


FIXED_MOMENT = datetime(2024, 3, 5, 7, 8, 9)


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Keep repackager settings from leaking in from the developer's shell."""
    monkeypatch.delenv("AAR_REPACKAGER_TIMEZONE", raising=False)
    monkeypatch.delenv("AAR_REPACKAGER_TEMPLATES_DIR", raising=False)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_MOMENT


@pytest.fixture
def aar_file(tmp_path: Path) -> Path:
    path = tmp_path / "input" / "mylib-release.aar"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"PK\x03\x04 fake aar payload")
    return path


@pytest.fixture
def jar_file(tmp_path: Path) -> Path:
    path = tmp_path / "input" / "mylib.jar"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"PK\x03\x04 fake jar payload")
    return path


@pytest.fixture
def sources_file(tmp_path: Path) -> Path:
    path = tmp_path / "input" / "mylib-src.jar"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"PK\x03\x04 fake sources payload")
    return path


@pytest.fixture
def make_spec(tmp_path: Path):
    def _make(input_path: Path, *, output: str = "out/repo.zip", sources: Path | None = None) -> ArtifactSpec:
        return ArtifactSpec.from_options(
            input_path=input_path,
            sources_path=sources,
            output_path=tmp_path / output,
            group_id="com.example.lib",
            artifact_id="foo",
            version="1.2.3",
        )

    return _make
