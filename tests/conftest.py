from __future__ import annotations

from pathlib import Path

import pytest

from versiongate.core.paths import global_paths


@pytest.fixture(autouse=True)
def tmp_working_directory(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> Path:
    tmp_working_directory = tmp_path_factory.mktemp("test_cwd")
    monkeypatch.chdir(tmp_working_directory)
    return tmp_working_directory


@pytest.fixture(autouse=True)
def versiongate_home(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> Path:
    home = tmp_path_factory.mktemp("versiongate") / ".versiongate"
    home.mkdir(parents=True, exist_ok=True)

    monkeypatch.delenv("VERSIONGATE_HOME", raising=False)
    monkeypatch.setattr(global_paths, "_DEFAULT_VERSIONGATE_HOME", home)
    return home
