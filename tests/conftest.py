"""Shared fixtures: a clean environment and an on-disk build layout."""

from pathlib import Path

import pytest

from eunit_pipeline.core.runner import BuildPaths


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's EUNIT_* settings out of the tests."""
    for name in ("EUNIT_BUILD_DIR", "EUNIT_PROFILE", "EUNIT_APPS", "EUNIT_TEST_SUFFIX"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def build_paths(tmp_path) -> BuildPaths:
    """BuildPaths for app 'myapp' with an existing, empty compile directory."""
    paths = BuildPaths(project_root=tmp_path, app="myapp")
    paths.compile_path.mkdir(parents=True)
    return paths


@pytest.fixture
def write_modules():
    """Return a helper writing {module_name: source} as .py files into a directory."""

    def write(directory: Path, sources: dict[str, str]) -> None:
        directory.mkdir(parents=True, exist_ok=True)
        for name, source in sources.items():
            (directory / f"{name}.py").write_text(source, encoding="utf-8")

    return write
