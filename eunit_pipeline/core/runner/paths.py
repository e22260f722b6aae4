"""Build-path resolution for the active build profile."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ...constants import (
    COMPILE_SUBDIR,
    DEFAULT_BUILD_DIR,
    DEFAULT_PROFILE,
    DEFAULT_TEST_SUFFIX,
    ENV_APPS,
    ENV_BUILD_DIR,
    ENV_PROFILE,
    ENV_TEST_SUFFIX,
)


@dataclass(frozen=True)
class BuildPaths:
    """Where one app's build output lives.

    Layout: <project_root>/<build_dir>/<profile>/<app>/lib/*.py
    """
    project_root: Path
    app: str
    build_dir: str = DEFAULT_BUILD_DIR
    profile: str = DEFAULT_PROFILE

    @classmethod
    def from_env(cls, project_root: Path, app: str | None = None) -> BuildPaths:
        """Resolve paths using EUNIT_BUILD_DIR / EUNIT_PROFILE when set."""
        project_root = Path(project_root).resolve()
        return cls(
            project_root=project_root,
            app=app or project_root.name,
            build_dir=os.getenv(ENV_BUILD_DIR) or DEFAULT_BUILD_DIR,
            profile=os.getenv(ENV_PROFILE) or DEFAULT_PROFILE,
        )

    @property
    def app_path(self) -> Path:
        return self.project_root / self.build_dir / self.profile / self.app

    @property
    def compile_path(self) -> Path:
        return self.app_path / COMPILE_SUBDIR


def resolve_apps(project_root: Path) -> list[str]:
    """App names to run: EUNIT_APPS (comma-separated) or the project itself."""

    configured = os.getenv(ENV_APPS, "")
    apps = [name.strip() for name in configured.split(",") if name.strip()]
    return apps or [Path(project_root).resolve().name]


def configured_suffix() -> str:
    """Suffix marking a test module (EUNIT_TEST_SUFFIX, default '_test')."""
    return os.getenv(ENV_TEST_SUFFIX) or DEFAULT_TEST_SUFFIX

