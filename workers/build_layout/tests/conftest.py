"""
Shared pytest fixtures for build_layout tests.

Builds throwaway Gradle-like project trees under tmp_path:

    <tmp>/
      android/
        settings.gradle.kts
        app/build.gradle.kts
        device_calendar/build.gradle
        ...
"""
import json
from pathlib import Path

import pytest

from build_layout.policy.profile import LayoutProfile

SUBPROJECTS = ["app", "device_calendar", "receive_sharing_intent", "workmanager_android"]


def _make_project(root: Path, names, script: str = "build.gradle.kts") -> Path:
    root.mkdir(parents=True, exist_ok=True)
    (root / "settings.gradle.kts").write_text(
        "\n".join(f'include(":{n}")' for n in names) + "\n"
    )
    for name in names:
        sub = root / name
        sub.mkdir()
        (sub / script).write_text("// generated for tests\n")
    return root


@pytest.fixture
def android_dir(tmp_path) -> Path:
    """A project root at <tmp>/android with four subprojects."""
    return _make_project(tmp_path / "android", SUBPROJECTS)


@pytest.fixture
def profile_v1() -> LayoutProfile:
    return LayoutProfile.v1()


@pytest.fixture
def profile_v2() -> LayoutProfile:
    return LayoutProfile.v2()


@pytest.fixture
def manifest_file(tmp_path) -> Path:
    """A valid profile manifest pinning only 'legacy_lib'."""
    p = tmp_path / "profile.json"
    p.write_text(json.dumps({
        "schema_version": "0.1",
        "profile_id": "custom",
        "legacy_projects": ["legacy_lib"],
        "current_jvm": "21",
    }))
    return p
