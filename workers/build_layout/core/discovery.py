"""
Discovery — find subprojects under a Gradle root.
"""
from __future__ import annotations

from pathlib import Path
from typing import List

BUILD_SCRIPT_NAMES = ("build.gradle.kts", "build.gradle")


def is_subproject(path: Path) -> bool:
    return path.is_dir() and any((path / n).is_file() for n in BUILD_SCRIPT_NAMES)


def discover_subprojects(project_dir: Path) -> List[str]:
    """Return sorted names of immediate child directories with a build script."""
    return sorted(
        d.name for d in project_dir.iterdir()
        if is_subproject(d)
    )
