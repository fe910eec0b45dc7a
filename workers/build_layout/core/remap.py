"""
Remap — relocate the root build directory and namespace subprojects under it.

Layout convention::

    <project_dir>/build            # default root build dir (unused)
    <relocated root>/              # project_dir/build/<relocated_build_dir>
      <subproject>/                # one output directory per subproject
"""
from __future__ import annotations

import os
from pathlib import Path

DEFAULT_BUILD_DIR_NAME = "build"


def default_build_dir(project_dir: Path) -> Path:
    return project_dir / DEFAULT_BUILD_DIR_NAME


def relocate_root_build_dir(project_dir: Path, relative: str = "../../build") -> Path:
    """
    Resolve *relative* against the root project's default build directory.

    Normalisation is lexical only; symlinks are not followed and the
    directory is not required to exist.
    """
    return Path(os.path.normpath(default_build_dir(project_dir) / relative))


def remap_output_dir(base: Path, project_name: str) -> Path:
    """Output directory for *project_name* under the relocated root."""
    return base / project_name
