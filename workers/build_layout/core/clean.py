"""
Clean — delete the relocated root build directory.
"""
import logging
import shutil
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)


def clean_build_dir(path: Path) -> None:
    """
    Recursively delete *path*.

    An already-absent directory is not an error.  Any other OSError
    (permissions, *path* being a file) propagates to the caller.  Unlike
    Gradle's Delete task, a plain file at *path* is left in place.
    """
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        logger.debug("Nothing to clean at %s", path)
        return
    logger.info("Deleted %s", path)


def register_clean_task(root_build_dir: Path) -> Callable[[], None]:
    """Bind the clean operation to *root_build_dir*; returns a zero-arg callable."""
    def clean() -> None:
        clean_build_dir(root_build_dir)

    return clean
