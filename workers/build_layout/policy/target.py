"""
Target — compiler-target selection for subprojects.

A subproject gets exactly one of two targets.  Membership in the
legacy allow-list is the only input; names are matched exactly.
"""
from enum import Enum, unique
from typing import AbstractSet


@unique
class CompilerTarget(str, Enum):
    """Which of the two language levels a subproject compiles for."""
    LEGACY = "LEGACY"
    CURRENT = "CURRENT"


@unique
class JvmTarget(str, Enum):
    """JVM bytecode levels understood by the Kotlin compiler."""
    JVM_1_8 = "1.8"
    JVM_11 = "11"
    JVM_17 = "17"
    JVM_21 = "21"

    def to_flag(self) -> str:
        """Convert to kotlinc flag"""
        return f"-jvm-target {self.value}"


def select_target(project_name: str, legacy_projects: AbstractSet[str]) -> CompilerTarget:
    """
    Return LEGACY if *project_name* is in *legacy_projects*, else CURRENT.

    Case-sensitive, no prefix or wildcard matching.
    """
    if project_name in legacy_projects:
        return CompilerTarget.LEGACY
    return CompilerTarget.CURRENT
