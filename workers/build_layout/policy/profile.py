"""
Profile — allow-list and layout knobs for a build.

The profile carries every policy decision (which subprojects stay on
the legacy JVM level, where the build tree is relocated, which anchor
project is evaluated first) so that core/ holds no opinions.  Editing
the allow-list is a profile change, not a code change.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, Optional, Tuple

from build_layout.policy.target import CompilerTarget, JvmTarget


@dataclass(frozen=True)
class LayoutProfile:
    """Describes how a build's output directories and JVM targets are laid out."""

    # Identity
    profile_id: str

    # Subprojects pinned to the legacy JVM level
    legacy_projects: FrozenSet[str]

    legacy_jvm: JvmTarget = JvmTarget.JVM_1_8
    current_jvm: JvmTarget = JvmTarget.JVM_17

    # Relative to the root project's default build/ directory
    relocated_build_dir: str = "../../build"

    repositories: Tuple[str, ...] = ("google", "mavenCentral")

    # Every other subproject's evaluation depends on this one
    evaluation_anchor: Optional[str] = "app"

    def jvm_for(self, target: CompilerTarget) -> JvmTarget:
        if target is CompilerTarget.LEGACY:
            return self.legacy_jvm
        return self.current_jvm

    @classmethod
    def v1(cls) -> LayoutProfile:
        """Three plugins on Java 1.8; everything else on 17."""
        return cls(
            profile_id="android-gradle-jvm-v1",
            legacy_projects=frozenset(
                {"device_calendar", "receive_sharing_intent", "workmanager_android"}
            ),
        )

    @classmethod
    def v2(cls) -> LayoutProfile:
        """Earlier allow-list without workmanager_android."""
        return cls(
            profile_id="android-gradle-jvm-v2",
            legacy_projects=frozenset({"receive_sharing_intent", "device_calendar"}),
        )


PROFILES: Dict[str, Callable[[], LayoutProfile]] = {
    "v1": LayoutProfile.v1,
    "v2": LayoutProfile.v2,
}

DEFAULT_PROFILE = "v1"


def get_profile(name: str) -> LayoutProfile:
    """Look up a built-in profile by short name ("v1") or full profile_id."""
    if name in PROFILES:
        return PROFILES[name]()
    for factory in PROFILES.values():
        profile = factory()
        if profile.profile_id == name:
            return profile
    raise ValueError(f"Unknown layout profile: {name}")
