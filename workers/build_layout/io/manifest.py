"""
Manifest — load a LayoutProfile from a versioned JSON file.

Example::

    {
      "schema_version": "0.1",
      "profile_id": "my-app",
      "legacy_projects": ["device_calendar", "receive_sharing_intent"],
      "legacy_jvm": "1.8",
      "current_jvm": "17"
    }

Only ``profile_id`` and ``legacy_projects`` are required; the rest
default to the built-in profile values.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from build_layout import SCHEMA_VERSION
from build_layout.policy.profile import LayoutProfile
from build_layout.policy.target import JvmTarget

logger = logging.getLogger(__name__)


class ProfileManifest(BaseModel):
    """On-disk form of a LayoutProfile."""

    schema_version: str = SCHEMA_VERSION
    profile_id: str
    legacy_projects: List[str]
    legacy_jvm: JvmTarget = JvmTarget.JVM_1_8
    current_jvm: JvmTarget = JvmTarget.JVM_17
    relocated_build_dir: str = "../../build"
    repositories: List[str] = Field(default_factory=lambda: ["google", "mavenCentral"])
    evaluation_anchor: Optional[str] = "app"

    def to_profile(self) -> LayoutProfile:
        return LayoutProfile(
            profile_id=self.profile_id,
            legacy_projects=frozenset(self.legacy_projects),
            legacy_jvm=self.legacy_jvm,
            current_jvm=self.current_jvm,
            relocated_build_dir=self.relocated_build_dir,
            repositories=tuple(self.repositories),
            evaluation_anchor=self.evaluation_anchor,
        )


def load_profile_manifest(path: Path) -> LayoutProfile:
    """
    Read and validate a profile manifest.

    Raises OSError if the file cannot be read, json.JSONDecodeError if
    it is not JSON, and pydantic.ValidationError if its content is
    malformed (both are ValueError subclasses).
    """
    raw = json.loads(path.read_text(encoding="utf-8"))
    manifest = ProfileManifest.model_validate(raw)
    if manifest.schema_version != SCHEMA_VERSION:
        logger.warning(
            "Manifest %s has schema_version %s (expected %s)",
            path, manifest.schema_version, SCHEMA_VERSION,
        )
    return manifest.to_profile()
