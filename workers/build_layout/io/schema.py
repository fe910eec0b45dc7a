"""
Schema — Pydantic models for layout JSON outputs.

One output per resolution: layout_report.json — the relocated root,
evaluation order, and per-subproject output directory and JVM target.

Runtime contract fields (present in every output):
  package_name, layout_version, profile_id, schema_version.
"""
from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field

from build_layout import LAYOUT_VERSION, PACKAGE_NAME, SCHEMA_VERSION


# ── Per-subproject entry ─────────────────────────────────────────────────────

class SubprojectLayout(BaseModel):
    """Resolved output directory and compiler target for one subproject."""

    name: str
    build_dir: str
    target: str              # LEGACY | CURRENT
    jvm_target: str          # e.g. "1.8", "17"
    compiler_flag: str


# ── Report ───────────────────────────────────────────────────────────────────

class TargetCounts(BaseModel):
    total: int = 0
    legacy: int = 0
    current: int = 0


class LayoutReport(BaseModel):
    """Build-level summary — layout_report.json."""

    package_name: str = PACKAGE_NAME
    layout_version: str = LAYOUT_VERSION
    schema_version: str = SCHEMA_VERSION
    profile_id: str

    project_dir: str
    root_build_dir: str
    repositories: List[str] = Field(default_factory=list)
    evaluation_order: List[str] = Field(default_factory=list)

    subprojects: List[SubprojectLayout] = Field(default_factory=list)
    target_counts: TargetCounts = Field(default_factory=TargetCounts)

    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
