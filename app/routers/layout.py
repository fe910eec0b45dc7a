"""
Layout Router
Output-directory relocation, JVM target selection and clean for a
Gradle project tree.

Wraps build_layout.runner so the same resolution the CLI performs
is available over HTTP.
"""
import logging
from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from build_layout.config import settings as layout_settings  # type: ignore
from build_layout.io.manifest import load_profile_manifest  # type: ignore
from build_layout.io.schema import LayoutReport  # type: ignore
from build_layout.policy.profile import LayoutProfile, get_profile  # type: ignore
from build_layout.runner import resolve_layout, run_clean  # type: ignore

logger = logging.getLogger(__name__)


# =============================================================================
# Request/Response Models
# =============================================================================

class LayoutRequest(BaseModel):
    """Which project tree and profile to use."""
    project_dir: Optional[str] = Field(
        None,
        description="Root project directory (default: BUILD_LAYOUT_PROJECT_DIR)",
    )
    profile: Optional[str] = Field(
        None,
        description="Built-in profile: v1 or v2",
    )
    manifest: Optional[str] = Field(
        None,
        description="Path to a JSON profile manifest (overrides profile)",
    )


class ResolveRequest(LayoutRequest):
    """Request to resolve a build layout."""
    projects: Optional[List[str]] = Field(
        None,
        description="Subproject names; discovered from project_dir if omitted",
    )
    output_dir: Optional[str] = Field(
        None,
        description="Write layout_report.json into this directory",
    )


class CleanResponse(BaseModel):
    """Result of a clean."""
    profile_id: str
    cleaned: str


# =============================================================================
# Helpers
# =============================================================================

def _profile_for(request: LayoutRequest) -> LayoutProfile:
    manifest = request.manifest or (None if request.profile else layout_settings.MANIFEST)
    try:
        if manifest:
            return load_profile_manifest(Path(manifest))
        return get_profile(request.profile or layout_settings.PROFILE)
    except ValueError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        )
    except OSError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Manifest not readable: {e}",
        )


# =============================================================================
# Router
# =============================================================================

router = APIRouter()


@router.post(
    "/resolve",
    response_model=LayoutReport,
    status_code=status.HTTP_200_OK,
    summary="Resolve output directories and JVM targets for every subproject",
)
async def resolve_endpoint(request: ResolveRequest):
    """
    Relocate the root build directory, give each subproject its own
    output directory under it, and select each subproject's JVM target
    from the profile's legacy allow-list.
    """
    profile = _profile_for(request)
    project_dir = Path(request.project_dir or layout_settings.PROJECT_DIR)

    if request.projects is None and not project_dir.is_dir():
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Project directory not found: {project_dir}",
        )

    try:
        return resolve_layout(
            project_dir,
            projects=request.projects,
            profile=profile,
            output_dir=Path(request.output_dir) if request.output_dir else None,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        )
    except OSError as e:
        logger.error("Resolve failed for %s: %s", project_dir, e, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Resolve failed: {e}",
        )


@router.post(
    "/clean",
    response_model=CleanResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete the relocated root build directory",
)
async def clean_endpoint(request: LayoutRequest):
    """Idempotent: cleaning an absent directory succeeds."""
    profile = _profile_for(request)
    project_dir = Path(request.project_dir or layout_settings.PROJECT_DIR)

    try:
        cleaned = run_clean(project_dir, profile)
    except OSError as e:
        logger.error("Clean failed for %s: %s", project_dir, e, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Clean failed: {e}",
        )

    return CleanResponse(profile_id=profile.profile_id, cleaned=str(cleaned))
