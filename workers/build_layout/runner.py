"""
Layout runner — top-level orchestration: project tree → layout report.

Ties discovery, ordering, remapping and target selection together
into ``resolve_layout``, and the clean task into ``run_clean``.  Both
can be called from the API router or from the CLI below.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from build_layout.config import settings
from build_layout.core.clean import register_clean_task
from build_layout.core.discovery import discover_subprojects
from build_layout.core.ordering import evaluation_order
from build_layout.core.remap import relocate_root_build_dir, remap_output_dir
from build_layout.io.manifest import load_profile_manifest
from build_layout.io.schema import LayoutReport, SubprojectLayout, TargetCounts
from build_layout.io.writer import write_report
from build_layout.policy.profile import LayoutProfile, get_profile
from build_layout.policy.target import CompilerTarget, select_target

logger = logging.getLogger(__name__)


def resolve_layout(
    project_dir: Path,
    projects: Optional[Iterable[str]] = None,
    profile: LayoutProfile | None = None,
    output_dir: Path | None = None,
) -> LayoutReport:
    """
    Resolve output directories and compiler targets for a build.

    Parameters
    ----------
    project_dir : Path
        Root project directory (the one holding settings.gradle).
    projects : iterable of str, optional
        Subproject names.  Discovered from *project_dir* if None.
    profile : LayoutProfile, optional
        Defaults to LayoutProfile.v1().
    output_dir : Path, optional
        Directory to write layout_report.json.  Nothing is written if None.

    Returns
    -------
    LayoutReport
    """
    if profile is None:
        profile = LayoutProfile.v1()

    if projects is None:
        projects = discover_subprojects(project_dir)
        logger.debug("Discovered %d subprojects under %s", len(projects), project_dir)

    # ── Step 1: evaluation order (anchor first) ─────────────────────
    ordered = evaluation_order(projects, profile.evaluation_anchor)

    # ── Step 2: relocate root build dir once ────────────────────────
    root_build_dir = relocate_root_build_dir(project_dir, profile.relocated_build_dir)

    # ── Step 3: per-subproject output dir + target ──────────────────
    entries: list[SubprojectLayout] = []
    counts = TargetCounts()

    for name in ordered:
        build_dir = remap_output_dir(root_build_dir, name)
        target = select_target(name, profile.legacy_projects)
        jvm = profile.jvm_for(target)

        entries.append(
            SubprojectLayout(
                name=name,
                build_dir=str(build_dir),
                target=target.value,
                jvm_target=jvm.value,
                compiler_flag=jvm.to_flag(),
            )
        )

        counts.total += 1
        if target == CompilerTarget.LEGACY:
            counts.legacy += 1
        else:
            counts.current += 1

    report = LayoutReport(
        profile_id=profile.profile_id,
        project_dir=str(project_dir),
        root_build_dir=str(root_build_dir),
        repositories=list(profile.repositories),
        evaluation_order=ordered,
        subprojects=entries,
        target_counts=counts,
    )

    if output_dir:
        write_report(report, output_dir)

    return report


def run_clean(project_dir: Path, profile: LayoutProfile | None = None) -> Path:
    """Delete the relocated root build directory; returns the path cleaned."""
    if profile is None:
        profile = LayoutProfile.v1()

    root_build_dir = relocate_root_build_dir(project_dir, profile.relocated_build_dir)
    clean = register_clean_task(root_build_dir)
    clean()
    return root_build_dir


# ── CLI ──────────────────────────────────────────────────────────────────────

def _load_profile(profile_name: Optional[str], manifest: Optional[str]) -> LayoutProfile:
    # explicit flags win over settings
    if manifest:
        return load_profile_manifest(Path(manifest))
    if profile_name:
        return get_profile(profile_name)
    if settings.MANIFEST:
        return load_profile_manifest(Path(settings.MANIFEST))
    return get_profile(settings.PROFILE)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="build-layout",
        description="build_layout — build-directory relocation and JVM target selection",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--project-dir",
        type=Path,
        default=None,
        help=f"Root project directory (default: {settings.PROJECT_DIR})",
    )
    source = common.add_mutually_exclusive_group()
    source.add_argument(
        "--profile",
        default=None,
        help=f"Built-in profile: v1 | v2 (default: {settings.PROFILE})",
    )
    source.add_argument(
        "--manifest",
        default=None,
        help="JSON profile manifest (default: BUILD_LAYOUT_MANIFEST if set)",
    )
    common.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    resolve = sub.add_parser("resolve", parents=[common], help="Resolve output dirs and JVM targets.")
    resolve.add_argument(
        "-p", "--project",
        dest="projects",
        action="append",
        default=None,
        help="Subproject name (repeatable; default: discover from project dir)",
    )
    resolve.add_argument(
        "-o", "--output-dir",
        type=Path,
        default=None,
        help="Directory to write layout_report.json",
    )

    sub.add_parser("clean", parents=[common], help="Delete the relocated root build directory.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for build_layout."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    project_dir = args.project_dir or Path(settings.PROJECT_DIR)

    try:
        profile = _load_profile(args.profile, args.manifest)
    except (OSError, ValueError) as e:
        logger.error("Cannot load profile: %s", e)
        return 1

    if args.cmd == "clean":
        try:
            cleaned = run_clean(project_dir, profile)
        except OSError as e:
            logger.error("Clean failed: %s", e)
            return 1
        print(f"Cleaned: {cleaned}")
        return 0

    if args.cmd == "resolve":
        if args.projects is None and not project_dir.is_dir():
            logger.error("Project directory not found: %s", project_dir)
            return 1
        try:
            report = resolve_layout(
                project_dir,
                projects=args.projects,
                profile=profile,
                output_dir=args.output_dir,
            )
        except (OSError, ValueError) as e:
            logger.error("Resolve failed: %s", e)
            return 1

        print(f"Profile: {report.profile_id}")
        print(f"Root build dir: {report.root_build_dir}")
        for entry in report.subprojects:
            print(f"  {entry.name}: {entry.build_dir} (jvm {entry.jvm_target})")
        print(f"Subprojects: {report.target_counts.total} "
              f"(legacy={report.target_counts.legacy}, "
              f"current={report.target_counts.current})")

        if args.output_dir:
            print(f"Report written to: {args.output_dir}")
        return 0

    raise SystemExit(f"Unknown command: {args.cmd}")


if __name__ == "__main__":
    sys.exit(main())
