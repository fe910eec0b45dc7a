"""
Writer — serialize the layout report to JSON.

Filesystem layout:
    <output_dir>/layout_report.json
"""
import json
from pathlib import Path

from build_layout.io.schema import LayoutReport

REPORT_FILENAME = "layout_report.json"


def write_report(report: LayoutReport, output_dir: Path) -> Path:
    """
    Write layout_report.json into *output_dir*.

    Creates *output_dir* if it does not exist.
    Returns the path of the written file.
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    report_path = output_dir / REPORT_FILENAME
    report_path.write_text(
        json.dumps(
            report.model_dump(mode="json"),
            indent=2,
            sort_keys=True,
        )
        + "\n"
    )
    return report_path
