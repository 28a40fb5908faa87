"""Generate unused-files JSON report."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from next_unused.models import AnalysisResult


def write_report(result: AnalysisResult, report_path: Path) -> Path:
    """Write a JSON summary of the analysis to ``report_path``."""
    root = result.project_root

    report = {
        "version": "1.0",
        "generated": datetime.now().isoformat(),
        "project_root": str(root),
        "total_files": len(result.files),
        "entry_points": [_relative(p, root) for p in result.entry_points],
        "reachable_count": len(result.reachable),
        "unused_count": len(result.unused),
        "unused": [_relative(p, root) for p in result.unused],
        "warnings": [
            {"file": _relative(f.path, root), "kind": f.kind, "message": f.message}
            for f in result.failures
        ],
    }

    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(
        json.dumps(report, indent=2) + "\n",
        encoding="utf-8",
    )
    return report_path


def _relative(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)
