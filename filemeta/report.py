# filemeta/report.py

from __future__ import annotations
import csv
import time
from pathlib import Path
from typing import Iterable

from .model import FileReport, ReportOutcome


def format_report(report: FileReport) -> str:
    """Render a report as a human-readable block (no trailing blank line).

    Args:
        report (FileReport): Report to render.

    Returns:
        str: One "Label: value" line per field.
    """
    lines = [
        f"File name: {report.name}",
        f"File extension: {report.extension} ({report.extension_type})",
        f"File size: {report.size_bytes} bytes",
        f"File creation time: {time.ctime(report.creation_time)}",
        f"File modification time: {time.ctime(report.modification_time)}",
        f"File type: {report.file_type}",
        f"File permissions: {report.permissions}",
        f"Line ending: {report.line_ending.value}",
        f"Kind of file: {report.content_type}",
    ]
    return "\n".join(lines)


def write_csv(out_path: Path, outcomes: Iterable[ReportOutcome]) -> None:
    """Write report outcomes to a CSV file, one row per input path.

    Failed paths get a row with only `path` and `error` filled in. Paths
    that are not valid UTF-8 are written back as their original bytes.

    Args:
        out_path (Path): Destination CSV file path.
        outcomes (Iterable[ReportOutcome]): Outcomes in input order.

    Returns:
        None
    """
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8", errors="surrogateescape", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([
            "path", "name", "extension", "extension_type", "size_bytes",
            "creation_time", "modification_time", "file_type", "permissions",
            "line_ending", "content_type", "error", "warnings"
        ])
        for o in outcomes:
            r = o.report
            if r is None:
                writer.writerow([o.path] + [""] * 10 + [o.error, ""])
                continue
            writer.writerow([
                r.path,
                r.name,
                r.extension,
                r.extension_type,
                r.size_bytes,
                time.ctime(r.creation_time),
                time.ctime(r.modification_time),
                r.file_type,
                r.permissions,
                r.line_ending.value,
                r.content_type,
                "",
                "; ".join(r.warnings)
            ])
