# filemeta/aggregator.py

"""
Builds one FileReport per path by combining filesystem attributes with
content inspection (magic-byte signature and line-ending scan).
"""
from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from .attributes import stat_path
from .errors import AttributeLookupError, FileOpenError
from .extension import get_extension_type, get_file_extension, get_file_name
from .line_ending import detect_line_ending
from .model import FileReport, LineEnding, ReportOutcome
from .signature import UNKNOWN, identify_file


@dataclass(frozen=True)
class ScanOptions:
    """Knobs for report building."""
    follow_symlinks: bool = True
    line_scan_limit: Optional[int] = None
    workers: int = 1


def _content_type(path: str) -> Tuple[str, str]:
    """Return (content_type, warning); the warning is empty on success."""
    try:
        return identify_file(path), ""
    except OSError as exc:
        return UNKNOWN, str(FileOpenError.from_os_error(path, "signature read", exc))


def _line_ending(path: str, limit: Optional[int]) -> Tuple[LineEnding, str]:
    """Return (line_ending, warning); the warning is empty on success."""
    try:
        return detect_line_ending(path, limit=limit), ""
    except OSError as exc:
        return LineEnding.NONE, str(FileOpenError.from_os_error(path, "line-ending scan", exc))


def build_report(path: str, options: ScanOptions = ScanOptions()) -> FileReport:
    """Build the metadata report for a single path.

    Attribute lookup is a hard dependency. The content scans are not: if the
    file cannot be opened for them, the report carries "unknown" / NONE and a
    warning describing the failure.

    Args:
        path (str): Path as given by the caller.
        options (ScanOptions): Scan configuration.

    Returns:
        FileReport: Immutable report for the path.

    Raises:
        AttributeLookupError: If the path cannot be stat-ed.
    """
    extension = get_file_extension(path)
    attrs = stat_path(path, follow_symlinks=options.follow_symlinks)

    # A link inspected without following has no content of its own; opening
    # it would scan the target instead.
    if attrs.file_type == "symlink":
        content_type, content_warning = UNKNOWN, ""
        line_ending, line_warning = LineEnding.NONE, ""
    else:
        content_type, content_warning = _content_type(path)
        line_ending, line_warning = _line_ending(path, options.line_scan_limit)

    return FileReport(
        path=path,
        name=get_file_name(path),
        extension=extension,
        extension_type=get_extension_type(extension),
        size_bytes=attrs.size,
        creation_time=attrs.creation_time,
        modification_time=attrs.modification_time,
        file_type=attrs.file_type,
        permissions=attrs.permissions,
        line_ending=line_ending,
        content_type=content_type,
        warnings=tuple(w for w in (content_warning, line_warning) if w),
    )


def _outcome(path: str, options: ScanOptions) -> ReportOutcome:
    """Build a report for one path, turning a stat failure into an error outcome."""
    try:
        return ReportOutcome(path=path, report=build_report(path, options))
    except AttributeLookupError as exc:
        return ReportOutcome(path=path, error=str(exc))


def build_reports(paths: Iterable[str], options: ScanOptions = ScanOptions()) -> Iterator[ReportOutcome]:
    """Yield one ReportOutcome per path, in input order.

    A path that fails attribute lookup yields an error outcome and does not
    stop the remaining paths. With ``options.workers > 1`` paths are
    processed on a thread pool; results are still yielded in input order.
    Closing the generator early cancels paths that have not started yet.
    """
    paths_list: List[str] = list(paths)
    if options.workers <= 1 or len(paths_list) <= 1:
        for path in paths_list:
            yield _outcome(path, options)
        return

    with ThreadPoolExecutor(max_workers=options.workers) as pool:
        futures = [pool.submit(_outcome, p, options) for p in paths_list]
        try:
            for future in futures:
                yield future.result()
        finally:
            for future in futures:
                future.cancel()
