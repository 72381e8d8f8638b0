# main.py

"""
Orchestrator: read params (JSON + CLI), build one metadata report per path, print or write CSV.
"""
from __future__ import annotations
import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from filemeta.aggregator import ScanOptions, build_reports
from filemeta.model import ReportOutcome
from filemeta.report import format_report, write_csv

FORMATS = ("text", "csv")


def load_config(path: Path | None) -> Dict[str, Any]:
    """Load configuration from a JSON file.

    Args:
        path (Path | None): Path to the JSON configuration file.

    Returns:
        Dict[str, Any]: Configuration dictionary. Empty if no file is provided or read fails.
    """
    if not path:
        return {}
    try:
        with path.open("r", encoding="utf-8") as f:
            cfg = json.load(f)
    except (OSError, ValueError) as exc:
        print(f"[WARN] Failed to read config {path}: {exc}", file=sys.stderr)
        return {}
    if not isinstance(cfg, dict):
        print(f"[WARN] Ignoring config {path}: top level must be an object", file=sys.stderr)
        return {}
    return cfg


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments.

    Returns:
        argparse.Namespace: Parsed command-line arguments.
    """
    p = argparse.ArgumentParser(
        prog="filemeta",
        description="Report name, size, timestamps, permissions, line ending and content type of files."
    )
    p.add_argument("paths", nargs="+", metavar="PATH", help="File(s) to inspect.")
    p.add_argument("--format", choices=FORMATS, help="Output format (default: text).")
    p.add_argument("--report", type=str, help="Path to CSV report when --format csv (default: report.csv).")
    p.add_argument("--fail-fast", action="store_true", help="Stop at the first path that cannot be stat-ed "
                   "(with --workers, paths already in flight still finish).")
    p.add_argument("--no-follow-symlinks", action="store_true", help="Inspect symlinks themselves, not their targets.")
    p.add_argument("--workers", type=int, help="Number of paths processed in parallel (default: 1).")
    p.add_argument("--line-scan-limit", type=int, help="Stop the line-ending scan after this many bytes.")
    p.add_argument("--config", type=str, help="Optional JSON config (flags override).")
    return p.parse_args(argv)


def _get_effective_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Load the JSON configuration, falling back to params.json beside this script."""
    script_dir = Path(__file__).parent
    default_config_path = script_dir / "params.json"
    config_path = Path(args.config) if args.config else default_config_path
    return load_config(config_path if config_path.exists() else None)


def _config_int(cfg: Dict[str, Any], key: str, default: Optional[int]) -> Optional[int]:
    """Read an integer config value, warning and falling back to the default on bad types."""
    if key not in cfg:
        return default
    value = cfg[key]
    try:
        if isinstance(value, bool):
            raise TypeError("booleans are not integers")
        return int(value)
    except (TypeError, ValueError):
        print(f"[WARN] Ignoring config key {key!r}: expected an integer, got {value!r}", file=sys.stderr)
        return default


def _resolve_options(args: argparse.Namespace, cfg: Dict[str, Any]) -> Tuple[ScanOptions, str, Path, bool]:
    """Merge CLI flags over config values; flags win."""
    fmt = args.format or cfg.get("format", "text")
    if fmt not in FORMATS:
        print(f"[ERR] Unknown format {fmt!r} (expected one of: {', '.join(FORMATS)}).", file=sys.stderr)
        raise SystemExit(2)

    workers = args.workers if args.workers is not None else _config_int(cfg, "workers", 1)
    limit = args.line_scan_limit if args.line_scan_limit is not None else _config_int(cfg, "line_scan_limit", None)
    if workers < 1 or (limit is not None and limit < 0):
        print("[ERR] --workers must be >= 1 and --line-scan-limit must be >= 0.", file=sys.stderr)
        raise SystemExit(2)

    options = ScanOptions(
        follow_symlinks=not args.no_follow_symlinks and bool(cfg.get("follow_symlinks", True)),
        line_scan_limit=limit,
        workers=workers,
    )
    report_path = Path(args.report or cfg.get("report", "report.csv"))
    fail_fast = bool(args.fail_fast or cfg.get("fail_fast", False))
    return options, fmt, report_path, fail_fast


def _print_outcome(outcome: ReportOutcome) -> None:
    """Print one report block (plus a blank separator) or the path's error."""
    if outcome.report is None:
        print(f"[ERR] {outcome.error}", file=sys.stderr)
        return
    for warning in outcome.report.warnings:
        print(f"[WARN] {outcome.path}: {warning}", file=sys.stderr)
    print(format_report(outcome.report))
    print()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main orchestration function.

    Returns:
        int: Exit code. 0 if every path was reported, 3 if any path failed.
    """
    args = parse_args(argv)
    cfg = _get_effective_config(args)
    options, fmt, report_path, fail_fast = _resolve_options(args, cfg)

    outcomes: List[ReportOutcome] = []
    errors = 0

    results = build_reports(args.paths, options)
    try:
        for outcome in results:
            outcomes.append(outcome)
            if fmt == "text":
                _print_outcome(outcome)
            elif not outcome.ok:
                print(f"[ERR] {outcome.error}", file=sys.stderr)

            if not outcome.ok:
                errors += 1
                if fail_fast:
                    print("[ERR] Aborting (--fail-fast).", file=sys.stderr)
                    break
    finally:
        results.close()

    if fmt == "csv":
        write_csv(report_path, outcomes)
        print(f"[INFO] Done. Total: {len(outcomes)} | Errors: {errors}")
        print(f"[INFO] Report: {report_path.resolve()}")

    return 3 if errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
