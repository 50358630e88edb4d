"""CLI entrypoint.

Commands:
- `pii-lens scan [PATH|-] [--policy policies/scan.yaml] [--masked] [--format html|text|json]`
- `pii-lens mask --category Email john.smith@example.com`
- `pii-lens categories`

The CLI is a thin presentation layer: it reads plain text, runs the
deterministic engine, prints the rendition on stdout and a summary table on
stderr. The default policy path can be set with PII_LENS_POLICY.
"""

from __future__ import annotations
import argparse
import json
import logging
import os
import sys
from typing import List, Optional
from rich import box
from rich.console import Console
from rich.table import Table
from .logging_ import setup_logging
from .pii.base import PiiCategory, PiiMatch
from .pii.engine import scan_text
from .pii.mask import mask
from .pii.redact import line_breaks, redact_text, render
from .pii.registry import iter_detectors
from .pii.summary import summarize, total_count
from .policies.loader import load_policy
from .tools.summary_report import generate_summary_report
from .writers.base import report_rows
from .writers.registry import writer_for_path

log = logging.getLogger("pii_lens.cli")

_SEVERITY_STYLE = {"high": "red", "medium": "yellow", "low": "cyan"}

def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()

def _summary_table(matches: List[PiiMatch]) -> Table:
    summaries = summarize(matches)
    table = Table(
        title=f"[bold]PII Detection Results[/bold] ({total_count(summaries)} items found)",
        box=box.ROUNDED,
    )
    table.add_column("PII Category", style="bold")
    table.add_column("Count", justify="right")
    table.add_column("Avg Confidence", justify="right")
    table.add_column("Risk Level")
    for s in summaries:
        style = _SEVERITY_STYLE[s.severity]
        table.add_row(s.category.value, str(s.count), f"{s.average_confidence:.2f}", f"[{style}]{s.severity.capitalize()}[/{style}]")
    return table

def _cmd_scan(args: argparse.Namespace) -> int:
    policy = load_policy(args.policy)
    text = _read_input(args.input)
    matches = scan_text(text, policy)
    log.info(f"scanned chars={len(text)} matches={len(matches)}")

    if args.format == "json":
        out = json.dumps([m.to_dict() for m in matches], ensure_ascii=False, indent=2)
    elif args.format == "text":
        out = redact_text(text, matches) if args.masked else text
    else:
        out = render(text, matches, masked=args.masked)
        if policy.line_breaks:
            out = line_breaks(out)
    sys.stdout.write(out)
    if not out.endswith("\n"):
        sys.stdout.write("\n")

    err = Console(stderr=True)
    if matches:
        err.print(_summary_table(matches))
    else:
        err.print("[green]No PII detected in the provided content[/green]")

    if args.report:
        writer = writer_for_path(args.report)
        path = writer.write(report_rows(text, matches, include_raw=args.include_raw), args.report)
        log.info(f"Report: {path}")
    if args.summary_out:
        path = generate_summary_report(args.summary_out, matches, source_name=args.input, text_chars=len(text))
        log.info(f"Summary report: {path}")
    return 0

def _cmd_mask(args: argparse.Namespace) -> int:
    print(mask(args.value, PiiCategory.parse(args.category)))
    return 0

def _cmd_categories(args: argparse.Namespace) -> int:
    table = Table(title="[bold]PII Categories[/bold]", box=box.ROUNDED)
    table.add_column("Category", style="cyan", no_wrap=True)
    table.add_column("Context", justify="center")
    table.add_column("Keywords", style="yellow")
    for det in iter_detectors():
        table.add_row(det.name, "required" if det.requires_context else "-", ", ".join(det.keywords))
    Console().print(table)
    return 0

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pii-lens")
    p.add_argument("--log-dir", default=None, help="Also write logs to <log-dir>/<run>.log")
    p.add_argument("--log-level", default="WARNING")
    sub = p.add_subparsers(dest="cmd", required=True)

    ps = sub.add_parser("scan", help="Scan a text file (or stdin) for PII")
    ps.add_argument("input", nargs="?", default="-", help="Text file to scan, '-' for stdin")
    ps.add_argument("--policy", default=os.environ.get("PII_LENS_POLICY"), help="Scan policy YAML")
    ps.add_argument("--masked", action="store_true", help="Show masked values instead of raw ones")
    ps.add_argument("--format", choices=("html", "text", "json"), default="html")
    ps.add_argument("--report", default=None, metavar="OUT", help="Write a match report (.jsonl or .parquet)")
    ps.add_argument("--include-raw", action="store_true", help="Include raw PII values in the report")
    ps.add_argument("--summary-out", default=None, metavar="FILE", help="Write a plain-text summary report")
    ps.set_defaults(func=_cmd_scan)

    pm = sub.add_parser("mask", help="Mask a single value")
    pm.add_argument("--category", required=True, choices=[c.value for c in PiiCategory])
    pm.add_argument("value")
    pm.set_defaults(func=_cmd_mask)

    pc = sub.add_parser("categories", help="List detector categories")
    pc.set_defaults(func=_cmd_categories)
    return p

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(log_dir=args.log_dir, level=args.log_level)
    return args.func(args)

if __name__ == "__main__":
    sys.exit(main())
