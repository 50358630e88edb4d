"""Plain-text scan summary report.

Written by `pii-lens scan --summary-out FILE`; the same content the CLI shows
as a table, in a form suitable for attaching to tickets or audit trails.
"""

from __future__ import annotations
import os
from datetime import datetime
from typing import List, Optional, Sequence
from ..pii.base import PiiMatch
from ..pii.summary import summarize, total_count

def format_summary_report(
    matches: Sequence[PiiMatch],
    *,
    source_name: str = "<stdin>",
    text_chars: Optional[int] = None,
) -> str:
    summaries = summarize(matches)
    lines: List[str] = []
    lines.append("=" * 70)
    lines.append("PII LENS - SCAN SUMMARY REPORT")
    lines.append("=" * 70)
    lines.append("")
    lines.append(f"Source: {source_name}")
    if text_chars is not None:
        lines.append(f"Characters Scanned: {text_chars:,}")
    lines.append(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    lines.append("")

    lines.append("=" * 70)
    lines.append("FINDINGS")
    lines.append("=" * 70)
    lines.append("")
    if not summaries:
        lines.append("No PII detected in the provided content")
        lines.append("")
    else:
        lines.append(f"Total Findings: {total_count(summaries):,}")
        lines.append("")
        lines.append(f"{'Category':<16}{'Count':>8}{'Avg Conf':>10}  Risk")
        for s in summaries:
            lines.append(f"{s.category.value:<16}{s.count:>8}{s.average_confidence:>10.2f}  {s.severity.capitalize()}")
        lines.append("")

        lines.append("=" * 70)
        lines.append("LOCATIONS")
        lines.append("=" * 70)
        lines.append("")
        for m in matches:
            lines.append(f"[{m.start}, {m.end}) {m.category.value}: {m.masked_value}")
        lines.append("")

    return "\n".join(lines)

def generate_summary_report(path: str, matches: Sequence[PiiMatch], **kwargs) -> str:
    """Write the summary report to `path` and return the path."""
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_summary_report(matches, **kwargs))
    return path
