"""Report writer registry.

Writers are looked up by name (`jsonl`, `parquet`) or by the extension of the
requested output path.
"""

from __future__ import annotations
import os
from typing import Dict
from .base import ReportWriter
from .jsonl import JSONLReportWriter
from .parquet import ParquetReportWriter

_WRITERS: Dict[str, ReportWriter] = {
    "jsonl": JSONLReportWriter(),
    "parquet": ParquetReportWriter(),
}

def register_report_writer(name: str, writer: ReportWriter) -> None:
    """Register a new report writer."""
    if name in _WRITERS:
        raise ValueError(f"Report writer '{name}' already registered")
    _WRITERS[name] = writer

def list_report_writers() -> list[str]:
    return list(_WRITERS.keys())

def get_report_writer(name: str) -> ReportWriter:
    """Get report writer by name."""
    if name not in _WRITERS:
        raise KeyError(
            f"Unknown report writer: {name}. "
            f"Available: {list(_WRITERS)}. "
            f"Register with register_report_writer()"
        )
    return _WRITERS[name]

def writer_for_path(path: str) -> ReportWriter:
    ext = os.path.splitext(path)[1].lower()
    for w in _WRITERS.values():
        if w.extension == ext:
            return w
    raise KeyError(f"No report writer for extension '{ext}'. Available: {list(_WRITERS)}")
