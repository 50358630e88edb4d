"""Report writers.

A report is one row per resolved match of a single scanned text. Raw values
are left out unless the caller explicitly asks for them.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence
from ..pii.base import PiiMatch
from ..utils.hashing import sha256_hex

def report_rows(text: str, matches: Sequence[PiiMatch], *, include_raw: bool = False) -> List[Dict[str, Any]]:
    doc_id = sha256_hex(text)
    rows = []
    for m in matches:
        row = {"doc_id": doc_id}
        row.update(m.to_dict(include_raw=include_raw))
        rows.append(row)
    return rows

class ReportWriter(ABC):
    """Writes a match report in a chosen format."""
    name: str
    extension: str

    @abstractmethod
    def write(self, rows: List[Dict[str, Any]], path: str) -> str:
        """Write rows and return the output path."""
        raise NotImplementedError
