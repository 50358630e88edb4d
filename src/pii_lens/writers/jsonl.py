from __future__ import annotations
import json
import os
from typing import Any, Dict, List
from .base import ReportWriter

class JSONLReportWriter(ReportWriter):
    name = "jsonl"
    extension = ".jsonl"

    def write(self, rows: List[Dict[str, Any]], path: str) -> str:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            for row in rows:
                f.write(json.dumps(row, ensure_ascii=False) + "\n")
        return path
