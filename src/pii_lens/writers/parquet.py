from __future__ import annotations
import os
from typing import Any, Dict, List
import pyarrow as pa
import pyarrow.parquet as pq
from .base import ReportWriter

REPORT_SCHEMA = pa.schema([
    ("doc_id", pa.string()),
    ("category", pa.string()),
    ("masked_value", pa.string()),
    ("start", pa.int64()),
    ("end", pa.int64()),
    ("confidence", pa.float64()),
    ("source", pa.string()),
])

class ParquetReportWriter(ReportWriter):
    name = "parquet"
    extension = ".parquet"

    def write(self, rows: List[Dict[str, Any]], path: str) -> str:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        schema = REPORT_SCHEMA
        if any("raw_value" in r for r in rows):
            schema = schema.append(pa.field("raw_value", pa.string()))
        table = pa.Table.from_pylist(rows, schema=schema)
        pq.write_table(table, path)
        return path
