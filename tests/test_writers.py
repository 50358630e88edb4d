"""Tests for report writers and the summary report."""
import json
import pyarrow.parquet as pq
import pytest
from pii_lens.pii import scan_text
from pii_lens.tools.summary_report import format_summary_report, generate_summary_report
from pii_lens.writers import registry
from pii_lens.writers.base import ReportWriter, report_rows
from pii_lens.writers.registry import (
    get_report_writer,
    list_report_writers,
    register_report_writer,
    writer_for_path,
)

S1 = "Contact John Smith at john.smith@example.com or 9876543210"


class TestReportRows:
    def test_rows_without_raw(self):
        rows = report_rows(S1, scan_text(S1))
        assert len(rows) == 3
        assert len({r["doc_id"] for r in rows}) == 1
        assert all("raw_value" not in r for r in rows)

    def test_rows_with_raw(self):
        rows = report_rows(S1, scan_text(S1), include_raw=True)
        assert "john.smith@example.com" in [r["raw_value"] for r in rows]


class TestWriters:
    def test_registry(self):
        assert list_report_writers() == ["jsonl", "parquet"]
        assert writer_for_path("out/report.parquet").name == "parquet"
        assert writer_for_path("report.JSONL").name == "jsonl"
        with pytest.raises(KeyError):
            writer_for_path("report.csv")
        with pytest.raises(KeyError):
            get_report_writer("csv")

    def test_register_custom_writer(self, tmp_path, monkeypatch):
        monkeypatch.setattr(registry, "_WRITERS", dict(registry._WRITERS))

        class TsvReportWriter(ReportWriter):
            name = "tsv"
            extension = ".tsv"

            def write(self, rows, path):
                with open(path, "w", encoding="utf-8") as f:
                    for r in rows:
                        f.write(f"{r['category']}\t{r['start']}\t{r['end']}\n")
                return path

        register_report_writer("tsv", TsvReportWriter())
        assert list_report_writers() == ["jsonl", "parquet", "tsv"]
        path = str(tmp_path / "report.tsv")
        writer_for_path(path).write(report_rows(S1, scan_text(S1)), path)
        with open(path, encoding="utf-8") as f:
            assert f.readline() == "Name\t8\t18\n"
        with pytest.raises(ValueError):
            register_report_writer("jsonl", TsvReportWriter())

    def test_jsonl(self, tmp_path):
        path = str(tmp_path / "sub" / "report.jsonl")
        rows = report_rows(S1, scan_text(S1))
        assert get_report_writer("jsonl").write(rows, path) == path
        with open(path, encoding="utf-8") as f:
            lines = [json.loads(line) for line in f]
        assert [r["category"] for r in lines] == ["Name", "Email", "Mobile"]

    def test_parquet(self, tmp_path):
        path = str(tmp_path / "report.parquet")
        get_report_writer("parquet").write(report_rows(S1, scan_text(S1)), path)
        table = pq.read_table(path)
        assert table.num_rows == 3
        assert "raw_value" not in table.column_names
        assert table.column("masked_value").to_pylist()[1] == "j****@e****"

    def test_parquet_with_raw(self, tmp_path):
        path = str(tmp_path / "report.parquet")
        get_report_writer("parquet").write(report_rows(S1, scan_text(S1), include_raw=True), path)
        assert "raw_value" in pq.read_table(path).column_names

    def test_parquet_empty(self, tmp_path):
        path = str(tmp_path / "empty.parquet")
        get_report_writer("parquet").write([], path)
        assert pq.read_table(path).num_rows == 0


class TestSummaryReport:
    def test_no_findings(self):
        assert "No PII detected in the provided content" in format_summary_report([])

    def test_findings(self, tmp_path):
        path = generate_summary_report(str(tmp_path / "summary.txt"), scan_text(S1), source_name="s1.txt", text_chars=len(S1))
        with open(path, encoding="utf-8") as f:
            body = f.read()
        assert "Source: s1.txt" in body
        assert "Total Findings: 3" in body
        assert "LOCATIONS" in body
        assert "[22, 44) Email: j****@e****" in body
        assert "john.smith@example.com" not in body
