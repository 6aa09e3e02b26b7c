# File: tests/test_report.py
import json

from site_rag.crawler.crawler import IngestReport
from site_rag.report.json_report import render_json


def test_render_json_writes_report(tmp_path):
    report = IngestReport(
        seed="https://example.com/",
        pages=["https://example.com/", "https://example.com/a"],
        records=5,
        tree={"https://example.com/": ["https://example.com/a"], "https://example.com/a": []},
        duration=1.23456,
    )
    out = render_json(report, tmp_path / "nested" / "ingest.json")

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["records"] == 5
    assert data["pages"][1] == "https://example.com/a"
    assert data["tree"]["https://example.com/"] == ["https://example.com/a"]
    assert data["duration"] == 1.235
