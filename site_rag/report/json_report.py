# site_rag/report/json_report.py

"""
JSON report of an ingestion run.

Serialises an IngestReport (visited pages, record count, crawl tree) to a file.
"""
import json
from pathlib import Path

from site_rag.crawler.crawler import IngestReport


def render_json(report: IngestReport, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Save *report* as JSON at *output_path* and return the path.

    Example:
    ```python
    from site_rag.report.json_report import render_json
    report_path = render_json(report, 'reports/ingest.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report.as_dict(), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
