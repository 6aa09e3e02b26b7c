# File: site_rag/report/__init__.py
"""site_rag.report: ingestion reports used by the CLI."""

from .json_report import render_json

__all__ = ["render_json"]
