# File: site_rag/crawler/__init__.py
"""site_rag.crawler: site traversal and page ingestion."""

from .crawler import CrawlAborted, IngestionCrawler, IngestReport
from .fetcher import Fetcher
from .link_scoper import scope_links
from .models import CrawlNode, CrawlTree, PageData, VisitationTracker

__all__ = [
    "CrawlAborted",
    "CrawlNode",
    "CrawlTree",
    "Fetcher",
    "IngestReport",
    "IngestionCrawler",
    "PageData",
    "VisitationTracker",
    "scope_links",
]
