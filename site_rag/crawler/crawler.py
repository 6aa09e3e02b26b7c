# site_rag/crawler/crawler.py
"""
Ingestion crawler for SiteRAG: walks a site, embeds every page and writes the
records into the vector index. Produces an :class:`IngestReport`.
"""
from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, Tuple

from site_rag.chunker import chunk_text
from site_rag.config import RagConfig
from site_rag.crawler.fetcher import Fetcher
from site_rag.crawler.link_scoper import scope_links
from site_rag.crawler.models import CrawlTree, VisitationTracker
from site_rag.index.records import IndexRecord, VectorIndex, chunk_record, head_record
from site_rag.logger import LOGGER_NAME
from site_rag.parser.html_parser import extract_content
from site_rag.services.embedder import Embedder

__all__ = ("IngestReport", "IngestionCrawler", "CrawlAborted")


@dataclass(slots=True)
class IngestReport:
    """Outcome of one ingestion run."""
    seed: str
    pages: List[str] = field(default_factory=list)
    records: int = 0
    tree: Dict[str, List[str]] = field(default_factory=dict)
    duration: float = 0.0

    def as_dict(self) -> dict:
        return {
            "seed": self.seed,
            "pages": list(self.pages),
            "records": self.records,
            "tree": {k: list(v) for k, v in self.tree.items()},
            "duration": round(self.duration, 3),
        }


class CrawlAborted(RuntimeError):
    """A page could not be fetched, embedded or written; the crawl stopped there."""

    def __init__(self, url: str, pages_ingested: int) -> None:
        super().__init__(f"ingestion aborted at {url} after {pages_ingested} page(s)")
        self.url = url
        self.pages_ingested = pages_ingested


class IngestionCrawler:
    """
    Walks a site from ``config.base_url`` and writes every page into the index.

    Pages are handled one at a time: fetch, extract, embed the head, embed
    each body chunk, then schedule in-scope links. The worklist is a stack
    for ``traversal="depth"`` and a FIFO queue for ``"breadth"``. A URL is
    marked visited right before it is fetched, so it is fetched at most once.
    """

    def __init__(
        self,
        config: RagConfig,
        fetcher: Fetcher,
        embedder: Embedder,
        index: VectorIndex,
    ) -> None:
        self.config = config
        self.fetcher = fetcher
        self.embedder = embedder
        self.index = index
        self.visited = VisitationTracker()
        self.tree = CrawlTree(config.seed_url)
        self.records_written = 0
        self.logger = logging.getLogger(LOGGER_NAME)

    async def crawl(self) -> IngestReport:
        seed = self.config.seed_url
        depth_first = self.config.traversal == "depth"
        self.logger.info("Starting ingestion: %s (%s-first)", seed, self.config.traversal)
        start = time.monotonic()
        worklist: Deque[Tuple[str, Optional[str]]] = deque([(seed, None)])
        pages: List[str] = []

        while worklist:
            url, parent = worklist.pop() if depth_first else worklist.popleft()
            if url in self.visited:
                continue
            if self.config.max_pages is not None and len(pages) >= self.config.max_pages:
                pending = {url}.union(link for link, _ in worklist if link not in self.visited)
                self.logger.info("Page limit %d reached, %d URL(s) left unvisited",
                                 self.config.max_pages, len(pending))
                break
            self.visited.mark(url)
            if parent is not None:
                self.tree.attach(parent, url)

            try:
                links = await self.visit(url)
            except Exception as exc:
                self.logger.error("Ingestion aborted at %s: %s", url, exc)
                raise CrawlAborted(url, len(pages)) from exc
            pages.append(url)

            fresh = [link for link in links if link not in self.visited]
            # the stack pops from the right, so push in reverse to keep sibling order
            worklist.extend((link, url) for link in (reversed(fresh) if depth_first else fresh))

        duration = time.monotonic() - start
        self.logger.info("Done: %d page(s), %d record(s) in %.2f s", len(pages), self.records_written, duration)
        return IngestReport(
            seed=seed,
            pages=pages,
            records=self.records_written,
            tree=self.tree.adjacency(),
            duration=duration,
        )

    async def visit(self, url: str) -> List[str]:
        """Ingest one page and return its in-scope links."""
        self.logger.info("Ingesting %s", url)
        page = await self.fetcher.fetch(url)
        content = extract_content(url, page.content)

        # no <head>: embed the URL so every page still gets a head record
        head_vector = await self.embedder.embed_document(content.head or url)
        await self._write(head_record(url, head_vector))

        for i, chunk in enumerate(chunk_text(content.body, self.config.chunk_size)):
            vector = await self.embedder.embed_document(chunk)
            await self._write(chunk_record(url, i, chunk, content.head, vector))

        return scope_links(url, content.links, self.config.seed_url, self.config.domain)

    async def _write(self, record: IndexRecord) -> None:
        await self.index.write([record])
        self.records_written += 1
        self.logger.debug("Wrote %s", record.id)
