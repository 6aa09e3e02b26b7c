# File: tests/conftest.py
import logging
from typing import Any, Dict, List, Sequence

import pytest

from site_rag.config import RagConfig
from site_rag.crawler.models import PageData
from site_rag.index.records import IndexRecord
from site_rag.logger import LOGGER_NAME


class FakeEmbedder:
    """Deterministic 3-d vectors; remembers every text it embedded."""

    def __init__(self) -> None:
        self.calls: List[tuple[str, str]] = []

    @staticmethod
    def vector(text: str) -> List[float]:
        return [float(len(text.split())), float(len(text)), 1.0]

    async def embed_document(self, text: str) -> List[float]:
        self.calls.append(("document", text))
        return self.vector(text)

    async def embed_query(self, text: str) -> List[float]:
        self.calls.append(("query", text))
        return self.vector(text)


class FakeIndex:
    """In-memory index ranking records by squared euclidean distance."""

    def __init__(self, records: Sequence[IndexRecord] = ()) -> None:
        self.records: List[IndexRecord] = list(records)
        self.writes = 0

    async def write(self, records: Sequence[IndexRecord]) -> None:
        self.writes += 1
        for record in records:
            self.records = [r for r in self.records if r.id != record.id]
            self.records.append(record)

    async def query(self, embedding: Sequence[float], top_k: int = 1) -> List[Dict[str, Any]]:
        def distance(record: IndexRecord) -> float:
            return sum((a - b) ** 2 for a, b in zip(record.embedding, embedding))

        ranked = sorted(self.records, key=distance)
        return [dict(r.metadata) for r in ranked[:top_k]]


class FakeChat:
    def __init__(self, reply: str = "stub answer") -> None:
        self.reply = reply
        self.prompts: List[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.reply


class FakeFetcher:
    """Serves markup from a dict and counts fetches per URL."""

    def __init__(self, pages: Dict[str, str]) -> None:
        self.pages = pages
        self.fetched: List[str] = []

    async def fetch(self, url: str) -> PageData:
        self.fetched.append(url)
        if url not in self.pages:
            raise ConnectionError(f"cannot reach {url}")
        return PageData(url, self.pages[url])


@pytest.fixture()
def embedder() -> FakeEmbedder:
    return FakeEmbedder()


@pytest.fixture()
def index() -> FakeIndex:
    return FakeIndex()


@pytest.fixture()
def chat() -> FakeChat:
    return FakeChat()


@pytest.fixture()
def basic_config() -> RagConfig:
    """
    Return a basic valid RagConfig for crawler tests.
    """
    return RagConfig(base_url="http://example.com", chunk_size=2)


@pytest.fixture()
def rag_caplog(caplog):
    """caplog wired to the project logger, which does not propagate to root."""
    lg = logging.getLogger(LOGGER_NAME)
    lg.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    yield caplog
    lg.removeHandler(caplog.handler)


@pytest.fixture()
def make_fetcher():
    """Factory: ``make_fetcher({url: markup})``."""
    return FakeFetcher


@pytest.fixture()
def make_index():
    """Factory: ``make_index([IndexRecord, ...])``."""
    return FakeIndex
