# File: site_rag/index/records.py
"""site_rag.index.records: the unit written to the vector index."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence

__all__ = ["IndexRecord", "VectorIndex", "head_record", "chunk_record"]


@dataclass(slots=True)
class IndexRecord:
    """One (id, embedding, metadata) triple."""

    id: str
    embedding: List[float]
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def url(self) -> str:
        return self.metadata.get("url", "")


class VectorIndex(Protocol):
    async def write(self, records: Sequence[IndexRecord]) -> None: ...

    async def query(self, embedding: Sequence[float], top_k: int = 1) -> List[Dict[str, Any]]: ...


def head_record(url: str, embedding: List[float]) -> IndexRecord:
    """Record for a page's head fragment; its body is always empty."""
    return IndexRecord(id=f"{url}#head", embedding=embedding, metadata={"url": url, "body": ""})


def chunk_record(
    url: str, index: int, chunk: str, head: Optional[str], embedding: List[float]
) -> IndexRecord:
    """Record for the *index*-th body chunk of a page."""
    return IndexRecord(
        id=f"{url}#chunk-{index}",
        embedding=embedding,
        metadata={"url": url, "head": head or "", "body": chunk, "chunk": index},
    )
