"""
Chroma vector index wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

import chromadb

from site_rag.index.records import IndexRecord


@dataclass
class ChromaIndex:
    collection_name: str
    collection: Any

    @classmethod
    async def connect(cls, *, collection: str, host: str, port: int) -> "ChromaIndex":
        client = await chromadb.AsyncHttpClient(host=host, port=port)
        handle = await client.get_or_create_collection(name=collection)
        return cls(collection_name=collection, collection=handle)

    async def write(self, records: Sequence[IndexRecord]) -> None:
        if not records:
            return
        # upsert: re-ingesting a page replaces its records instead of tripping on known ids
        await self.collection.upsert(
            ids=[r.id for r in records],
            embeddings=[list(r.embedding) for r in records],
            metadatas=[r.metadata for r in records],
        )

    async def query(self, embedding: Sequence[float], top_k: int = 1) -> List[Dict[str, Any]]:
        """
        Return the metadata of the *top_k* records nearest to *embedding*,
        closest first. An empty collection gives an empty list.
        """
        res = await self.collection.query(
            query_embeddings=[list(embedding)],
            n_results=top_k,
            include=["metadatas"],
        )
        metadatas = res.get("metadatas") or []
        if not metadatas:
            return []
        return [dict(m) for m in (metadatas[0] or []) if m is not None]
