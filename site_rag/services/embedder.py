"""
Embedding backends used by the ingestion and retrieval pipelines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Protocol

import cohere


class Embedder(Protocol):
    async def embed_document(self, text: str) -> List[float]: ...

    async def embed_query(self, text: str) -> List[float]: ...


@dataclass
class CohereEmbedder:
    """Cohere v2 embed endpoint, one input text per request."""

    model: str
    api_key: Optional[str] = None
    client: Any = None

    def __post_init__(self) -> None:
        if self.client is None:
            if not self.api_key:
                raise RuntimeError("COHERE_API_KEY is not set")
            self.client = cohere.AsyncClientV2(api_key=self.api_key)

    async def _embed(self, text: str, input_type: str) -> List[float]:
        resp = await self.client.embed(
            model=self.model,
            texts=[text],
            input_type=input_type,
            embedding_types=["float"],
        )
        vectors = resp.embeddings.float_ or []
        if not vectors:
            raise ValueError(f"{self.model} returned no embedding")
        return list(vectors[0])

    async def embed_document(self, text: str) -> List[float]:
        return await self._embed(text, "search_document")

    async def embed_query(self, text: str) -> List[float]:
        return await self._embed(text, "search_query")
