# File: site_rag/engine.py
"""site_rag.engine: builds the service clients from configuration and runs the pipelines."""

from __future__ import annotations

from aiohttp import ClientSession, ClientTimeout

from site_rag.config import Credentials, RagConfig
from site_rag.crawler.crawler import IngestionCrawler, IngestReport
from site_rag.crawler.fetcher import Fetcher
from site_rag.index.chroma_store import ChromaIndex
from site_rag.logger import logger
from site_rag.retrieval import Answer, RetrievalPipeline
from site_rag.services.completion import CohereChat
from site_rag.services.embedder import CohereEmbedder

__all__ = ["ingest_site", "ask_question"]


async def _open_index(config: RagConfig) -> ChromaIndex:
    return await ChromaIndex.connect(
        collection=config.collection,
        host=config.chroma_host,
        port=config.chroma_port,
    )


async def ingest_site(config: RagConfig, credentials: Credentials) -> IngestReport:
    """
    Crawl ``config.base_url`` and populate the configured collection.

    Parameters
    ----------
    config : RagConfig
        Crawl, index and model settings.
    credentials : Credentials
        Must carry a Cohere API key.

    Returns
    -------
    IngestReport
        Visited pages, records written and the crawl tree.
    """
    embedder = CohereEmbedder(model=config.embed_model, api_key=credentials.require_cohere())
    index = await _open_index(config)
    timeout = ClientTimeout(total=config.timeout)
    async with ClientSession(timeout=timeout, headers={"User-Agent": config.user_agent}) as session:
        crawler = IngestionCrawler(config, Fetcher(session), embedder, index)
        return await crawler.crawl()


async def ask_question(config: RagConfig, credentials: Credentials, question: str) -> Answer:
    """Answer *question* from the configured collection."""
    api_key = credentials.require_cohere()
    logger.info("Answering: %s", question)
    pipeline = RetrievalPipeline(
        embedder=CohereEmbedder(model=config.embed_model, api_key=api_key),
        index=await _open_index(config),
        chat=CohereChat(model=config.chat_model, api_key=api_key),
        top_k=config.top_k,
    )
    return await pipeline.answer(question)
