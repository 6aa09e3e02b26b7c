# File: site_rag/retrieval.py
"""site_rag.retrieval: answering a question from the nearest indexed passages."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence

from site_rag.index.records import VectorIndex
from site_rag.logger import LOGGER_NAME
from site_rag.services.completion import ChatModel
from site_rag.services.embedder import Embedder

__all__ = ["AnswerStatus", "Answer", "RetrievalPipeline", "build_prompt", "PROMPT_TEMPLATE"]

logger = logging.getLogger(LOGGER_NAME)

PROMPT_TEMPLATE = """
You are an AI support assistant specializing in providing information to users based on the given webpage context.
Answer the user's question based on the retrieved content.

Query: {question}
URL: {urls}
Retrieved Context: {context}
""".strip()

NO_DATA_MESSAGE = "No relevant data found in the database."


class AnswerStatus(str, Enum):
    ANSWERED = "answered"
    NO_DATA = "no_data"
    ERROR = "error"


@dataclass(slots=True)
class Answer:
    """Result of :meth:`RetrievalPipeline.answer`; ``text`` holds the message for every status."""

    status: AnswerStatus
    text: str
    prompt: Optional[str] = None
    sources: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is AnswerStatus.ANSWERED


def _non_blank(values: Iterable[Any]) -> List[str]:
    return [v for v in values if isinstance(v, str) and v.strip()]


def build_prompt(question: str, urls: Sequence[str], passages: Sequence[str]) -> str:
    """Fill :data:`PROMPT_TEMPLATE` with the question and retrieved material."""
    return PROMPT_TEMPLATE.format(
        question=question,
        urls=", ".join(urls),
        context=", ".join(passages),
    )


class RetrievalPipeline:
    """Embed question, look up nearest records, ask the chat model."""

    def __init__(
        self,
        embedder: Embedder,
        index: VectorIndex,
        chat: ChatModel,
        top_k: int = 1,
    ) -> None:
        if top_k < 1:
            raise ValueError("top_k must be >= 1")
        self.embedder = embedder
        self.index = index
        self.chat = chat
        self.top_k = top_k

    async def answer(self, question: str) -> Answer:
        """
        Never raises: failures come back as ``AnswerStatus.ERROR`` and an
        empty index as ``AnswerStatus.NO_DATA``.
        """
        try:
            vector = await self.embedder.embed_query(question)
        except Exception as exc:
            logger.error("Failed to generate embeddings for the question: %s", exc)
            return Answer(AnswerStatus.ERROR, f"Failed to generate embeddings for the question: {exc}")
        if not vector:
            logger.error("Failed to generate embeddings for the question")
            return Answer(AnswerStatus.ERROR, "Failed to generate embeddings for the question.")

        try:
            matches = await self.index.query(vector, top_k=self.top_k)
            if not matches:
                logger.info(NO_DATA_MESSAGE)
                return Answer(AnswerStatus.NO_DATA, NO_DATA_MESSAGE)
            prompt, sources = self._prompt_for(question, matches)
            text = await self.chat.complete(prompt)
        except Exception as exc:
            logger.error("Error answering from the index: %s", exc)
            return Answer(AnswerStatus.ERROR, f"Error answering from the index: {exc}")

        return Answer(AnswerStatus.ANSWERED, text, prompt=prompt, sources=sources)

    @staticmethod
    def _prompt_for(question: str, matches: Sequence[Dict[str, Any]]) -> tuple[str, List[str]]:
        passages = _non_blank(m.get("body") for m in matches)
        # several chunks of one page share a URL
        urls = list(dict.fromkeys(_non_blank(m.get("url") for m in matches)))
        return build_prompt(question, urls, passages), urls
