# File: site_rag/services/__init__.py
"""site_rag.services: hosted model backends (embeddings and chat)."""

from .completion import ChatModel, CohereChat
from .embedder import CohereEmbedder, Embedder

__all__ = ["Embedder", "CohereEmbedder", "ChatModel", "CohereChat"]
