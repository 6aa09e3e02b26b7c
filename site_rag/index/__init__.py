# File: site_rag/index/__init__.py
"""site_rag.index: index records and the Chroma-backed vector index."""

from .records import IndexRecord, VectorIndex, chunk_record, head_record

__all__ = ["IndexRecord", "VectorIndex", "head_record", "chunk_record"]
