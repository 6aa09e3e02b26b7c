# File: site_rag/parser/__init__.py
"""site_rag.parser: extracting head/body fragments and anchors from page markup."""

from .html_parser import ExtractedContent, extract_content

__all__ = ["ExtractedContent", "extract_content"]
