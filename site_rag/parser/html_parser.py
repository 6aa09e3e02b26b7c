# === FILE: site_rag/parser/html_parser.py ===
"""HTML content extraction for SiteRAG.

Given the markup of a fetched page this module hands back the three things
the ingestion pipeline needs:

* head  - inner markup of ``<head>``. Without a ``<head>`` tag, the leading
  metadata elements of the document; ``None`` if there are none.
* body  - inner markup of ``<body>``. Without a ``<body>`` tag, the rest of
  the document content; ``None`` if there is none.
* links - raw ``href`` values of every ``<a>`` tag, unresolved, in document
  order (duplicates removed).

Parsing is delegated to BeautifulSoup with the lenient ``html.parser``
backend, so broken documents still give whatever sections can be found.
Deciding which links are worth following is left to
:func:`site_rag.crawler.link_scoper.scope_links`.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional, Union

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

__all__: Sequence[str] = ("ExtractedContent", "extract_content")

_HEAD_ELEMENTS = frozenset({"base", "link", "meta", "noscript", "script", "style", "template", "title"})


@dataclass(slots=True)
class ExtractedContent:
    """Fragments of one page."""

    url: str
    head: Optional[str]
    body: Optional[str]
    links: list[str] = field(default_factory=list)


def _inner_markup(tag: object) -> Optional[str]:
    if not isinstance(tag, Tag):
        return None
    return tag.decode_contents()


def _render(nodes: list[PageElement]) -> Optional[str]:
    if not nodes:
        return None
    return "".join(
        node.decode() if isinstance(node, Tag) else node.output_ready()
        for node in nodes
        if isinstance(node, (Tag, NavigableString))
    )


def _implied_sections(soup: BeautifulSoup) -> tuple[list[PageElement], list[PageElement]]:
    """Split top-level nodes of a document without explicit sections.

    Leading metadata elements (``<title>``, ``<meta>``, ...) form the head;
    everything from the first other element or non-blank text onwards forms
    the body. Doctype and comments belong to neither.
    """
    root = soup.html if isinstance(soup.html, Tag) else soup
    head: list[PageElement] = []
    body: list[PageElement] = []
    for node in root.contents:
        if isinstance(node, PreformattedString):
            continue
        if isinstance(node, Tag) and node.name in ("head", "body"):
            continue
        if not body:
            if isinstance(node, Tag) and node.name in _HEAD_ELEMENTS:
                head.append(node)
                continue
            if isinstance(node, NavigableString) and not node.strip():
                continue
        body.append(node)
    return head, body


def extract_content(page_url: str, markup: Union[str, bytes]) -> ExtractedContent:
    """Split *markup* into head/body fragments and raw anchor hrefs."""
    soup = BeautifulSoup(markup, "html.parser")

    seen: dict[str, None] = {}
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href = tag.get("href")
        if isinstance(href, str):
            seen.setdefault(href.strip(), None)

    head = _inner_markup(soup.head)
    body = _inner_markup(soup.body)
    if head is None or body is None:
        # html.parser does not add the <head>/<body> an HTML5 parser implies
        implied_head, implied_body = _implied_sections(soup)
        if head is None:
            head = _render(implied_head)
        if body is None:
            body = _render(implied_body)

    return ExtractedContent(url=page_url, head=head, body=body, links=list(seen))
