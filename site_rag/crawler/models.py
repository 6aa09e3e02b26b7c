# site_rag/crawler/models.py
"""
Data models for the SiteRAG crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set, Union


@dataclass(slots=True)
class PageData:
    """Holds the URL and raw markup of a fetched page."""

    url: str
    content: Union[str, bytes]


@dataclass(slots=True)
class CrawlNode:
    """One discovered page. ``children`` lists child URLs in visit order."""

    url: str
    parent: Optional[str] = None
    children: List[str] = field(default_factory=list)


class VisitationTracker:
    """URLs already scheduled or processed during one crawl."""

    def __init__(self) -> None:
        self._seen: Set[str] = set()

    def __contains__(self, url: object) -> bool:
        return url in self._seen

    def __len__(self) -> int:
        return len(self._seen)

    def mark(self, url: str) -> bool:
        """Record *url*; return False if it was already known."""
        if url in self._seen:
            return False
        self._seen.add(url)
        return True


class CrawlTree:
    """Arena of :class:`CrawlNode` keyed by URL.

    Every URL appears once, so the parent/child edges form a tree even when
    the site's link graph has cycles.
    """

    def __init__(self, root_url: str) -> None:
        self.root = root_url
        self._nodes: Dict[str, CrawlNode] = {root_url: CrawlNode(root_url)}

    def __contains__(self, url: object) -> bool:
        return url in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[CrawlNode]:
        return iter(self._nodes.values())

    def get(self, url: str) -> Optional[CrawlNode]:
        return self._nodes.get(url)

    def attach(self, parent_url: str, url: str) -> CrawlNode:
        """Create the node for *url* under *parent_url*."""
        if url in self._nodes:
            raise ValueError(f"{url} is already in the crawl tree")
        parent = self._nodes[parent_url]
        node = CrawlNode(url, parent=parent_url)
        parent.children.append(url)
        self._nodes[url] = node
        return node

    def adjacency(self) -> Dict[str, List[str]]:
        return {node.url: list(node.children) for node in self._nodes.values()}
