# site_rag/crawler/link_scoper.py
"""
Link scoping for SiteRAG: turns raw anchor hrefs into the in-scope URL set.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional
from urllib.parse import quote, urljoin, urlsplit, urlunsplit

from site_rag.logger import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)

__all__ = ["scope_links", "is_candidate_href", "normalize_url"]

_DEFAULT_PORTS = {"http": 80, "https": 443}
# existing %XX escapes and reserved characters stay as they are
_SAFE_CHARS = "/%:@!$&'()*+,;=-._~"


def normalize_url(url: str) -> str:
    """
    Canonical form of an absolute http(s) URL.

    Scheme and host are lowercased, a default port is dropped, an empty path
    becomes ``/`` and unsafe characters in path, query and fragment are
    percent-encoded, so ``/a b`` and ``/a%20b`` name the same page. URLs
    without a host are returned unchanged. Raises ``ValueError`` for an
    invalid port or IPv6 literal.
    """
    parts = urlsplit(url)
    host = parts.hostname
    if not host:
        return url
    scheme = parts.scheme.lower()

    netloc = f"[{host}]" if ":" in host else host
    port = parts.port
    if port is not None and port != _DEFAULT_PORTS.get(scheme):
        netloc = f"{netloc}:{port}"
    if parts.username is not None:
        userinfo = parts.username if parts.password is None else f"{parts.username}:{parts.password}"
        netloc = f"{userinfo}@{netloc}"

    path = quote(parts.path, safe=_SAFE_CHARS)
    if not path and scheme in _DEFAULT_PORTS:
        path = "/"
    query = quote(parts.query, safe=_SAFE_CHARS + "?")
    fragment = quote(parts.fragment, safe=_SAFE_CHARS + "?")
    return urlunsplit((scheme, netloc, path, query, fragment))


def is_candidate_href(href: Optional[str]) -> bool:
    """Fragment-only, root and missing hrefs never lead to new content."""
    return bool(href) and href != "/" and not href.startswith("#")


def scope_links(
    page_url: str,
    hrefs: Iterable[Optional[str]],
    base_url: str,
    base_domain: str,
) -> List[str]:
    """
    Resolve *hrefs* against *page_url* and keep the in-scope ones.

    Resolved URLs go through :func:`normalize_url` first. A link is in scope
    when its hostname equals *base_domain* and it starts with the normalised
    *base_url*. Malformed hrefs are skipped with a warning. The result has no
    duplicates and keeps first-seen order, which the crawler uses as sibling
    order.
    """
    domain = base_domain.lower()
    prefix = normalize_url(base_url)
    scoped: dict[str, None] = {}
    for href in hrefs:
        if not is_candidate_href(href):
            continue
        try:
            resolved = normalize_url(urljoin(page_url, href))
            hostname = urlsplit(resolved).hostname
        except ValueError:
            logger.warning("Skipping invalid URL: %s", href)
            continue
        if hostname == domain and resolved.startswith(prefix):
            scoped.setdefault(resolved, None)
    return list(scoped)
