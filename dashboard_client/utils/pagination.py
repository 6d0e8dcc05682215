"""
utils/pagination.py
--------------------

Helpers for following ``Link`` header pagination.

The dashboard API paginates list endpoints by returning a ``Link``
header made of comma-separated records such as::

    <https://host/api/v1/organizations?startingAfter=abc>; rel="next",
    <https://host/api/v1/organizations?endingBefore=xyz>; rel="prev"

Only the ``next`` relation matters to the client.  The target URL
already carries every query parameter the server wants for the next
page, so it is turned into a path relative to the configured base URL
and requested as-is.
"""

from __future__ import annotations

import re
from typing import Dict, Optional

import httpx

_LINK_RECORD = re.compile(r'^\s*<([^>]*)>\s*(.*)$')
_REL_PARAM = re.compile(r'rel\s*=\s*"?([^";]+)"?', re.IGNORECASE)


def parse_link_header(value: Optional[str]) -> Dict[str, str]:
    """Map each relation of a ``Link`` header to its target URL.

    Records that do not match ``<url>; rel=...`` are ignored.  When a
    relation appears more than once the first record wins.

    :param value: raw header value, possibly ``None``
    :return: ``{"next": url, ...}``
    """
    links: Dict[str, str] = {}
    if not value:
        return links
    for record in value.split(","):
        match = _LINK_RECORD.match(record)
        if not match:
            continue
        url, params = match.groups()
        rel = _REL_PARAM.search(params)
        if not rel:
            continue
        for name in rel.group(1).split():
            links.setdefault(name.lower(), url.strip())
    return links


def next_link(value: Optional[str]) -> Optional[str]:
    """Return the ``rel="next"`` target of a ``Link`` header, if any."""
    return parse_link_header(value).get("next")


def to_relative_path(url: str, base_url: str) -> str:
    """Strip the API origin and version prefix from a continuation URL.

    Relative targets (``</api/v1/orgs?page=2>``) are resolved against
    ``base_url`` first.  URLs outside ``base_url`` are returned absolute;
    httpx requests them directly.

    >>> to_relative_path("https://h/api/v1/orgs?page=2", "https://h/api/v1")
    '/orgs?page=2'
    """
    base_url = base_url.rstrip("/")
    url = str(httpx.URL(base_url).join(url))
    if url.startswith(base_url):
        rest = url[len(base_url):]
        if not rest:
            return "/"
        if rest[0] in "/?":
            return rest if rest[0] == "/" else "/" + rest
    return url
