"""
utils/query.py
---------------

Serialises the query object of a logical call into a URL query string.

Array parameters follow the ``key[]=value`` convention used by the
dashboard API.  Values are coerced to strings but are NOT URL-escaped:
callers passing characters that need escaping must encode them first.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional


def _to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(query: Optional[Mapping[str, Any]]) -> str:
    """Build a query string from a mapping of parameters.

    Lists and tuples emit one ``key[]=value`` pair per element in
    order; scalars emit ``key=value``.  ``None`` values are skipped.
    The result starts with ``?`` and joins pairs with ``&``, or is the
    empty string when there is nothing to encode.

    :param query: mapping of parameter names to scalars or sequences
    :return: the encoded query string

    >>> encode_query({"a": 1, "b": [2, 3]})
    '?a=1&b[]=2&b[]=3'
    """
    if not query:
        return ""
    pairs: List[str] = []
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend(f"{key}[]={_to_str(item)}" for item in value)
        else:
            pairs.append(f"{key}={_to_str(value)}")
    if not pairs:
        return ""
    return "?" + "&".join(pairs)
