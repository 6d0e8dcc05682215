"""
Exports the request helpers so that ``from dashboard_client.utils import ...``
works without knowing the module layout:

- is_valid_method
- encode_query
- parse_link_header / next_link / to_relative_path
"""

from __future__ import annotations

from .pagination import next_link, parse_link_header, to_relative_path
from .query import encode_query
from .validation import ALLOWED_METHODS, is_valid_method

__all__ = [
    "ALLOWED_METHODS",
    "is_valid_method",
    "encode_query",
    "parse_link_header",
    "next_link",
    "to_relative_path",
]
