"""
core/auth.py
-------------

Helpers for building authenticated requests to the dashboard API.

These helpers centralise construction of the base URL and the HTTP
headers every call carries.  Keeping the credential handling here
ensures the API key is only ever placed in the ``Authorization``
header, which :mod:`dashboard_client.logging_config` strips before
anything is logged.
"""

from __future__ import annotations

from typing import Dict, Optional
from urllib.parse import urlsplit


def normalize_base_url(base_url: str) -> str:
    """Return the API base URL without surrounding whitespace or trailing slash.

    :param base_url: origin plus version prefix (e.g. ``https://host/api/v1``)
    :raises ValueError: if the value is not an absolute http(s) URL
    :return: the normalised base URL
    """
    base_url = base_url.strip().rstrip("/")
    parts = urlsplit(base_url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValueError(f"Invalid base URL: {base_url!r}")
    return base_url


def build_auth_headers(api_key: str, user_agent: str, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Create the headers required for an authenticated call.

    The API key is included as a Bearer token.  Additional headers can
    be provided by the caller and override the generated values.

    :param api_key: credential issued by the dashboard
    :param user_agent: value of the ``User-Agent`` header
    :param extra: optional headers merged last
    :return: a dictionary of headers suitable for use with httpx
    """
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
        "Accept": "application/json",
        "User-Agent": user_agent,
    }
    if extra:
        headers.update(extra)
    return headers
