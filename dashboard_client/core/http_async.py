"""
Asynchronous transport for the dashboard client.

Builds the ``httpx.AsyncClient`` every :class:`DashboardClient` talks
through and wraps a single exchange with request logging.  Connection
handling, TLS and header parsing are left to httpx; this module only
fixes the base URL, the per-request timeout and the auth headers so
that all calls behave the same.

Usage example:

    from dashboard_client.core.http_async import build_async_client, send_request
    async with build_async_client(config) as http:
        resp = await send_request(http, "GET", "/organizations")
"""

from __future__ import annotations

import json
import time
from typing import Any, Dict, Optional

import httpx

from dashboard_client.core.auth import build_auth_headers, normalize_base_url
from dashboard_client.core.config import ClientConfig
from dashboard_client.logging_config import log_http_request, logger


def build_async_client(
    config: ClientConfig,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    extra_headers: Optional[Dict[str, str]] = None,
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` bound to one client configuration.

    ``transport`` lets tests plug in ``httpx.MockTransport`` or an
    ``httpx.ASGITransport`` without touching the network.
    """
    return httpx.AsyncClient(
        base_url=normalize_base_url(config.base_url),
        headers=build_auth_headers(config.api_key, config.user_agent, extra_headers),
        timeout=httpx.Timeout(config.timeout),
        transport=transport,
    )


async def send_request(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    json_body: Any = None,
    attempt: int = 0,
) -> httpx.Response:
    """Perform one HTTP exchange and log it.

    Any response, whatever its status, is returned to the caller.
    ``httpx.RequestError`` (connection refused, timeout, undecodable
    body, redirect loop) is logged and re-raised.

    Parameters
    ----------
    client : httpx.AsyncClient
        Client created by :func:`build_async_client`.
    method : str
        The HTTP method (e.g. ``"GET"``).
    url : str
        Path relative to the client's base URL, or an absolute URL.
    json_body : Any, optional
        JSON payload; omitted from the request when ``None``.
    attempt : int, optional
        Retry counter, recorded in the log only.

    Returns
    -------
    httpx.Response
        The response of the exchange.
    """
    method = method.upper()
    headers = dict(client.headers)
    log_http_request(method, url, headers=headers, json_body=json_body, attempt=attempt)
    start_time = time.time()
    kwargs: Dict[str, Any] = {}
    if json_body is not None:
        kwargs["json"] = json_body
    try:
        resp = await client.request(method, url, **kwargs)
    except httpx.RequestError as exc:
        duration_ms = (time.time() - start_time) * 1000
        logger.error(json.dumps({
            "event": "http_error",
            "method": method,
            "url": url,
            "detail": str(exc),
        }))
        log_http_request(method, url, status=None, duration_ms=duration_ms, attempt=attempt)
        raise
    duration_ms = (time.time() - start_time) * 1000
    log_http_request(method, url, status=resp.status_code, duration_ms=duration_ms, attempt=attempt)
    return resp
