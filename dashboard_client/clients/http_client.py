"""
clients/http_client.py
----------------------

Asynchronous dashboard API client.  One :class:`DashboardClient` is
created per credential/base URL and shared by every caller, either
injected explicitly or obtained from :func:`get_client`.  It uses the
``httpx`` library under the hood and honours the configuration in
:mod:`dashboard_client.core.config`.

Every logical call resolves to a :class:`ResultEnvelope`; no exception
escapes :meth:`DashboardClient.call`.  Two failure modes are handled
transparently:

* ``Link`` pagination: while a response advertises a ``rel="next"``
  page the client fetches it and concatenates the page bodies in
  fetch order.
* Rate limiting: a 429 response is retried up to ``max_retries`` times,
  waiting for the ``Retry-After`` header (whole seconds) or the
  configured default delay.  Each page gets its own retry budget.

Every other 4xx/5xx status is returned immediately as a failed
envelope, and network failures are reported with a 404 status.
"""

from __future__ import annotations

import asyncio
import json
from functools import lru_cache
from typing import Any, List, Optional, Tuple

import httpx
from pydantic import ValidationError

from dashboard_client.core.config import ClientConfig
from dashboard_client.core.http_async import build_async_client, send_request
from dashboard_client.logging_config import logger
from dashboard_client.schemas.envelope import CallDescriptor, ResultEnvelope, RetryState
from dashboard_client.utils.pagination import next_link, to_relative_path
from dashboard_client.utils.query import encode_query
from dashboard_client.utils.validation import is_valid_method

RATE_LIMIT_STATUS = 429
INVALID_INPUT_STATUS = 400
# Status reported when the exchange produced no response at all.
FALLBACK_STATUS = 404
MAX_RETRIES_MESSAGE = "Max retries reached"


def _as_list(data: Any) -> List[Any]:
    if data is None:
        return []
    if isinstance(data, list):
        return data
    return [data]


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _extract_errors(response: httpx.Response) -> Optional[List[Any]]:
    """Return the ``errors`` list of an error body, or ``None``.

    Bodies that are not JSON, or not of the ``{"errors": [...]}`` shape,
    yield ``None`` instead of a second failure.
    """
    if not response.content:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("errors"), list):
        return body["errors"]
    return None


class DashboardClient:
    """Async client issuing paginated, rate-limit aware calls.

    Use as an async context manager, or call :meth:`aclose` when done.
    An ``http_client`` passed in by the caller is left open.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config or ClientConfig.from_settings()
        self._owns_http = http_client is None
        self._http = http_client or build_async_client(self.config, transport=transport)

    def __repr__(self) -> str:
        return f"DashboardClient(base_url={self.config.base_url!r})"

    async def __aenter__(self) -> "DashboardClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTPX client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    async def call(
        self,
        method: Any,
        path: str,
        query: Optional[dict] = None,
        body: Any = None,
    ) -> ResultEnvelope:
        """Run one logical call and return its envelope.

        :param method: get, put, post or delete (any case)
        :param path: endpoint path relative to the base URL
        :param query: optional query parameters; sequences become ``key[]=v``
        :param body: optional JSON payload
        :return: the resolved envelope; paginated data is concatenated
        """
        if not is_valid_method(method):
            return ResultEnvelope.fail(INVALID_INPUT_STATUS, [f"Invalid method: {method!r}"])
        try:
            descriptor = CallDescriptor(method=method.lower(), path=path, query=query, body=body)
        except ValidationError as exc:
            logger.warning(json.dumps({"event": "invalid_call", "path": repr(path), "detail": str(exc)}))
            errors = [
                f"Invalid {'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            ]
            return ResultEnvelope.fail(INVALID_INPUT_STATUS, errors)
        return await self._call(descriptor)

    request = call

    async def _call(self, descriptor: CallDescriptor) -> ResultEnvelope:
        """Follow the continuation chain of a logical call page by page."""
        first: Optional[ResultEnvelope] = None
        pages: List[Any] = []
        page_count = 0
        current = descriptor
        while True:
            # every page starts with a fresh retry budget
            envelope, next_path = await self._fetch_page(current, RetryState())
            if not envelope.success:
                return envelope
            page_count += 1
            if first is None:
                first = envelope
            pages.extend(_as_list(envelope.data))
            if next_path is None:
                break
            if next_path == current.path:
                logger.warning(json.dumps({
                    "event": "pagination_loop",
                    "path": current.path,
                    "detail": "next link points at the page just fetched",
                }))
                break
            max_pages = self.config.max_pages
            if max_pages is not None and page_count >= max_pages:
                logger.warning(json.dumps({
                    "event": "pagination_truncated",
                    "path": descriptor.path,
                    "max_pages": max_pages,
                }))
                break
            current = descriptor.continuation(next_path)

        if page_count == 1:
            return first  # type: ignore[return-value]
        return ResultEnvelope.ok(envelope.status, pages)

    async def _fetch_page(
        self, descriptor: CallDescriptor, retry_state: RetryState
    ) -> Tuple[ResultEnvelope, Optional[str]]:
        """Fetch one page, retrying while the server answers 429.

        Returns the page envelope and the relative path of the next page
        (``None`` on the terminal page or on failure).
        """
        while True:
            try:
                response = await self._execute(descriptor, retry_state)
            except httpx.RequestError as exc:
                logger.error(json.dumps({
                    "event": "transport_failure",
                    "method": descriptor.method.upper(),
                    "path": descriptor.path,
                    "detail": str(exc),
                }))
                return ResultEnvelope.fail(FALLBACK_STATUS), None

            if response.status_code == RATE_LIMIT_STATUS:
                retry_state.attempt += 1
                if retry_state.attempt > self.config.max_retries:
                    logger.error(json.dumps({
                        "event": "rate_limit_exhausted",
                        "method": descriptor.method.upper(),
                        "path": descriptor.path,
                        "retries": self.config.max_retries,
                    }))
                    return ResultEnvelope.fail(RATE_LIMIT_STATUS, [MAX_RETRIES_MESSAGE]), None
                retry_state.delay = self._retry_delay(response)
                logger.warning(json.dumps({
                    "event": "rate_limited",
                    "method": descriptor.method.upper(),
                    "path": descriptor.path,
                    "attempt": retry_state.attempt,
                    "delay_s": retry_state.delay,
                }))
                await self._wait(retry_state.delay)
                continue

            if response.is_error:
                return ResultEnvelope.fail(response.status_code, _extract_errors(response)), None

            data = _decode_body(response)
            link = next_link(response.headers.get("link"))
            next_path = to_relative_path(link, self.config.base_url) if link else None
            return ResultEnvelope.ok(response.status_code, data), next_path

    async def _execute(self, descriptor: CallDescriptor, retry_state: RetryState) -> httpx.Response:
        """Issue a single HTTP exchange for ``descriptor``."""
        url = descriptor.path + encode_query(descriptor.query)
        return await send_request(
            self._http,
            descriptor.method,
            url,
            json_body=descriptor.body,
            attempt=retry_state.attempt,
        )

    async def _wait(self, delay: float) -> None:
        # suspends this call only; other calls on the loop keep running
        await asyncio.sleep(delay)

    def _retry_delay(self, response: httpx.Response) -> float:
        """Seconds to wait before retrying a throttled request."""
        value = response.headers.get("retry-after")
        if value is not None:
            try:
                seconds = int(value.strip())
            except ValueError:
                seconds = -1
            if seconds >= 0:
                return float(seconds)
        return self.config.retry_delay


@lru_cache()
def get_client() -> DashboardClient:
    """Return a process-wide client built from the environment settings.

    Convenience for scripts; libraries should inject their own
    :class:`DashboardClient`.  The underlying connection pool is bound
    to the event loop that first uses it.
    """
    return DashboardClient(ClientConfig.from_settings())
