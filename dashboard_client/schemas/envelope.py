"""
schemas/envelope.py
--------------------

Pydantic models describing a logical call and its outcome.  Every
call made through :class:`~dashboard_client.clients.http_client.DashboardClient`
resolves to a :class:`ResultEnvelope`, whether the remote side
answered with data, rejected the request, throttled it or could not be
reached at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class DashboardAPIError(Exception):
    """Raised by :meth:`ResultEnvelope.raise_for_error` for failed calls."""

    def __init__(self, status: int, errors: Any = None):
        message = f"Dashboard API call failed with status {status}"
        if errors:
            message = f"{message}: {errors}"
        super().__init__(message)
        self.status = status
        self.errors = errors


class ResultEnvelope(BaseModel):
    """Uniform result of a logical call.

    ``success=True`` carries ``data`` (the aggregated list for paginated
    endpoints) and never ``errors``; ``success=False`` carries ``errors``
    when the server sent any and never ``data``.
    """

    success: bool
    status: int
    data: Any = None
    errors: Any = None

    @model_validator(mode="after")
    def _check_consistency(self) -> "ResultEnvelope":
        if self.success and self.errors is not None:
            raise ValueError("successful envelope cannot carry errors")
        if not self.success and self.data is not None:
            raise ValueError("failed envelope cannot carry data")
        return self

    @classmethod
    def ok(cls, status: int, data: Any) -> "ResultEnvelope":
        return cls(success=True, status=status, data=data)

    @classmethod
    def fail(cls, status: int, errors: Any = None) -> "ResultEnvelope":
        return cls(success=False, status=status, errors=errors)

    def raise_for_error(self) -> "ResultEnvelope":
        """Return ``self`` on success, raise :class:`DashboardAPIError` otherwise."""
        if not self.success:
            raise DashboardAPIError(self.status, self.errors)
        return self


class CallDescriptor(BaseModel):
    """One logical call: verb, endpoint path, query parameters and body."""

    model_config = ConfigDict(frozen=True)

    method: str
    path: str
    query: Optional[Dict[str, Any]] = None
    body: Any = None

    def continuation(self, path: str) -> "CallDescriptor":
        """Descriptor for the next page.

        Same verb and body; the query is dropped because the
        continuation URL already embeds it.
        """
        return CallDescriptor(method=self.method, path=path, body=self.body)


@dataclass
class RetryState:
    """Rate-limit retry bookkeeping for a single page fetch."""

    attempt: int = 0
    delay: float = 0.0
