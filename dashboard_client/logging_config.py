"""
logging_config.py
------------------

Shared logging configuration and helpers for structured logging
throughout the dashboard client.  Everything goes through Python's
built-in ``logging`` module so that applications embedding the client
can route the output to their own handlers.  Messages are serialised
as JSON to make them easier to parse downstream.

Import ``logger`` and call its methods instead of ``logging.info``
directly.  The ``log_call`` decorator can be applied to plain or
``async`` functions to record entry and exit points at DEBUG level
without leaking credentials such as API keys or bearer tokens.

Unlike an application, a library must not configure the root logger.
Call :func:`configure_logging` from application code (or a test) to
get the stdout handler with the standard format.
"""

from __future__ import annotations

import inspect
import json
import logging
import sys
from functools import wraps
from typing import Any, Callable, Dict

# Expose a module level logger.  Code elsewhere can import this and log
# messages without repeatedly instantiating new Logger instances.
logger = logging.getLogger("dashboard_client")
logger.addHandler(logging.NullHandler())

_SENSITIVE_KEYS = ("token", "password", "secret", "api_key", "apikey")
_SENSITIVE_HEADERS = {"authorization", "x-api-key"}


def configure_logging(level: int = logging.INFO) -> None:
    """Attach a stdout handler to the package logger.

    Messages are formatted with a timestamp, the level and the raw
    message, which is itself a JSON string.  Calling this more than
    once does not add duplicate handlers.
    """
    if any(getattr(h, "_dashboard_client", False) for h in logger.handlers):
        logger.setLevel(level)
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    handler._dashboard_client = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)


def _sanitize(obj: Any) -> Any:
    """Recursively sanitise objects for logging.

    Dictionaries have keys containing 'token', 'password', 'secret' or
    'api_key' removed.  Lists and tuples are processed element-wise and
    byte strings are replaced with a size marker.

    Parameters
    ----------
    obj : Any
        Arbitrary Python object to sanitise.

    Returns
    -------
    Any
        A sanitised representation of the input suitable for JSON serialisation.
    """
    if isinstance(obj, (bytes, bytearray)):
        return f"<binary {len(obj)} bytes>"
    if isinstance(obj, dict):
        clean: Dict[str, Any] = {}
        for k, v in obj.items():
            if any(keyword in str(k).lower() for keyword in _SENSITIVE_KEYS):
                continue
            clean[k] = _sanitize(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [_sanitize(i) for i in obj]
    # Pydantic models (ClientConfig, ResultEnvelope) expose model_dump.
    if hasattr(obj, "model_dump"):
        try:
            return _sanitize(obj.model_dump())
        except Exception:
            return str(obj)
    try:
        return json.loads(json.dumps(obj))
    except (TypeError, ValueError):
        return str(obj)


def _log_start(func: Callable[..., Any], args: Any, kwargs: Any) -> None:
    try:
        logger.debug(json.dumps({
            "event": "call_start",
            "function": func.__name__,
            "args": _sanitize(args),
            "kwargs": _sanitize(kwargs),
        }))
    except Exception:
        logger.debug(json.dumps({"event": "call_start", "function": func.__name__}))


def _log_end(func: Callable[..., Any], result: Any) -> None:
    try:
        logger.debug(json.dumps({
            "event": "call_end",
            "function": func.__name__,
            "result": _sanitize(result),
        }))
    except Exception:
        logger.debug(json.dumps({"event": "call_end", "function": func.__name__}))


def log_call(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to log entry and exit of functions.

    Emits a ``call_start`` event at DEBUG before the wrapped callable
    runs and a ``call_end`` event afterwards, with arguments and return
    value passed through ``_sanitize``.  Coroutine functions get an
    ``async`` wrapper so the end event is logged once the awaited
    result is available.

    Examples
    --------

    >>> @log_call
    ... async def get_organizations(client, query=None):
    ...     return await client.call("get", "/organizations", query=query)
    """

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            _log_start(func, args, kwargs)
            result = await func(*args, **kwargs)
            _log_end(func, result)
            return result

        return async_wrapper

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        _log_start(func, args, kwargs)
        result = func(*args, **kwargs)
        _log_end(func, result)
        return result

    return wrapper


def log_http_request(method: str, url: str, *, headers: Dict[str, Any] | None = None,
                     params: Dict[str, Any] | None = None, json_body: Any = None,
                     status: int | None = None, duration_ms: float | None = None,
                     attempt: int | None = None) -> None:
    """Log an outbound HTTP request at DEBUG level.

    Credential headers are removed and only high-level information
    (method, URL, status, duration and retry attempt) is recorded.
    Invoked by the client before and after every exchange.

    Parameters
    ----------
    method : str
        The HTTP method (GET, POST, etc.)
    url : str
        The URL being requested.
    headers : dict, optional
        Request headers.  Sensitive keys are removed.
    params : dict, optional
        Query parameters of the logical call.
    json_body : Any, optional
        JSON payload.
    status : int, optional
        Response status code (log end only).
    duration_ms : float, optional
        Time taken in milliseconds (log end only).
    attempt : int, optional
        Rate-limit retry counter of the exchange.
    """
    data: Dict[str, Any] = {
        "event": "http_request",
        "method": method,
        "url": url,
    }
    if headers is not None:
        data["headers"] = {k: v for k, v in headers.items() if k.lower() not in _SENSITIVE_HEADERS}
    if params:
        data["params"] = _sanitize(params)
    if json_body:
        data["json"] = _sanitize(json_body)
    if status is not None:
        data["status"] = status
    if duration_ms is not None:
        data["duration_ms"] = round(duration_ms, 2)
    if attempt:
        data["attempt"] = attempt
    logger.debug(json.dumps(data))
