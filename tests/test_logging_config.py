import asyncio
import json
import logging

import httpx

from dashboard_client.logging_config import _sanitize, log_call, log_http_request, logger
from dashboard_client.schemas.envelope import ResultEnvelope


def test_sanitize_strips_credentials():
    cleaned = _sanitize({"api_key": "k", "token": "t", "name": "acme", "nested": [{"password": "p", "id": 1}]})
    assert cleaned == {"name": "acme", "nested": [{"id": 1}]}


def test_sanitize_handles_models_and_bytes():
    assert _sanitize(ResultEnvelope.ok(200, [1])) == {"success": True, "status": 200, "data": [1], "errors": None}
    assert _sanitize(b"abc") == "<binary 3 bytes>"


def test_log_http_request_drops_authorization(caplog):
    with caplog.at_level(logging.DEBUG, logger=logger.name):
        log_http_request("GET", "/organizations", headers={"Authorization": "Bearer k", "Accept": "x"}, status=200)
    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["headers"] == {"Accept": "x"}
    assert payload["status"] == 200


def test_log_call_wraps_coroutines(caplog):
    @log_call
    async def fetch(value):
        return value * 2

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        assert asyncio.run(fetch(2)) == 4
    events = [json.loads(r.getMessage())["event"] for r in caplog.records if r.name == logger.name]
    assert events == ["call_start", "call_end"]
    assert fetch.__name__ == "fetch"


def test_rate_limit_is_logged(client_for, sleeps, caplog):
    responses = iter([httpx.Response(429, headers={"Retry-After": "3"}), httpx.Response(200, json=[])])
    client = client_for(lambda request: next(responses))
    with caplog.at_level(logging.WARNING, logger=logger.name):
        asyncio.run(client.call("get", "/organizations"))
    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["event"] == "rate_limited"
    assert payload["delay_s"] == 3.0
