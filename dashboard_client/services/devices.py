"""
services/devices.py
-------------------

Device endpoints, addressed by serial number.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from dashboard_client.clients.http_client import DashboardClient
from dashboard_client.logging_config import log_call
from dashboard_client.schemas.envelope import ResultEnvelope


@log_call
async def get_device(client: DashboardClient, serial: str) -> ResultEnvelope:
    return await client.call("get", f"/devices/{serial}")


@log_call
async def update_device(client: DashboardClient, serial: str, body: Dict[str, Any]) -> ResultEnvelope:
    return await client.call("put", f"/devices/{serial}", body=body)


@log_call
async def get_device_clients(
    client: DashboardClient, serial: str, query: Optional[Dict[str, Any]] = None
) -> ResultEnvelope:
    return await client.call("get", f"/devices/{serial}/clients", query=query)


@log_call
async def reboot_device(client: DashboardClient, serial: str) -> ResultEnvelope:
    return await client.call("post", f"/devices/{serial}/reboot")
