"""
services/networks.py
--------------------

Network endpoints.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from dashboard_client.clients.http_client import DashboardClient
from dashboard_client.logging_config import log_call
from dashboard_client.schemas.envelope import ResultEnvelope


@log_call
async def get_network(client: DashboardClient, network_id: str) -> ResultEnvelope:
    return await client.call("get", f"/networks/{network_id}")


@log_call
async def update_network(client: DashboardClient, network_id: str, body: Dict[str, Any]) -> ResultEnvelope:
    return await client.call("put", f"/networks/{network_id}", body=body)


@log_call
async def delete_network(client: DashboardClient, network_id: str) -> ResultEnvelope:
    return await client.call("delete", f"/networks/{network_id}")


@log_call
async def get_network_devices(client: DashboardClient, network_id: str) -> ResultEnvelope:
    return await client.call("get", f"/networks/{network_id}/devices")


@log_call
async def get_network_clients(
    client: DashboardClient, network_id: str, query: Optional[Dict[str, Any]] = None
) -> ResultEnvelope:
    return await client.call("get", f"/networks/{network_id}/clients", query=query)
