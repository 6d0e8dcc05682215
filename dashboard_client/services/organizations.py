"""
services/organizations.py
-------------------------

Organization endpoints.  Each function forwards straight into
:meth:`DashboardClient.call` with a fixed verb and URL template.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from dashboard_client.clients.http_client import DashboardClient
from dashboard_client.logging_config import log_call
from dashboard_client.schemas.envelope import ResultEnvelope


@log_call
async def get_organizations(client: DashboardClient, query: Optional[Dict[str, Any]] = None) -> ResultEnvelope:
    return await client.call("get", "/organizations", query=query)


@log_call
async def create_organization(client: DashboardClient, body: Dict[str, Any]) -> ResultEnvelope:
    return await client.call("post", "/organizations", body=body)


@log_call
async def get_organization(client: DashboardClient, organization_id: str) -> ResultEnvelope:
    return await client.call("get", f"/organizations/{organization_id}")


@log_call
async def update_organization(client: DashboardClient, organization_id: str, body: Dict[str, Any]) -> ResultEnvelope:
    return await client.call("put", f"/organizations/{organization_id}", body=body)


@log_call
async def delete_organization(client: DashboardClient, organization_id: str) -> ResultEnvelope:
    return await client.call("delete", f"/organizations/{organization_id}")


@log_call
async def get_organization_networks(
    client: DashboardClient, organization_id: str, query: Optional[Dict[str, Any]] = None
) -> ResultEnvelope:
    """List networks; ``tags`` and ``productTypes`` accept lists."""
    return await client.call("get", f"/organizations/{organization_id}/networks", query=query)


@log_call
async def create_organization_network(
    client: DashboardClient, organization_id: str, body: Dict[str, Any]
) -> ResultEnvelope:
    return await client.call("post", f"/organizations/{organization_id}/networks", body=body)


@log_call
async def get_organization_devices(
    client: DashboardClient, organization_id: str, query: Optional[Dict[str, Any]] = None
) -> ResultEnvelope:
    return await client.call("get", f"/organizations/{organization_id}/devices", query=query)
