"""
dashboard_client package
------------------------

Async client for a dashboard-style REST API.  Importing the package
exposes the client, its configuration and the result envelope every
call returns::

    from dashboard_client import ClientConfig, DashboardClient

    async with DashboardClient(ClientConfig(api_key="...")) as client:
        result = await client.call("get", "/organizations")
"""

from .clients.http_client import DashboardClient, get_client
from .core.config import ClientConfig, Settings, get_settings
from .logging_config import configure_logging, logger
from .schemas.envelope import CallDescriptor, DashboardAPIError, ResultEnvelope

__all__ = [
    "CallDescriptor",
    "ClientConfig",
    "DashboardAPIError",
    "DashboardClient",
    "ResultEnvelope",
    "Settings",
    "configure_logging",
    "get_client",
    "get_settings",
    "logger",
]
