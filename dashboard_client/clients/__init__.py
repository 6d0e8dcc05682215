"""HTTP clients for the dashboard API."""

from .http_client import DashboardClient, get_client

__all__ = ["DashboardClient", "get_client"]
