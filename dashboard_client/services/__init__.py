"""
Endpoint functions grouped by resource.

Each function takes the client first, then the URL path parameters and
an optional ``query``/``body``, and returns the call's
:class:`~dashboard_client.schemas.envelope.ResultEnvelope`.
"""

from . import devices, networks, organizations

__all__ = ["devices", "networks", "organizations"]
