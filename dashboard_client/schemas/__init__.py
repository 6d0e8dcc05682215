"""Request and result models shared by the client and the endpoint stubs."""

from .envelope import CallDescriptor, DashboardAPIError, ResultEnvelope, RetryState

__all__ = ["CallDescriptor", "DashboardAPIError", "ResultEnvelope", "RetryState"]
