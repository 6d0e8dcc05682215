"""
Core helpers package for the dashboard client.

This package contains low-level infrastructure: settings, credential
headers and the asynchronous HTTP transport.  Keeping these helpers in
a dedicated package makes it easy to swap the transport or customise
behaviour for testing.
"""

from .config import ClientConfig, Settings, get_settings

__all__ = ["ClientConfig", "Settings", "get_settings"]
