"""Query client for ntpctl.

This module provides the READVAR query client and its configuration.
"""

from __future__ import annotations

from .config import QueryConfig
from .query import QueryClient, query, udp_transport_factory

__all__ = [
    "QueryClient",
    "QueryConfig",
    "query",
    "udp_transport_factory",
]
