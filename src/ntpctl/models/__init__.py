"""Value objects for ntpctl.

This module provides the immutable results returned by queries and header decoding.
"""

from __future__ import annotations

from .result import QueryResult, SystemStatus

__all__ = [
    "QueryResult",
    "SystemStatus",
]
