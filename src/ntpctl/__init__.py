"""ntpctl: NTP control message (mode 6) query library

Reads a running NTP daemon's self-reported clock offset and reference time
over the mode 6 control protocol, the same channel ``ntpq`` uses, without
parsing log files or shelling out.

Key Features:
- Bit-exact mode 6 header codec with named field accessors
- READVAR request construction and variable list parsing
- One request, one response per query; no retries, no hidden state
- Pluggable transports (UDP, mock for tests)

Quick Start:
    >>> from ntpctl import query
    >>> result = query("localhost", 123, timeout=2.0)  # doctest: +SKIP
    >>> result.offset_millis, result.ref_time_millis  # doctest: +SKIP
    (1, 1601000000000)

Lower-level codec use:
    >>> from ntpctl import ControlMessage, ControlOpcode
    >>> request = ControlMessage.build_request(ControlOpcode.READVAR, "reftime,offset")
    >>> len(request)
    26
"""

from __future__ import annotations

from .client import QueryClient, QueryConfig, query
from .codec import (
    HEADER_SIZE,
    ControlMessage,
    ControlOpcode,
    VariableListParser,
    extract,
    parse_variables,
)
from .exceptions import (
    DaemonError,
    EncodeError,
    MalformedResponseError,
    NtpctlError,
    ParseError,
    TransportError,
)
from .models import QueryResult, SystemStatus
from .utils import parse_ntp_timestamp, parse_offset_millis

__version__ = "0.1.0"

__all__ = [
    # Core API
    "query",
    "QueryClient",
    "QueryConfig",
    "QueryResult",
    # Codec
    "ControlMessage",
    "ControlOpcode",
    "HEADER_SIZE",
    "SystemStatus",
    "VariableListParser",
    "extract",
    "parse_variables",
    # Conversions
    "parse_ntp_timestamp",
    "parse_offset_millis",
    # Exceptions
    "NtpctlError",
    "EncodeError",
    "MalformedResponseError",
    "ParseError",
    "TransportError",
    "DaemonError",
    # Version
    "__version__",
]
