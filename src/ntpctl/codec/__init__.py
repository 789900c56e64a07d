"""NTP control message codec for ntpctl.

This module provides the mode 6 header layout, the ControlMessage buffer and
the READVAR variable list parser.
"""

from __future__ import annotations

from .message import ControlMessage
from .schema import (
    CONTROL_MODE,
    DEFAULT_VERSION,
    HEADER_FIELDS,
    HEADER_SIZE,
    MAX_DATA_SIZE,
    ControlOpcode,
    HeaderField,
)
from .varlist import VariableListParser, extract, parse_variables

__all__ = [
    "ControlMessage",
    "ControlOpcode",
    "HeaderField",
    "HEADER_FIELDS",
    "HEADER_SIZE",
    "MAX_DATA_SIZE",
    "CONTROL_MODE",
    "DEFAULT_VERSION",
    "VariableListParser",
    "extract",
    "parse_variables",
]
