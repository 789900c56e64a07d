"""Utility functions for ntpctl.

This module provides timestamp and offset conversions.
"""

from __future__ import annotations

from .timestamp import NTP_DELTA, parse_ntp_timestamp, parse_offset_millis

__all__ = [
    "NTP_DELTA",
    "parse_ntp_timestamp",
    "parse_offset_millis",
]
