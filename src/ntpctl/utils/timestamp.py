"""Conversions for values reported in READVAR responses.

NTP timestamps are 32.32 fixed point seconds since 1900-01-01. The daemon
reports them as hex text, e.g. ``0xe2fc1a2b.80000000``.
"""

from __future__ import annotations

import datetime
import re
import string
from decimal import Decimal

from ..exceptions import ParseError

NTP_EPOCH = datetime.date(1900, 1, 1)
UNIX_EPOCH = datetime.date(1970, 1, 1)
# 2208988800 seconds
NTP_DELTA = (UNIX_EPOCH - NTP_EPOCH).days * 24 * 3600
ERA_MSB = 0x80000000
ERA_SECONDS = 1 << 32

_OFFSET_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$", re.ASCII)


def _parse_hex_word(text: str, what: str, original: str) -> int:
    if not 0 < len(text) <= 8 or any(c not in string.hexdigits for c in text):
        raise ParseError(f"Invalid NTP timestamp {original!r}: bad {what} part")
    return int(text, 16)


def parse_ntp_timestamp(text: str) -> int:
    """Convert an NTP hex timestamp to milliseconds since the Unix epoch.

    The fraction is truncated to whole milliseconds. Seconds with the most
    significant bit clear belong to era 1, which starts 2036-02-07 (RFC 4330
    section 3). The all-zero timestamp, reported by an unsynchronised daemon,
    means "unset" and maps to 0.

    Args:
        text: ``[0x]SSSSSSSS[.FFFFFFFF]`` hex seconds and fraction

    Returns:
        Milliseconds since 1970-01-01, or 0 for an unset timestamp

    Raises:
        ParseError: If text is not a hex NTP timestamp

    Example:
        >>> parse_ntp_timestamp("0x83aa7e80.80000000")
        500
    """
    value = text.strip()
    if value[:2].lower() == "0x":
        value = value[2:]

    seconds_text, _, fraction_text = value.partition(".")
    seconds = _parse_hex_word(seconds_text, "seconds", text)
    fraction = _parse_hex_word(fraction_text, "fraction", text) if fraction_text else 0

    if seconds == 0 and fraction == 0:
        return 0
    if not seconds & ERA_MSB:
        seconds += ERA_SECONDS

    # Fraction is in units of 2**-32 seconds
    fraction_millis = (fraction * 1000) >> 32
    return (seconds - NTP_DELTA) * 1000 + fraction_millis


def parse_offset_millis(text: str) -> int:
    """Convert a decimal millisecond string to an integer, truncating toward zero.

    Only plain fixed-point spellings are accepted: no exponent, no digit
    separators, no NaN or infinity.

    Args:
        text: Decimal milliseconds, e.g. ``"1.234"`` or ``"-0.871"``

    Returns:
        Whole milliseconds

    Raises:
        ParseError: If text is not a fixed-point decimal number

    Example:
        >>> parse_offset_millis("-12.9")
        -12
    """
    value = text.strip()
    if not _OFFSET_RE.match(value):
        raise ParseError(f"Invalid offset {text!r}: not a decimal number")

    return int(Decimal(value))
