"""Header layout and protocol constants for NTP control (mode 6) messages.

Control message format (RFC 1305, appendix B)::

     0                   1                   2                   3
     0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    |LI | VN  |Mode |R|E|M| OpCode  |           Sequence            |
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    |            Status             |        Association ID         |
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    |            Offset             |             Count             |
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    .                     Data (468 octets max)                     .
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+

The layout is kept as a table of ``(index, shift, width)`` per field so the
codec has no scattered bit literals.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..exceptions import EncodeError

HEADER_SIZE = 12
MAX_DATA_SIZE = 468
CONTROL_MODE = 6
DEFAULT_VERSION = 4


class ControlOpcode(enum.IntEnum):
    """Control message opcodes."""

    UNSPEC = 0
    READSTAT = 1
    READVAR = 2
    WRITEVAR = 3
    READCLOCK = 4
    WRITECLOCK = 5
    SETTRAP = 6
    ASYNCMSG = 7
    UNSETTRAP = 31


# Carried in the high byte of the status word when the error bit is set
ERROR_CODES: dict[int, str] = {
    0: "unspecified error",
    1: "permission denied",
    2: "bad request format",
    3: "bad opcode",
    4: "unknown association",
    5: "unknown variable",
    6: "bad variable value",
    7: "administratively prohibited",
}


@dataclass(frozen=True)
class HeaderField:
    """Position of a single header field.

    Attributes:
        name: Field name
        index: Byte index of the field (first byte for 16-bit fields)
        shift: Bit position of the least significant bit within the byte
        width: Field width in bits (16 for word fields)
    """

    name: str
    index: int
    shift: int
    width: int

    @property
    def is_word(self) -> bool:
        """True for the byte-aligned 16-bit fields."""
        return self.width == 16

    @property
    def max_value(self) -> int:
        return (1 << self.width) - 1


HEADER_FIELDS: tuple[HeaderField, ...] = (
    HeaderField("leap_indicator", 0, 6, 2),
    HeaderField("version", 0, 3, 3),
    HeaderField("mode", 0, 0, 3),
    HeaderField("response", 1, 7, 1),
    HeaderField("error", 1, 6, 1),
    HeaderField("more", 1, 5, 1),
    HeaderField("opcode", 1, 0, 5),
    HeaderField("sequence", 2, 0, 16),
    HeaderField("status", 4, 0, 16),
    HeaderField("association_id", 6, 0, 16),
    HeaderField("offset", 8, 0, 16),
    HeaderField("count", 10, 0, 16),
)

_FIELDS_BY_NAME: dict[str, HeaderField] = {f.name: f for f in HEADER_FIELDS}


def header_field(name: str) -> HeaderField:
    """Look up a header field by name.

    Raises:
        EncodeError: If no header field has that name
    """
    try:
        return _FIELDS_BY_NAME[name]
    except KeyError:
        raise EncodeError(
            f"Unknown header field {name!r}. Known fields: {', '.join(_FIELDS_BY_NAME)}"
        ) from None


def error_code_name(code: int) -> str:
    """Human-readable name for a daemon error code."""
    return ERROR_CODES.get(code, f"error code {code}")
