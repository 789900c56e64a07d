"""NTP control (mode 6) message.

This module provides ControlMessage, an owned byte buffer with named accessors
for every header field, plus request construction and response decoding.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from ..exceptions import EncodeError, MalformedResponseError
from ..models import SystemStatus
from .bitpack import read_bits, read_uint16, write_bits, write_uint16
from .schema import (
    CONTROL_MODE,
    DEFAULT_VERSION,
    HEADER_FIELDS,
    HEADER_SIZE,
    MAX_DATA_SIZE,
    HeaderField,
    header_field,
)

logger = logging.getLogger(__name__)


def _header_property(name: str, doc: str) -> property:
    field = header_field(name)

    def getter(self: ControlMessage) -> int:
        return self._read(field)

    def setter(self: ControlMessage, value: int) -> None:
        self._write(field, value)

    return property(getter, setter, doc=doc)


class ControlMessage:
    """A control message backed by an exclusively owned bytearray.

    Every header field is exposed as a read/write integer property. Writes go
    straight through to the buffer and never disturb fields that share a byte.

    Example:
        >>> msg = ControlMessage.build_request(ControlOpcode.READVAR, "reftime,offset")
        >>> msg.to_bytes()[:2]
        b'&\\x02'
        >>> msg.count
        14
    """

    leap_indicator = _header_property("leap_indicator", "Leap indicator (2 bits).")
    version = _header_property("version", "NTP version number (3 bits).")
    mode = _header_property("mode", "Association mode, 6 for control messages (3 bits).")
    response = _header_property("response", "Response bit, set by the daemon.")
    error = _header_property("error", "Error bit; data then holds an error description.")
    more = _header_property("more", "More bit; further fragments follow.")
    opcode = _header_property("opcode", "Control opcode (5 bits).")
    sequence = _header_property("sequence", "Request sequence number (16 bits).")
    status = _header_property("status", "Status word (16 bits).")
    association_id = _header_property("association_id", "Association ID, 0 for the system.")
    offset = _header_property("offset", "Byte offset of data within a multi-packet list.")
    count = _header_property("count", "Length of the data section in bytes.")

    def __init__(self, data: Union[bytes, bytearray]) -> None:
        """Wrap a copy of data.

        Args:
            data: Complete message bytes (header plus data)

        Raises:
            MalformedResponseError: If data is shorter than the header
        """
        if len(data) < HEADER_SIZE:
            raise MalformedResponseError(
                f"Control message too short: need at least {HEADER_SIZE} bytes, "
                f"got {len(data)} bytes"
            )
        self._buf = bytearray(data)

    @classmethod
    def build_request(
        cls,
        opcode: int,
        payload: Union[str, bytes] = b"",
        *,
        version: int = DEFAULT_VERSION,
        sequence: int = 0,
        association_id: int = 0,
    ) -> ControlMessage:
        """Build a request message.

        The buffer is exactly ``HEADER_SIZE + len(payload)`` bytes: a zeroed
        header followed by the payload, with no padding or authenticator.

        Args:
            opcode: Control opcode (0-31), e.g. ``ControlOpcode.READVAR``
            payload: Request data; str is ASCII-encoded
            version: NTP version number (0-7)
            sequence: Sequence number (0-65535)
            association_id: Association to address, 0 for the system

        Returns:
            Request message

        Raises:
            EncodeError: If a value doesn't fit its header field
        """
        if isinstance(payload, str):
            try:
                payload = payload.encode("ascii")
            except UnicodeEncodeError as e:
                raise EncodeError(f"Request payload must be ASCII: {e}") from e

        if len(payload) > MAX_DATA_SIZE:
            # Daemons drop such requests; the protocol ceiling is not enforced here
            logger.warning(
                "Request payload of %d bytes exceeds the %d byte data limit",
                len(payload),
                MAX_DATA_SIZE,
            )

        msg = cls(bytes(HEADER_SIZE) + bytes(payload))
        msg.version = version
        msg.mode = CONTROL_MODE
        msg.opcode = opcode
        msg.sequence = sequence
        msg.association_id = association_id
        msg.count = len(payload)
        return msg

    @classmethod
    def from_response(
        cls, raw: Union[bytes, bytearray, memoryview], length: Optional[int] = None
    ) -> ControlMessage:
        """Decode a received datagram.

        Only the first ``length`` bytes are copied, so an oversized receive
        buffer is never aliased. Apart from the header length nothing is
        validated: callers check ``error`` and use ``data`` for count bounds.

        Args:
            raw: Received bytes (may be a larger receive buffer)
            length: Number of valid bytes in raw, or None for all of it

        Returns:
            Response message

        Raises:
            MalformedResponseError: If fewer than HEADER_SIZE bytes are available
        """
        if length is None:
            length = len(raw)
        elif length < 0 or length > len(raw):
            raise MalformedResponseError(
                f"Invalid response length {length} for a {len(raw)} byte buffer"
            )
        return cls(bytes(raw[:length]))

    def get_field(self, name: str) -> int:
        """Read a header field by name."""
        return self._read(header_field(name))

    def set_field(self, name: str, value: int) -> None:
        """Write a header field by name.

        Raises:
            EncodeError: If the name is unknown or the value doesn't fit
        """
        self._write(header_field(name), value)

    def header(self) -> dict[str, int]:
        """Return all header fields as a name -> value mapping."""
        return {field.name: self._read(field) for field in HEADER_FIELDS}

    @property
    def payload(self) -> bytes:
        """All bytes after the header.

        This is ``len(message) - HEADER_SIZE`` bytes and may differ from
        ``count`` (padding, truncation).
        """
        return bytes(self._buf[HEADER_SIZE:])

    @property
    def data(self) -> bytes:
        """The first ``count`` bytes after the header.

        Raises:
            MalformedResponseError: If count exceeds the bytes available
        """
        count = self.count
        available = len(self._buf) - HEADER_SIZE
        if count > available:
            raise MalformedResponseError(
                f"Header count {count} exceeds the {available} data bytes received"
            )
        return bytes(self._buf[HEADER_SIZE : HEADER_SIZE + count])

    @property
    def size(self) -> int:
        """Total message size in bytes."""
        return len(self._buf)

    def system_status(self) -> SystemStatus:
        """Decode the status word as a system status (association 0)."""
        return SystemStatus.from_word(self.status)

    def to_bytes(self) -> bytes:
        """Return a copy of the full message."""
        return bytes(self._buf)

    def _read(self, field: HeaderField) -> int:
        if field.is_word:
            return read_uint16(self._buf, field.index)
        return read_bits(self._buf, field.index, field.shift, field.width)

    def _write(self, field: HeaderField, value: int) -> None:
        if not isinstance(value, int):
            raise EncodeError(
                f"Invalid value for header field {field.name}: expected int, "
                f"got {type(value).__name__}"
            )
        try:
            if field.is_word:
                write_uint16(self._buf, field.index, value)
            else:
                write_bits(self._buf, field.index, field.shift, field.width, value)
        except ValueError as e:
            raise EncodeError(f"Invalid value for header field {field.name}: {e}") from e

    def __len__(self) -> int:
        return len(self._buf)

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ControlMessage):
            return NotImplemented
        return self._buf == other._buf

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v}" for k, v in self.header().items())
        return f"ControlMessage({fields}, size={len(self._buf)})"
