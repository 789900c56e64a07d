"""Exception hierarchy for ntpctl.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from NtpctlError for easy catching of any ntpctl-specific error.
"""

from __future__ import annotations

from typing import Optional


class NtpctlError(Exception):
    """Base exception for all ntpctl errors."""

    pass


class EncodeError(NtpctlError):
    """Raised when a control message header field cannot be written.

    Examples:
        - Negative field value
        - Value wider than the field (e.g. opcode > 31, count > 65535)
        - Unknown header field name
    """

    pass


class MalformedResponseError(NtpctlError):
    """Raised when a response datagram cannot hold a control message.

    Examples:
        - Datagram shorter than the 12-byte header
        - Header count larger than the data actually received
    """

    pass


class ParseError(NtpctlError):
    """Raised when response data cannot be interpreted.

    Examples:
        - Payload is not a ``name=value`` list
        - A requested variable is missing
        - Invalid NTP timestamp or offset text
    """

    pass


class TransportError(NtpctlError):
    """Raised when the datagram exchange with the daemon fails.

    Examples:
        - Host name resolution failure
        - Socket creation failure
        - Send or receive failure (including receive timeout)
    """

    pass


class DaemonError(NtpctlError):
    """Raised when the daemon answers with the error bit set.

    Attributes:
        detail: Error text carried in the response data (may be empty)
        code: Error code from the high byte of the status word
    """

    def __init__(self, detail: str, code: Optional[int] = None) -> None:
        self.detail = detail
        self.code = code
        super().__init__(detail)
