"""UDP transport to an NTP daemon's control port."""

from __future__ import annotations

import logging
import socket
from typing import Optional

from ..exceptions import TransportError
from .driver import Transport

logger = logging.getLogger(__name__)


class UdpTransport(Transport):
    """Connected UDP socket to one daemon.

    The socket is connected to the resolved target, so the kernel discards
    datagrams from any other source and an ICMP port unreachable surfaces as
    a receive error instead of an endless wait.

    Attributes:
        host: Target host name or address
        port: Target UDP port
        timeout: Receive deadline in seconds, or None to block
    """

    def __init__(self, host: str, port: int, timeout: Optional[float] = None) -> None:
        """Resolve the target and open the socket.

        Raises:
            TransportError: If resolution or socket creation fails
        """
        self.host = host
        self.port = port
        self.timeout = timeout
        self._sock: Optional[socket.socket] = None

        try:
            addrinfo = socket.getaddrinfo(host, port, type=socket.SOCK_DGRAM)[0]
        except OSError as e:
            raise TransportError(f"Cannot resolve {host}:{port}: {e}") from e

        family, socktype, proto, _, sockaddr = addrinfo
        try:
            sock = socket.socket(family, socktype, proto)
        except OSError as e:
            raise TransportError(f"Cannot create UDP socket: {e}") from e

        try:
            sock.settimeout(timeout)
            sock.connect(sockaddr)
        except OSError as e:
            sock.close()
            raise TransportError(f"Cannot connect UDP socket to {host}:{port}: {e}") from e

        self._sock = sock
        logger.debug("Opened UDP socket to %s (%s)", sockaddr, host)

    def send(self, data: bytes) -> None:
        sock = self._require_open()
        try:
            sent = sock.send(data)
        except OSError as e:
            raise TransportError(f"Send to {self.host}:{self.port} failed: {e}") from e
        if sent != len(data):
            raise TransportError(f"Short send to {self.host}:{self.port}: {sent}/{len(data)} bytes")
        logger.debug("Sent %d bytes to %s:%d", sent, self.host, self.port)

    def receive(self, buffer_size: int) -> bytes:
        sock = self._require_open()
        try:
            data = sock.recv(buffer_size)
        except socket.timeout as e:
            raise TransportError(
                f"No response from {self.host}:{self.port} within {self.timeout}s"
            ) from e
        except OSError as e:
            raise TransportError(f"Receive from {self.host}:{self.port} failed: {e}") from e
        logger.debug("Received %d bytes from %s:%d", len(data), self.host, self.port)
        return data

    def close(self) -> None:
        if self._sock is not None:
            self._sock.close()
            self._sock = None
            logger.debug("Closed UDP socket to %s:%d", self.host, self.port)

    @property
    def closed(self) -> bool:
        return self._sock is None

    def _require_open(self) -> socket.socket:
        if self._sock is None:
            raise TransportError("Transport is closed")
        return self._sock
