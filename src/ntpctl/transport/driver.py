"""Abstract interface for datagram transports.

A transport carries one control message exchange: one datagram out, one
datagram back. QueryClient opens a fresh transport per query and always
closes it, so implementations are used as context managers:

```python
with UdpTransport("localhost", 123) as transport:
    transport.send(request)
    reply = transport.receive(512)
```
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional


class Transport(ABC):
    """Abstract datagram transport.

    Implementations:

    - **UdpTransport**: UDP socket to the daemon
    - **MockTransport**: canned replies for tests, no network
    """

    @abstractmethod
    def send(self, data: bytes) -> None:
        """Send one datagram.

        Raises:
            TransportError: If the datagram cannot be sent
        """
        pass

    @abstractmethod
    def receive(self, buffer_size: int) -> bytes:
        """Block until one datagram arrives and return it.

        Args:
            buffer_size: Maximum datagram size accepted; longer datagrams
                are truncated

        Raises:
            TransportError: If receiving fails or the deadline passes
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the underlying resources. Safe to call more than once."""
        pass

    def __enter__(self) -> Transport:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()
