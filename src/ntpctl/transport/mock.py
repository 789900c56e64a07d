"""Mock transport for testing without a running daemon.

MockTransport records what is sent and answers receive() from a queue of
canned replies. Queued exceptions are raised instead of returned, which makes
timeouts and socket failures easy to simulate.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Iterable, Optional, Union

from ..exceptions import TransportError
from .driver import Transport

logger = logging.getLogger(__name__)

Reply = Union[bytes, BaseException]


class MockTransport(Transport):
    """In-memory transport.

    Attributes:
        sent: Datagrams passed to send(), in order
        closed: True once close() has been called

    Examples:
        ```python
        from ntpctl import QueryClient
        from ntpctl.transport import MockTransport

        transport = MockTransport([reply_bytes])
        client = QueryClient(transport_factory=lambda config: transport)
        result = client.query()
        assert transport.closed
        ```
    """

    def __init__(
        self,
        replies: Iterable[Reply] = (),
        responder: Optional[Callable[[bytes], Reply]] = None,
    ) -> None:
        """Initialize mock transport.

        Args:
            replies: Replies handed out by receive(), in order
            responder: Called with each sent datagram; its return value is
                queued as a reply. Use it to echo request fields.
        """
        self.sent: list[bytes] = []
        self.closed = False
        self._replies: deque[Reply] = deque(replies)
        self._responder = responder

    def send(self, data: bytes) -> None:
        if self.closed:
            raise TransportError("Transport is closed")
        self.sent.append(bytes(data))
        logger.debug("[MockTransport] Sent %d bytes", len(data))
        if self._responder is not None:
            self._replies.append(self._responder(bytes(data)))

    def receive(self, buffer_size: int) -> bytes:
        if self.closed:
            raise TransportError("Transport is closed")
        if not self._replies:
            raise TransportError("No reply queued")

        reply = self._replies.popleft()
        if isinstance(reply, BaseException):
            raise reply
        logger.debug("[MockTransport] Received %d bytes", len(reply))
        return bytes(reply[:buffer_size])

    def close(self) -> None:
        self.closed = True
