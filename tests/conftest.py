"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import socket
import threading
from typing import Callable, Iterator, Optional

import pytest

from ntpctl.codec import ControlMessage

READVAR_DATA = b"reftime=0xe2fc1a2b.00000000, offset=1.234"


def make_response(
    data: bytes = READVAR_DATA,
    *,
    opcode: int = 2,
    sequence: int = 0,
    status: int = 0,
    error: bool = False,
    more: bool = False,
    count: Optional[int] = None,
    padding: int = 0,
) -> bytes:
    """Build a daemon reply the way ntpd lays it out."""
    msg = ControlMessage(bytes(12) + data + bytes(padding))
    msg.version = 4
    msg.mode = 6
    msg.response = 1
    msg.error = int(error)
    msg.more = int(more)
    msg.opcode = opcode
    msg.sequence = sequence
    msg.status = status
    msg.count = len(data) if count is None else count
    return msg.to_bytes()


@pytest.fixture
def build_reply() -> Callable[..., bytes]:
    """Factory for daemon replies (see make_response)."""
    return make_response


@pytest.fixture
def readvar_response() -> bytes:
    """Successful READVAR reply for reftime and offset."""
    return make_response()


class FakeDaemon:
    """Single-threaded UDP server answering control requests.

    The responder gets each request and returns the reply bytes, or None to
    stay silent.
    """

    def __init__(self, responder: Callable[[bytes], Optional[bytes]]) -> None:
        self.responder = responder
        self.requests: list[bytes] = []
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self._sock.bind(("127.0.0.1", 0))
        self._sock.settimeout(0.1)
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._serve, daemon=True, name="FakeDaemon")

    @property
    def port(self) -> int:
        return self._sock.getsockname()[1]

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        self._thread.join(timeout=2.0)
        self._sock.close()

    def _serve(self) -> None:
        while not self._stop.is_set():
            try:
                request, addr = self._sock.recvfrom(1024)
            except socket.timeout:
                continue
            except OSError:
                return
            self.requests.append(request)
            reply = self.responder(request)
            if reply is not None:
                self._sock.sendto(reply, addr)


@pytest.fixture
def fake_daemon() -> Iterator[Callable[[Callable[[bytes], Optional[bytes]]], FakeDaemon]]:
    """Factory fixture starting FakeDaemon instances on 127.0.0.1."""
    daemons: list[FakeDaemon] = []

    def start(responder: Callable[[bytes], Optional[bytes]]) -> FakeDaemon:
        daemon = FakeDaemon(responder)
        daemon.start()
        daemons.append(daemon)
        return daemon

    yield start

    for daemon in daemons:
        daemon.stop()
