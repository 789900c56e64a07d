"""Datagram transports for control message exchanges.

## Available Transports

### UdpTransport
Connected UDP socket to the daemon's control port (IPv4 or IPv6), with an
optional receive deadline.

### MockTransport
Canned replies and recorded requests for tests without a daemon.

## Quick Start

```python
from ntpctl.codec import ControlMessage, ControlOpcode
from ntpctl.transport import UdpTransport

request = ControlMessage.build_request(ControlOpcode.READVAR, "reftime,offset")
with UdpTransport("localhost", 123, timeout=2.0) as transport:
    transport.send(request.to_bytes())
    reply = ControlMessage.from_response(transport.receive(512))
```
"""

from __future__ import annotations

from .driver import Transport
from .mock import MockTransport
from .udp import UdpTransport

__all__ = [
    "Transport",
    "UdpTransport",
    "MockTransport",
]
