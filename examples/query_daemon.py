"""Query an NTP daemon and inspect the raw control messages.

Demonstrates:
1. The one-call query API
2. Building a READVAR request by hand
3. Decoding the reply header and variable list

Run against a local ntpd (ntpd must allow mode 6 queries from localhost):

    python examples/query_daemon.py [host]
"""

from __future__ import annotations

import logging
import sys

from ntpctl import ControlMessage, ControlOpcode, NtpctlError, parse_variables, query
from ntpctl.transport import UdpTransport


def main() -> int:
    host = sys.argv[1] if len(sys.argv) > 1 else "localhost"
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print(f"Querying {host}")
    print("=" * 60)

    try:
        result = query(host, timeout=2.0)
    except NtpctlError as e:
        print(f"Query failed: {e}")
        return 1

    print(f"offset={result.offset_millis} ms, reftime={result.ref_time_millis} ms")

    # Same exchange by hand, asking for a few more variables
    request = ControlMessage.build_request(ControlOpcode.READVAR, "reftime,offset,stratum")
    print(f"\nRequest ({len(request)} bytes): {request.to_bytes()[:12].hex(' ')}")

    try:
        with UdpTransport(host, 123, timeout=2.0) as transport:
            transport.send(request.to_bytes())
            reply = ControlMessage.from_response(transport.receive(512))
    except NtpctlError as e:
        print(f"Exchange failed: {e}")
        return 1

    print(f"Reply header: {reply.header()}")
    print(f"System status: {reply.system_status()}")
    for name, value in parse_variables(reply.data):
        print(f"  {name:10s} {value}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
