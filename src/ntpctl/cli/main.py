"""Main CLI entry point for ntpctl."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .. import __version__
from ..client import QueryClient, QueryConfig
from ..exceptions import NtpctlError


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the ntpctl CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="ntpctl: NTP control message query",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ntpctl                                 Query the local daemon
  ntpctl --host ntp1 --timeout 2         Query ntp1, wait at most 2 seconds
  ntpctl --version                       Show version
        """,
    )

    parser.add_argument("--host", default="localhost", help="Daemon host (default: localhost)")
    parser.add_argument("--port", type=int, default=123, help="Daemon UDP port (default: 123)")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        metavar="SECONDS",
        help="Give up if no reply arrives in time (default: wait forever)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log protocol details")
    parser.add_argument(
        "--version",
        action="version",
        version=f"ntpctl {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = QueryConfig(host=args.host, port=args.port, timeout=args.timeout)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        result = QueryClient(config).query()
    except NtpctlError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"offset={result.offset_millis}, reftime={result.ref_time_millis}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
