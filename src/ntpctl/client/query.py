"""READVAR query against an NTP daemon.

This module provides QueryClient, which performs exactly one control message
exchange per query and turns the daemon's ``reftime`` and ``offset``
variables into a QueryResult.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..codec.message import ControlMessage
from ..codec.schema import ControlOpcode, error_code_name
from ..codec.varlist import VariableListParser
from ..exceptions import DaemonError
from ..models import QueryResult
from ..transport import Transport, UdpTransport
from ..utils.timestamp import parse_ntp_timestamp, parse_offset_millis
from .config import DEFAULT_HOST, DEFAULT_PORT, QueryConfig

logger = logging.getLogger(__name__)

TransportFactory = Callable[[QueryConfig], Transport]


def udp_transport_factory(config: QueryConfig) -> Transport:
    """Open a UDP transport for config's target."""
    return UdpTransport(config.host, config.port, timeout=config.timeout)


class QueryClient:
    """Reads the daemon's clock offset and reference time.

    Each call to query() opens its own transport, sends one READVAR request,
    waits for one reply and closes the transport again, whether the query
    succeeds or fails. Nothing is retried.

    Attributes:
        config: Query configuration
        transport_factory: Called with the effective config to open a transport

    Examples:
        ```python
        from ntpctl import QueryClient, QueryConfig

        client = QueryClient(QueryConfig(timeout=2.0))
        result = client.query()
        print(result.offset_millis, result.ref_time_millis)
        ```
    """

    def __init__(
        self,
        config: Optional[QueryConfig] = None,
        transport_factory: Optional[TransportFactory] = None,
    ) -> None:
        self.config = config if config is not None else QueryConfig()
        self.transport_factory = (
            transport_factory if transport_factory is not None else udp_transport_factory
        )
        self._parser = VariableListParser(self.config.variables)

    def query(self, host: Optional[str] = None, port: Optional[int] = None) -> QueryResult:
        """Query the daemon once.

        Args:
            host: Target host, overriding the configured one
            port: Target port, overriding the configured one

        Returns:
            Offset and reference time reported by the daemon

        Raises:
            ValueError: If the host or port override is invalid (see
                QueryConfig); raised before any I/O and not an NtpctlError
            TransportError: If the datagram exchange fails
            MalformedResponseError: If the reply is too short for a control message
            DaemonError: If the daemon reports an error
            ParseError: If reftime/offset are missing or unreadable
        """
        config = self.config
        if host is not None or port is not None:
            config = QueryConfig(
                host=host if host is not None else config.host,
                port=port if port is not None else config.port,
                timeout=config.timeout,
                buffer_size=config.buffer_size,
                version=config.version,
                variables=config.variables,
            )

        request = ControlMessage.build_request(
            ControlOpcode.READVAR, self._parser.request_text, version=config.version
        )
        logger.debug("Querying %s:%d for %s", config.host, config.port, self._parser.request_text)

        with self.transport_factory(config) as transport:
            transport.send(request.to_bytes())
            raw = transport.receive(config.buffer_size)

        response = ControlMessage.from_response(raw)
        logger.debug("Response header: %r", response)
        self._check_header(request, response)

        if response.error:
            raise self._daemon_error(response)

        values = self._parser.extract(response.data)
        result = QueryResult(
            offset_millis=parse_offset_millis(values["offset"]),
            ref_time_millis=parse_ntp_timestamp(values["reftime"]),
        )
        logger.debug("Query result from %s:%d: %s", config.host, config.port, result)
        return result

    @staticmethod
    def _check_header(request: ControlMessage, response: ControlMessage) -> None:
        if not response.response:
            logger.warning("Reply does not have the response bit set")
        if response.opcode != request.opcode:
            logger.warning(
                "Reply opcode %d does not match request opcode %d",
                response.opcode,
                request.opcode,
            )
        if response.sequence != request.sequence:
            logger.warning(
                "Reply sequence %d does not match request sequence %d",
                response.sequence,
                request.sequence,
            )
        if response.more:
            # Fragment reassembly is not supported
            logger.warning("Reply is fragmented; using the first fragment only")

    @staticmethod
    def _daemon_error(response: ControlMessage) -> DaemonError:
        code = (response.status >> 8) & 0xFF
        detail = response.payload.rstrip(b"\x00").decode("ascii", errors="replace").strip()
        if not detail:
            detail = error_code_name(code)
        logger.debug("Daemon error %d: %s", code, detail)
        return DaemonError(detail, code=code)


def query(
    host: str = DEFAULT_HOST, port: int = DEFAULT_PORT, *, timeout: Optional[float] = None
) -> QueryResult:
    """Query a daemon once with default settings.

    Raises:
        ValueError: If host, port or timeout is invalid (see QueryConfig);
            raised before any I/O and not an NtpctlError
        TransportError: If the datagram exchange fails
        MalformedResponseError: If the reply is too short for a control message
        DaemonError: If the daemon reports an error
        ParseError: If reftime/offset are missing or unreadable

    Example:
        >>> result = query("localhost", 123, timeout=2.0)  # doctest: +SKIP
    """
    return QueryClient(QueryConfig(host=host, port=port, timeout=timeout)).query()
