"""Configuration for control message queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 123
DEFAULT_BUFFER_SIZE = 512
DEFAULT_VARIABLES = ("reftime", "offset")


@dataclass
class QueryConfig:
    """Configuration for a READVAR query.

    Attributes:
        host: Daemon host name or address (default "localhost")
        port: Daemon UDP port (default 123)
        timeout: Receive deadline in seconds. None (default) blocks until a
            reply arrives.
        buffer_size: Receive buffer size in bytes (default 512). Observed
            responses to the two-variable query are well under 100 bytes.
        version: NTP version number placed in requests (default 4)
        variables: Variables requested with READVAR. The query result needs
            ``reftime`` and ``offset``; extra names are requested and ignored.

    Examples:
        ```python
        from ntpctl import QueryClient, QueryConfig

        # Remote daemon, give up after two seconds
        config = QueryConfig(host="ntp1.example.net", timeout=2.0)
        result = QueryClient(config).query()
        ```
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    timeout: Optional[float] = None
    buffer_size: int = DEFAULT_BUFFER_SIZE
    version: int = 4
    variables: tuple[str, ...] = DEFAULT_VARIABLES

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not self.host:
            raise ValueError("host must not be empty")

        if not 0 < self.port <= 65535:
            raise ValueError(f"port must be 1-65535, got {self.port}")

        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be > 0 or None, got {self.timeout}")

        if self.buffer_size < 12:
            raise ValueError(f"buffer_size must be >= 12, got {self.buffer_size}")

        if not 1 <= self.version <= 7:
            raise ValueError(f"version must be 1-7, got {self.version}")

        self.variables = tuple(self.variables)
        missing = [name for name in DEFAULT_VARIABLES if name not in self.variables]
        if missing:
            raise ValueError(f"variables must include {', '.join(missing)}")
