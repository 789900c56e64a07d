"""Immutable value objects produced by the codec and the query client."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _FrozenModel(BaseModel):
    model_config = ConfigDict(
        # Results are plain values: no mutation after construction
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )


class QueryResult(_FrozenModel):
    """Outcome of one successful READVAR query.

    Attributes:
        offset_millis: Daemon's clock offset in whole milliseconds
            (truncated toward zero)
        ref_time_millis: Daemon's reference time in milliseconds since the
            Unix epoch
    """

    offset_millis: int
    ref_time_millis: int


class SystemStatus(_FrozenModel):
    """Decoded system status word of a response for association 0.

    Attributes:
        leap: Leap indicator (0-3)
        clock_source: Selected clock source code (0-63)
        event_counter: Number of system events since the last report (0-15)
        event_code: Code of the most recent system event (0-15)
    """

    leap: int = Field(ge=0, le=3)
    clock_source: int = Field(ge=0, le=63)
    event_counter: int = Field(ge=0, le=15)
    event_code: int = Field(ge=0, le=15)

    @classmethod
    def from_word(cls, status: int) -> SystemStatus:
        """Split a 16-bit status word into its parts."""
        return cls(
            leap=(status >> 14) & 0x3,
            clock_source=(status >> 8) & 0x3F,
            event_counter=(status >> 4) & 0xF,
            event_code=status & 0xF,
        )
