"""Property-based tests using hypothesis."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from ntpctl import ControlMessage, parse_ntp_timestamp, parse_variables
from ntpctl.codec.schema import HEADER_FIELDS, HEADER_SIZE

header_values = st.fixed_dictionaries(
    {field.name: st.integers(min_value=0, max_value=field.max_value) for field in HEADER_FIELDS}
)


class TestHeaderProperties:
    """Property-based tests for header fields."""

    @given(values=header_values)
    def test_fields_roundtrip(self, values: dict[str, int]) -> None:
        """Test every field reads back what was written."""
        msg = ControlMessage(bytes(HEADER_SIZE))
        for name, value in values.items():
            msg.set_field(name, value)

        assert msg.header() == values

        decoded = ControlMessage.from_response(msg.to_bytes())
        assert decoded.header() == values

    @given(raw=st.binary(min_size=HEADER_SIZE, max_size=HEADER_SIZE), data=st.data())
    def test_write_leaves_other_fields(self, raw: bytes, data: st.DataObject) -> None:
        """Test writing one field never perturbs another."""
        msg = ControlMessage(raw)
        before = msg.header()

        field = data.draw(st.sampled_from(HEADER_FIELDS))
        value = data.draw(st.integers(min_value=0, max_value=field.max_value))
        msg.set_field(field.name, value)

        after = msg.header()
        assert after[field.name] == value
        for name, old in before.items():
            if name != field.name:
                assert after[name] == old

    @given(
        opcode=st.integers(min_value=0, max_value=31),
        payload=st.binary(max_size=468),
        sequence=st.integers(min_value=0, max_value=0xFFFF),
    )
    def test_request_length(self, opcode: int, payload: bytes, sequence: int) -> None:
        """Test requests are exactly header plus payload."""
        msg = ControlMessage.build_request(opcode, payload, sequence=sequence)

        assert len(msg) == HEADER_SIZE + len(payload)
        assert msg.count == len(payload)
        assert msg.data == payload
        assert msg.mode == 6
        assert msg.opcode == opcode
        assert msg.sequence == sequence


names = st.text(alphabet="abcdefghijklmnopqrstuvwxyz_", min_size=1, max_size=12)
values = st.text(alphabet="0123456789abcdefx.-+:", max_size=20)


class TestParserProperties:
    """Property-based tests for the variable list parser."""

    @given(
        pairs=st.lists(st.tuples(names, values), max_size=10),
        sep=st.sampled_from([",", ", ", ",\r\n"]),
    )
    def test_parse_formatted_list(self, pairs: list[tuple[str, str]], sep: str) -> None:
        """Test any separator spelling yields the same pairs."""
        text = sep.join(f"{name}={value}" for name, value in pairs)

        assert parse_variables(text) == pairs

    @given(
        seconds=st.integers(min_value=1, max_value=0xFFFFFFFF),
        fraction=st.integers(min_value=0, max_value=0xFFFFFFFF),
    )
    def test_timestamp_monotonic_in_fraction(self, seconds: int, fraction: int) -> None:
        """Test the fraction adds 0-999 ms to whole seconds."""
        whole = parse_ntp_timestamp(f"0x{seconds:08x}.00000000")
        millis = parse_ntp_timestamp(f"0x{seconds:08x}.{fraction:08x}")

        assert 0 <= millis - whole <= 999
