"""Unit tests for the READVAR variable list parser."""

from __future__ import annotations

import pytest

from ntpctl import ParseError, VariableListParser, extract, parse_variables


class TestParseVariables:
    """Test tokenizing variable lists."""

    def test_daemon_format(self) -> None:
        """Test the comma-space separated daemon output."""
        pairs = parse_variables("reftime=0xe2fc1a2b.00000000, offset=1.234")

        assert pairs == [("reftime", "0xe2fc1a2b.00000000"), ("offset", "1.234")]

    def test_whitespace_and_line_breaks(self) -> None:
        """Test that separator whitespace is not significant."""
        text = "stratum=2,precision=-23,\r\nrootdelay=1.5 ,  offset=-0.017\r\n"

        assert parse_variables(text) == [
            ("stratum", "2"),
            ("precision", "-23"),
            ("rootdelay", "1.5"),
            ("offset", "-0.017"),
        ]

    def test_quoted_values(self) -> None:
        """Test commas and equals signs inside quotes belong to the value."""
        text = 'version="ntpd 4.2.8p15, built=x", offset=0.5'

        assert parse_variables(text) == [
            ("version", '"ntpd 4.2.8p15, built=x"'),
            ("offset", "0.5"),
        ]

    def test_bytes_and_padding(self) -> None:
        """Test bytes input with trailing NUL padding."""
        assert parse_variables(b"offset=1.0\x00\x00") == [("offset", "1.0")]

    def test_empty_value_and_trailing_comma(self) -> None:
        """Test empty values and a trailing separator."""
        assert parse_variables("leap=, offset=2,") == [("leap", ""), ("offset", "2")]

    def test_empty_text(self) -> None:
        """Test empty input yields no pairs."""
        assert parse_variables("") == []
        assert parse_variables("  \r\n") == []

    def test_missing_equals(self) -> None:
        """Test entries without '='."""
        with pytest.raises(ParseError, match="Expected name=value"):
            parse_variables("garbage text")

    def test_empty_name(self) -> None:
        """Test entries with no name."""
        with pytest.raises(ParseError, match="Expected name=value"):
            parse_variables("=1.0, offset=2")

    def test_unterminated_quote(self) -> None:
        """Test unbalanced quotes."""
        with pytest.raises(ParseError, match="Unterminated"):
            parse_variables('version="ntpd, offset=1')


class TestExtract:
    """Test extracting named variables."""

    def test_extract_reftime_offset(self) -> None:
        """Test the reftime/offset reply."""
        values = extract("reftime=0xe2fc1a2b.00000000, offset=1.234", ["reftime", "offset"])

        assert values == {"reftime": "0xe2fc1a2b.00000000", "offset": "1.234"}

    def test_any_order(self) -> None:
        """Test that reply order doesn't matter and extras are ignored."""
        text = "offset=1.234, sys_jitter=0.1, reftime=0xe2fc1a2b.00000000"
        values = extract(text, ("reftime", "offset"))

        assert list(values) == ["reftime", "offset"]
        assert values["offset"] == "1.234"

    def test_first_occurrence_wins(self) -> None:
        """Test duplicate names."""
        assert extract("offset=1, offset=2", ["offset"]) == {"offset": "1"}

    def test_generator_names(self) -> None:
        """Test that field names may be any iterable."""
        names = (n for n in ["offset"])

        assert extract("offset=3", names) == {"offset": "3"}

    def test_missing_field(self) -> None:
        """Test a requested name that isn't present."""
        with pytest.raises(ParseError, match="missing from response: reftime"):
            extract("offset=1.234", ["reftime", "offset"])

    def test_missing_fields_listed(self) -> None:
        """Test that all missing names are reported."""
        with pytest.raises(ParseError, match="Variables missing from response: reftime, offset"):
            extract("stratum=2", ["reftime", "offset"])

    def test_no_variables(self) -> None:
        """Test empty replies."""
        with pytest.raises(ParseError, match="no variables"):
            extract("", ["offset"])

    def test_garbage(self) -> None:
        """Test text that isn't a variable list."""
        with pytest.raises(ParseError):
            extract("garbage text", ["reftime", "offset"])


class TestVariableListParser:
    """Test the reusable parser."""

    def test_request_text(self) -> None:
        """Test the READVAR request payload."""
        parser = VariableListParser(["reftime", "offset"])

        assert parser.request_text == "reftime,offset"
        assert parser.field_names == ("reftime", "offset")

    def test_extract(self) -> None:
        """Test extraction with the fixed name set."""
        parser = VariableListParser(["reftime", "offset"])
        values = parser.extract(b"reftime=0x1.0, offset=-0.5")

        assert values == {"reftime": "0x1.0", "offset": "-0.5"}

    @pytest.mark.parametrize("names", [[], ["off,set"], ["a=b"], [""], [" offset"]])
    def test_invalid_names(self, names: list[str]) -> None:
        """Test names that can't be requested."""
        with pytest.raises(ValueError):
            VariableListParser(names)
