"""Parser for READVAR variable lists.

The daemon answers READVAR with ASCII text of the form::

    name1=value1, name2=value2,
    name3="quoted, value"

Pairs are separated by commas; whitespace and line breaks around pairs are
not significant. Commas and equals signs inside double-quoted values belong
to the value.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Union

from ..exceptions import ParseError


def _split_pairs(text: str) -> list[str]:
    tokens: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in text:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            tokens.append("".join(current))
            current = []
            continue
        current.append(char)

    if in_quotes:
        raise ParseError(f"Unterminated quoted value in variable list: {text!r}")

    tokens.append("".join(current))
    return [token.strip() for token in tokens]


def parse_variables(text: Union[str, bytes]) -> list[tuple[str, str]]:
    """Split a variable list into ``(name, raw_value)`` pairs.

    Args:
        text: Variable list text; bytes are decoded as ASCII

    Returns:
        Pairs in the order they appear. Values are returned verbatim
        (quotes are kept).

    Raises:
        ParseError: If a non-empty entry has no ``=`` or an empty name

    Example:
        >>> parse_variables("reftime=0xe2fc1a2b.00000000, offset=1.234")
        [('reftime', '0xe2fc1a2b.00000000'), ('offset', '1.234')]
    """
    if isinstance(text, bytes):
        text = text.decode("ascii", errors="replace")

    pairs: list[tuple[str, str]] = []
    for token in _split_pairs(text.rstrip("\x00")):
        if not token:
            # Trailing comma or blank line
            continue
        name, sep, value = token.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ParseError(f"Expected name=value, got {token!r}")
        pairs.append((name, value.strip()))

    return pairs


def extract(text: Union[str, bytes], field_names: Iterable[str]) -> dict[str, str]:
    """Extract raw values for the requested variables.

    Args:
        text: Variable list text
        field_names: Variable names to look up

    Returns:
        Mapping of each requested name to its raw value, in request order.
        If a name appears more than once, the first occurrence wins.

    Raises:
        ParseError: If the text is not a variable list or a name is missing

    Example:
        >>> extract("reftime=0xe2fc1a2b.00000000, offset=1.234", ["offset"])
        {'offset': '1.234'}
    """
    field_names = list(field_names)
    pairs = parse_variables(text)
    if not pairs:
        raise ParseError("Response contains no variables")

    values: dict[str, str] = {}
    for name, value in pairs:
        values.setdefault(name, value)

    missing = [name for name in field_names if name not in values]
    if missing:
        raise ParseError(
            f"Variable{'s' if len(missing) != 1 else ''} missing from response: "
            f"{', '.join(missing)}"
        )

    return {name: values[name] for name in field_names}


class VariableListParser:
    """Extracts a fixed set of variables from READVAR responses.

    Example:
        >>> parser = VariableListParser(["reftime", "offset"])
        >>> parser.request_text
        'reftime,offset'
        >>> parser.extract("reftime=0x1.0, offset=-0.5")["offset"]
        '-0.5'
    """

    def __init__(self, field_names: Sequence[str]) -> None:
        if not field_names:
            raise ValueError("field_names must not be empty")
        for name in field_names:
            if not name or any(c in name for c in ',="') or name != name.strip():
                raise ValueError(f"Invalid variable name: {name!r}")
        self.field_names = tuple(field_names)

    @property
    def request_text(self) -> str:
        """Variable list to send in a READVAR request."""
        return ",".join(self.field_names)

    def extract(self, text: Union[str, bytes]) -> dict[str, str]:
        """Extract this parser's variables from text (see ``extract``)."""
        return extract(text, self.field_names)
