import re
from collections.abc import Mapping

from sdunit.parse.errors import ParseError
from sdunit.parse.tables import BASE_IEC, SEC_UNIT_TABLE, U64_MAX
from sdunit.unit.types import ParseErrorType

_SIZE_PATTERN = re.compile(r'^(\d+)\s*(\S*)$')
_TERM_NUMBER = re.compile(r'\s*(\d+)\s*')


def _by_length(table: Mapping[str, int]) -> tuple[str, ...]:
    return tuple(sorted(table, key=len, reverse=True))


def _check_range(value: int, text: str) -> int:
    if value > U64_MAX:
        raise ParseError(
            ParseErrorType.ERANGE,
            f'Quantity out of range: {text!r}',
        )
    return value


def parse_size(text: str, table: Mapping[str, int] = BASE_IEC) -> int:
    """Convert ``<integer><suffix>`` to bytes.

    Args:
        text: Quantity such as ``100M`` or ``4096``
        table: Multiplier table, BASE_IEC or BASE_SI

    Returns:
        Number of bytes

    Raises:
        ParseError: EINVAL for malformed input or an unknown suffix,
            ERANGE when the result does not fit in 64 bits
    """
    match = _SIZE_PATTERN.match(text.strip())
    if not match:
        raise ParseError(ParseErrorType.EINVAL, f'Invalid size: {text!r}')

    number, suffix = match.groups()
    multiplier = table.get(suffix)
    if multiplier is None:
        raise ParseError(
            ParseErrorType.EINVAL,
            f'Unknown size suffix {suffix!r} in {text!r}',
        )

    return _check_range(int(number) * multiplier, text)


def parse_duration(
    text: str,
    table: Mapping[str, int] = SEC_UNIT_TABLE,
) -> int:
    """Convert a duration such as ``5min``, ``1h 30min`` or ``10`` to
    nanoseconds.

    Terms are summed. Each suffix is matched longest first, so ``5ms`` is
    five milliseconds and ``5min`` five minutes. A bare number is taken in
    the unit of the table's empty suffix (seconds).
    """
    text = text.strip()
    if not text:
        raise ParseError(ParseErrorType.EINVAL, 'Empty duration')

    suffixes = _by_length(table)
    total = 0
    position = 0

    while position < len(text):
        match = _TERM_NUMBER.match(text, position)
        if not match:
            raise ParseError(
                ParseErrorType.EINVAL,
                f'Invalid duration: {text!r}',
            )
        number = int(match.group(1))
        position = match.end()

        suffix = next(
            (s for s in suffixes if text.startswith(s, position)),
            None,
        )
        if suffix is not None:
            position += len(suffix)

        # A suffix must end the word: '5mins' is not '5min' plus 's'
        if suffix is None \
            or position < len(text) and text[position].isalpha():
            raise ParseError(
                ParseErrorType.EINVAL,
                f'Unknown duration suffix in {text!r}',
            )

        total += number * table[suffix]

    return _check_range(total, text)
