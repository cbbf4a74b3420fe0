import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from sdunit.parse.errors import ParseError
from sdunit.parse.tables import UNIT_SUFFIX
from sdunit.unit.types import ParseErrorType, Segment, UnitType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogicalLine:
    """A line after comment removal and continuation merging.

    number is the 1-based physical line the logical line starts on;
    segment is set for header lines only.
    """

    number: int
    text: str
    segment: Segment | None = None

    @property
    def is_header(self) -> bool:
        return self.segment is not None


def detect_unit_type(path: str) -> UnitType:
    """Map the extension of path to a unit type.

    Raises:
        ParseError: EFILE when there is no extension or it is unknown
    """
    _, dot, suffix = path.rpartition('.')
    unit_type = UNIT_SUFFIX.get(suffix) if dot else None
    if unit_type is None:
        raise ParseError(
            ParseErrorType.EFILE,
            f'Unknown unit file extension: {path!r}',
            path,
            0,
        )
    return unit_type


def get_unit_reader(path: str, unit_type: UnitType) -> list[str]:
    """Validate path against unit_type and read its lines.

    Args:
        path: Unit file path
        unit_type: Type the caller expects the file to be

    Returns:
        Raw lines without line terminators

    Raises:
        ParseError: EFILE for a missing, mismatching or unreadable file
    """
    if detect_unit_type(path) != unit_type:
        raise ParseError(
            ParseErrorType.EFILE,
            f'Expected a {unit_type.value} unit',
            path,
            0,
        )

    try:
        with open(path, encoding='utf-8') as f:
            lines = [line.rstrip('\r\n') for line in f]
    except (OSError, UnicodeDecodeError) as e:
        logger.debug('Failed to read unit file %s: %s', path, e)
        raise ParseError(
            ParseErrorType.EFILE,
            f'Cannot read unit file: {e}',
            path,
            0,
        ) from e

    return lines


def iter_logical_lines(
    lines: Iterable[str],
    headers: Mapping[str, Segment],
) -> Iterator[LogicalLine]:
    """Classify raw lines and merge backslash continued lines.

    Blank lines and lines starting with ``#`` are dropped. A trimmed line
    equal to one of headers is reported as a header. A line ending in
    ``\\`` is joined, space separated, with the following lines up to and
    including the first that does not end in ``\\``; scanning then goes
    on with the next line.
    """
    numbered = enumerate(lines, start=1)

    for number, line in numbered:
        if not line.strip() or line.startswith('#'):
            continue

        segment = headers.get(line.strip())
        if segment is not None:
            yield LogicalLine(number, line.strip(), segment)
            continue

        if not line.endswith('\\'):
            yield LogicalLine(number, line)
            continue

        parts = [line[:-1]]
        for _, continued in numbered:
            if not continued.endswith('\\'):
                parts.append(continued)
                break
            parts.append(continued[:-1])

        yield LogicalLine(number, ' '.join(parts))
