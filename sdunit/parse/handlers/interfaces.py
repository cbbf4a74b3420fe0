from abc import ABC, abstractmethod

from sdunit.parse.errors import ParseError
from sdunit.unit.models import UnitSection
from sdunit.unit.types import ParseErrorType, Segment, UnitType


class UnitSectionHandler(ABC):
    """Interface for the type specific part of a unit file.

    The parser resolves [Unit] and [Install] attributes itself and hands
    every other (segment, key, value) triple to the handler of the unit's
    type. A fresh handler is created for each parse and starts out with
    default values.
    """

    unit_type: UnitType

    @abstractmethod
    def set_attr(self, segment: Segment, key: str, value: str) -> None:
        """Apply one attribute.

        Raises:
            ParseError: For a key outside the type's section, an unknown
                key, or an invalid value
        """

    @abstractmethod
    def build(self) -> UnitSection:
        """Freeze the collected attributes into a section record.
        """

    def require_own_segment(self, segment: Segment, key: str) -> None:
        if segment is not Segment.TYPE_SPECIFIC:
            raise ParseError(
                ParseErrorType.EINVAL,
                f'Unknown attribute {key!r} in [{segment.value}] section',
            )

    def unknown_key(self, key: str) -> ParseError:
        return ParseError(
            ParseErrorType.EINVAL,
            f'Unknown {self.unit_type.value} attribute {key!r}',
        )
