from sdunit.parse.handlers.interfaces import UnitSectionHandler
from sdunit.unit.models import EmptySection, RawSection
from sdunit.unit.types import Segment, UnitType


class EmptySectionHandler(UnitSectionHandler):
    """Handler for unit types without a section of their own.

    Every key that reaches it is unknown.
    """

    def __init__(self, unit_type: UnitType) -> None:
        self.unit_type = unit_type

    def set_attr(self, segment: Segment, key: str, value: str) -> None:
        self.require_own_segment(segment, key)
        raise self.unknown_key(key)

    def build(self) -> EmptySection:
        return EmptySection()


class RawSectionHandler(UnitSectionHandler):
    """Keeps the settings of a type's own section uninterpreted.
    """

    def __init__(self, unit_type: UnitType) -> None:
        self.unit_type = unit_type
        self._settings: list[tuple[str, str]] = []

    def set_attr(self, segment: Segment, key: str, value: str) -> None:
        self.require_own_segment(segment, key)
        if not key:
            raise self.unknown_key(key)
        self._settings.append((key, value))

    def build(self) -> RawSection:
        return RawSection(settings=tuple(self._settings))
