import logging
from typing import Any

from sdunit.parse.errors import ParseError
from sdunit.parse.handlers import UnitSectionHandler, create_handler
from sdunit.parse.reader import (
    LogicalLine,
    get_unit_reader,
    iter_logical_lines,
)
from sdunit.parse.tables import (
    BASE_UNIT_ATTR_TABLE,
    INSTALL_UNIT_ATTR_TABLE,
    SEGMENT_TABLES,
)
from sdunit.parse.util import parse_unit_names, parse_word_list
from sdunit.unit.models import BaseUnit, InstallInfo, UnitFile
from sdunit.unit.types import (
    BaseUnitAttr,
    InstallUnitAttr,
    ParseErrorType,
    Segment,
    UnitType,
)

BASE_UNIT_FIELDS: dict[BaseUnitAttr, str] = {
    BaseUnitAttr.DOCUMENTATION: 'documentation',
    BaseUnitAttr.REQUIRES: 'requires',
    BaseUnitAttr.WANTS: 'wants',
    BaseUnitAttr.AFTER: 'after',
    BaseUnitAttr.BEFORE: 'before',
    BaseUnitAttr.BINDS_TO: 'binds_to',
    BaseUnitAttr.PART_OF: 'part_of',
    BaseUnitAttr.ON_FAILURE: 'on_failure',
    BaseUnitAttr.CONFLICTS: 'conflicts',
}

INSTALL_UNIT_FIELDS: dict[InstallUnitAttr, str] = {
    InstallUnitAttr.WANTED_BY: 'wanted_by',
    InstallUnitAttr.REQUIRED_BY: 'required_by',
    InstallUnitAttr.ALSO: 'also',
    InstallUnitAttr.ALIAS: 'alias',
}


def split_attribute(text: str) -> tuple[str, str]:
    """Split ``Key=Value`` on the first ``=`` and trim both sides.

    Raises:
        ParseError: ESyntaxError when there is no ``=``
    """
    key, sep, value = text.partition('=')
    if not sep:
        raise ParseError(
            ParseErrorType.ESYNTAX,
            f'Expected Key=Value, got {text.strip()!r}',
        )
    return key.strip(), value.strip()


class SegmentTracker:
    """Tracks the section currently being read.

    Starts in Segment.NONE; only a header line moves it.
    """

    def __init__(self) -> None:
        self.segment = Segment.NONE

    def enter(self, segment: Segment) -> None:
        self.segment = segment

    def require_header_seen(self) -> Segment:
        if self.segment is Segment.NONE:
            raise ParseError(
                ParseErrorType.ESYNTAX,
                'Attribute outside of any section',
            )
        return self.segment


class AttributeDispatcher:
    """Routes attributes to the [Unit] and [Install] drafts or to the type
    specific handler.
    """

    def __init__(self, handler: UnitSectionHandler) -> None:
        self._handler = handler
        self._base: dict[str, Any] = {}
        self._install: dict[str, tuple[str, ...]] = {}

    def dispatch(self, segment: Segment, text: str) -> None:
        key, value = split_attribute(text)

        base_attr = BASE_UNIT_ATTR_TABLE.get(key)
        if base_attr is not None:
            self._require_segment(Segment.UNIT, segment, key)
            self._set_base_attr(base_attr, value)
            return

        install_attr = INSTALL_UNIT_ATTR_TABLE.get(key)
        if install_attr is not None:
            self._require_segment(Segment.INSTALL, segment, key)
            self._set_install_attr(install_attr, value)
            return

        self._handler.set_attr(segment, key, value)

    def build(self, unit_type: UnitType) -> tuple[BaseUnit, InstallInfo]:
        return (
            BaseUnit(unit_type=unit_type, **self._base),
            InstallInfo(**self._install),
        )

    def _require_segment(
        self,
        expected: Segment,
        segment: Segment,
        key: str,
    ) -> None:
        if segment is not expected:
            raise ParseError(
                ParseErrorType.EINVAL,
                f'{key} is only valid in the [{expected.value}] section',
            )

    def _set_base_attr(self, attr: BaseUnitAttr, value: str) -> None:
        if attr is BaseUnitAttr.DESCRIPTION:
            self._base['description'] = value
            return

        field = BASE_UNIT_FIELDS[attr]
        if attr is BaseUnitAttr.DOCUMENTATION:
            items = parse_word_list(value)
        else:
            items = parse_unit_names(value)
        self._base[field] = self._extend(self._base.get(field, ()), items)

    def _set_install_attr(self, attr: InstallUnitAttr, value: str) -> None:
        field = INSTALL_UNIT_FIELDS[attr]
        items = parse_unit_names(value)
        self._install[field] = self._extend(
            self._install.get(field, ()),
            items,
        )

    @staticmethod
    def _extend(
        current: tuple[str, ...],
        items: tuple[str, ...],
    ) -> tuple[str, ...]:
        # An empty assignment resets the list
        return current + items if items else ()


class UnitParser:
    """Parses one unit file into a frozen UnitFile.

    [Unit] and [Install] are handled here; the type's own section is
    delegated to the handler registered for the unit type.
    """

    def __init__(self, path: str, unit_type: UnitType) -> None:
        self._logger = logging.getLogger(__name__)

        self._path = path
        self._unit_type = unit_type

    def parse(self) -> UnitFile:
        """Parse the file.

        Returns:
            The frozen unit record

        Raises:
            ParseError: On the first failure, stamped with the file path
                and the 1-based line number
        """
        self._logger.debug(
            'Parsing %s as %s unit',
            self._path,
            self._unit_type.value,
        )

        try:
            unit_file = self._parse()
        except ParseError as e:
            self._logger.warning('Failed to parse unit file: %s', e)
            raise

        self._logger.debug('Parsed %s', self._path)
        return unit_file

    def _parse(self) -> UnitFile:
        lines = get_unit_reader(self._path, self._unit_type)

        handler = create_handler(self._unit_type)
        tracker = SegmentTracker()
        dispatcher = AttributeDispatcher(handler)

        headers = SEGMENT_TABLES[self._unit_type]
        for line in iter_logical_lines(lines, headers):
            try:
                self._consume(line, tracker, dispatcher)
            except ParseError as e:
                raise e.at(self._path, line.number) from e

        base, install = dispatcher.build(self._unit_type)
        return UnitFile(
            path=self._path,
            unit=base,
            install=install,
            section=handler.build(),
        )

    def _consume(
        self,
        line: LogicalLine,
        tracker: SegmentTracker,
        dispatcher: AttributeDispatcher,
    ) -> None:
        if line.segment is not None:
            tracker.enter(line.segment)
            return

        segment = tracker.require_header_seen()
        dispatcher.dispatch(segment, line.text)


def parse(path: str, unit_type: UnitType) -> UnitFile:
    """Parse the unit file at path, which must be of unit_type.
    """
    return UnitParser(str(path), unit_type).parse()


def parse_service(path: str) -> UnitFile:
    return parse(path, UnitType.SERVICE)


def parse_target(path: str) -> UnitFile:
    return parse(path, UnitType.TARGET)
