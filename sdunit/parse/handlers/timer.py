from collections.abc import Callable
from typing import Any

from sdunit.parse.handlers.interfaces import UnitSectionHandler
from sdunit.parse.quantity import parse_duration
from sdunit.parse.tables import TIMER_UNIT_ATTR_TABLE
from sdunit.parse.util import parse_boolean, validate_unit_name
from sdunit.unit.models import TimerSection
from sdunit.unit.types import Segment, TimerUnitAttr, UnitType

SCALAR_FIELDS: dict[TimerUnitAttr, tuple[str, Callable[[str], Any]]] = {
    TimerUnitAttr.ON_ACTIVE_SEC: ('on_active_sec_ns', parse_duration),
    TimerUnitAttr.ON_BOOT_SEC: ('on_boot_sec_ns', parse_duration),
    TimerUnitAttr.ON_STARTUP_SEC: ('on_startup_sec_ns', parse_duration),
    TimerUnitAttr.ON_UNIT_ACTIVE_SEC: (
        'on_unit_active_sec_ns',
        parse_duration,
    ),
    TimerUnitAttr.ON_UNIT_INACTIVE_SEC: (
        'on_unit_inactive_sec_ns',
        parse_duration,
    ),
    TimerUnitAttr.ACCURACY_SEC: ('accuracy_sec_ns', parse_duration),
    TimerUnitAttr.RANDOMIZED_DELAY_SEC: (
        'randomized_delay_sec_ns',
        parse_duration,
    ),
    TimerUnitAttr.PERSISTENT: ('persistent', parse_boolean),
    TimerUnitAttr.WAKE_SYSTEM: ('wake_system', parse_boolean),
    TimerUnitAttr.REMAIN_AFTER_ELAPSE: (
        'remain_after_elapse',
        parse_boolean,
    ),
    TimerUnitAttr.UNIT: ('unit', validate_unit_name),
}


class TimerHandler(UnitSectionHandler):
    """Handles the [Timer] section of .timer units.
    """

    unit_type = UnitType.TIMER

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}
        self._calendar: list[str] = []

    def set_attr(self, segment: Segment, key: str, value: str) -> None:
        self.require_own_segment(segment, key)

        attr = TIMER_UNIT_ATTR_TABLE.get(key)
        if attr is None:
            raise self.unknown_key(key)

        if attr is TimerUnitAttr.ON_CALENDAR:
            if value:
                self._calendar.append(value)
            else:
                self._calendar.clear()
            return

        field, convert = SCALAR_FIELDS[attr]
        if value:
            self._fields[field] = convert(value)
        else:
            self._fields.pop(field, None)

    def build(self) -> TimerSection:
        return TimerSection(
            **self._fields,
            on_calendar=tuple(self._calendar),
        )
