"""Process wide lookup tables.

All tables are read-only views built at import time; lookups are exact and
case-sensitive.
"""
from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from sdunit.unit.types import (
    BaseUnitAttr,
    InstallUnitAttr,
    Segment,
    ServiceUnitAttr,
    TimerUnitAttr,
    UnitType,
)

U64_MAX: Final[int] = 2 ** 64 - 1

UNIT_SUFFIX: Final[Mapping[str, UnitType]] = MappingProxyType(
    {unit_type.value: unit_type for unit_type in UnitType}
)

# Section header of each unit type's own segment; device and target units
# have none.
TYPE_SECTION_HEADERS: Final[Mapping[UnitType, str]] = MappingProxyType({
    UnitType.AUTOMOUNT: '[Automount]',
    UnitType.MOUNT: '[Mount]',
    UnitType.PATH: '[Path]',
    UnitType.SCOPE: '[Scope]',
    UnitType.SERVICE: '[Service]',
    UnitType.SLICE: '[Slice]',
    UnitType.SOCKET: '[Socket]',
    UnitType.SWAP: '[Swap]',
    UnitType.TIMER: '[Timer]',
})

COMMON_SEGMENT_TABLE: Final[Mapping[str, Segment]] = MappingProxyType({
    '[Unit]': Segment.UNIT,
    '[Install]': Segment.INSTALL,
})

BASE_UNIT_ATTR_TABLE: Final[Mapping[str, BaseUnitAttr]] = MappingProxyType(
    {attr.value: attr for attr in BaseUnitAttr}
)

INSTALL_UNIT_ATTR_TABLE: Final[Mapping[str, InstallUnitAttr]] = \
    MappingProxyType({attr.value: attr for attr in InstallUnitAttr})

SERVICE_UNIT_ATTR_TABLE: Final[Mapping[str, ServiceUnitAttr]] = \
    MappingProxyType({attr.value: attr for attr in ServiceUnitAttr})

TIMER_UNIT_ATTR_TABLE: Final[Mapping[str, TimerUnitAttr]] = \
    MappingProxyType({attr.value: attr for attr in TimerUnitAttr})

BASE_IEC: Final[Mapping[str, int]] = MappingProxyType({
    'E': 1024 ** 6,
    'P': 1024 ** 5,
    'T': 1024 ** 4,
    'G': 1024 ** 3,
    'M': 1024 ** 2,
    'K': 1024,
    'B': 1,
    '': 1,
})

BASE_SI: Final[Mapping[str, int]] = MappingProxyType({
    'E': 1000 ** 6,
    'P': 1000 ** 5,
    'T': 1000 ** 4,
    'G': 1000 ** 3,
    'M': 1000 ** 2,
    'K': 1000,
    'B': 1,
    '': 1,
})

# Nanoseconds per duration suffix; a bare number is seconds.
SEC_UNIT_TABLE: Final[Mapping[str, int]] = MappingProxyType({
    'h': 60 * 60 * 1000 * 1000 * 1000,
    'min': 60 * 1000 * 1000 * 1000,
    'm': 60 * 1000 * 1000 * 1000,
    's': 1000 * 1000 * 1000,
    '': 1000 * 1000 * 1000,
    'ms': 1000 * 1000,
    'us': 1000,
    'ns': 1,
})


def segment_table(unit_type: UnitType) -> Mapping[str, Segment]:
    """Header to segment mapping recognized in a unit of the given type.
    """
    table = dict(COMMON_SEGMENT_TABLE)
    header = TYPE_SECTION_HEADERS.get(unit_type)
    if header is not None:
        table[header] = Segment.TYPE_SPECIFIC
    return MappingProxyType(table)


SEGMENT_TABLES: Final[Mapping[UnitType, Mapping[str, Segment]]] = \
    MappingProxyType({
        unit_type: segment_table(unit_type) for unit_type in UnitType
    })
