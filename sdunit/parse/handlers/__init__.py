from collections.abc import Callable, Mapping
from functools import partial
from types import MappingProxyType

from sdunit.parse.handlers.generic import (
    EmptySectionHandler,
    RawSectionHandler,
)
from sdunit.parse.handlers.interfaces import UnitSectionHandler
from sdunit.parse.handlers.service import ServiceHandler
from sdunit.parse.handlers.timer import TimerHandler
from sdunit.unit.types import UnitType

HANDLERS: Mapping[UnitType, Callable[[], UnitSectionHandler]] = \
    MappingProxyType({
        UnitType.AUTOMOUNT: partial(RawSectionHandler, UnitType.AUTOMOUNT),
        UnitType.DEVICE: partial(EmptySectionHandler, UnitType.DEVICE),
        UnitType.MOUNT: partial(RawSectionHandler, UnitType.MOUNT),
        UnitType.PATH: partial(RawSectionHandler, UnitType.PATH),
        UnitType.SCOPE: partial(RawSectionHandler, UnitType.SCOPE),
        UnitType.SERVICE: ServiceHandler,
        UnitType.SLICE: partial(RawSectionHandler, UnitType.SLICE),
        UnitType.SOCKET: partial(RawSectionHandler, UnitType.SOCKET),
        UnitType.SWAP: partial(RawSectionHandler, UnitType.SWAP),
        UnitType.TARGET: partial(EmptySectionHandler, UnitType.TARGET),
        UnitType.TIMER: TimerHandler,
    })


def create_handler(unit_type: UnitType) -> UnitSectionHandler:
    """Create an empty handler for the given unit type.
    """
    return HANDLERS[unit_type]()


__all__ = [
    'HANDLERS',
    'EmptySectionHandler',
    'RawSectionHandler',
    'ServiceHandler',
    'TimerHandler',
    'UnitSectionHandler',
    'create_handler',
]
