import logging
from collections.abc import Callable
from functools import partial
from typing import Any

from sdunit.parse.handlers.interfaces import UnitSectionHandler
from sdunit.parse.quantity import parse_duration, parse_size
from sdunit.parse.tables import BASE_IEC, SERVICE_UNIT_ATTR_TABLE
from sdunit.parse.util import (
    parse_absolute_path,
    parse_boolean,
    parse_command,
    parse_enum,
    parse_environment,
    parse_environment_file,
    parse_int_range,
)
from sdunit.unit.models import EnvironmentFile, ExecCommand, ServiceSection
from sdunit.unit.types import (
    MountFlags,
    RestartPolicy,
    Segment,
    ServiceType,
    ServiceUnitAttr,
    UnitType,
)

INFINITY = 'infinity'

COMMAND_FIELDS = {
    ServiceUnitAttr.EXEC_START: 'exec_start',
    ServiceUnitAttr.EXEC_START_PRE: 'exec_start_pre',
    ServiceUnitAttr.EXEC_START_POST: 'exec_start_post',
    ServiceUnitAttr.EXEC_RELOAD: 'exec_reload',
    ServiceUnitAttr.EXEC_STOP: 'exec_stop',
    ServiceUnitAttr.EXEC_STOP_POST: 'exec_stop_post',
}


def parse_timeout(value: str) -> int | None:
    """Duration in nanoseconds, or None for ``infinity``.
    """
    if value == INFINITY:
        return None
    return parse_duration(value)


def parse_memory_limit(value: str) -> int | None:
    if value == INFINITY:
        return None
    return parse_size(value, BASE_IEC)


class ServiceHandler(UnitSectionHandler):
    """Handles the [Service] section of .service units.
    """

    unit_type = UnitType.SERVICE

    def __init__(self) -> None:
        """Start from systemd's defaults.
        """
        self._logger = logging.getLogger(__name__)

        self._fields: dict[str, Any] = {}
        self._commands: dict[str, list[ExecCommand]] = {
            field: [] for field in COMMAND_FIELDS.values()
        }
        self._environment: dict[str, str] = {}
        self._environment_files: list[EnvironmentFile] = []

        self._scalars: dict[
            ServiceUnitAttr,
            tuple[str, Callable[[str], Any]],
        ] = {
            ServiceUnitAttr.TYPE: (
                'type',
                partial(parse_enum, ServiceType),
            ),
            ServiceUnitAttr.REMAIN_AFTER_EXIT: (
                'remain_after_exit',
                parse_boolean,
            ),
            ServiceUnitAttr.RESTART: (
                'restart',
                partial(parse_enum, RestartPolicy),
            ),
            ServiceUnitAttr.RESTART_SEC: ('restart_sec_ns', parse_duration),
            ServiceUnitAttr.TIMEOUT_START_SEC: (
                'timeout_start_sec_ns',
                parse_timeout,
            ),
            ServiceUnitAttr.TIMEOUT_STOP_SEC: (
                'timeout_stop_sec_ns',
                parse_timeout,
            ),
            ServiceUnitAttr.NICE: (
                'nice',
                partial(parse_int_range, low=-20, high=19),
            ),
            ServiceUnitAttr.WORKING_DIRECTORY: (
                'working_directory',
                partial(parse_absolute_path, allow_home=True),
            ),
            ServiceUnitAttr.ROOT_DIRECTORY: (
                'root_directory',
                parse_absolute_path,
            ),
            ServiceUnitAttr.USER: ('user', str),
            ServiceUnitAttr.GROUP: ('group', str),
            ServiceUnitAttr.MOUNT_FLAGS: (
                'mount_flags',
                partial(parse_enum, MountFlags),
            ),
            ServiceUnitAttr.MEMORY_MAX: ('memory_max', parse_memory_limit),
        }

    def set_attr(self, segment: Segment, key: str, value: str) -> None:
        self.require_own_segment(segment, key)

        attr = SERVICE_UNIT_ATTR_TABLE.get(key)
        if attr is None:
            raise self.unknown_key(key)

        if attr in COMMAND_FIELDS:
            self._set_command(COMMAND_FIELDS[attr], value)
        elif attr is ServiceUnitAttr.ENVIRONMENT:
            self._set_environment(value)
        elif attr is ServiceUnitAttr.ENVIRONMENT_FILE:
            self._set_environment_file(value)
        else:
            self._set_scalar(attr, value)

    def build(self) -> ServiceSection:
        commands = {
            field: tuple(commands)
            for field, commands in self._commands.items()
        }
        return ServiceSection(
            **self._fields,
            **commands,
            environment=tuple(self._environment.items()),
            environment_files=tuple(self._environment_files),
        )

    def _set_scalar(self, attr: ServiceUnitAttr, value: str) -> None:
        field, convert = self._scalars[attr]

        # An empty assignment restores the default
        if not value:
            self._fields.pop(field, None)
            return

        self._fields[field] = convert(value)

    def _set_command(self, field: str, value: str) -> None:
        if not value:
            self._commands[field].clear()
            return

        self._commands[field].append(parse_command(value))
        self._logger.debug('Added %s command: %s', field, value)

    def _set_environment(self, value: str) -> None:
        if not value:
            self._environment.clear()
            return

        self._environment.update(parse_environment(value))

    def _set_environment_file(self, value: str) -> None:
        if not value:
            self._environment_files.clear()
            return

        self._environment_files.append(parse_environment_file(value))
