"""Converters from attribute value text to typed values.

Every converter raises ParseError without location; the parser adds file
and line.
"""
import re
import shlex
from enum import StrEnum
from typing import TypeVar

from sdunit.parse.errors import ParseError
from sdunit.unit.models import EnvironmentFile, ExecCommand
from sdunit.unit.types import ParseErrorType

E = TypeVar('E', bound=StrEnum)

_TRUE_VALUES = frozenset({'1', 'yes', 'y', 'true', 't', 'on'})
_FALSE_VALUES = frozenset({'0', 'no', 'n', 'false', 'f', 'off'})

_UNIT_NAME = re.compile(r'^[a-zA-Z0-9:_.\\@%-]+$')
_ENV_NAME = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')


def _invalid(message: str) -> ParseError:
    return ParseError(ParseErrorType.EINVAL, message)


def parse_boolean(value: str) -> bool:
    lowered = value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise _invalid(f'Invalid boolean: {value!r}')


def parse_enum(enum_type: type[E], value: str) -> E:
    """Look up value among the members of a StrEnum.
    """
    try:
        return enum_type(value)
    except ValueError:
        choices = ', '.join(member.value for member in enum_type)
        raise _invalid(
            f'Invalid {enum_type.__name__} {value!r}, expected one of: '
            f'{choices}'
        ) from None


def parse_int_range(value: str, low: int, high: int) -> int:
    try:
        number = int(value)
    except ValueError:
        raise _invalid(f'Invalid integer: {value!r}') from None

    if not low <= number <= high:
        raise ParseError(
            ParseErrorType.ERANGE,
            f'{number} is outside {low}..{high}',
        )
    return number


def parse_word_list(value: str) -> tuple[str, ...]:
    return tuple(value.split())


def validate_unit_name(name: str) -> str:
    # Unit name characters plus % for specifiers
    if not _UNIT_NAME.match(name):
        raise _invalid(f'Invalid unit name: {name!r}')
    if name.startswith('.') or name.endswith('.'):
        raise _invalid(f'Unit name cannot start or end with a dot: {name!r}')
    return name


def parse_unit_names(value: str) -> tuple[str, ...]:
    """Split a space separated list of unit names.
    """
    return tuple(validate_unit_name(name) for name in value.split())


def parse_absolute_path(value: str, allow_home: bool = False) -> str:
    if allow_home and value == '~':
        return value
    if not value.startswith('/'):
        raise _invalid(f'Path is not absolute: {value!r}')
    return value


def parse_command(value: str) -> ExecCommand:
    """Parse an Exec* command line.

    A leading ``-`` on the executable marks a non-zero exit status as
    tolerated.
    """
    try:
        argv = shlex.split(value)
    except ValueError as e:
        raise _invalid(f'Invalid command format: {e}') from None

    if not argv:
        raise _invalid('Empty command')

    path, *args = argv
    ignore_failure = path.startswith('-')
    if ignore_failure:
        path = path[1:]
    if not path:
        raise _invalid(f'Missing executable in command: {value!r}')

    return ExecCommand(
        path=path,
        args=tuple(args),
        ignore_failure=ignore_failure,
    )


def parse_environment(value: str) -> list[tuple[str, str]]:
    """Parse ``Environment=`` assignments, honouring shell style quotes.
    """
    try:
        words = shlex.split(value)
    except ValueError as e:
        raise _invalid(f'Invalid environment assignment: {e}') from None

    assignments = []
    for word in words:
        name, sep, setting = word.partition('=')
        if not sep or not _ENV_NAME.match(name):
            raise _invalid(f'Invalid environment assignment: {word!r}')
        assignments.append((name, setting))
    return assignments


def parse_environment_file(value: str) -> EnvironmentFile:
    optional = value.startswith('-')
    path = value[1:] if optional else value
    return EnvironmentFile(
        path=parse_absolute_path(path),
        optional=optional,
    )
