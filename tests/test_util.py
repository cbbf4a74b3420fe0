import pytest

from sdunit.parse import ParseError
from sdunit.parse.util import (
    parse_boolean,
    parse_command,
    parse_enum,
    parse_environment,
    parse_environment_file,
    parse_int_range,
    parse_unit_names,
)
from sdunit.unit.types import ParseErrorType, RestartPolicy


@pytest.mark.parametrize('value', ['1', 'yes', 'true', 'on', 'YES', 'True'])
def test_boolean_true(value):
    assert parse_boolean(value) is True


@pytest.mark.parametrize('value', ['0', 'no', 'false', 'off', 'Off'])
def test_boolean_false(value):
    assert parse_boolean(value) is False


def test_boolean_invalid():
    with pytest.raises(ParseError):
        parse_boolean('perhaps')


def test_enum():
    assert parse_enum(RestartPolicy, 'on-abort') is RestartPolicy.ON_ABORT
    with pytest.raises(ParseError) as exc_info:
        parse_enum(RestartPolicy, 'On-Abort')
    assert 'on-abort' in exc_info.value.message


def test_int_range():
    assert parse_int_range('-20', -20, 19) == -20
    with pytest.raises(ParseError) as exc_info:
        parse_int_range('19.5', -20, 19)
    assert exc_info.value.kind is ParseErrorType.EINVAL


def test_unit_names():
    assert parse_unit_names('  a.service\tb@1.service  ') == (
        'a.service',
        'b@1.service',
    )
    assert parse_unit_names('') == ()
    for bad in ('.hidden', 'trailing.', 'sp ace/x'):
        with pytest.raises(ParseError):
            parse_unit_names(bad)


def test_command():
    command = parse_command("/bin/sh -c 'echo hello world'")
    assert command.path == '/bin/sh'
    assert command.args == ('-c', 'echo hello world')
    assert not command.ignore_failure

    assert parse_command('-/bin/false').ignore_failure


def test_environment():
    assert parse_environment('A=1 "B=two words" C=') == [
        ('A', '1'),
        ('B', 'two words'),
        ('C', ''),
    ]


def test_environment_file():
    env_file = parse_environment_file('/etc/default/app')
    assert env_file.path == '/etc/default/app'
    assert not env_file.optional
