import json
import logging

import pytest
from click.testing import CliRunner

from sdunit.cli import cli
from sdunit.cli.commands.tables import format_table
from sdunit.parse.tables import BASE_SI


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    app_logger = logging.getLogger('sdunit')
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)


def test_verify_ok(write_unit):
    path = write_unit('app.service', '[Unit]\nDescription=App\n')
    result = CliRunner().invoke(cli, ['verify', path])
    assert result.exit_code == 0
    assert result.output.strip() == f'{path}: ok (service)'


def test_verify_details(write_unit):
    path = write_unit('app.service', '''
        [Unit]
        Description=App
        [Service]
        User=nobody
    ''')
    result = CliRunner().invoke(cli, ['verify', '--details', path])
    assert result.exit_code == 0
    assert '[Unit] Human readable unit description: App' in result.output
    assert '[service] User to run processes as: nobody' in result.output


def test_verify_json(write_unit):
    path = write_unit('app.service', '''
        [Unit]
        Description=App
        [Service]
        ExecStart=/bin/app run
    ''')
    result = CliRunner().invoke(cli, ['verify', '--json', path])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data['name'] == 'app.service'
    assert data['unit']['unit_type'] == 'service'
    assert data['section']['exec_start'][0]['args'] == ['run']


def test_verify_reports_errors(write_unit):
    path = write_unit('app.service', '[Unit]\nbroken\n')
    result = CliRunner().invoke(cli, ['verify', path])
    assert result.exit_code == 1
    assert f'Error: {path}:2: ESyntaxError' in result.output


def test_verify_with_explicit_type(write_unit):
    path = write_unit('backup.timer', '[Timer]\nOnBootSec=5\n')
    result = CliRunner().invoke(cli, ['verify', '--type', 'service', path])
    assert result.exit_code == 1
    assert 'EFILE' in result.output


def test_verify_unknown_extension(write_unit):
    path = write_unit('app.conf', '[Unit]\n')
    result = CliRunner().invoke(cli, ['verify', path])
    assert result.exit_code == 1
    assert 'EFILE' in result.output


def test_tables_command():
    result = CliRunner().invoke(cli, ['tables', 'iec'])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0].split() == ['SUFFIX', 'MULTIPLIER']
    assert lines[1].split() == ["'E'", str(1024 ** 6)]


def test_format_table_orders_by_multiplier():
    lines = format_table(BASE_SI).splitlines()
    assert lines[-1].split() == ["'B'", '1']
    assert lines[1].split() == ["'E'", str(10 ** 18)]
