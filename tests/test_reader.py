import pytest

from sdunit.parse import ParseError
from sdunit.parse.reader import (
    LogicalLine,
    detect_unit_type,
    get_unit_reader,
    iter_logical_lines,
)
from sdunit.parse.tables import SEGMENT_TABLES
from sdunit.unit.types import ParseErrorType, Segment, UnitType

SERVICE_HEADERS = SEGMENT_TABLES[UnitType.SERVICE]


def logical(lines):
    return list(iter_logical_lines(lines, SERVICE_HEADERS))


def test_blank_and_comment_lines_are_dropped():
    result = logical(['', '   ', '\t', '# comment', '#', 'A=1'])
    assert result == [LogicalLine(6, 'A=1')]


def test_indented_hash_is_not_a_comment():
    result = logical(['  # not a comment'])
    assert result == [LogicalLine(1, '  # not a comment')]


def test_headers_are_reported_with_their_segment():
    result = logical(['[Unit]', '  [Service]  ', '[Install]', '[Timer]'])
    assert [line.segment for line in result] == [
        Segment.UNIT,
        Segment.TYPE_SPECIFIC,
        Segment.INSTALL,
        None,
    ]
    assert result[1].text == '[Service]'
    assert result[1].is_header
    assert not result[3].is_header


def test_header_match_is_exact():
    result = logical(['[unit]', '[Unit] x'])
    assert all(not line.is_header for line in result)


def test_continuation_lines_are_merged():
    result = logical([
        'ExecStart=/bin/foo \\',
        '  --flag \\',
        '  --other',
    ])
    assert len(result) == 1
    assert result[0].number == 1
    assert result[0].text == 'ExecStart=/bin/foo    --flag    --other'


def test_scanning_resumes_after_a_continuation_group():
    result = logical([
        '[Service]',
        'ExecStart=/bin/foo \\',
        '  --flag',
        'User=nobody',
        '',
        'Group=nogroup',
    ])
    assert [(line.number, line.text) for line in result] == [
        (1, '[Service]'),
        (2, 'ExecStart=/bin/foo    --flag'),
        (4, 'User=nobody'),
        (6, 'Group=nogroup'),
    ]


def test_continuation_at_end_of_file():
    result = logical(['A=1 \\', 'B \\'])
    assert result == [LogicalLine(1, 'A=1  B ')]


def test_header_does_not_start_a_continuation():
    result = logical(['[Service]', 'A=1'])
    assert result[0].is_header
    assert result[1] == LogicalLine(2, 'A=1')


def test_detect_unit_type():
    assert detect_unit_type('/etc/systemd/system/foo.service') \
        is UnitType.SERVICE
    assert detect_unit_type('backup.timer') is UnitType.TIMER
    assert detect_unit_type('home.automount') is UnitType.AUTOMOUNT
    assert detect_unit_type('user.slice') is UnitType.SLICE


@pytest.mark.parametrize(
    'path',
    ['noextension', 'foo.conf', 'foo.Service', 'foo.service.'],
)
def test_detect_unit_type_rejects_unknown_extensions(path):
    with pytest.raises(ParseError) as exc_info:
        detect_unit_type(path)
    assert exc_info.value.kind is ParseErrorType.EFILE
    assert exc_info.value.file == path
    assert exc_info.value.line == 0


def test_reader_rejects_type_mismatch(write_unit):
    path = write_unit('foo.timer', '[Timer]\nOnBootSec=5\n')
    with pytest.raises(ParseError) as exc_info:
        get_unit_reader(path, UnitType.SERVICE)
    assert exc_info.value.kind is ParseErrorType.EFILE
    assert exc_info.value.file == path


def test_reader_rejects_missing_file(tmp_path):
    path = str(tmp_path / 'missing.service')
    with pytest.raises(ParseError) as exc_info:
        get_unit_reader(path, UnitType.SERVICE)
    assert exc_info.value.kind is ParseErrorType.EFILE


def test_reader_rejects_undecodable_file(tmp_path):
    path = tmp_path / 'binary.service'
    path.write_bytes(b'[Unit]\nDescription=\xff\xfe\n')
    with pytest.raises(ParseError) as exc_info:
        get_unit_reader(str(path), UnitType.SERVICE)
    assert exc_info.value.kind is ParseErrorType.EFILE


def test_reader_strips_line_terminators(tmp_path):
    path = tmp_path / 'crlf.service'
    path.write_bytes(b'[Unit]\r\nDescription=x \\\r\n  y\r\n')
    lines = get_unit_reader(str(path), UnitType.SERVICE)
    assert lines == ['[Unit]', 'Description=x \\', '  y']
