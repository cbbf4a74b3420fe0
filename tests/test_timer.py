import pytest

from sdunit import ParseError, ParseErrorType, UnitType, parse
from sdunit.unit.models import TimerSection

SECOND = 1_000_000_000


def test_timer_unit(write_unit):
    path = write_unit('backup.timer', '''
        [Unit]
        Description=Run backup daily

        [Timer]
        OnCalendar=daily
        OnCalendar=Sat *-*-* 12:00:00
        OnBootSec=15min
        OnUnitActiveSec=1h
        AccuracySec=1s
        RandomizedDelaySec=30
        Persistent=true
        WakeSystem=no
        RemainAfterElapse=false
        Unit=backup.service

        [Install]
        WantedBy=timers.target
    ''')
    unit_file = parse(path, UnitType.TIMER)
    section = unit_file.section
    assert isinstance(section, TimerSection)
    assert section.on_calendar == ('daily', 'Sat *-*-* 12:00:00')
    assert section.on_boot_sec_ns == 15 * 60 * SECOND
    assert section.on_unit_active_sec_ns == 3600 * SECOND
    assert section.on_startup_sec_ns is None
    assert section.accuracy_sec_ns == SECOND
    assert section.randomized_delay_sec_ns == 30 * SECOND
    assert section.persistent is True
    assert section.wake_system is False
    assert section.remain_after_elapse is False
    assert section.unit == 'backup.service'
    assert unit_file.install.wanted_by == ('timers.target',)


def test_timer_defaults(write_unit):
    path = write_unit('empty.timer', '[Timer]\n')
    section = parse(path, UnitType.TIMER).section
    assert section == TimerSection()
    assert section.accuracy_sec_ns == 60 * SECOND
    assert section.remain_after_elapse is True


def test_timer_rejects_service_keys(write_unit):
    path = write_unit('backup.timer', '[Timer]\nExecStart=/bin/true\n')
    with pytest.raises(ParseError) as exc_info:
        parse(path, UnitType.TIMER)
    assert exc_info.value.kind is ParseErrorType.EINVAL
    assert exc_info.value.line == 2


def test_timer_rejects_bad_duration(write_unit):
    path = write_unit('backup.timer', '[Timer]\nOnBootSec=soon\n')
    with pytest.raises(ParseError) as exc_info:
        parse(path, UnitType.TIMER)
    assert exc_info.value.kind is ParseErrorType.EINVAL
