from sdunit.unit.models import (
    BaseUnit,
    EmptySection,
    EnvironmentFile,
    ExecCommand,
    InstallInfo,
    RawSection,
    ServiceSection,
    TimerSection,
    UnitFile,
)
from sdunit.unit.types import (
    MountFlags,
    ParseErrorType,
    RestartPolicy,
    Segment,
    ServiceType,
    UnitType,
)

__all__ = [
    'BaseUnit',
    'EmptySection',
    'EnvironmentFile',
    'ExecCommand',
    'InstallInfo',
    'MountFlags',
    'ParseErrorType',
    'RawSection',
    'RestartPolicy',
    'Segment',
    'ServiceSection',
    'ServiceType',
    'TimerSection',
    'UnitFile',
    'UnitType',
]
