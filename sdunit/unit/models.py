from pathlib import PurePath

from pydantic import Field, computed_field

from sdunit.unit.types import MountFlags, RestartPolicy, ServiceType, UnitType
from sdunit.utils import BaseModel

SECOND_NS = 1_000_000_000


class BaseUnit(BaseModel):
    """Attributes shared by every unit type ([Unit] section).

    Args:
        unit_type: Type of the unit, taken from the file extension
        description: Human readable unit description
        documentation: Documentation references
        requires: Units this unit requires
        wants: Units this unit wants
        after: Units ordered before this unit
        before: Units ordered after this unit
        binds_to: Units this unit is bound to
        part_of: Units this unit is part of
        on_failure: Units activated when this unit fails
        conflicts: Units that cannot run alongside this unit
    """

    unit_type: UnitType = Field(...)
    description: str = Field('')
    documentation: tuple[str, ...] = Field(())
    requires: tuple[str, ...] = Field(())
    wants: tuple[str, ...] = Field(())
    after: tuple[str, ...] = Field(())
    before: tuple[str, ...] = Field(())
    binds_to: tuple[str, ...] = Field(())
    part_of: tuple[str, ...] = Field(())
    on_failure: tuple[str, ...] = Field(())
    conflicts: tuple[str, ...] = Field(())


class InstallInfo(BaseModel):
    """Enable/disable wiring ([Install] section).

    Args:
        wanted_by: Units that want this unit once enabled
        required_by: Units that require this unit once enabled
        also: Units installed together with this unit
        alias: Additional names of this unit
    """

    wanted_by: tuple[str, ...] = Field(())
    required_by: tuple[str, ...] = Field(())
    also: tuple[str, ...] = Field(())
    alias: tuple[str, ...] = Field(())


class ExecCommand(BaseModel):
    """A command line from one of the Exec* attributes.

    Args:
        path: Executable path
        args: Arguments, without the executable
        ignore_failure: Non-zero exit status is not treated as failure
    """

    path: str = Field(..., min_length=1)
    args: tuple[str, ...] = Field(())
    ignore_failure: bool = Field(False)

    @property
    def argv(self) -> tuple[str, ...]:
        return (self.path, *self.args)


class EnvironmentFile(BaseModel):
    """An EnvironmentFile reference.

    Args:
        path: Path of the environment file
        optional: Missing file is not an error
    """

    path: str = Field(..., min_length=1)
    optional: bool = Field(False)


class ServiceSection(BaseModel):
    """Service specific attributes ([Service] section).

    Durations are in nanoseconds; None timeouts mean infinity.

    Args:
        type: Service start-up type
        remain_after_exit: Service stays active after its processes exit
        exec_start: Commands executed to start the service
        exec_start_pre: Commands executed before ExecStart
        exec_start_post: Commands executed after ExecStart
        exec_reload: Commands executed to reload the service
        exec_stop: Commands executed to stop the service
        exec_stop_post: Commands executed after the service stopped
        restart: Restart policy
        restart_sec_ns: Delay before restarting
        timeout_start_sec_ns: Start-up timeout
        timeout_stop_sec_ns: Stop timeout
        environment: Environment variables as ordered name/value pairs
        environment_files: Files to read environment variables from
        nice: Scheduling priority
        working_directory: Working directory of executed processes
        root_directory: Root directory of executed processes
        user: User to run processes as
        group: Group to run processes as
        mount_flags: Mount propagation flags
        memory_max: Memory limit in bytes, None for no limit
    """

    type: ServiceType = Field(ServiceType.SIMPLE)
    remain_after_exit: bool = Field(False)
    exec_start: tuple[ExecCommand, ...] = Field(())
    exec_start_pre: tuple[ExecCommand, ...] = Field(())
    exec_start_post: tuple[ExecCommand, ...] = Field(())
    exec_reload: tuple[ExecCommand, ...] = Field(())
    exec_stop: tuple[ExecCommand, ...] = Field(())
    exec_stop_post: tuple[ExecCommand, ...] = Field(())
    restart: RestartPolicy = Field(RestartPolicy.NO)
    restart_sec_ns: int = Field(100_000_000, ge=0)
    timeout_start_sec_ns: int | None = Field(90 * SECOND_NS, ge=0)
    timeout_stop_sec_ns: int | None = Field(90 * SECOND_NS, ge=0)
    environment: tuple[tuple[str, str], ...] = Field(())
    environment_files: tuple[EnvironmentFile, ...] = Field(())
    nice: int = Field(0, ge=-20, le=19)
    working_directory: str | None = Field(None)
    root_directory: str | None = Field(None)
    user: str | None = Field(None)
    group: str | None = Field(None)
    mount_flags: MountFlags = Field(MountFlags.SHARED)
    memory_max: int | None = Field(None, ge=0)

    @property
    def environment_dict(self) -> dict[str, str]:
        """Environment as a fresh dict, later assignments winning.
        """
        return dict(self.environment)


class TimerSection(BaseModel):
    """Timer specific attributes ([Timer] section).

    Durations are in nanoseconds.

    Args:
        on_active_sec_ns: Delay after the timer itself is activated
        on_boot_sec_ns: Delay after boot
        on_startup_sec_ns: Delay after the service manager started
        on_unit_active_sec_ns: Delay after the unit was last activated
        on_unit_inactive_sec_ns: Delay after the unit was last deactivated
        on_calendar: Calendar event expressions
        accuracy_sec_ns: Timer accuracy
        randomized_delay_sec_ns: Random delay added to the elapse time
        persistent: Missed runs are caught up after downtime
        wake_system: Elapsing wakes the system from suspend
        remain_after_elapse: Timer stays loaded after elapsing
        unit: Unit activated when the timer elapses
    """

    on_active_sec_ns: int | None = Field(None, ge=0)
    on_boot_sec_ns: int | None = Field(None, ge=0)
    on_startup_sec_ns: int | None = Field(None, ge=0)
    on_unit_active_sec_ns: int | None = Field(None, ge=0)
    on_unit_inactive_sec_ns: int | None = Field(None, ge=0)
    on_calendar: tuple[str, ...] = Field(())
    accuracy_sec_ns: int = Field(60 * SECOND_NS, ge=0)
    randomized_delay_sec_ns: int = Field(0, ge=0)
    persistent: bool = Field(False)
    wake_system: bool = Field(False)
    remain_after_elapse: bool = Field(True)
    unit: str | None = Field(None)


class RawSection(BaseModel):
    """Uninterpreted settings of a unit type's own section.

    Args:
        settings: Key/value pairs in file order
    """

    settings: tuple[tuple[str, str], ...] = Field(())

    def get(self, key: str) -> str | None:
        """Return the last value assigned to key.
        """
        value = None
        for name, setting in self.settings:
            if name == key:
                value = setting
        return value


class EmptySection(BaseModel):
    """Placeholder for unit types without a section of their own.
    """


UnitSection = ServiceSection | TimerSection | RawSection | EmptySection


class UnitFile(BaseModel):
    """A fully parsed unit file.

    Args:
        path: Path the unit was parsed from
        unit: Generic [Unit] attributes
        install: [Install] attributes
        section: Type specific attributes
    """

    path: str = Field(..., min_length=1)
    unit: BaseUnit
    install: InstallInfo = Field(default_factory=InstallInfo)
    section: UnitSection = Field(default_factory=EmptySection)

    @computed_field
    @property
    def name(self) -> str:
        return PurePath(self.path).name

    @property
    def unit_type(self) -> UnitType:
        return self.unit.unit_type
