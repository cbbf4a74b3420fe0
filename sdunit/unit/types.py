from enum import StrEnum


class UnitType(StrEnum):
    """Systemd unit types, valued by their file extension.
    """

    AUTOMOUNT = 'automount'
    DEVICE = 'device'
    MOUNT = 'mount'
    PATH = 'path'
    SCOPE = 'scope'
    SERVICE = 'service'
    SLICE = 'slice'
    SOCKET = 'socket'
    SWAP = 'swap'
    TARGET = 'target'
    TIMER = 'timer'


class Segment(StrEnum):
    """Unit file sections that scope which attributes are legal.
    """

    # Before the first header
    NONE = 'none'

    UNIT = 'Unit'
    INSTALL = 'Install'

    # The unit type's own section, e.g. [Service]
    TYPE_SPECIFIC = 'type-specific'


class ParseErrorType(StrEnum):
    """Kinds of unit file parse failures.
    """

    EFILE = 'EFILE'
    ESYNTAX = 'ESyntaxError'
    EINVAL = 'EINVAL'
    ERANGE = 'ERANGE'


class BaseUnitAttr(StrEnum):
    """Attributes of the [Unit] section.
    """

    DESCRIPTION = 'Description'
    DOCUMENTATION = 'Documentation'
    REQUIRES = 'Requires'
    WANTS = 'Wants'
    AFTER = 'After'
    BEFORE = 'Before'
    BINDS_TO = 'BindsTo'
    PART_OF = 'PartOf'
    ON_FAILURE = 'OnFailure'
    CONFLICTS = 'Conflicts'


class InstallUnitAttr(StrEnum):
    """Attributes of the [Install] section.
    """

    WANTED_BY = 'WantedBy'
    REQUIRED_BY = 'RequiredBy'
    ALSO = 'Also'
    ALIAS = 'Alias'


class ServiceUnitAttr(StrEnum):
    """Attributes of the [Service] section.
    """

    TYPE = 'Type'
    REMAIN_AFTER_EXIT = 'RemainAfterExit'
    EXEC_START = 'ExecStart'
    EXEC_START_PRE = 'ExecStartPre'
    EXEC_START_POST = 'ExecStartPost'
    EXEC_RELOAD = 'ExecReload'
    EXEC_STOP = 'ExecStop'
    EXEC_STOP_POST = 'ExecStopPost'
    RESTART = 'Restart'
    RESTART_SEC = 'RestartSec'
    TIMEOUT_START_SEC = 'TimeoutStartSec'
    TIMEOUT_STOP_SEC = 'TimeoutStopSec'
    ENVIRONMENT = 'Environment'
    ENVIRONMENT_FILE = 'EnvironmentFile'
    NICE = 'Nice'
    WORKING_DIRECTORY = 'WorkingDirectory'
    ROOT_DIRECTORY = 'RootDirectory'
    USER = 'User'
    GROUP = 'Group'
    MOUNT_FLAGS = 'MountFlags'
    MEMORY_MAX = 'MemoryMax'


class TimerUnitAttr(StrEnum):
    """Attributes of the [Timer] section.
    """

    ON_ACTIVE_SEC = 'OnActiveSec'
    ON_BOOT_SEC = 'OnBootSec'
    ON_STARTUP_SEC = 'OnStartupSec'
    ON_UNIT_ACTIVE_SEC = 'OnUnitActiveSec'
    ON_UNIT_INACTIVE_SEC = 'OnUnitInactiveSec'
    ON_CALENDAR = 'OnCalendar'
    ACCURACY_SEC = 'AccuracySec'
    RANDOMIZED_DELAY_SEC = 'RandomizedDelaySec'
    PERSISTENT = 'Persistent'
    WAKE_SYSTEM = 'WakeSystem'
    REMAIN_AFTER_ELAPSE = 'RemainAfterElapse'
    UNIT = 'Unit'


class ServiceType(StrEnum):
    SIMPLE = 'simple'
    EXEC = 'exec'
    FORKING = 'forking'
    ONESHOT = 'oneshot'
    DBUS = 'dbus'
    NOTIFY = 'notify'
    IDLE = 'idle'


class RestartPolicy(StrEnum):
    NO = 'no'
    ALWAYS = 'always'
    ON_SUCCESS = 'on-success'
    ON_FAILURE = 'on-failure'
    ON_ABNORMAL = 'on-abnormal'
    ON_ABORT = 'on-abort'
    ON_WATCHDOG = 'on-watchdog'


class MountFlags(StrEnum):
    SHARED = 'shared'
    SLAVE = 'slave'
    PRIVATE = 'private'
