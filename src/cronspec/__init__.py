import importlib.metadata as importlib_metadata

from ._crontab import CommandEntry, Crontab, CrontabEntry, EnvVariable
from ._exceptions import (
    CronParseError,
    CronSyntaxError,
    CrontabLineError,
    CronValidationError,
)
from ._scanner import Scanner
from ._schedule import (
    DAILY,
    EVERY_MINUTE,
    HOURLY,
    MONTHLY,
    WEEKLY,
    YEARLY,
    CronSchedule,
)
from .fields import (
    BaseField,
    CronField,
    Field,
    ListField,
    RangeField,
    SpecificField,
    Star,
    StepField,
)
from .parser import (
    cron_schedule,
    cron_schedule_loose,
    crontab,
    crontab_entry,
    parse_cron_schedule,
    parse_crontab,
    parse_crontab_entry,
)
from .specs import (
    DayOfMonthSpec,
    DayOfWeekSpec,
    FieldSpec,
    HourSpec,
    MinuteSpec,
    MonthSpec,
)

try:
    release = importlib_metadata.version("cronspec").split("-")[0]
except importlib_metadata.PackageNotFoundError:
    release = "1.0.0"

version_info = tuple(int(x) if x.isdigit() else x for x in release.split("."))
version = __version__ = ".".join(str(x) for x in version_info[:3])
del importlib_metadata
