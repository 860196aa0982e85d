from __future__ import annotations

import re

import attrs
from attrs.validators import instance_of

from ._grammar import cron_field
from ._scanner import Scanner
from .fields import Field, SpecificField, Star
from .specs import (
    DayOfMonthSpec,
    DayOfWeekSpec,
    FieldSpec,
    HourSpec,
    MinuteSpec,
    MonthSpec,
)


@attrs.define(frozen=True)
class CronSchedule:
    """
    A complete five column cron schedule.

    :var MinuteSpec minute: minute (0-59)
    :var HourSpec hour: hour (0-23)
    :var DayOfMonthSpec day_of_month: day of the month (1-31)
    :var MonthSpec month: month (1-12 or jan-dec)
    :var DayOfWeekSpec day_of_week: weekday (0-7 or mon-sun, both 0 and 7 being
        sunday)
    """

    minute: MinuteSpec = attrs.field(validator=instance_of(MinuteSpec))
    hour: HourSpec = attrs.field(validator=instance_of(HourSpec))
    day_of_month: DayOfMonthSpec = attrs.field(validator=instance_of(DayOfMonthSpec))
    month: MonthSpec = attrs.field(validator=instance_of(MonthSpec))
    day_of_week: DayOfWeekSpec = attrs.field(validator=instance_of(DayOfWeekSpec))

    @property
    def fields(self) -> tuple[FieldSpec, ...]:
        return self.minute, self.hour, self.day_of_month, self.month, self.day_of_week

    def __str__(self) -> str:
        return " ".join(str(spec) for spec in self.fields)


def _every() -> Field:
    return Field(Star())


def _at(value: int) -> Field:
    return Field(SpecificField(value))


YEARLY = CronSchedule(
    MinuteSpec(_at(0)),
    HourSpec(_at(0)),
    DayOfMonthSpec(_at(1)),
    MonthSpec(_at(1)),
    DayOfWeekSpec(_every()),
)
MONTHLY = CronSchedule(
    MinuteSpec(_at(0)),
    HourSpec(_at(0)),
    DayOfMonthSpec(_at(1)),
    MonthSpec(_every()),
    DayOfWeekSpec(_every()),
)
WEEKLY = CronSchedule(
    MinuteSpec(_at(0)),
    HourSpec(_at(0)),
    DayOfMonthSpec(_every()),
    MonthSpec(_every()),
    DayOfWeekSpec(_at(0)),
)
DAILY = CronSchedule(
    MinuteSpec(_at(0)),
    HourSpec(_at(0)),
    DayOfMonthSpec(_every()),
    MonthSpec(_every()),
    DayOfWeekSpec(_every()),
)
HOURLY = CronSchedule(
    MinuteSpec(_at(0)),
    HourSpec(_every()),
    DayOfMonthSpec(_every()),
    MonthSpec(_every()),
    DayOfWeekSpec(_every()),
)
EVERY_MINUTE = CronSchedule(
    MinuteSpec(_every()),
    HourSpec(_every()),
    DayOfMonthSpec(_every()),
    MonthSpec(_every()),
    DayOfWeekSpec(_every()),
)

# Tried in this order
MACROS = (
    ("@yearly", YEARLY),
    ("@monthly", MONTHLY),
    ("@weekly", WEEKLY),
    ("@daily", DAILY),
    ("@hourly", HOURLY),
)
MACRO_RES = tuple(
    (re.compile(re.escape(macro), re.IGNORECASE), schedule)
    for macro, schedule in MACROS
)


def _spec(scanner: Scanner, spec_class: type[FieldSpec]) -> FieldSpec:
    return spec_class(cron_field(scanner, spec_class.names))


def classic_schedule(scanner: Scanner) -> CronSchedule:
    """Parse the five space separated columns of a cron schedule."""
    minute = _spec(scanner, MinuteSpec)
    scanner.expect_char(" ")
    hour = _spec(scanner, HourSpec)
    scanner.expect_char(" ")
    day_of_month = _spec(scanner, DayOfMonthSpec)
    scanner.expect_char(" ")
    month = _spec(scanner, MonthSpec)
    scanner.expect_char(" ")
    day_of_week = _spec(scanner, DayOfWeekSpec)
    return CronSchedule(minute, hour, day_of_month, month, day_of_week)


def macro_schedule(scanner: Scanner) -> CronSchedule:
    """Parse one of the ``@yearly``, ``@monthly``... shorthands."""
    for pattern, schedule in MACRO_RES:
        if scanner.match(pattern):
            return schedule

    raise scanner.fail("expected one of " + ", ".join(macro for macro, _ in MACROS))


def cron_schedule_loose(scanner: Scanner) -> CronSchedule:
    """
    Parse a cron schedule at the current position of ``scanner``, leaving any
    input that follows it unconsumed.

    This is the variant to use when the schedule is embedded in a larger line,
    like the command lines of a crontab.

    """
    return scanner.choice(macro_schedule, classic_schedule)


def cron_schedule(scanner: Scanner) -> CronSchedule:
    """
    Parse a cron schedule at the current position of ``scanner`` and require the
    input to end right after it.

    Extra input, like a sixth column, makes the parse fail. Use
    :func:`cron_schedule_loose` if trailing input is expected.

    """
    schedule = cron_schedule_loose(scanner)
    scanner.end_of_input()
    return schedule
