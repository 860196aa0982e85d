"""
Column specific, bounds checked wrappers around :data:`~cronspec.fields.CronField`.
"""

from __future__ import annotations

from typing import ClassVar

import attrs

from ._grammar import MONTHS, WEEKDAYS, parse_field
from ._validators import within_bounds
from .fields import CronField


@attrs.define(frozen=True)
class FieldSpec:
    """
    Base class for the validated field of one cron column.

    Instantiating a subclass checks every value in ``field`` against the bounds of
    that column and raises :exc:`~cronspec.CronValidationError` if any of them
    falls outside.

    :var field: the validated field
    """

    field_name: ClassVar[str]
    min_value: ClassVar[int]
    max_value: ClassVar[int]
    names: ClassVar[tuple[str, ...]] = ()

    field: CronField = attrs.field(validator=within_bounds)

    @classmethod
    def parse(cls, text: str) -> FieldSpec:
        """
        Parse and validate a single field of this column.

        :param text: the field text, like ``*/15`` or ``mon-fri``
        :raises CronParseError: if the text is not a valid field for this column
        """
        return cls(parse_field(text, cls.names))

    def __str__(self) -> str:
        return str(self.field)


@attrs.define(frozen=True)
class MinuteSpec(FieldSpec):
    field_name = "minutes"
    min_value = 0
    max_value = 59


@attrs.define(frozen=True)
class HourSpec(FieldSpec):
    field_name = "hours"
    min_value = 0
    max_value = 23


@attrs.define(frozen=True)
class DayOfMonthSpec(FieldSpec):
    field_name = "day of month"
    min_value = 1
    max_value = 31


@attrs.define(frozen=True)
class MonthSpec(FieldSpec):
    field_name = "month"
    min_value = 1
    max_value = 12
    names = MONTHS


@attrs.define(frozen=True)
class DayOfWeekSpec(FieldSpec):
    """
    Day of week, where both 0 and 7 denote sunday. The two values are kept as
    written and are not normalized to each other.
    """

    field_name = "day of week"
    min_value = 0
    max_value = 7
    names = WEEKDAYS
