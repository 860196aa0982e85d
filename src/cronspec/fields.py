"""
The untyped field tree produced by the field grammar.

These classes know nothing about the column they appear in. Bounds are checked
later by the spec classes in :mod:`cronspec.specs`.
"""

from __future__ import annotations

from typing import Union

import attrs

from ._validators import (
    base_field,
    base_fields,
    non_negative_value,
    non_singleton,
    ordered_range,
    positive_step,
)


@attrs.define(frozen=True)
class Star:
    """Matches every value of the column."""

    def __str__(self) -> str:
        return "*"


@attrs.define(frozen=True)
class SpecificField:
    """
    A single value.

    :var int value: a non-negative integer
    """

    value: int = attrs.field(validator=non_negative_value)

    def __str__(self) -> str:
        return str(self.value)


@attrs.define(frozen=True)
class RangeField:
    """
    An inclusive range of values.

    :var int begin: first value of the range
    :var int end: last value of the range (must not be lower than ``begin``)
    """

    begin: int = attrs.field(validator=non_negative_value)
    end: int = attrs.field(validator=[non_negative_value, ordered_range])

    def __str__(self) -> str:
        return f"{self.begin}-{self.end}"


BaseField = Union[Star, SpecificField, RangeField]
BASE_FIELD_TYPES = (Star, SpecificField, RangeField)


@attrs.define(frozen=True)
class Field:
    """A cron field consisting of a single base field."""

    base: BaseField = attrs.field(validator=base_field)

    def __str__(self) -> str:
        return str(self.base)


@attrs.define(frozen=True)
class ListField:
    """
    A comma separated list of base fields.

    :var tuple fields: two or more base fields, in source order
    """

    fields: tuple[BaseField, ...] = attrs.field(
        converter=tuple, validator=[non_singleton, base_fields]
    )

    def __str__(self) -> str:
        return ",".join(str(field) for field in self.fields)


@attrs.define(frozen=True)
class StepField:
    """
    Every ``step``-th value matched by ``base``.

    :var base: the star, value or range being stepped over
    :var int step: a positive integer
    """

    base: BaseField = attrs.field(validator=base_field)
    step: int = attrs.field(validator=positive_step)

    def __str__(self) -> str:
        return f"{self.base}/{self.step}"


CronField = Union[Field, ListField, StepField]
