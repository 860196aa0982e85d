from __future__ import annotations

from typing import Any

from attrs import Attribute

from ._exceptions import CronValidationError


def non_negative_value(instance: Any, attribute: Attribute, value: Any) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise CronValidationError("specific field value out of range")


def ordered_range(instance: Any, attribute: Attribute, value: Any) -> None:
    if instance.begin > value:
        raise CronValidationError("start of range must be less than or equal to end")


def non_singleton(instance: Any, attribute: Attribute, value: Any) -> None:
    if len(value) < 2:
        raise CronValidationError("invalid singleton list")


def base_fields(instance: Any, attribute: Attribute, value: Any) -> None:
    from .fields import BASE_FIELD_TYPES

    for item in value:
        if not isinstance(item, BASE_FIELD_TYPES):
            raise CronValidationError(
                f"{attribute.name} must contain only base fields, got: {item!r}"
            )


def base_field(instance: Any, attribute: Attribute, value: Any) -> None:
    from .fields import BASE_FIELD_TYPES

    if not isinstance(value, BASE_FIELD_TYPES):
        raise CronValidationError(
            f"{attribute.name} must be a base field, got: {value!r}"
        )


def positive_step(instance: Any, attribute: Attribute, value: Any) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise CronValidationError("invalid stepping")


def within_bounds(instance: Any, attribute: Attribute, value: Any) -> None:
    """
    Check that every numeric leaf of a cron field lies within the bounds declared
    on the spec class of ``instance``. Range order, list arity and stepping are
    already enforced by the field classes themselves.

    """
    from .fields import Field, ListField, RangeField, SpecificField, StepField

    def check_base(base: Any) -> None:
        if isinstance(base, SpecificField):
            check_value(base.value)
        elif isinstance(base, RangeField):
            check_value(base.begin)
            check_value(base.end)

    def check_value(number: int) -> None:
        if not instance.min_value <= number <= instance.max_value:
            raise CronValidationError(f"{instance.field_name} out of range")

    if isinstance(value, Field):
        check_base(value.base)
    elif isinstance(value, ListField):
        for item in value.fields:
            check_base(item)
    elif isinstance(value, StepField):
        check_base(value.base)
    else:
        raise CronValidationError(
            f"{attribute.name} must be a cron field, got: {value!r}"
        )
