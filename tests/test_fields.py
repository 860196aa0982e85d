import attrs
import pytest

from cronspec import (
    CronValidationError,
    Field,
    ListField,
    RangeField,
    SpecificField,
    Star,
    StepField,
)


def test_specific_negative():
    with pytest.raises(CronValidationError, match="specific field value out of range"):
        SpecificField(-1)


def test_range_order():
    assert RangeField(3, 3) == RangeField(3, 3)
    with pytest.raises(
        CronValidationError, match="start of range must be less than or equal to end"
    ):
        RangeField(9, 3)


def test_singleton_list():
    with pytest.raises(CronValidationError, match="invalid singleton list"):
        ListField([SpecificField(3)])


def test_empty_list():
    with pytest.raises(CronValidationError, match="invalid singleton list"):
        ListField([])


def test_list_converts_to_tuple():
    field = ListField([SpecificField(1), Star()])
    assert field.fields == (SpecificField(1), Star())


def test_list_rejects_nested_list():
    inner = ListField([SpecificField(1), SpecificField(2)])
    with pytest.raises(CronValidationError, match="must contain only base fields"):
        ListField([inner, SpecificField(3)])


@pytest.mark.parametrize("step", [0, -2])
def test_step_not_positive(step):
    with pytest.raises(CronValidationError, match="invalid stepping"):
        StepField(Star(), step)


def test_step_over_list():
    base = ListField([SpecificField(1), SpecificField(2)])
    with pytest.raises(CronValidationError, match="must be a base field"):
        StepField(base, 2)


def test_frozen():
    field = SpecificField(5)
    with pytest.raises(attrs.exceptions.FrozenInstanceError):
        field.value = 6


@pytest.mark.parametrize(
    "field, expected",
    [
        pytest.param(Field(Star()), "*", id="star"),
        pytest.param(Field(SpecificField(7)), "7", id="specific"),
        pytest.param(Field(RangeField(1, 5)), "1-5", id="range"),
        pytest.param(
            ListField([SpecificField(1), RangeField(3, 4)]), "1,3-4", id="list"
        ),
        pytest.param(StepField(RangeField(3, 9), 2), "3-9/2", id="step"),
    ],
)
def test_str(field, expected):
    assert str(field) == expected
