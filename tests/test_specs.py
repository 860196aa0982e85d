import pytest

from cronspec import (
    CronParseError,
    CronValidationError,
    DayOfMonthSpec,
    DayOfWeekSpec,
    Field,
    HourSpec,
    ListField,
    MinuteSpec,
    MonthSpec,
    RangeField,
    SpecificField,
    Star,
    StepField,
)


@pytest.mark.parametrize("value", range(0, 60))
def test_minute_in_range(value):
    assert MinuteSpec.parse(str(value)).field == Field(SpecificField(value))


@pytest.mark.parametrize(
    "spec_class, value, message",
    [
        pytest.param(MinuteSpec, 60, "minutes out of range", id="minute"),
        pytest.param(HourSpec, 24, "hours out of range", id="hour"),
        pytest.param(DayOfMonthSpec, 0, "day of month out of range", id="dom_low"),
        pytest.param(DayOfMonthSpec, 32, "day of month out of range", id="dom_high"),
        pytest.param(MonthSpec, 0, "month out of range", id="month_low"),
        pytest.param(MonthSpec, 13, "month out of range", id="month_high"),
        pytest.param(DayOfWeekSpec, 8, "day of week out of range", id="dow"),
    ],
)
def test_out_of_range(spec_class, value, message):
    with pytest.raises(CronValidationError, match=message):
        spec_class(Field(SpecificField(value)))


@pytest.mark.parametrize(
    "spec_class, low, high",
    [
        (MinuteSpec, 0, 59),
        (HourSpec, 0, 23),
        (DayOfMonthSpec, 1, 31),
        (MonthSpec, 1, 12),
        (DayOfWeekSpec, 0, 7),
    ],
)
def test_bounds(spec_class, low, high):
    assert spec_class(Field(RangeField(low, high)))
    with pytest.raises(CronValidationError, match="out of range"):
        spec_class(Field(RangeField(low, high + 1)))


def test_range_end_out_of_range():
    with pytest.raises(CronValidationError, match="hours out of range"):
        HourSpec.parse("20-25")


def test_list_member_out_of_range():
    with pytest.raises(CronValidationError, match="month out of range"):
        MonthSpec.parse("1,13")


def test_step_base_out_of_range():
    with pytest.raises(CronValidationError, match="minutes out of range"):
        MinuteSpec.parse("60/5")


def test_step_over_star_any_size():
    assert MinuteSpec.parse("*/90").field == StepField(Star(), 90)


def test_rejects_non_field():
    with pytest.raises(CronValidationError, match="must be a cron field"):
        MinuteSpec(SpecificField(3))


def test_day_of_week_zero_and_seven_are_kept_apart():
    sunday_0 = DayOfWeekSpec.parse("0")
    sunday_7 = DayOfWeekSpec.parse("7")
    assert sunday_7 == DayOfWeekSpec.parse("sun")
    assert sunday_0 != sunday_7


@pytest.mark.parametrize("text", ["MON", "Mon", "mon", "1"])
def test_day_of_week_names(text):
    assert DayOfWeekSpec.parse(text) == DayOfWeekSpec(Field(SpecificField(1)))


def test_month_names():
    assert MonthSpec.parse("feb,dec").field == ListField(
        [SpecificField(2), SpecificField(12)]
    )


def test_names_only_in_named_columns():
    with pytest.raises(CronParseError):
        HourSpec.parse("mon")


def test_specs_of_different_columns_differ():
    field = Field(SpecificField(5))
    assert MinuteSpec(field) != HourSpec(field)


def test_str():
    assert str(DayOfWeekSpec.parse("mon-fri/2")) == "1-5/2"
