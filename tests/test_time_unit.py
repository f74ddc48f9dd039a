# tests/test_time_unit.py

import pytest

import calchrono
from calchrono import HIJRAH, ISO, Duration, LocalDateTime, LocalTime, TimeUnit
from calchrono.core.errors import ArithmeticOverflowError, InvalidDateFieldError, UnknownUnitError
from calchrono.core.safe_math import INT64_MAX


def test_durations_are_descriptive_metadata():
    assert TimeUnit.NANOS.duration == Duration(0, 1)
    assert TimeUnit.MICROS.duration == Duration(0, 1000)
    assert TimeUnit.MILLIS.duration == Duration(0, 1_000_000)
    assert TimeUnit.SECONDS.duration == Duration(1)
    assert TimeUnit.MINUTES.duration == Duration(60)
    assert TimeUnit.HOURS.duration == Duration(3600)
    assert TimeUnit.HALF_DAYS.duration == Duration(43200)
    assert str(TimeUnit.HALF_DAYS) == "HalfDays"


def test_unit_lookup():
    assert TimeUnit.of_name("half_days") is TimeUnit.HALF_DAYS
    assert TimeUnit.of_name("HalfDays") is TimeUnit.HALF_DAYS
    assert TimeUnit.of_name("millis") is TimeUnit.MILLIS
    with pytest.raises(UnknownUnitError):
        TimeUnit.of_name("fortnights")


def test_25_hours_wraps_on_time():
    t = LocalTime(10, 0)
    assert TimeUnit.HOURS.rules.add_to_time(t, 25) == LocalTime(11, 0)
    assert TimeUnit.HOURS.rules.add_to_time(LocalTime(0, 30), -1) == LocalTime(23, 30)


def test_25_hours_carries_on_date_time():
    dt = LocalDateTime(ISO.date(2023, 7, 19), LocalTime(0, 0))
    out = TimeUnit.HOURS.rules.add_to_date_time(dt, 25)
    assert out == LocalDateTime(ISO.date(2023, 7, 20), LocalTime(1, 0))
    # original is untouched
    assert dt.time == LocalTime(0, 0)


def test_carry_across_hijrah_year():
    dt = LocalDateTime(HIJRAH.date(1444, 12, 29), LocalTime(23, 0))
    out = calchrono.add(dt, 1, TimeUnit.HOURS)
    assert out.date == HIJRAH.date(1445, 1, 1)
    assert out.time == LocalTime(0, 0)


@pytest.mark.parametrize(
    "unit, amount, expected",
    [
        (TimeUnit.NANOS, 1, LocalTime(12, 0, 0, 1)),
        (TimeUnit.MICROS, 1, LocalTime(12, 0, 0, 1000)),
        (TimeUnit.MILLIS, 1500, LocalTime(12, 0, 1, 500_000_000)),
        (TimeUnit.SECONDS, -1, LocalTime(11, 59, 59)),
        (TimeUnit.MINUTES, 90, LocalTime(13, 30)),
        (TimeUnit.HOURS, 12, LocalTime(0, 0)),
        (TimeUnit.HALF_DAYS, 1, LocalTime(0, 0)),
        (TimeUnit.HALF_DAYS, 3, LocalTime(0, 0)),
    ],
)
def test_add_to_time_per_unit(unit, amount, expected):
    assert unit.rules.add_to_time(LocalTime(12, 0), amount) == expected


def test_half_days_on_date_time():
    dt = LocalDateTime(ISO.date(2024, 2, 28), LocalTime(12, 0))
    out = TimeUnit.HALF_DAYS.rules.add_to_date_time(dt, 3)
    assert out == LocalDateTime(ISO.date(2024, 3, 1), LocalTime(0, 0))


def test_add_to_date_leaves_date_unchanged():
    d = ISO.date(2023, 7, 19)
    for unit in TimeUnit:
        assert unit.rules.add_to_date(d, 25) is d


def test_scaling_overflow():
    t = LocalTime(0, 0)
    with pytest.raises(ArithmeticOverflowError):
        TimeUnit.MICROS.rules.add_to_time(t, INT64_MAX)
    with pytest.raises(ArithmeticOverflowError):
        TimeUnit.HALF_DAYS.rules.add_to_time(t, 1 << 62)
    with pytest.raises(ArithmeticOverflowError):
        TimeUnit.NANOS.rules.add_to_time(t, INT64_MAX + 1)
    # largest amount that scales cleanly still wraps without error
    assert TimeUnit.NANOS.rules.add_to_time(t, INT64_MAX) == LocalTime.of_nano_of_day(INT64_MAX % 86_400_000_000_000)


def test_between_times():
    a, b = LocalTime(10, 0), LocalTime(12, 30)
    assert TimeUnit.HOURS.rules.period_between_times(a, b) == 2
    assert TimeUnit.HOURS.rules.period_between_times(b, a) == -2
    assert TimeUnit.MINUTES.rules.period_between_times(a, b) == 150
    assert TimeUnit.HALF_DAYS.rules.period_between_times(a, b) == 0


def test_between_date_times_truncates_toward_zero():
    d = ISO.date(2023, 7, 19)
    a = LocalDateTime(d, LocalTime(23, 0))
    b = LocalDateTime(d.plus_days(1), LocalTime(1, 0))
    assert TimeUnit.HOURS.rules.period_between_date_times(a, b) == 2
    assert TimeUnit.HOURS.rules.period_between_date_times(b, a) == -2
    c = LocalDateTime(d, LocalTime(23, 59, 59, 999_999_999))
    assert calchrono.between(LocalDateTime(d, LocalTime(0, 0)), c, "hours") == 23
    assert calchrono.between(c, LocalDateTime(d, LocalTime(0, 0)), "hours") == -23
    e = LocalDateTime(d.plus_days(3), LocalTime(12, 0))
    assert calchrono.between(LocalDateTime(d, LocalTime(0, 0)), e, TimeUnit.HALF_DAYS) == 7


def test_between_dates():
    a, b = ISO.date(2023, 7, 19), ISO.date(2023, 7, 22)
    assert TimeUnit.HALF_DAYS.rules.period_between_dates(a, b) == 6
    assert TimeUnit.MILLIS.rules.period_between_dates(a, b) == 3 * 86_400_000
    assert TimeUnit.HOURS.rules.period_between_dates(b, a) == -72
    # mixed chronologies measure on the shared epoch-day line
    assert TimeUnit.HOURS.rules.period_between_dates(a, HIJRAH.date(1445, 1, 2)) == 24


def test_between_dates_overflow():
    with pytest.raises(ArithmeticOverflowError):
        TimeUnit.NANOS.rules.period_between_dates(ISO.date(1970, 1, 1), ISO.date(2300, 1, 1))


def test_api_add_rejects_other_types():
    with pytest.raises(TypeError):
        calchrono.add("10:00", 1, TimeUnit.HOURS)
    with pytest.raises(TypeError):
        calchrono.between(LocalTime(1, 0), ISO.date(2023, 1, 1), TimeUnit.HOURS)


def test_units_satisfy_protocols():
    from calchrono.units.interfaces import PeriodRules, PeriodUnit

    for unit in TimeUnit:
        assert isinstance(unit, PeriodUnit)
        assert isinstance(unit.rules, PeriodRules)
        assert unit.rules.unit is unit


@pytest.mark.parametrize("text", ["10:xx", "aa:00", "10:00:zz", "10:00:00.12a", "10"])
def test_time_parse_rejects_garbage(text):
    with pytest.raises(InvalidDateFieldError):
        LocalTime.parse(text)


def test_time_parse():
    assert LocalTime.parse("23:59:59.5") == LocalTime(23, 59, 59, 500_000_000)
    assert LocalTime.parse("07:05") == LocalTime(7, 5)


def test_duration_normalizes_nanos():
    assert Duration(0, 1_500_000_000) == Duration(1, 500_000_000)
    assert Duration(1, -1) == Duration(0, 999_999_999)
    assert Duration(0, -1).to_nanos() == -1
    assert Duration(5, 2_000_000_000).seconds == 7
