# tests/test_iso.py

import random
from datetime import date

import pytest

from calchrono import HIJRAH, ISO, IsoEra
from calchrono.core.errors import InvalidDateFieldError, InvalidEraError
from calchrono.core.time import date_from_epoch_day, epoch_day_from_date

UNIX_ORDINAL = date(1970, 1, 1).toordinal()


def test_known_epochs():
    assert ISO.date(1970, 1, 1).to_epoch_day() == 0
    assert ISO.date(2000, 1, 1).to_epoch_day() == 10957
    assert ISO.date(1969, 12, 31).to_epoch_day() == -1


def test_matches_stdlib_date():
    random.seed(42)
    # Constrain to year 1 - 9999 to stay inside datetime.date
    for _ in range(10000):
        ordinal = random.randint(1, date(9999, 12, 31).toordinal())
        ref = date.fromordinal(ordinal)
        n = ordinal - UNIX_ORDINAL
        d = ISO.date_from_epoch_day(n)
        assert (d.proleptic_year, d.month, d.day) == (ref.year, ref.month, ref.day)
        assert d.to_epoch_day() == n
        assert epoch_day_from_date(ref) == n
        assert date_from_epoch_day(n) == ref


def test_round_trip_far_from_epoch():
    random.seed(7)
    for _ in range(2000):
        n = random.randint(-10 ** 9, 10 ** 9)
        y, m, d = ISO.fields_from_epoch_day(n)
        assert ISO.epoch_day_from_fields(y, m, d) == n


@pytest.mark.parametrize(
    "year, leap",
    [(2000, True), (1900, False), (2024, True), (2023, False), (0, True), (-4, True), (-100, False), (-400, True)],
)
def test_leap_years(year, leap):
    assert ISO.is_leap_year(year) is leap
    assert ISO.length_of_year(year) == (366 if leap else 365)


def test_eras():
    assert ISO.proleptic_year(IsoEra.BCE, 5) == -4
    assert ISO.proleptic_year(IsoEra.CE, 5) == 5
    d = ISO.date(1, 1, 1, era=IsoEra.BCE)
    assert d.proleptic_year == 0
    assert (d.era, d.year_of_era) == (IsoEra.BCE, 1)
    with pytest.raises(InvalidEraError):
        ISO.proleptic_year(HIJRAH.era_of(1), 5)


def test_invalid_fields():
    with pytest.raises(InvalidDateFieldError):
        ISO.date(2023, 2, 29)
    with pytest.raises(InvalidDateFieldError):
        ISO.date(2023, 4, 31)
    with pytest.raises(InvalidDateFieldError):
        ISO.date(2023, 13, 1)
    assert ISO.date(2024, 2, 29).day_of_year == 60


def test_day_of_year_and_week():
    assert ISO.date(2023, 12, 31).day_of_year == 365
    assert ISO.date(2024, 12, 31).day_of_year == 366
    assert ISO.date(1970, 1, 1).day_of_week == 4   # Thursday
    assert ISO.date(2023, 7, 19).day_of_week == 3  # Wednesday
    assert ISO.date_year_day(2024, 366) == ISO.date(2024, 12, 31)


def test_ordering_within_chronology_only():
    assert ISO.date(2023, 7, 18) < ISO.date(2023, 7, 19)
    assert ISO.date(2023, 7, 19) >= ISO.date(2023, 7, 19)
    with pytest.raises(TypeError):
        ISO.date(2023, 7, 19) < HIJRAH.date(1445, 1, 1)
