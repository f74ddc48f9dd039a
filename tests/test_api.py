# tests/test_api.py

from concurrent.futures import ThreadPoolExecutor

import pytest

import calchrono
from calchrono import HIJRAH, ISO, HijrahEra
from calchrono.core.errors import CalchronoError, InvalidDateFieldError


def test_registry():
    assert calchrono.list_chronologies() == ["hijrah", "iso"]
    assert calchrono.get_chronology("HIJRAH") is HIJRAH
    with pytest.raises(KeyError):
        calchrono.get_chronology("julian")


def test_chronology_info():
    info = calchrono.chronology_info("hijrah")
    assert info["id"] == "Hijrah"
    assert info["calendar_type"] == "islamicc"
    assert info["eras"] == ["BEFORE_AH", "AH"]


def test_date_of_with_era_ordinal():
    d = calchrono.date_of("hijrah", 5, 1, 1, era=0)
    assert d.proleptic_year == -4
    assert calchrono.date_of("hijrah", 5, 1, 1, era=HijrahEra.AH).proleptic_year == 5


def test_convert_both_ways():
    h = HIJRAH.date(1445, 1, 1)
    iso = calchrono.convert(h, "iso")
    assert iso == ISO.date(2023, 7, 19)
    assert calchrono.convert(iso, HIJRAH) == h
    assert h.with_chronology(ISO) == iso
    assert calchrono.convert(h, HIJRAH) is h


def test_str():
    assert str(HIJRAH.date(1445, 1, 1)) == "Hijrah AH 1445-01-01"
    assert str(ISO.date(0, 3, 1)) == "ISO BCE 0001-03-01"


def test_is_leap_year():
    assert calchrono.is_leap_year("hijrah", 1445)
    assert not calchrono.is_leap_year("hijrah", 1444)
    assert calchrono.is_leap_year("iso", 2024)


def test_date_from_epoch_day():
    assert calchrono.date_from_epoch_day("hijrah", 19557) == HIJRAH.date(1445, 1, 1)
    with pytest.raises(InvalidDateFieldError):
        calchrono.date_from_epoch_day("hijrah", -10 ** 8)


def test_attributes():
    attrs = calchrono.date_attributes(HIJRAH.date(1445, 1, 1), ["weekday", "era", "year", "julian_day"])
    assert attrs["weekday"] == 3
    assert attrs["weekday_name"] == "Wednesday"
    assert attrs["era"] == "AH"
    assert attrs["year_of_era"] == 1445
    assert attrs["leap_year"] is True
    assert attrs["length_of_year"] == 355
    assert attrs["jdn"] == 19557 + 2440588
    with pytest.raises(KeyError):
        calchrono.date_attributes(HIJRAH.date(1445, 1, 1), ["zodiac"])


def test_errors_share_a_base():
    with pytest.raises(CalchronoError):
        HIJRAH.date(1445, 13, 1)
    with pytest.raises(ValueError):
        HIJRAH.era_of(7)


def test_shared_singletons_across_threads():
    def work(n):
        d = HIJRAH.date_from_epoch_day(n)
        return calchrono.convert(d, ISO).to_epoch_day()

    days = list(range(-50_000, 50_000, 97))
    with ThreadPoolExecutor(max_workers=8) as pool:
        assert list(pool.map(work, days)) == days
