# tests/test_mesoamerican.py

import pytest

from polycal.core.errors import InvalidDateError
from polycal.engines.mesoamerican import MAYAN_EPOCH


def test_epoch_is_day_one_everywhere(conv):
    assert conv("mayan-tzolkin").from_day_count(MAYAN_EPOCH).key() == (1, 1, 1)
    assert conv("mayan-haab").from_day_count(MAYAN_EPOCH).key() == (1, 1, 1)
    assert conv("aztec-xiuhpohualli").from_day_count(MAYAN_EPOCH).key() == (1, 1, 1)
    lc = conv("mayan-longcount")
    d = lc.from_day_count(MAYAN_EPOCH)
    assert d.key() == (0, 0, 0)
    assert lc.notation(d) == "0.0.0.0.0"


def test_end_of_thirteenth_baktun(conv):
    lc = conv("mayan-longcount")
    d = lc.from_day_count(2456283)  # 2012-12-21
    assert lc.notation(d) == "13.0.0.0.0"
    assert lc.format(d) == "0013-00-00"
    assert lc.parse("0013-00-00") == d
    assert lc.parse("13.0.0.0.0") == d


def test_long_count_packing(conv):
    lc = conv("mayan-longcount")
    d = lc.parse("9.12.11.5.18")
    assert d.key() == (9, 12, 11 * 400 + 5 * 20 + 18)
    assert lc.to_day_count(*d.key()) == MAYAN_EPOCH + 9 * 144000 + 12 * 7200 + 11 * 360 + 5 * 20 + 18
    assert lc.notation(lc.from_day_count(lc.to_day_count(*d.key()))) == "9.12.11.5.18"


@pytest.mark.parametrize("text", ["13.20.0.0.0", "13.0.0.18.0", "13.0.20.0.0", "13.0.0.0.20", "1.2.3"])
def test_long_count_rejects_bad_components(conv, text):
    assert conv("mayan-longcount").parse(text) is None


def test_long_count_validation(conv):
    lc = conv("mayan-longcount")
    assert lc.is_valid(13, 19, 19 * 400 + 17 * 20 + 19)
    assert not lc.is_valid(13, 0, 360)  # uinal 18
    with pytest.raises(InvalidDateError):
        lc.to_day_count(13, 20, 0)
    with pytest.raises(InvalidDateError):
        lc.from_components(13, 0, 0, 18, 0)


def test_tzolkin_cycle(conv):
    tz = conv("mayan-tzolkin")
    last = tz.from_day_count(MAYAN_EPOCH + 259)
    assert last.key() == (1, 20, 13)
    assert tz.from_day_count(MAYAN_EPOCH + 260).key() == (2, 1, 1)
    # name and number advance together
    assert tz.from_day_count(MAYAN_EPOCH + 13).key() == (1, 14, 1)
    assert tz.from_day_count(MAYAN_EPOCH - 1).key() == (0, 20, 13)
    for r in range(260):
        d = tz.from_day_count(MAYAN_EPOCH + r)
        assert tz.to_day_count(*d.key()) == MAYAN_EPOCH + r


def test_tzolkin_names(conv):
    tz = conv("mayan-tzolkin")
    assert tz.month_name(1, 1) == "Imix"
    assert tz.month_name(1, 20) == "Ajaw"
    assert tz.days_in_year(1) == 260


def test_haab_wayeb(conv):
    haab = conv("mayan-haab")
    assert haab.days_in_month(1, 19) == 5
    assert haab.days_in_year(1) == 365
    assert haab.from_day_count(MAYAN_EPOCH + 364).key() == (1, 19, 5)
    assert haab.from_day_count(MAYAN_EPOCH + 365).key() == (2, 1, 1)
    assert haab.month_name(1, 19) == "Wayeb'"
    assert conv("aztec-xiuhpohualli").month_name(1, 19) == "Nemontemi"


@pytest.mark.parametrize(
    "calendar, ymd",
    [
        ("mayan-tzolkin", (1, 1, 14)),
        ("mayan-tzolkin", (1, 21, 1)),
        ("mayan-haab", (1, 19, 6)),
        ("mayan-haab", (1, 20, 1)),
        ("aztec-xiuhpohualli", (1, 1, 21)),
    ],
)
def test_cyclical_calendars_reject_out_of_range(conv, calendar, ymd):
    with pytest.raises(InvalidDateError):
        conv(calendar).to_day_count(*ymd)


def test_no_era_label(conv):
    d = conv("mayan-haab").from_day_count(MAYAN_EPOCH - 1000)
    assert d.era is None
    assert conv("mayan-haab").format(d, "ERA") == ""
