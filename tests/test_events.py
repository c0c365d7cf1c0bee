# tests/test_events.py

import pytest

from polycal import events as ev
from polycal.core.time import gregorian_to_jdn


@pytest.mark.parametrize(
    "fn, jdn",
    [
        (ev.vernal_equinox, gregorian_to_jdn(2024, 3, 20)),
        (ev.summer_solstice, gregorian_to_jdn(2024, 6, 20)),
        (ev.autumnal_equinox, gregorian_to_jdn(2024, 9, 22)),
        (ev.winter_solstice, gregorian_to_jdn(2024, 12, 21)),
    ],
)
def test_seasons_2024(fn, jdn):
    assert fn(2024) == jdn


def test_vernal_equinox_moment_2024():
    # 2024 March 20, 03:06 UT
    assert ev.vernal_equinox_moment(2024) == pytest.approx(2460389.629, abs=0.02)


def test_new_and_full_moon_january_2024():
    # new moon 2024 Jan 11 11:57 UT, full moon Jan 25 17:54 UT
    nm = ev.new_moon_for_lunation(297)
    assert nm == pytest.approx(2460320.998, abs=0.03)
    assert ev.full_moon(nm + 14.8) == pytest.approx(2460335.246, abs=0.03)
    assert ev.next_new_moon(nm) == pytest.approx(nm + 29.5, abs=0.5)
    assert ev.previous_new_moon(nm + 1.0) == pytest.approx(nm, abs=1e-6)
    assert ev.previous_new_moon(nm) < nm - 29.0


def test_moon_phase_windows():
    assert ev.get_moon_phase(gregorian_to_jdn(2024, 1, 11)) == "new-moon"
    assert ev.get_moon_phase(gregorian_to_jdn(2024, 1, 25)) == "full-moon"
    assert ev.get_moon_phase(gregorian_to_jdn(2024, 1, 18)) == "first-quarter"
    assert ev.get_moon_phase(gregorian_to_jdn(2024, 1, 14)) == "waxing-crescent"


def test_solar_term_numbering():
    assert ev.solar_term_longitude(0) == 315.0
    assert ev.solar_term_longitude(3) == 0.0
    assert ev.solar_term_longitude(21) == 270.0
    assert ev.solar_term_of_longitude(0.0) == 3
    assert ev.solar_term_of_longitude(314.9) == 23
    with pytest.raises(ValueError):
        ev.solar_term_longitude(24)


def test_lichun_2024_in_beijing():
    # Lichun 2024: February 4, 16:27 Beijing time
    assert ev.solar_term_day(2024, 0, utc_offset_hours=8.0) == gregorian_to_jdn(2024, 2, 4)
    assert ev.solar_term(gregorian_to_jdn(2024, 2, 10)) == 0


def test_events_for_march_2024():
    start, end = gregorian_to_jdn(2024, 3, 1), gregorian_to_jdn(2024, 3, 31)
    events = ev.astronomical_events_for_range(start, end)

    assert list(events) == sorted(events)
    assert all(start <= jdn <= end for jdn in events)

    names = {e.name: jdn for jdn, evs in events.items() for e in evs}
    assert names["vernal-equinox"] == gregorian_to_jdn(2024, 3, 20)
    assert names["full-moon"] == gregorian_to_jdn(2024, 3, 25)
    assert names["new-moon"] == gregorian_to_jdn(2024, 3, 10)
    assert {"first-quarter", "last-quarter"} <= set(names)

    d = events[gregorian_to_jdn(2024, 3, 20)][0].date
    assert (d.year, d.month, d.day, d.calendar) == (2024, 3, 20, "gregorian")


def test_event_filters():
    start, end = gregorian_to_jdn(2024, 3, 1), gregorian_to_jdn(2024, 3, 31)
    only_moon = ev.astronomical_events_for_range(start, end, solstices_equinoxes=False)
    assert all(e.kind == "moon-phase" for evs in only_moon.values() for e in evs)
    only_seasons = ev.astronomical_events_for_range(start, end, moon_phases=False)
    assert [e.name for evs in only_seasons.values() for e in evs] == ["vernal-equinox"]
    assert ev.astronomical_events_for_range(end, start) == {}


def test_solstices_equinoxes_for_year_are_ordered():
    out = ev.solstices_equinoxes_for_year(2023)
    assert [e.name for e in out] == [s[0] for s in ev.SEASONS]
    assert [e.jdn for e in out] == sorted(e.jdn for e in out)


def test_events_dated_in_another_calendar():
    start = gregorian_to_jdn(2024, 3, 1)
    events = ev.astronomical_events_for_range(start, start + 30, moon_phases=False, calendar_id="hebrew")
    (equinox,) = events[gregorian_to_jdn(2024, 3, 20)]
    assert equinox.date.key() == (5784, 13, 10)
    assert equinox.date.calendar == "hebrew"
