# tests/test_solar_lunar.py

import pytest

from polycal.reference import deltat, lunar, solar, time_scales


def test_meeus_example_25a_apparent_sun():
    """Example 25.a: 1992 October 13, 0h TD; apparent longitude 199.90895 deg."""
    coords = solar.solar_longitude(2448908.5)
    assert coords.L_true_deg == pytest.approx(199.90988, abs=1e-3)
    assert coords.L_app_deg == pytest.approx(199.90895, abs=1e-3)
    assert solar.apparent_solar_longitude(2448908.5) == coords.L_app_deg


def test_meeus_example_47a_moon_longitude():
    """Example 47.a: 1992 April 12, 0h TD; geocentric longitude 133.162655 deg."""
    coords = lunar.lunar_longitude(2448724.5)
    # sum of the periodic terms is -1127527e-6 deg on top of L' = 134.290182
    assert coords.L_true_deg == pytest.approx(133.162655, abs=1e-5)
    # nutation in longitude is +0.004610 deg on that date; only the leading term is modelled
    assert coords.L_app_deg == pytest.approx(133.167265, abs=2e-3)


def test_sun_moves_about_one_degree_per_day():
    a = solar.apparent_solar_longitude(2451545.0)
    b = solar.apparent_solar_longitude(2451546.0)
    assert (b - a) % 360.0 == pytest.approx(1.02, abs=0.03)


def test_delta_t_values():
    assert deltat.delta_t_seconds(2000.0) == pytest.approx(63.86, abs=0.01)
    assert deltat.delta_t_seconds(1900.0) == pytest.approx(-2.79, abs=0.01)
    assert deltat.delta_t_seconds(2024.0) == pytest.approx(73.9, abs=0.5)
    # ancient ΔT is hours, not seconds
    assert deltat.delta_t_seconds(-500.0) > 15000.0


def test_delta_t_is_continuous_at_2150():
    left = deltat.delta_t_seconds(2149.999)
    right = deltat.delta_t_seconds(2150.0)
    assert left == pytest.approx(right, abs=0.01)


def test_time_scales_round_trip():
    jd = 2460000.25
    tt = time_scales.ut_to_tt(jd)
    assert tt - jd == pytest.approx(deltat.delta_t_seconds(deltat.decimal_year_from_jd(jd)) / 86400.0)
    assert time_scales.tt_to_ut(tt) == pytest.approx(jd, abs=1e-7)
    assert time_scales.ut_to_tt(jd, use_delta_t=False) == jd
    assert time_scales.tt_to_ut(jd, use_delta_t=False) == jd


def test_lunar_series_is_table_47a():
    assert len(lunar.LUNAR_LON_TERMS) == 59
    assert lunar.LUNAR_LON_TERMS[0] == (0, 0, 1, 0, 6288774)
    assert (2, -2, -1, 0, 2048) in lunar.LUNAR_LON_TERMS
    assert (3, 0, -1, 0, -892) in lunar.LUNAR_LON_TERMS
