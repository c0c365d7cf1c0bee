# tests/test_astro_args.py

import pytest
from polycal.reference import astro_args as aa


def test_meeus_example_47a_lunar_fundamentals():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 47.a.
    Date: 1992 April 12, 0h TD (TT).
    JD: 2448724.5
    """
    jd_tt = 2448724.5
    T = aa.T_centuries(jd_tt)

    assert T == pytest.approx(-0.077221081451, abs=1e-12)

    fa = aa.fundamental_args(T)

    assert fa.Lp_deg == pytest.approx(134.290182, abs=1e-6)
    assert fa.D_deg  == pytest.approx(113.842304, abs=1e-6)
    assert fa.M_deg  == pytest.approx(97.643514, abs=1e-6)
    assert fa.Mp_deg == pytest.approx(5.150833, abs=1e-6)
    assert fa.F_deg  == pytest.approx(219.889721, abs=1e-6)

    E = aa.eccentricity_factor(T)
    assert E == pytest.approx(1.000194, abs=1e-6)


def test_meeus_example_25a_solar_mean_elements():
    """
    Example 25.a: 1992 October 13, 0h TD, JD 2448908.5.
    """
    T = aa.T_centuries(2448908.5)
    assert T == pytest.approx(-0.072183436, abs=1e-9)

    sm = aa.solar_mean_elements(T)
    assert sm.L0_deg == pytest.approx(201.80720, abs=1e-5)
    assert sm.M_deg  == pytest.approx(278.99397, abs=1e-5)


def test_mean_periods_consistency():
    T = 0.0
    assert aa.tropical_year_days(T) == pytest.approx(365.242189, abs=1e-6)
    assert aa.synodic_month_days(T) == pytest.approx(29.5305888, abs=1e-7)
    assert aa.SYNODIC_MONTH == pytest.approx(aa.synodic_month_days(T), abs=1e-6)


def test_mean_new_moon_and_lunation_index():
    # k=0 is the new moon of 2000 January 6
    assert aa.jde_mean_new_moon(0) == pytest.approx(2451550.09766, abs=1e-6)
    # Example 49.a: k = -283 is the new moon of 1977 February
    assert aa.jde_mean_new_moon(-283) == pytest.approx(2443192.94102, abs=1e-4)
    assert aa.lunation_index(2443192.9) == -283
    assert aa.lunation_index(aa.jde_mean_new_moon(297) + 10.0) == 297


@pytest.mark.parametrize("x, wrapped", [(-10.0, 350.0), (360.0, 0.0), (725.5, 5.5)])
def test_wrap_deg(x, wrapped):
    assert aa.wrap_deg(x) == pytest.approx(wrapped)


@pytest.mark.parametrize("x, wrapped", [(190.0, -170.0), (-190.0, 170.0), (180.0, -180.0), (45.0, 45.0)])
def test_wrap180(x, wrapped):
    assert aa.wrap180(x) == pytest.approx(wrapped)
