from __future__ import annotations

from .deltat import decimal_year_from_jd, delta_t_seconds


def delta_t_days(jd_ut: float) -> float:
    return delta_t_seconds(decimal_year_from_jd(jd_ut)) / 86400.0


def ut_to_tt(jd_ut: float, *, use_delta_t: bool = True) -> float:
    """JD(UT) -> JD(TT)."""
    if not use_delta_t:
        return jd_ut
    return jd_ut + delta_t_days(jd_ut)


def tt_to_ut(jd_tt: float, *, use_delta_t: bool = True) -> float:
    """
    JD(TT) -> JD(UT).

    ΔT is evaluated at the TT instant; the difference from evaluating it at
    the UT instant is far below a second.
    """
    if not use_delta_t:
        return jd_tt
    return jd_tt - delta_t_days(jd_tt)
