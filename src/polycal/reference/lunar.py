# reference/lunar.py

from __future__ import annotations

import math
from dataclasses import dataclass

from . import astro_args as aa


@dataclass(frozen=True)
class LunarCoordinates:
    """True and apparent lunar longitude (degrees)."""
    L_true_deg: float
    L_app_deg: float


# Periodic terms of the Moon's longitude, Meeus ch. 47 (ELP2000-82 truncation).
# (d, m, m', f, coefficient in microdegrees)
LUNAR_LON_TERMS = (
    # Primary series (24 terms)
    (0, 0, 1, 0, 6288774),
    (2, 0, -1, 0, 1274027),
    (2, 0, 0, 0, 658314),
    (0, 0, 2, 0, 213618),
    (0, 1, 0, 0, -185116),
    (0, 0, 0, 2, -114332),
    (2, 0, -2, 0, 58793),
    (2, -1, -1, 0, 57066),
    (2, 0, 1, 0, 53322),
    (2, -1, 0, 0, 45758),
    (0, 1, -1, 0, -40923),
    (1, 0, 0, 0, -34720),
    (0, 1, 1, 0, -30383),
    (2, 0, 0, -2, 15327),
    (0, 0, 1, 2, -12528),
    (0, 0, 1, -2, 10980),
    (4, 0, -1, 0, 10675),
    (0, 0, 3, 0, 10034),
    (4, 0, -2, 0, 8548),
    (2, 1, -1, 0, -7888),
    (2, 1, 0, 0, -6766),
    (1, 0, -1, 0, -5163),
    (1, 1, 0, 0, 4987),
    (2, -1, 1, 0, 4036),

    # Remaining terms of Table 47.A (the 60th has no longitude component)
    (2, 0, 2, 0, 3994),
    (4, 0, 0, 0, 3861),
    (2, 0, -3, 0, 3665),
    (0, 1, -2, 0, -2689),
    (2, 0, -1, 2, -2602),
    (2, -1, -2, 0, 2390),
    (1, 0, 1, 0, -2348),
    (2, -2, 0, 0, 2236),
    (0, 1, 2, 0, -2120),
    (0, 2, 0, 0, -2069),
    (2, -2, -1, 0, 2048),
    (2, 0, 1, -2, -1773),
    (2, 0, 0, 2, -1595),
    (4, -1, -1, 0, 1215),
    (0, 0, 2, 2, -1110),
    (3, 0, -1, 0, -892),
    (2, 1, 1, 0, -810),
    (4, -1, -2, 0, 759),
    (0, 2, -1, 0, -713),
    (2, 2, -1, 0, -700),
    (2, 1, -2, 0, 691),
    (2, -1, 0, -2, 596),
    (4, 0, 1, 0, 549),
    (0, 0, 4, 0, 537),
    (4, -1, 0, 0, 520),
    (1, 0, -2, 0, -487),
    (2, 1, 0, -2, -399),
    (0, 0, 2, -2, -381),
    (1, 1, 1, 0, 351),
    (3, 0, -2, 0, -340),
    (4, 0, -3, 0, 330),
    (2, -1, 2, 0, 327),
    (0, 2, 1, 0, -323),
    (1, 1, -1, 0, 299),
    (2, 0, 3, 0, 294),
)


def lunar_longitude(jd_tt: float) -> LunarCoordinates:
    """
    Geocentric lunar longitude for a JD(TT).

    Sums the periodic series on top of the mean longitude L', then adds the
    Venus/Jupiter/flattening terms (A1, A2, L'-F) and nutation in longitude.
    """
    T = aa.T_centuries(jd_tt)
    fa = aa.fundamental_args(T)
    E = aa.eccentricity_factor(T)

    D_rad = math.radians(fa.D_deg)
    M_rad = math.radians(fa.M_deg)
    Mp_rad = math.radians(fa.Mp_deg)
    F_rad = math.radians(fa.F_deg)

    acc = 0.0
    for d, m, mp, f, coef in LUNAR_LON_TERMS:
        if m:
            coef *= E if abs(m) == 1 else E * E
        acc += coef * math.sin(d * D_rad + m * M_rad + mp * Mp_rad + f * F_rad)

    A1 = math.radians(aa.wrap_deg(119.75 + 131.849 * T))
    A2 = math.radians(aa.wrap_deg(53.09 + 479264.290 * T))
    Lp_rad = math.radians(fa.Lp_deg)
    acc += 3958.0 * math.sin(A1) + 1962.0 * math.sin(Lp_rad - F_rad) + 318.0 * math.sin(A2)

    L_true = aa.wrap_deg(fa.Lp_deg + acc * 1e-6)
    L_app = aa.wrap_deg(L_true - 0.00478 * math.sin(math.radians(fa.Omega_deg)))
    return LunarCoordinates(L_true_deg=L_true, L_app_deg=L_app)


def apparent_lunar_longitude(jd_tt: float) -> float:
    return lunar_longitude(jd_tt).L_app_deg
