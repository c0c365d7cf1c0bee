"""
polycal.reference.deltat

ΔT (= TT − UT) in seconds from the Espenak–Meeus (NASA Five Millennium Canon)
piecewise polynomials, valid across roughly −1999..+3000 and extended outside
by the long-term parabola.

Only day-level accuracy matters here: ΔT shifts lunation and solar-term
moments by up to a few hours in antiquity, which decides the civil day of a
new moon close to midnight.
"""

from __future__ import annotations

from typing import Tuple

# (upper bound of y, origin, scale, polynomial coefficients in u = (y - origin) / scale)
_BRANCHES: Tuple[Tuple[float, float, float, Tuple[float, ...]], ...] = (
    (-500.0, 1820.0, 100.0, (-20.0, 0.0, 32.0)),
    (500.0, 0.0, 100.0, (10583.6, -1014.41, 33.78311, -5.952053, -0.1798452, 0.022174192, 0.0090316521)),
    (1600.0, 1000.0, 100.0, (1574.2, -556.01, 71.23472, 0.319781, -0.8503463, -0.005050998, 0.0083572073)),
    (1700.0, 1600.0, 1.0, (120.0, -0.9808, -0.01532, 1.0 / 7129.0)),
    (1800.0, 1700.0, 1.0, (8.83, 0.1603, -0.0059285, 0.00013336, -1.0 / 1174000.0)),
    (1860.0, 1800.0, 1.0, (13.72, -0.332447, 0.0068612, 0.0041116, -0.00037436, 0.0000121272, -0.0000001699, 0.000000000875)),
    (1900.0, 1860.0, 1.0, (7.62, 0.5737, -0.251754, 0.01680668, -0.0004473624, 1.0 / 233174.0)),
    (1920.0, 1900.0, 1.0, (-2.79, 1.494119, -0.0598939, 0.0061966, -0.000197)),
    (1941.0, 1920.0, 1.0, (21.20, 0.84493, -0.076100, 0.0020936)),
    (1961.0, 1950.0, 1.0, (29.07, 0.407, -1.0 / 233.0, 1.0 / 2547.0)),
    (1986.0, 1975.0, 1.0, (45.45, 1.067, -1.0 / 260.0, -1.0 / 718.0)),
    (2005.0, 2000.0, 1.0, (63.86, 0.3345, -0.060374, 0.0017275, 0.000651814, 0.00002373599)),
    (2050.0, 2000.0, 1.0, (62.92, 0.32217, 0.005589)),
)


def _poly(u: float, coeffs: Tuple[float, ...]) -> float:
    """Horner evaluation for Σ coeffs[k] u^k."""
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * u + c
    return acc


def _long_term(y: float) -> float:
    u = (y - 1820.0) / 100.0
    return -20.0 + 32.0 * u * u


def delta_t_seconds(y: float) -> float:
    """ΔT(y) in seconds for a decimal year y."""
    for upper, origin, scale, coeffs in _BRANCHES:
        if y < upper:
            return _poly((y - origin) / scale, coeffs)
    if y < 2150.0:
        # keeps the curve continuous into the long-term parabola
        return _long_term(y) - 0.5628 * (2150.0 - y)
    return _long_term(y)


def decimal_year_from_jd(jd: float) -> float:
    """Approximate decimal (Julian-epoch) year of a JD; good enough for ΔT lookups."""
    return 2000.0 + (jd - 2451545.0) / 365.25
