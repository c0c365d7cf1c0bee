"""
polycal.events
--------------
Seasons, solar terms and lunar phases as moments (JD, UT) and civil days.

Moments are found with reference.solver on the apparent longitudes of
reference.solar / reference.lunar, evaluated in TT. Civil days are UTC days
unless a zone offset is passed.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, List, Tuple

from .core.config import DEFAULT_CONFIG, PolycalConfig
from .core.time import gregorian_to_jdn, jd_to_jdn, jdn_to_gregorian
from .core.types import AstronomicalEvent, CalendarDate, MoonPhase
from .reference import astro_args as aa
from .reference.lunar import apparent_lunar_longitude
from .reference.solar import apparent_solar_longitude
from .reference.solver import solve_longitude
from .reference.time_scales import tt_to_ut, ut_to_tt

SEASONS: Tuple[Tuple[str, str, float, int, int], ...] = (
    # name, display name, solar longitude, seed month, seed day
    ("vernal-equinox", "Vernal Equinox", 0.0, 3, 20),
    ("summer-solstice", "Summer Solstice", 90.0, 6, 21),
    ("autumnal-equinox", "Autumnal Equinox", 180.0, 9, 23),
    ("winter-solstice", "Winter Solstice", 270.0, 12, 22),
)

SUN_MEAN_RATE = 0.9856  # deg/day
SUN_MAX_FALLBACK_DAYS = 3.0

MOON_PHASES: Tuple[MoonPhase, ...] = (
    "new-moon",
    "waxing-crescent",
    "first-quarter",
    "waxing-gibbous",
    "full-moon",
    "waning-gibbous",
    "last-quarter",
    "waning-crescent",
)

# principal phases: name, display name, elongation, days after new moon
_PRINCIPAL_PHASES = (
    ("new-moon", "New Moon", 0.0, 0.0),
    ("first-quarter", "First Quarter", 90.0, 7.4),
    ("full-moon", "Full Moon", 180.0, 14.8),
    ("last-quarter", "Last Quarter", 270.0, 22.1),
)


# ------------------------------------------------------------
# Longitudes on the UT axis
# ------------------------------------------------------------

def sun_longitude(jd_ut: float, *, config: PolycalConfig = DEFAULT_CONFIG) -> float:
    """Apparent solar longitude (deg) at a UT moment."""
    return apparent_solar_longitude(ut_to_tt(jd_ut, use_delta_t=config.use_delta_t))


def moon_elongation(jd_ut: float, *, config: PolycalConfig = DEFAULT_CONFIG) -> float:
    """Apparent Moon minus Sun longitude (deg, [0,360)) at a UT moment."""
    jd_tt = ut_to_tt(jd_ut, use_delta_t=config.use_delta_t)
    return aa.wrap_deg(apparent_lunar_longitude(jd_tt) - apparent_solar_longitude(jd_tt))


# ------------------------------------------------------------
# Sun
# ------------------------------------------------------------

def solar_longitude_moment(target_deg: float, seed_jd: float, *, config: PolycalConfig = DEFAULT_CONFIG) -> float:
    return solve_longitude(
        lambda t: sun_longitude(t, config=config),
        seed=seed_jd,
        target_deg=target_deg,
        fallback_step=SUN_MAX_FALLBACK_DAYS,
        fallback_rate=SUN_MEAN_RATE,
        config=config.solver,
    )


def _season_moment(index: int, year: int, config: PolycalConfig) -> float:
    _, _, lon, month, day = SEASONS[index]
    return solar_longitude_moment(lon, float(gregorian_to_jdn(year, month, day)), config=config)


def vernal_equinox_moment(year: int, *, config: PolycalConfig = DEFAULT_CONFIG) -> float:
    return _season_moment(0, year, config)

def summer_solstice_moment(year: int, *, config: PolycalConfig = DEFAULT_CONFIG) -> float:
    return _season_moment(1, year, config)

def autumnal_equinox_moment(year: int, *, config: PolycalConfig = DEFAULT_CONFIG) -> float:
    return _season_moment(2, year, config)

def winter_solstice_moment(year: int, *, config: PolycalConfig = DEFAULT_CONFIG) -> float:
    return _season_moment(3, year, config)


def vernal_equinox(year: int, *, config: PolycalConfig = DEFAULT_CONFIG) -> int:
    """UTC day (JDN) of the March equinox of a Gregorian year."""
    return jd_to_jdn(vernal_equinox_moment(year, config=config))

def summer_solstice(year: int, *, config: PolycalConfig = DEFAULT_CONFIG) -> int:
    return jd_to_jdn(summer_solstice_moment(year, config=config))

def autumnal_equinox(year: int, *, config: PolycalConfig = DEFAULT_CONFIG) -> int:
    return jd_to_jdn(autumnal_equinox_moment(year, config=config))

def winter_solstice(year: int, *, config: PolycalConfig = DEFAULT_CONFIG) -> int:
    return jd_to_jdn(winter_solstice_moment(year, config=config))


def solar_term_longitude(term: int) -> float:
    """Longitude at which solar term `term` (0 = Lichun, 315 deg) begins."""
    if not 0 <= term <= 23:
        raise ValueError("solar term must be in 0..23")
    return (315.0 + 15.0 * term) % 360.0


def solar_term_of_longitude(lon_deg: float) -> int:
    return int(aa.wrap_deg(lon_deg - 315.0) // 15.0)


def solar_term(jdn: int, *, config: PolycalConfig = DEFAULT_CONFIG) -> int:
    """Solar term (0..23) in effect at noon UT of day jdn."""
    return solar_term_of_longitude(sun_longitude(float(jdn), config=config))


def solar_term_moment(year: int, term: int, *, config: PolycalConfig = DEFAULT_CONFIG) -> float:
    """Moment (JD, UT) when the Sun enters solar term `term` in a Gregorian year."""
    seed = gregorian_to_jdn(year, 2, 4) + term * 365.25 / 24.0
    return solar_longitude_moment(solar_term_longitude(term), seed, config=config)


def solar_term_day(year: int, term: int, *, utc_offset_hours: float = 0.0,
                   config: PolycalConfig = DEFAULT_CONFIG) -> int:
    return jd_to_jdn(solar_term_moment(year, term, config=config), utc_offset_hours)


# ------------------------------------------------------------
# Moon
# ------------------------------------------------------------

def lunar_phase_moment(target_deg: float, seed_jd: float, *, config: PolycalConfig = DEFAULT_CONFIG) -> float:
    """Moment (JD, UT) nearest to seed_jd at which the elongation equals target_deg."""
    fallback = aa.SYNODIC_MONTH / 2.0 if target_deg % 360.0 == 0.0 else aa.SYNODIC_MONTH / 4.0
    return solve_longitude(
        lambda t: moon_elongation(t, config=config),
        seed=seed_jd,
        target_deg=target_deg,
        fallback_step=fallback,
        config=config.solver,
    )


def new_moon(seed_jd: float, *, config: PolycalConfig = DEFAULT_CONFIG) -> float:
    return lunar_phase_moment(0.0, seed_jd, config=config)

def first_quarter(seed_jd: float, *, config: PolycalConfig = DEFAULT_CONFIG) -> float:
    return lunar_phase_moment(90.0, seed_jd, config=config)

def full_moon(seed_jd: float, *, config: PolycalConfig = DEFAULT_CONFIG) -> float:
    return lunar_phase_moment(180.0, seed_jd, config=config)

def last_quarter(seed_jd: float, *, config: PolycalConfig = DEFAULT_CONFIG) -> float:
    return lunar_phase_moment(270.0, seed_jd, config=config)


def new_moon_for_lunation(k: int, *, config: PolycalConfig = DEFAULT_CONFIG) -> float:
    """True new moon (JD, UT) of Meeus lunation k, seeded at the mean new moon."""
    seed = tt_to_ut(aa.jde_mean_new_moon(k), use_delta_t=config.use_delta_t)
    return new_moon(seed, config=config)


def next_new_moon(jd: float, *, config: PolycalConfig = DEFAULT_CONFIG) -> float:
    """First new moon strictly after jd."""
    k = aa.lunation_index(jd) - 1
    t = new_moon_for_lunation(k, config=config)
    while t <= jd:
        k += 1
        t = new_moon_for_lunation(k, config=config)
    return t


def previous_new_moon(jd: float, *, config: PolycalConfig = DEFAULT_CONFIG) -> float:
    """Last new moon strictly before jd."""
    k = aa.lunation_index(jd) + 1
    t = new_moon_for_lunation(k, config=config)
    while t >= jd:
        k -= 1
        t = new_moon_for_lunation(k, config=config)
    return t


def get_moon_phase(jdn: int, *, config: PolycalConfig = DEFAULT_CONFIG) -> MoonPhase:
    """One of eight 45-degree phase windows, evaluated at noon UT of jdn."""
    elong = moon_elongation(float(jdn), config=config)
    return MOON_PHASES[int(((elong + 22.5) % 360.0) // 45.0)]


# ------------------------------------------------------------
# Range queries
# ------------------------------------------------------------

def _gregorian_date(jdn: int) -> CalendarDate:
    y, m, d = jdn_to_gregorian(jdn)
    return CalendarDate(y, m, d, "gregorian", "CE" if y > 0 else "BCE")


def solstices_equinoxes_for_year(year: int, *, config: PolycalConfig = DEFAULT_CONFIG) -> List[AstronomicalEvent]:
    out = []
    for i, (name, display, _, _, _) in enumerate(SEASONS):
        jdn = jd_to_jdn(_season_moment(i, year, config))
        out.append(AstronomicalEvent("solstice-equinox", name, display, jdn, _gregorian_date(jdn)))
    return out


def moon_phases_for_range(start_jdn: int, end_jdn: int, *,
                          config: PolycalConfig = DEFAULT_CONFIG) -> List[AstronomicalEvent]:
    """Principal lunar phases whose UTC day lies in [start_jdn, end_jdn]."""
    out: List[AstronomicalEvent] = []
    nm = previous_new_moon(float(start_jdn) - 0.5, config=config)
    while jd_to_jdn(nm) <= end_jdn:
        for name, display, target, offset in _PRINCIPAL_PHASES:
            t = nm if target == 0.0 else lunar_phase_moment(target, nm + offset, config=config)
            jdn = jd_to_jdn(t)
            if start_jdn <= jdn <= end_jdn:
                out.append(AstronomicalEvent("moon-phase", name, display, jdn, _gregorian_date(jdn)))
        nm = next_new_moon(nm + 1.0, config=config)
    out.sort(key=lambda e: e.jdn)
    return out


def astronomical_events_for_range(
    start_jdn: int,
    end_jdn: int,
    *,
    solstices_equinoxes: bool = True,
    moon_phases: bool = True,
    calendar_id: str = "gregorian",
    config: PolycalConfig = DEFAULT_CONFIG,
) -> Dict[int, List[AstronomicalEvent]]:
    """
    Events keyed by their UTC day, restricted to [start_jdn, end_jdn].

    Each event's `date` is expressed in `calendar_id` (Gregorian by default).
    """
    events: Dict[int, List[AstronomicalEvent]] = {}
    if end_jdn < start_jdn:
        return events

    if solstices_equinoxes:
        y0 = jdn_to_gregorian(start_jdn)[0]
        y1 = jdn_to_gregorian(end_jdn)[0]
        for year in range(y0, y1 + 1):
            for ev in solstices_equinoxes_for_year(year, config=config):
                if start_jdn <= ev.jdn <= end_jdn:
                    events.setdefault(ev.jdn, []).append(ev)

    if moon_phases:
        for ev in moon_phases_for_range(start_jdn, end_jdn, config=config):
            events.setdefault(ev.jdn, []).append(ev)

    if calendar_id != "gregorian":
        from .api import jdn_to_calendar_date

        events = {
            jdn: [replace(e, date=jdn_to_calendar_date(jdn, calendar_id)) for e in evs]
            for jdn, evs in events.items()
        }
    return dict(sorted(events.items()))
