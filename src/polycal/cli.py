from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from datetime import date

_DATE_RE = re.compile(r"^-?\d{4,}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    if not _DATE_RE.match(s):
        raise SystemExit(f"Expected YYYY-MM-DD, got {s!r}")
    sign = -1 if s.startswith("-") else 1
    y, m, d = map(int, s.lstrip("-").split("-"))
    return sign * y, m, d


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _gregorian_jdn(s: str) -> int:
    from polycal.core.time import gregorian_to_jdn

    return gregorian_to_jdn(*_parse_ymd(s))


def cmd_list(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal list", description="List calendar ids")
    p.parse_args(argv)
    for cid in polycal.list_calendars():
        info = polycal.calendar_info(cid)
        print(f"{cid:<20} {info['name']:<26} {info['kind']}")
    return 0


def cmd_info(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal info", description="Describe one calendar")
    p.add_argument("calendar")
    args = p.parse_args(argv)

    for key, value in polycal.calendar_info(args.calendar).items():
        print(f"{key:<14} {value}")
    return 0


def cmd_convert(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal convert", description="Convert a date between calendars")
    p.add_argument("text", help="date in the source calendar, YYYY-MM-DD (or b.k.t.u.k for the Long Count)")
    p.add_argument("--from", dest="source", default="gregorian")
    p.add_argument("--to", dest="target", required=True)
    p.add_argument("--format", dest="fmt", default="YYYY-MM-DD")
    args = p.parse_args(argv)

    try:
        d = polycal.parse_calendar_date(args.text, args.source)
        if d is None:
            print(f"Not a valid {args.source} date: {args.text!r}", file=sys.stderr)
            return 2
        out = polycal.convert_date(d, args.target)
    except polycal.UnknownCalendarError as e:
        print(e, file=sys.stderr)
        return 2
    print(polycal.format_calendar_date(out, args.fmt))
    return 0


def cmd_day(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal day", description="A Gregorian day in every calendar")
    p.add_argument("date", nargs="?", help="YYYY-MM-DD (default: today)")
    p.add_argument("--calendars", default="", help="comma-separated ids (default: all)")
    p.add_argument("--format", dest="fmt", default="YYYY-MM-DD MMMM ERA")
    args = p.parse_args(argv)

    jdn = _gregorian_jdn(args.date) if args.date else _gregorian_jdn(date.today().isoformat())
    ids = [c.strip() for c in args.calendars.split(",") if c.strip()] or polycal.list_calendars()

    print(f"JDN {jdn}")
    for cid in ids:
        d = polycal.jdn_to_calendar_date(jdn, cid)
        conv = polycal.get_converter(cid)
        text = polycal.format_calendar_date(d, args.fmt)
        if cid == "mayan-longcount":
            text = conv.notation(d)
        print(f"  {cid:<20} {text.strip()}")
    return 0


def cmd_events(argv: list[str]) -> int:
    import polycal
    from polycal.core.time import gregorian_to_jdn
    from polycal.events import astronomical_events_for_range

    p = argparse.ArgumentParser(prog="polycal events", description="Equinoxes, solstices and moon phases")
    p.add_argument("year", type=int)
    p.add_argument("--month", type=int, default=None, help="restrict to one Gregorian month")
    p.add_argument("--no-moon", action="store_true")
    p.add_argument("--no-seasons", action="store_true")
    p.add_argument("--calendar", default="gregorian", help="calendar the event days are shown in")
    args = p.parse_args(argv)

    if args.month is None:
        start, end = gregorian_to_jdn(args.year, 1, 1), gregorian_to_jdn(args.year + 1, 1, 1) - 1
    else:
        start = gregorian_to_jdn(args.year, args.month, 1)
        ny, nm = (args.year + 1, 1) if args.month == 12 else (args.year, args.month + 1)
        end = gregorian_to_jdn(ny, nm, 1) - 1

    events = astronomical_events_for_range(
        start,
        end,
        solstices_equinoxes=not args.no_seasons,
        moon_phases=not args.no_moon,
        calendar_id=args.calendar,
    )
    for evs in events.values():
        text = polycal.format_calendar_date(evs[0].date)
        print(f"{text}  " + ", ".join(e.display_name for e in evs))
    return 0


def cmd_chinese_year(argv: list[str]) -> int:
    import polycal
    from polycal.core.time import jdn_to_gregorian
    from polycal.cycles import sexagenary_year

    p = argparse.ArgumentParser(prog="polycal chinese-year", description="Month table of a Chinese year")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    conv = polycal.get_converter("chinese")
    rec = conv.year_record(args.year)
    sy = sexagenary_year(args.year)
    print(f"Chinese year {args.year} ({sy.name}, {sy.animal}), {conv.days_in_year(args.year)} days")
    for m in rec.months:
        y, mo, d = jdn_to_gregorian(m.start)
        name = conv.month_name(args.year, m.label)
        terms = ",".join(str(t) for t in m.solar_terms)
        print(f"  {name:<4} {'leap' if m.is_leap else '    '} {y:04d}-{mo:02d}-{d:02d}  {m.length} days  terms[{terms}]")
    return 0


def cmd_cycles(argv: list[str]) -> int:
    import polycal
    from polycal.cycles import macro_cycles

    p = argparse.ArgumentParser(prog="polycal cycles", description="Macro cycles of a Gregorian day")
    p.add_argument("date", help="YYYY-MM-DD")
    args = p.parse_args(argv)

    jdn = _gregorian_jdn(args.date)
    mc = macro_cycles(
        jdn,
        chinese_year=polycal.jdn_to_calendar_date(jdn, "chinese").year,
        hebrew_year=polycal.jdn_to_calendar_date(jdn, "hebrew").year,
    )
    sx, mt, cr, lc = mc.sexagenary, mc.metonic, mc.calendar_round, mc.long_count
    print(f"Sexagenary     {sx.name} ({sx.animal}), position {sx.position}/60")
    print(f"Metonic        position {mt.position}/19, cycle {mt.cycle}{', leap' if mt.is_leap else ''}")
    print(f"Calendar Round round {cr.round}, year {cr.years_into_round}, day {cr.days_into_round}")
    print(f"Long Count     {lc.notation()}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `polycal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="polycal", description="Multi-calendar conversion toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="List calendar ids")
    sub.add_parser("info", help="Describe one calendar")
    sub.add_parser("convert", help="Convert a date between calendars")
    sub.add_parser("day", help="A Gregorian day in every calendar")
    sub.add_parser("today", help="Today in every calendar")
    sub.add_parser("events", help="Equinoxes, solstices and moon phases of a year")
    sub.add_parser("chinese-year", help="Month table of a Chinese year")
    sub.add_parser("cycles", help="Sexagenary, Metonic, Calendar Round and Long Count of a day")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "leap-months", "new-years"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "list": cmd_list,
        "info": cmd_info,
        "convert": cmd_convert,
        "day": cmd_day,
        "today": cmd_day,
        "events": cmd_events,
        "chinese-year": cmd_chinese_year,
        "cycles": cmd_cycles,
    }
    if args.cmd in commands:
        return commands[args.cmd](rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "polycal.diagnostics.round_trip",
            "leap-months": "polycal.diagnostics.leap_months",
            "new-years": "polycal.diagnostics.new_years_table",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
