from __future__ import annotations

import argparse
from typing import List, Tuple

import polycal
from polycal.core.time import jdn_to_gregorian

DEFAULT_CALENDARS: List[Tuple[str, str]] = [
    ("Chinese", "chinese"),
    ("Hebrew", "hebrew"),
    ("Islamic", "islamic"),
    ("Persian", "persian"),
    ("Baha'i", "bahai"),
    ("Ethiopian", "ethiopian"),
    ("Saka", "indian-saka"),
]


def parse_calendars(arg: str) -> List[Tuple[str, str]]:
    """
    Parse the calendar list from the CLI.
    Example:
      --calendars "Jewish=hebrew,Nowruz=persian"
    Bare ids are shown capitalized:
      --calendars "hebrew,coptic"
    """
    items = [x.strip() for x in arg.split(",") if x.strip()]
    out: List[Tuple[str, str]] = []
    for it in items:
        if "=" in it:
            name, cid = it.split("=", 1)
            out.append((name.strip(), cid.strip()))
        else:
            out.append((it.capitalize(), it))
    return out


def new_years_in(calendar_id: str, gregorian_year: int) -> List[int]:
    """JDNs of first days of a year (month 1 in year order) that fall in a Gregorian year."""
    conv = polycal.get_converter(calendar_id)
    lo = polycal.calendar_date_to_jdn(polycal.CalendarDate(gregorian_year, 1, 1, "gregorian"))
    hi = polycal.calendar_date_to_jdn(polycal.CalendarDate(gregorian_year, 12, 31, "gregorian"))
    y0 = conv.from_day_count(lo).year
    out = []
    for y in (y0, y0 + 1, y0 + 2):
        first = conv.month_labels(y)[0]
        jdn = conv.to_day_count(y, first, 1)
        if lo <= jdn <= hi:
            out.append(jdn)
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print the new-year day of several calendars per Gregorian year.")
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument("--calendars", type=str, default="", help='Comma list like "Jewish=hebrew,Nowruz=persian".')
    p.add_argument("--dates", choices=("mmdd", "iso"), default="mmdd")
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars) if args.calendars else DEFAULT_CALENDARS

    def fmt(jdn: int) -> str:
        y, m, d = jdn_to_gregorian(jdn)
        return f"{m:02d}-{d:02d}" if args.dates == "mmdd" else f"{y:04d}-{m:02d}-{d:02d}"

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year"] + [name for name, _ in calendars]
    colw = [5] + [max(11, len(h)) for h in headers[1:]]
    print("  ".join(h.ljust(w) for h, w in zip(headers, colw)))
    print("  ".join("-" * w for w in colw))

    for Y in range(Y0, Y1 + 1):
        row = [str(Y)]
        for _, cid in calendars:
            row.append(" ".join(fmt(j) for j in new_years_in(cid, Y)) or "-")
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
