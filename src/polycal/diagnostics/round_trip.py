from __future__ import annotations

import argparse
from typing import List, Optional

import polycal
from polycal.core.time import gregorian_to_jdn


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "polycal[diagnostics]"') from e


def parse_calendars(s: str) -> List[str]:
    # "hebrew,chinese" -> ["hebrew", "chinese"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(calendar_id: str, jdns, *, max_failures: int) -> int:
    """JDN -> date -> JDN and date -> text -> date for every sampled day."""
    conv = polycal.get_converter(calendar_id)
    if conv is None:
        raise SystemExit(f"Unknown calendar '{calendar_id}'. Known: {polycal.list_calendars()}")
    failures = 0

    for jdn in jdns:
        jdn = int(jdn)
        d = conv.from_day_count(jdn)
        back = conv.to_day_count(d.year, d.month, d.day)
        if back != jdn:
            failures += 1
            print("\nFAIL (day count)")
            print("calendar:", calendar_id)
            print("jdn:", jdn)
            print("date:", d)
            print("back:", back)
        else:
            parsed = conv.parse(conv.format(d))
            if parsed != d:
                failures += 1
                print("\nFAIL (text)")
                print("calendar:", calendar_id)
                print("date:", d)
                print("text:", conv.format(d))
                print("parsed:", parsed)
        if failures >= max_failures:
            break

    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip check of every converter.")
    p.add_argument("--n", type=int, default=500, help="samples per calendar")
    p.add_argument("--start", type=int, default=1, help="first Gregorian year sampled")
    p.add_argument("--end", type=int, default=3000, help="last Gregorian year sampled")
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--calendars", default="", help="comma list (default: all)")
    p.add_argument("--max-failures", type=int, default=10)
    args = p.parse_args(argv)

    np = _need_numpy()
    rng = np.random.default_rng(args.seed)
    lo = gregorian_to_jdn(args.start, 1, 1)
    hi = gregorian_to_jdn(args.end, 12, 31)

    calendars = parse_calendars(args.calendars) or polycal.list_calendars()
    total = 0
    for cid in calendars:
        n = args.n if cid not in ("chinese", "bahai") else max(1, args.n // 10)
        jdns = rng.integers(lo, hi, size=n, endpoint=True)
        failures = roundtrip_test(cid, jdns, max_failures=args.max_failures)
        print(f"{cid:<20} {n:>6} samples  {failures} failures")
        total += failures

    return 1 if total else 0


if __name__ == "__main__":
    raise SystemExit(main())
