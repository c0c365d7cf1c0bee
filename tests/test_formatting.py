# tests/test_formatting.py

import pytest

from polycal.core.types import CALENDAR_IDS
from polycal.formatting import format_year, lookup_month_name


def test_gregorian_tokens(conv):
    g = conv("gregorian")
    d = g.date(2024, 3, 5)
    assert g.format(d) == "2024-03-05"
    assert g.format(d, "D MMMM YYYY ERA") == "5 March 2024 CE"
    assert g.format(d, "MMM YY") == "Mar 24"
    assert g.format(d, "M/D") == "3/5"
    assert g.format(d, "EEEE, EEE, E") == "Tuesday, Tue, T"


def test_literal_text_passes_through(conv):
    g = conv("gregorian")
    assert g.format(g.date(2024, 3, 5), "[YYYY] x") == "[2024] x"


def test_negative_years(conv):
    g = conv("gregorian")
    d = g.date(-100, 1, 1)
    assert g.format(d) == "-0100-01-01"
    assert g.format(d, "YYYY ERA") == "-0100 BCE"
    assert g.parse("-0100-01-01") == d
    assert format_year(0) == "0000"
    assert format_year(12345) == "12345"


@pytest.mark.parametrize(
    "calendar, ymd, fmt, text",
    [
        ("hebrew", (5785, 7, 1), "D MMMM YYYY ERA", "1 Tishrei 5785 AM"),
        ("islamic", (1445, 9, 1), "D MMMM YYYY ERA", "1 Ramadan 1445 AH"),
        ("persian", (1403, 1, 1), "MMMM", "Farvardin"),
        ("ethiopian", (2015, 13, 6), "MMMM", "Pagume"),
        ("bahai", (181, 19, 1), "MMMM", "Ayyám-i-Há"),
        ("thai-buddhist", (2567, 1, 1), "ERA", "BE"),
        ("mayan-longcount", (13, 0, 0), "MMMM", "0"),
    ],
)
def test_named_months(conv, calendar, ymd, fmt, text):
    c = conv(calendar)
    assert c.format(c.date(*ymd), fmt) == text


def test_month_name_fallback():
    assert lookup_month_name("mayan-longcount", 5) == "5"
    assert lookup_month_name("gregorian", 1, short=True) == "Jan"
    assert lookup_month_name("gregorian", 13) == "13"


@pytest.mark.parametrize("text", ["2024-02-30", "2024-2-01", "hello", "", "2024-13-01", "24-01-01"])
def test_parse_rejects(conv, text):
    assert conv("gregorian").parse(text) is None


def test_parse_strips_whitespace(conv):
    g = conv("gregorian")
    assert g.parse(" 2024-01-01 ") == g.date(2024, 1, 1)


@pytest.mark.parametrize("calendar", CALENDAR_IDS)
def test_format_parse_is_idempotent(conv, calendar):
    c = conv(calendar)
    jdns = [2460390, 2460600, 2415021]
    if calendar != "chinese":
        jdns += [1721426, 584283 + 777]
    for jdn in jdns:
        d = c.from_day_count(jdn)
        assert c.parse(c.format(d, "YYYY-MM-DD")) == d
