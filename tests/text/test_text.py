"""
tests/text/test_text.py

Covers:
  - Formatter tokens, escapes and default patterns
  - Substituted text is not rescanned for tokens
  - Era labels
  - Parser: numeric, named (day-first / month-first), era, failures
  - Format → parse round trips
"""

import pytest

from almanac.calendar import Calendar, IncompatibleCalendarError, InvalidDateError
from almanac.profiles import DRAGONLANCE_RULES, DSA_RULES, FAERUN_RULES, GREGORIAN_RULES
from almanac.text import DateFormatter, DateParser


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def gregorian():
    return Calendar(GREGORIAN_RULES)


@pytest.fixture
def faerun():
    return Calendar(FAERUN_RULES)


@pytest.fixture
def dsa():
    return Calendar(DSA_RULES)


@pytest.fixture
def christmas(gregorian):
    return gregorian.point(2024, 12, 25, 12, 0, 0)


# ── Formatting ────────────────────────────────────────────────────────────────

class TestFormat:

    def test_escaped_literals(self, gregorian, christmas):
        assert gregorian.format(christmas, r"F j, Y \a\t H:i") == "December 25, 2024 at 12:00"

    @pytest.mark.parametrize(
        "pattern, expected",
        [
            ("Y-m-d", "2024-03-07"),
            ("d/m/y", "07/03/24"),
            ("n/j/Y", "3/7/2024"),
            ("H:i:s.u", "09:05:01.000042"),
            ("F", "March"),
        ],
    )
    def test_tokens(self, gregorian, pattern, expected):
        p = gregorian.point(2024, 3, 7, 9, 5, 1, 42)
        assert gregorian.format(p, pattern) == expected

    def test_month_name_not_rescanned(self, gregorian, christmas):
        # "December" contains the token letter m.
        assert gregorian.format(christmas, "F") == "December"

    def test_default_pattern(self, gregorian, faerun, dsa, christmas):
        assert gregorian.format(christmas) == "December 25, 2024"
        assert str(faerun.point(1492, 12, 24)) == "24 Nightal 1492 DR"
        assert str(dsa.point(1045, 1, 12)) == "12. Praios 1045 BF"

    def test_era(self, faerun):
        assert faerun.format(faerun.point(1492, 1, 1), "Y E") == "1492 DR"
        assert faerun.format(faerun.point(0, 1, 1), "Y E") == "0 Before DR"

    def test_trailing_backslash_dropped(self, gregorian, christmas):
        assert gregorian.format(christmas, "Y\\") == "2024"

    def test_unknown_letters_are_literal(self, gregorian, christmas):
        assert gregorian.format(christmas, "Q Y") == "Q 2024"

    def test_formatter_direct(self, gregorian, christmas):
        assert DateFormatter().format(gregorian, christmas, "Y") == "2024"

    def test_foreign_point_rejected(self, gregorian, faerun):
        with pytest.raises(IncompatibleCalendarError):
            gregorian.format(faerun.point(1492, 1, 1))


# ── Parsing ───────────────────────────────────────────────────────────────────

class TestParse:

    def test_numeric(self, gregorian):
        assert gregorian.parse("2024-12-25").fields == (2024, 12, 25, 0, 0, 0, 0)

    def test_numeric_with_time(self, gregorian):
        p = gregorian.parse("2024-12-25 12:30:15.5")
        assert p.fields == (2024, 12, 25, 12, 30, 15, 500_000)
        assert gregorian.parse("2024-12-25T08:05").fields[3:5] == (8, 5)

    def test_negative_year(self, gregorian):
        assert gregorian.parse("-44-03-15").year == -44

    def test_month_first(self, gregorian):
        assert gregorian.parse("December 25, 2024").fields[:3] == (2024, 12, 25)
        assert gregorian.parse("december 25 2024").fields[:3] == (2024, 12, 25)

    def test_day_first_with_era(self, faerun):
        assert faerun.parse("24 Nightal 1492 DR").fields[:3] == (1492, 12, 24)

    def test_day_first_with_dot(self, dsa):
        assert dsa.parse("12. Praios 1045 BF").fields[:3] == (1045, 1, 12)

    def test_multi_word_month(self):
        krynn = Calendar(DRAGONLANCE_RULES)
        assert krynn.parse("3 Winter Deep 356 AC").fields[:3] == (356, 1, 3)

    def test_before_era_counts_back_from_year_one(self, faerun):
        assert faerun.parse("1 Hammer 1 Before DR").year == 0
        assert faerun.parse("1 Hammer 10 before dr").year == -9

    @pytest.mark.parametrize("text", ["", "not a date", "25 Smarch 2024", "2024/12/25"])
    def test_unparseable(self, gregorian, text):
        with pytest.raises(InvalidDateError, match="Failed to parse date"):
            gregorian.parse(text)

    def test_unknown_era(self, gregorian):
        with pytest.raises(InvalidDateError, match="unknown era"):
            gregorian.parse("25 December 2024 DR")

    def test_invalid_components(self, gregorian):
        with pytest.raises(InvalidDateError) as info:
            gregorian.parse("2023-02-29")
        assert info.value.field == "day"

    def test_parser_direct(self, gregorian):
        assert DateParser().parse(gregorian, "2024-01-02").day == 2


# ── Round trips ───────────────────────────────────────────────────────────────

class TestRoundTrip:

    @pytest.mark.parametrize("pattern", ["Y-m-d", "F j, Y", "j F Y E"])
    def test_gregorian(self, gregorian, pattern):
        p = gregorian.point(1969, 7, 20)
        assert gregorian.parse(gregorian.format(p, pattern)) == p

    def test_default_patterns(self, faerun, dsa):
        for calendar in (faerun, dsa):
            p = calendar.point(1200, 9, 9)
            assert calendar.parse(str(p)) == p

    def test_with_time(self, gregorian):
        p = gregorian.point(2024, 2, 29, 23, 59, 58, 123_000)
        assert gregorian.parse(gregorian.format(p, "Y-m-d H:i:s.u")) == p
