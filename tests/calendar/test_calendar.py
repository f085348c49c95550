"""
tests/calendar/test_calendar.py

Covers:
  - diff between points (sign, microseconds, calendar checks)
  - Year lengths as spans between consecutive New Years
  - Crossing nameless days with arithmetic
  - nameless_day_at lookup
  - from_seconds / seconds_to_date, float precision vs exact from_timestamp
  - Calendar equality and hashing
  - from_configuration
"""

import numpy as np
import pytest

from almanac.calendar import (
    Calendar,
    CalendarRules,
    IncompatibleCalendarError,
    InvalidCalendarConfigError,
    NamelessDayGroup,
    TimeSpan,
)
from almanac.profiles import DSA_RULES, FAERUN_RULES, GREGORIAN_RULES


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def gregorian():
    return Calendar(GREGORIAN_RULES)


@pytest.fixture
def faerun():
    """12 × 30 days, five festivals, Shieldmeet every fourth year."""
    return Calendar(FAERUN_RULES)


@pytest.fixture
def dsa():
    """12 × 30 days, five nameless days after the twelfth month, no leap years."""
    return Calendar(DSA_RULES)


def _year_span(calendar, year):
    return calendar.diff(calendar.point(year, 1, 1), calendar.point(year + 1, 1, 1))


# ── diff ──────────────────────────────────────────────────────────────────────

class TestDiff:

    def test_signed(self, gregorian):
        a = gregorian.point(2024, 3, 1)
        b = gregorian.point(2024, 2, 28)
        assert gregorian.diff(b, a) == TimeSpan.from_days(2)
        assert gregorian.diff(a, b) == TimeSpan.from_days(-2)

    def test_microseconds(self, gregorian):
        a = gregorian.point(2024, 1, 1, 0, 0, 0, 750_000)
        b = gregorian.point(2024, 1, 1, 0, 0, 1, 250_000)
        span = gregorian.diff(a, b)
        assert (span.total_seconds, span.microseconds) == (0, 500_000)

    def test_negation_law(self, faerun):
        rng = np.random.default_rng(5)
        for _ in range(50):
            a = faerun.point(int(rng.integers(-500, 2000)), int(rng.integers(1, 13)), int(rng.integers(1, 31)))
            b = faerun.point(int(rng.integers(-500, 2000)), int(rng.integers(1, 13)), int(rng.integers(1, 31)))
            assert faerun.diff(a, b) == faerun.diff(b, a).negate()

    def test_foreign_point_raises(self, gregorian, dsa):
        with pytest.raises(IncompatibleCalendarError):
            gregorian.diff(gregorian.point(1, 1, 1), dsa.point(1, 1, 1))
        with pytest.raises(IncompatibleCalendarError):
            gregorian.diff(dsa.point(1, 1, 1), dsa.point(1, 1, 2))


# ── Year lengths ──────────────────────────────────────────────────────────────

class TestYearLength:

    @pytest.mark.parametrize("year, days", [(1492, 366), (1493, 365), (1496, 366), (1500, 366)])
    def test_leap_festival_calendar(self, faerun, year, days):
        assert _year_span(faerun, year).total_days == days
        assert faerun.is_leap_year(year) is (days == 366)

    @pytest.mark.parametrize("year", [-10, 0, 1, 1000, 1041])
    def test_trailing_nameless_days(self, dsa, year):
        assert _year_span(dsa, year) == TimeSpan.from_days(365)

    def test_span_matches_days_in_year(self, gregorian, faerun, dsa):
        for calendar in (gregorian, faerun, dsa):
            for year in range(1896, 1906):
                assert _year_span(calendar, year).total_days == calendar.days_in_year(year)

    def test_crossing_nameless_days(self, dsa):
        p = dsa.point(1000, 12, 25) + TimeSpan.from_days(11)
        assert p.fields == (1001, 1, 1, 0, 0, 0, 0)

    def test_crossing_nameless_days_backwards(self, dsa):
        p = dsa.point(1001, 1, 1) - TimeSpan.from_days(6)
        assert p.fields[:3] == (1000, 12, 30)


# ── Nameless days ─────────────────────────────────────────────────────────────

class TestNamelessDayAt:

    def _at(self, calendar, year, doy, second=0):
        return (calendar.converter.days_before_year(year) + doy) * 86_400 + second

    def test_midwinter(self, faerun):
        day = faerun.nameless_day_at(self._at(faerun, 1492, 30, 3600))
        assert day.label == "Midwinter"
        assert (day.group_index, day.index) == (0, 0)

    def test_midsummer_and_shieldmeet(self, faerun):
        midsummer = faerun.nameless_day_at(self._at(faerun, 1492, 212))
        shieldmeet = faerun.nameless_day_at(self._at(faerun, 1492, 213))
        assert midsummer.label == "Midsummer"
        assert shieldmeet.label == "Shieldmeet"
        assert shieldmeet.group is midsummer.group
        assert shieldmeet.index == 1

    def test_no_shieldmeet_in_common_year(self, faerun):
        assert faerun.nameless_day_at(self._at(faerun, 1493, 213)) is None

    def test_ordinary_day(self, faerun):
        assert faerun.nameless_day_at(faerun.date_to_seconds(1492, 3, 10)) is None

    def test_trailing_days_labels(self, dsa):
        labels = [dsa.nameless_day_at(self._at(dsa, 1000, doy)).label for doy in range(360, 365)]
        assert labels == list(dsa.nameless_day_groups[0].labels)

    def test_negative_seconds(self, dsa):
        day = dsa.nameless_day_at(-0.5)
        assert day is not None
        assert day.index == 4


# ── Seconds ───────────────────────────────────────────────────────────────────

class TestSeconds:

    def test_from_seconds(self, gregorian):
        seconds = gregorian.date_to_seconds(30, 12, 25, 12, 0, 0, 123_456)
        p = gregorian.from_seconds(seconds)
        assert p.fields == (30, 12, 25, 12, 0, 0, 123_456)
        assert p.calendar is gregorian

    def test_float_seconds_lose_microseconds_in_modern_years(self, gregorian):
        # Around 6.4e10 s one float step is about 7.6 µs; rounding stays within 4.
        base = gregorian.point(2024, 12, 25, 10, 30, 15)
        errors = []
        for microsecond in range(0, 1_000_000, 997):
            expected = base.replace(microsecond=microsecond)
            got = gregorian.from_seconds(expected.to_seconds())
            errors.append((got - expected).total_microseconds)
        assert max(abs(e) for e in errors) <= 4
        assert any(errors)

    def test_from_timestamp_is_exact(self, gregorian):
        base = gregorian.point(2024, 12, 25, 10, 30, 15)
        for microsecond in (0, 1, 15_838, 39_595, 999_999):
            expected = base.replace(microsecond=microsecond)
            got = gregorian.from_timestamp(expected.to_timestamp(), expected.microsecond)
            assert got == expected

    def test_from_timestamp_pre_epoch(self, faerun):
        p = faerun.point(-40, 6, 30, 1, 2, 3, 4)
        assert faerun.from_timestamp(p.to_timestamp(), 4) == p

    def test_from_seconds_on_nameless_day(self, dsa):
        seconds = dsa.date_to_seconds(1000, 12, 30) + 3 * 86_400
        assert dsa.from_seconds(seconds).fields[:3] == (1000, 12, 30)

    def test_point_seconds_agree_with_converter(self, faerun):
        p = faerun.point(1372, 11, 20, 7, 8, 9)
        assert p.to_seconds() == faerun.date_to_seconds(1372, 11, 20, 7, 8, 9)


# ── Identity ──────────────────────────────────────────────────────────────────

class TestIdentity:

    def test_equal_by_rules(self):
        assert Calendar(GREGORIAN_RULES) == Calendar(GREGORIAN_RULES)
        assert hash(Calendar(FAERUN_RULES)) == hash(Calendar(FAERUN_RULES))
        assert Calendar(GREGORIAN_RULES) != Calendar(DSA_RULES)

    def test_points_interoperate_across_equal_instances(self):
        # Midwinter falls between Hammer 30 and Alturiak 1.
        a = Calendar(FAERUN_RULES).point(1492, 1, 30)
        b = Calendar(FAERUN_RULES).point(1492, 2, 1)
        assert (b - a) == TimeSpan.from_days(2)

    def test_properties(self, faerun):
        assert faerun.name == "faerun"
        assert faerun.month_count == 12
        assert faerun.month_name(1) == "Hammer"
        assert faerun.epoch_notation.after == "DR"
        assert len(faerun.nameless_day_groups) == 5
        assert faerun.metadata["setting"]

    def test_repr(self, dsa):
        assert repr(dsa) == "Calendar(name='dsa', months=12, nameless_groups=1)"


# ── Configuration ─────────────────────────────────────────────────────────────

class TestFromConfiguration:

    def test_custom_calendar(self):
        calendar = Calendar.from_configuration(
            {
                "name": "tenfold",
                "display_name": "Tenfold",
                "month_names": [f"M{i}" for i in range(1, 11)],
                "days_per_month": [36] * 10,
                "leap_rule": {"kind": "every_n", "n": 5},
                "nameless_days": [
                    {"after_month": 10, "labels": ["Eve"], "grows_in_leap_year": True}
                ],
            }
        )
        assert calendar.days_in_year(5) == 362
        assert calendar.days_in_year(6) == 361
        assert calendar.metadata["source"] == "Custom"
        p = calendar.point(6, 10, 36) + TimeSpan.from_days(2)
        assert p.fields[:3] == (7, 1, 1)

    def test_rules_and_configuration_agree(self):
        by_config = Calendar.from_configuration(
            {
                "name": "thirty",
                "display_name": "Thirty",
                "month_names": [f"M{i}" for i in range(1, 13)],
                "days_per_month": [30] * 12,
                "nameless_days": [{"after_month": 12, "labels": list("abcde")}],
            }
        )
        by_rules = Calendar(
            CalendarRules(
                name="thirty",
                display_name="Thirty",
                month_names=tuple(f"M{i}" for i in range(1, 13)),
                month_days=(30,) * 12,
                nameless_days=(NamelessDayGroup(12, tuple("abcde")),),
            )
        )
        assert by_config == by_rules

    def test_invalid_configuration(self):
        with pytest.raises(InvalidCalendarConfigError):
            Calendar.from_configuration(
                {
                    "name": "bad",
                    "display_name": "Bad",
                    "month_names": ["A", "B"],
                    "days_per_month": [10],
                }
            )
