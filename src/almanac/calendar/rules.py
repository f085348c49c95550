from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Callable, Mapping, NamedTuple, Union

import numpy as np

from ._exceptions import InvalidCalendarConfigError


# ── leap rules ───────────────────────────────────────────────────────────────
#
# Tagged variants rather than closures: each is a frozen value that compares
# by its fields, answers a scalar query and a vectorised one over an int64
# year array. All but Custom also count leap years in closed form:
# leap_count(lo, hi) is the number of leap years in [lo, hi), negated when
# hi < lo, and density is the long-run share of leap years.

@dataclass(frozen=True, slots=True)
class Never:
    def is_leap(self, year: int) -> bool:
        return False

    def mask(self, years: np.ndarray) -> np.ndarray:
        return np.zeros(np.shape(years), dtype=bool)

    def leap_count(self, lo: int, hi: int) -> int:
        return 0

    @property
    def density(self) -> Fraction:
        return Fraction(0)


@dataclass(frozen=True, slots=True)
class EveryN:
    n: int
    offset: int = 0

    def __post_init__(self) -> None:
        if self.n < 1:
            raise InvalidCalendarConfigError(f"Leap cycle must be >= 1; got {self.n}.")

    def is_leap(self, year: int) -> bool:
        return (year - self.offset) % self.n == 0

    def mask(self, years: np.ndarray) -> np.ndarray:
        return np.mod(np.asarray(years, dtype=np.int64) - self.offset, self.n) == 0

    def leap_count(self, lo: int, hi: int) -> int:
        return (hi - 1 - self.offset) // self.n - (lo - 1 - self.offset) // self.n

    @property
    def density(self) -> Fraction:
        return Fraction(1, self.n)


@dataclass(frozen=True, slots=True)
class GregorianRule:
    def is_leap(self, year: int) -> bool:
        if year % 400 == 0:
            return True
        if year % 100 == 0:
            return False
        return year % 4 == 0

    def mask(self, years: np.ndarray) -> np.ndarray:
        y = np.asarray(years, dtype=np.int64)
        return (np.mod(y, 4) == 0) & ((np.mod(y, 100) != 0) | (np.mod(y, 400) == 0))

    def leap_count(self, lo: int, hi: int) -> int:
        return _gregorian_leaps_through(hi - 1) - _gregorian_leaps_through(lo - 1)

    @property
    def density(self) -> Fraction:
        return Fraction(97, 400)


def _gregorian_leaps_through(year: int) -> int:
    return year // 4 - year // 100 + year // 400


@dataclass(frozen=True, slots=True)
class Custom:
    """Leap predicate backed by a user function; must be pure."""

    function: Callable[[int], bool]

    def is_leap(self, year: int) -> bool:
        return bool(self.function(year))

    def mask(self, years: np.ndarray) -> np.ndarray:
        y = np.asarray(years, dtype=np.int64).reshape(-1)
        out = np.fromiter((bool(self.function(int(v))) for v in y), dtype=bool, count=y.size)
        return out.reshape(np.shape(years))


LeapRule = Union[Never, EveryN, GregorianRule, Custom]

NEVER = Never()
GREGORIAN = GregorianRule()


# ── nameless days ────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class NamelessDayGroup:
    """
    Days that belong to no month, placed after month ``after_month``
    (0 = before the first month). In leap years a growing group gains one
    extra day at its end.
    """

    after_month: int
    labels: tuple[str, ...]
    grows_in_leap_year: bool = False
    leap_label: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", tuple(self.labels))

    @property
    def day_count(self) -> int:
        return len(self.labels)

    def size(self, leap: bool) -> int:
        return self.day_count + (1 if self.grows_in_leap_year and leap else 0)

    def label(self, index: int) -> str:
        """Label of the 0-based ``index``-th day of the group."""
        if index < self.day_count:
            return self.labels[index]
        return self.leap_label or f"{self.labels[-1]} (leap day)"


class EpochNotation(NamedTuple):
    before: str
    after: str


# ── rules ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CalendarRules:
    """
    Pure description of one calendar's shape. Behaviour is data: month
    lengths, a leap rule, the month that absorbs the leap day and the
    nameless-day groups. Conversion math lives in ``TimeConverter``.
    """

    name: str
    display_name: str
    month_names: tuple[str, ...]
    month_days: tuple[int, ...]
    leap_rule: LeapRule = NEVER
    leap_month: int | None = None
    nameless_days: tuple[NamelessDayGroup, ...] = ()
    epoch_notation: EpochNotation = EpochNotation("BE", "AE")
    format_patterns: tuple[str, ...] = ("F j, Y",)
    metadata: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self) -> None:
        # Normalise sequences so equal rules hash equally.
        object.__setattr__(self, "month_names", tuple(self.month_names))
        object.__setattr__(self, "month_days", tuple(int(d) for d in self.month_days))
        object.__setattr__(self, "nameless_days", tuple(self.nameless_days))
        object.__setattr__(self, "format_patterns", tuple(self.format_patterns))
        object.__setattr__(self, "epoch_notation", EpochNotation(*self.epoch_notation))
        self._check()

    def _check(self) -> None:
        if not self.name:
            raise InvalidCalendarConfigError("Calendar name must not be empty.")
        n = len(self.month_names)
        if n == 0:
            raise InvalidCalendarConfigError("Calendar must have at least one month.")
        if len(self.month_days) != n:
            raise InvalidCalendarConfigError(
                f"Expected {n} month lengths; got {len(self.month_days)}."
            )
        for i, d in enumerate(self.month_days, start=1):
            if d < 1:
                raise InvalidCalendarConfigError(f"Days in month {i} must be >= 1; got {d}.")
        if self.leap_month is not None and not 1 <= self.leap_month <= n:
            raise InvalidCalendarConfigError(
                f"Leap month must be between 1 and {n}; got {self.leap_month}."
            )
        for group in self.nameless_days:
            if not 0 <= group.after_month <= n:
                raise InvalidCalendarConfigError(
                    f"Nameless days must follow a month between 0 and {n}; "
                    f"got {group.after_month}."
                )
            if group.day_count < 1:
                raise InvalidCalendarConfigError("Nameless day group must hold at least one day.")

    # ── scalar queries ───────────────────────────────────────────────────

    @property
    def month_count(self) -> int:
        return len(self.month_names)

    def is_leap_year(self, year: int) -> bool:
        return self.leap_rule.is_leap(year)

    def days_in_month(self, month: int, year: int) -> int:
        days = self.month_days[month - 1]
        if month == self.leap_month and self.is_leap_year(year):
            days += 1
        return days

    def group_size(self, group: NamelessDayGroup, year: int) -> int:
        return group.size(self.is_leap_year(year))

    def days_in_year(self, year: int) -> int:
        extra = self.leap_extra_days if self.is_leap_year(year) else 0
        return self.common_year_length + extra

    def day_of_year(self, month: int, day: int, year: int) -> int:
        """0-based day of the year, counting nameless days before ``month``."""
        leap = self.is_leap_year(year)
        days = sum(self.days_in_month(m, year) for m in range(1, month))
        days += sum(g.size(leap) for g in self.nameless_days if g.after_month < month)
        return days + day - 1

    def locate(self, day_of_year: int, year: int) -> tuple[int, int]:
        """
        Inverse of ``day_of_year``. A day inside a nameless group is attributed
        to the last day of the preceding month, the final month for a trailing
        group, and day 1 of month 1 for a group placed before the first month.
        """
        leap = self.is_leap_year(year)
        remaining = day_of_year
        for month in range(1, self.month_count + 1):
            for group in self.nameless_days:
                if group.after_month != month - 1:
                    continue
                size = group.size(leap)
                if remaining < size:
                    return self._boundary(month - 1, year)
                remaining -= size
            dim = self.days_in_month(month, year)
            if remaining < dim:
                return month, remaining + 1
            remaining -= dim
        return self._boundary(self.month_count, year)

    def nameless_day(self, day_of_year: int, year: int) -> tuple[int, int] | None:
        """(group index, day index within group) when ``day_of_year`` is nameless."""
        leap = self.is_leap_year(year)
        offset = 0
        for month in range(1, self.month_count + 2):
            for gi, group in enumerate(self.nameless_days):
                if group.after_month != month - 1:
                    continue
                size = group.size(leap)
                if offset <= day_of_year < offset + size:
                    return gi, day_of_year - offset
                offset += size
            if month <= self.month_count:
                offset += self.days_in_month(month, year)
        return None

    def _boundary(self, month: int, year: int) -> tuple[int, int]:
        if month == 0:
            return 1, 1
        return month, self.days_in_month(month, year)

    # ── vectorised ───────────────────────────────────────────────────────

    @property
    def common_year_length(self) -> int:
        """Days in a non-leap year; no year is shorter."""
        return sum(self.month_days) + sum(g.day_count for g in self.nameless_days)

    @property
    def leap_extra_days(self) -> int:
        extra = sum(1 for g in self.nameless_days if g.grows_in_leap_year)
        if self.leap_month is not None:
            extra += 1
        return extra

    # ── closed form ──────────────────────────────────────────────────────

    @property
    def has_closed_form(self) -> bool:
        """True when year offsets can be computed without summing year by year."""
        return not isinstance(self.leap_rule, Custom)

    @property
    def mean_year_length(self) -> Fraction:
        return self.common_year_length + self.leap_extra_days * self.leap_rule.density

    def days_before_year(self, year: int) -> int:
        """
        Day number (year 1 starts at 0) of the first day of ``year``, exact for
        any integer year. Only defined when ``has_closed_form``.
        """
        leaps = self.leap_rule.leap_count(1, year)
        return (year - 1) * self.common_year_length + leaps * self.leap_extra_days

    def year_lengths(self, years: np.ndarray) -> np.ndarray:
        """Days per year for an int64 array of years."""
        leap = self.leap_rule.mask(years).astype(np.int64)
        return self.common_year_length + leap * self.leap_extra_days
