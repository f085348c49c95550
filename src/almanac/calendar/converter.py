from __future__ import annotations

import logging
import math
import threading
from typing import NamedTuple, Optional, Union

import numpy as np

from ._exceptions import InvalidDateError
from .rules import CalendarRules

logger = logging.getLogger(__name__)

ArrayLike = Union[int, "np.ndarray"]

SECONDS_PER_DAY: int = 86_400
MICROSECONDS_PER_SECOND: int = 1_000_000


class DateFields(NamedTuple):
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    microsecond: int = 0


class _YearTable(NamedTuple):
    first: int
    # starts[i] is the day number (epoch = 0) of the first day of year first + i.
    starts: np.ndarray

    @property
    def last(self) -> int:
        return self.first + len(self.starts) - 1


class TimeConverter:
    """
    Maps (year, month, day, time) to a linear coordinate and back for one set
    of calendar rules.

    Year offsets come from a dense prefix-sum table over year lengths; year
    lookup is a binary search on it. The table covers a window of years around
    the epoch. Outside that window, rules with a closed-form leap count are
    answered arithmetically (any integer year), while ``Custom`` rules widen
    the table up to ``CUSTOM_YEAR_LIMIT`` years either side of the epoch.
    Years are proleptic: year 0 precedes year 1 and negative coordinates map
    to years <= 0.
    """

    _DEFAULT_BUFFER: int = 400
    CUSTOM_YEAR_LIMIT: int = 1_000_000

    def __init__(self, rules: CalendarRules, horizon: Optional[int] = None) -> None:
        self._rules = rules
        if horizon is None:
            horizon = self._DEFAULT_BUFFER * 10
        limit = self.CUSTOM_YEAR_LIMIT
        horizon = min(max(horizon, 1), limit)
        self._closed_form: bool = rules.has_closed_form
        self._min_year_length: int = rules.common_year_length
        self._lock = threading.Lock()
        self._table: _YearTable = self._build(max(1 - self._DEFAULT_BUFFER, -limit), 1 + horizon)

    # ── table management ─────────────────────────────────────────────────

    def _build(self, first: int, last: int) -> _YearTable:
        years = np.arange(first, last, dtype=np.int64)
        lengths = self._rules.year_lengths(years)
        starts = np.zeros(len(years) + 1, dtype=np.int64)
        np.cumsum(lengths, out=starts[1:])
        starts -= starts[1 - first]
        logger.debug(
            "Built year table for %r covering years %d..%d",
            self._rules.name, first, last - 1,
        )
        return _YearTable(first, starts)

    def _widen(self, first: int, last: int) -> _YearTable:
        limit = self.CUSTOM_YEAR_LIMIT
        with self._lock:
            # Re-read under the lock; another thread may already have widened.
            table = self._table
            first = max(min(first, table.first), -limit)
            last = min(max(last, table.last), limit + 1)
            if first < table.first or last > table.last:
                table = self._build(first, last)
                self._table = table
        return table

    def _ensure_years(self, lo: int, hi: int) -> _YearTable:
        self.check_year(lo)
        self.check_year(hi)
        table = self._table
        if table.first <= lo and hi <= table.last:
            return table
        return self._widen(lo - self._DEFAULT_BUFFER, hi + self._DEFAULT_BUFFER)

    def _ensure_days(self, lo: int, hi: int) -> _YearTable:
        while True:
            table = self._table
            first_day, end_day = int(table.starts[0]), int(table.starts[-1])
            if first_day <= lo and hi < end_day:
                return table
            # Every year holds at least _min_year_length days.
            first, last = table.first, table.last
            if lo < first_day:
                first -= (first_day - lo) // self._min_year_length + 1 + self._DEFAULT_BUFFER
            if hi >= end_day:
                last += (hi - end_day) // self._min_year_length + 1 + self._DEFAULT_BUFFER
            widened = self._widen(first, last)
            if widened.first == table.first and widened.last == table.last:
                limit = self.CUSTOM_YEAR_LIMIT
                raise InvalidDateError(
                    f"Day {lo if lo < first_day else hi} lies outside years "
                    f"{-limit}..{limit} supported by calendar '{self._rules.name}'."
                )

    def _unsupported_year(self, year: int) -> InvalidDateError:
        limit = self.CUSTOM_YEAR_LIMIT
        return InvalidDateError.out_of_range(
            "year", year, -limit, limit, f"for calendar '{self._rules.name}'"
        )

    def check_year(self, year: int) -> None:
        """Raise ``InvalidDateError`` if ``year`` cannot be converted."""
        limit = self.CUSTOM_YEAR_LIMIT
        if not self._closed_form and not -limit <= year <= limit:
            raise self._unsupported_year(year)

    # ── day arithmetic ───────────────────────────────────────────────────

    def days_before_year(self, year: int) -> int:
        """Day number of the first day of ``year``."""
        table = self._table
        if not table.first <= year <= table.last:
            if self._closed_form:
                return self._rules.days_before_year(year)
            table = self._ensure_years(year, year)
        return int(table.starts[year - table.first])

    def year_of_day(self, days: ArrayLike) -> tuple[ArrayLike, ArrayLike]:
        """
        Year and 0-based day of year for day number(s) ``days``. Accepts a
        scalar or an integer array and returns the same shape.
        """
        if np.ndim(days) == 0:
            return self._year_of_day_scalar(int(days))

        d = np.asarray(days, dtype=np.int64)
        flat = d.ravel()
        years = np.empty(flat.shape, dtype=np.int64)
        doy = np.empty(flat.shape, dtype=np.int64)
        if flat.size:
            table = self._table
            inside = (flat >= table.starts[0]) & (flat < table.starts[-1])
            if not inside.all() and not self._closed_form:
                table = self._ensure_days(int(flat.min()), int(flat.max()))
                inside[:] = True
            idx = np.searchsorted(table.starts, flat[inside], side="right") - 1
            years[inside] = table.first + idx
            doy[inside] = flat[inside] - table.starts[idx]
            for i in np.flatnonzero(~inside):
                years[i], doy[i] = self._rules_year_of_day(int(flat[i]))
        return years.reshape(d.shape), doy.reshape(d.shape)

    def _year_of_day_scalar(self, days: int) -> tuple[int, int]:
        table = self._table
        if not int(table.starts[0]) <= days < int(table.starts[-1]):
            if self._closed_form:
                return self._rules_year_of_day(days)
            table = self._ensure_days(days, days)
        i = int(np.searchsorted(table.starts, days, side="right")) - 1
        return table.first + i, days - int(table.starts[i])

    def _rules_year_of_day(self, days: int) -> tuple[int, int]:
        # Estimate from the mean year length, then step to the exact year.
        rules = self._rules
        year = 1 + math.floor(days / rules.mean_year_length)
        start = rules.days_before_year(year)
        while start > days:
            year -= 1
            start = rules.days_before_year(year)
        while days >= start + rules.days_in_year(year):
            start += rules.days_in_year(year)
            year += 1
        return year, days - start

    def date_to_days(self, year: int, month: int, day: int) -> int:
        return self.days_before_year(year) + self._rules.day_of_year(month, day, year)

    # ── seconds ──────────────────────────────────────────────────────────

    def to_timestamp(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> int:
        """Exact whole seconds since the epoch."""
        days = self.date_to_days(year, month, day)
        return days * SECONDS_PER_DAY + hour * 3600 + minute * 60 + second

    def from_timestamp(self, total_seconds: int) -> DateFields:
        days, rem = divmod(int(total_seconds), SECONDS_PER_DAY)
        hour, rem = divmod(rem, 3600)
        minute, second = divmod(rem, 60)
        year, doy = self.year_of_day(days)
        month, day = self._rules.locate(doy, year)
        return DateFields(year, month, day, hour, minute, second, 0)

    def date_to_seconds(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ) -> float:
        whole = self.to_timestamp(year, month, day, hour, minute, second)
        return whole + microsecond / MICROSECONDS_PER_SECOND

    def seconds_to_date(self, seconds: float) -> DateFields:
        whole = math.floor(seconds)
        microsecond = round((seconds - whole) * MICROSECONDS_PER_SECOND)
        if microsecond >= MICROSECONDS_PER_SECOND:
            whole += 1
            microsecond -= MICROSECONDS_PER_SECOND
        return self.from_timestamp(whole)._replace(microsecond=microsecond)

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def rules(self) -> CalendarRules:
        return self._rules

    @property
    def horizon(self) -> tuple[int, int]:
        """First and last year the table currently covers."""
        table = self._table
        return table.first, table.last - 1

    def __repr__(self) -> str:
        first, last = self.horizon
        return f"TimeConverter(calendar={self._rules.name!r}, years={first}..{last})"
