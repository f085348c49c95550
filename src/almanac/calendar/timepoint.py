from __future__ import annotations

import dataclasses
import operator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ._exceptions import DateArithmeticError, IncompatibleCalendarError, InvalidDateError
from .converter import MICROSECONDS_PER_SECOND, DateFields
from .timespan import TimeSpan

if TYPE_CHECKING:
    from .calendar import Calendar


_TIME_LIMITS = (
    ("hour", 0, 23),
    ("minute", 0, 59),
    ("second", 0, 59),
    ("microsecond", 0, 999_999),
)


@dataclass(frozen=True, slots=True)
class TimePoint:
    """
    Immutable moment on one calendar. Construction validates every component
    against the calendar's rules; arithmetic returns new points.
    """

    calendar: "Calendar"
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    microsecond: int = 0

    def __post_init__(self) -> None:
        for name in ("year", "month", "day", "hour", "minute", "second", "microsecond"):
            value = getattr(self, name)
            try:
                object.__setattr__(self, name, operator.index(value))
            except TypeError:
                raise InvalidDateError(
                    f"Invalid {name}: {value!r}. Must be an integer.", field=name
                ) from None
        self._validate()

    def _validate(self) -> None:
        rules = self.calendar.rules
        self.calendar.converter.check_year(self.year)
        n = rules.month_count
        if not 1 <= self.month <= n:
            raise InvalidDateError.out_of_range("month", self.month, 1, n)
        dim = rules.days_in_month(self.month, self.year)
        if not 1 <= self.day <= dim:
            raise InvalidDateError.out_of_range(
                "day", self.day, 1, dim, f"for month {self.month} of year {self.year}"
            )
        for name, low, high in _TIME_LIMITS:
            value = getattr(self, name)
            if not low <= value <= high:
                raise InvalidDateError.out_of_range(name, value, low, high)

    # ── linear time ──────────────────────────────────────────────────────

    def to_timestamp(self) -> int:
        """Exact whole seconds since the calendar epoch."""
        return self.calendar.converter.to_timestamp(
            self.year, self.month, self.day, self.hour, self.minute, self.second
        )

    def to_seconds(self) -> float:
        return self.to_timestamp() + self.microsecond / MICROSECONDS_PER_SECOND

    def _total_microseconds(self) -> int:
        return self.to_timestamp() * MICROSECONDS_PER_SECOND + self.microsecond

    @property
    def fields(self) -> DateFields:
        return DateFields(
            self.year, self.month, self.day,
            self.hour, self.minute, self.second, self.microsecond,
        )

    # ── arithmetic ───────────────────────────────────────────────────────

    def add(self, span: TimeSpan) -> "TimePoint":
        seconds, microsecond = divmod(
            self._total_microseconds() + span.total_microseconds, MICROSECONDS_PER_SECOND
        )
        try:
            fields = self.calendar.converter.from_timestamp(seconds)
            return TimePoint(self.calendar, *fields[:6], microsecond)
        except InvalidDateError as exc:
            raise DateArithmeticError(
                f"Adding {span!r} to {self!r} produced an invalid date: {exc}"
            ) from exc

    def subtract(self, span: TimeSpan) -> "TimePoint":
        return self.add(span.negate())

    def replace(self, **changes: Any) -> "TimePoint":
        return dataclasses.replace(self, **changes)

    def __add__(self, other: object) -> "TimePoint":
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> Any:
        if isinstance(other, TimeSpan):
            return self.subtract(other)
        if isinstance(other, TimePoint):
            return self.calendar.diff(other, self)
        return NotImplemented

    # ── ordering ─────────────────────────────────────────────────────────

    def _key(self, other: "TimePoint") -> tuple[int, int]:
        if not isinstance(other, TimePoint):
            raise TypeError(f"Cannot compare TimePoint with {type(other).__name__}.")
        if other.calendar != self.calendar:
            raise IncompatibleCalendarError(
                f"Cannot compare TimePoints from '{self.calendar.name}' "
                f"and '{other.calendar.name}'."
            )
        return other._total_microseconds(), self._total_microseconds()

    def __lt__(self, other: "TimePoint") -> bool:
        theirs, ours = self._key(other)
        return ours < theirs

    def __le__(self, other: "TimePoint") -> bool:
        theirs, ours = self._key(other)
        return ours <= theirs

    def __gt__(self, other: "TimePoint") -> bool:
        theirs, ours = self._key(other)
        return ours > theirs

    def __ge__(self, other: "TimePoint") -> bool:
        theirs, ours = self._key(other)
        return ours >= theirs

    def __str__(self) -> str:
        return self.calendar.format(self)

    def __repr__(self) -> str:
        return (
            f"TimePoint({self.calendar.name!r}, "
            f"{self.year}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}.{self.microsecond:06d})"
        )
