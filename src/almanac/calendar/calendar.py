from __future__ import annotations

import math
from typing import Any, Mapping, NamedTuple, Optional, Union

from ._exceptions import IncompatibleCalendarError
from .configuration import CalendarConfiguration
from .converter import SECONDS_PER_DAY, DateFields, TimeConverter
from .rules import CalendarRules, EpochNotation, NamelessDayGroup
from .timepoint import TimePoint
from .timespan import TimeSpan


class NamelessDay(NamedTuple):
    group_index: int
    group: NamelessDayGroup
    index: int
    label: str


class Calendar:
    """
    Façade over one set of calendar rules and the converter built for them.
    Two calendars are equal when their rules are equal.
    """

    def __init__(self, rules: CalendarRules, horizon: Optional[int] = None) -> None:
        self._rules = rules
        self._converter = TimeConverter(rules, horizon=horizon)

    @classmethod
    def from_configuration(cls, config: Union[CalendarConfiguration, Mapping[str, Any]]) -> "Calendar":
        if not isinstance(config, CalendarConfiguration):
            config = CalendarConfiguration.load(config)
        return cls(config.to_rules())

    # ── rules ────────────────────────────────────────────────────────────

    @property
    def rules(self) -> CalendarRules:
        return self._rules

    @property
    def converter(self) -> TimeConverter:
        return self._converter

    @property
    def name(self) -> str:
        return self._rules.name

    @property
    def display_name(self) -> str:
        return self._rules.display_name

    @property
    def month_names(self) -> tuple[str, ...]:
        return self._rules.month_names

    @property
    def month_count(self) -> int:
        return self._rules.month_count

    @property
    def epoch_notation(self) -> EpochNotation:
        return self._rules.epoch_notation

    @property
    def nameless_day_groups(self) -> tuple[NamelessDayGroup, ...]:
        return self._rules.nameless_days

    @property
    def format_patterns(self) -> tuple[str, ...]:
        return self._rules.format_patterns

    @property
    def metadata(self) -> Mapping[str, Any]:
        return self._rules.metadata

    def month_name(self, month: int) -> str:
        return self._rules.month_names[month - 1]

    def days_in_month(self, month: int, year: int) -> int:
        return self._rules.days_in_month(month, year)

    def is_leap_year(self, year: int) -> bool:
        return self._rules.is_leap_year(year)

    def days_in_year(self, year: int) -> int:
        return self._rules.days_in_year(year)

    # ── points ───────────────────────────────────────────────────────────

    def point(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ) -> TimePoint:
        return TimePoint(self, year, month, day, hour, minute, second, microsecond)

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
        return self._converter.date_to_seconds(year, month, day, hour, minute, second, microsecond)

    def seconds_to_date(self, seconds: float) -> DateFields:
        return self._converter.seconds_to_date(seconds)

    def from_seconds(self, seconds: float) -> TimePoint:
        return TimePoint(self, *self._converter.seconds_to_date(seconds))

    def from_timestamp(self, seconds: int, microsecond: int = 0) -> TimePoint:
        """Exact inverse of ``TimePoint.to_timestamp``; no float rounding."""
        fields = self._converter.from_timestamp(seconds)
        return TimePoint(self, *fields[:6], microsecond)

    def diff(self, start: TimePoint, end: TimePoint) -> TimeSpan:
        """Signed span from ``start`` to ``end``; both must be on this calendar."""
        if start.calendar != self or end.calendar != self:
            raise IncompatibleCalendarError(
                "Cannot calculate difference between TimePoints from different calendars."
            )
        seconds = end.to_timestamp() - start.to_timestamp()
        return TimeSpan.from_seconds(seconds, end.microsecond - start.microsecond)

    def nameless_day_at(self, seconds: float) -> Optional[NamelessDay]:
        """The nameless day covering linear time ``seconds``, if any."""
        days = math.floor(seconds) // SECONDS_PER_DAY
        year, doy = self._converter.year_of_day(days)
        found = self._rules.nameless_day(doy, year)
        if found is None:
            return None
        gi, index = found
        group = self._rules.nameless_days[gi]
        return NamelessDay(gi, group, index, group.label(index))

    # ── text ─────────────────────────────────────────────────────────────

    def format(self, point: TimePoint, pattern: Optional[str] = None) -> str:
        from almanac.text.formatter import DateFormatter

        if point.calendar != self:
            raise IncompatibleCalendarError("Cannot format TimePoint from different calendar.")
        return DateFormatter().format(self, point, pattern)

    def parse(self, text: str) -> TimePoint:
        from almanac.text.parser import DateParser

        return DateParser().parse(self, text)

    # ── identity / repr ──────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calendar):
            return NotImplemented
        return self is other or self._rules == other._rules

    def __hash__(self) -> int:
        return hash(self._rules)

    def __repr__(self) -> str:
        return (
            f"Calendar(name={self.name!r}, "
            f"months={self.month_count}, "
            f"nameless_groups={len(self.nameless_day_groups)})"
        )
