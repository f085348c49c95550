from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from almanac.calendar import (
    Calendar,
    IncompatibleCalendarError,
    InvalidDateError,
    TimePoint,
)

from .configuration import CalendarMappingConfiguration, DateRecord

logger = logging.getLogger(__name__)


class CalendarMapping:
    """
    Projects dates between two calendars through one correlation pair.

    A date's offset from the source anchor, as an exact (seconds,
    microseconds) span, is reapplied verbatim to the target anchor. Elapsed
    seconds are treated as identical in both calendars, so a round trip
    through ``convert`` and ``reverse_convert`` restores the original point.
    """

    def __init__(
        self,
        config: Union[CalendarMappingConfiguration, Mapping[str, Any]],
        source: Calendar,
        target: Calendar,
    ) -> None:
        if not isinstance(config, CalendarMappingConfiguration):
            config = CalendarMappingConfiguration.load(config)

        # Names first: nothing is built for a mismatched pair.
        if source.name != config.source_calendar_name:
            raise IncompatibleCalendarError(
                f"Source calendar '{source.name}' does not match configuration "
                f"'{config.source_calendar_name}'"
            )
        if target.name != config.target_calendar_name:
            raise IncompatibleCalendarError(
                f"Target calendar '{target.name}' does not match configuration "
                f"'{config.target_calendar_name}'"
            )

        source_anchor = _point(source, config.correlation.source)
        target_anchor = _point(target, config.correlation.target)
        rng = config.valid_range
        minimum = _point(source, rng.min) if rng is not None and rng.min is not None else None
        maximum = _point(source, rng.max) if rng is not None and rng.max is not None else None

        self._config = config
        self._source = source
        self._target = target
        self._source_anchor = source_anchor
        self._target_anchor = target_anchor
        self._minimum: Optional[TimePoint] = minimum
        self._maximum: Optional[TimePoint] = maximum

    # ── conversion ───────────────────────────────────────────────────────

    def convert(self, date: TimePoint) -> TimePoint:
        """Source → target."""
        if date.calendar != self._source:
            raise IncompatibleCalendarError("TimePoint must be from the source calendar")
        self._check_range(date)
        delta = self._source.diff(self._source_anchor, date)
        result = self._target_anchor.add(delta)
        logger.debug("Converted %r → %r", date, result)
        return result

    def reverse_convert(self, date: TimePoint) -> TimePoint:
        """Target → source; only for bidirectional mappings."""
        if not self._config.bidirectional:
            raise IncompatibleCalendarError("This mapping does not support reverse conversion")
        if date.calendar != self._target:
            raise IncompatibleCalendarError("TimePoint must be from the target calendar")
        delta = self._target.diff(self._target_anchor, date)
        result = self._source_anchor.add(delta)
        logger.debug("Reverse-converted %r → %r", date, result)
        return result

    def _check_range(self, date: TimePoint) -> None:
        if self._minimum is not None and self._source.diff(self._minimum, date).is_negative():
            raise InvalidDateError("Date is before minimum valid date for conversion")
        if self._maximum is not None and self._source.diff(date, self._maximum).is_negative():
            raise InvalidDateError("Date is after maximum valid date for conversion")

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def source(self) -> Calendar:
        return self._source

    @property
    def target(self) -> Calendar:
        return self._target

    @property
    def configuration(self) -> CalendarMappingConfiguration:
        return self._config

    @property
    def bidirectional(self) -> bool:
        return self._config.bidirectional

    @property
    def correlation(self) -> tuple[TimePoint, TimePoint]:
        return self._source_anchor, self._target_anchor

    @property
    def valid_range(self) -> tuple[Optional[TimePoint], Optional[TimePoint]]:
        return self._minimum, self._maximum

    def __repr__(self) -> str:
        arrow = "<->" if self.bidirectional else "->"
        return f"CalendarMapping({self._source.name!r} {arrow} {self._target.name!r})"


def _point(calendar: Calendar, record: DateRecord) -> TimePoint:
    return TimePoint(calendar, record.year, record.month, record.day)
