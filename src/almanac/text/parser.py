from __future__ import annotations

import re
from functools import lru_cache
from typing import TYPE_CHECKING, Optional

from almanac.calendar._exceptions import InvalidDateError
from almanac.calendar.timepoint import TimePoint

if TYPE_CHECKING:
    from almanac.calendar import Calendar


_NUMERIC = re.compile(
    r"^\s*(?P<year>-?\d+)-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
    r"(?:[ T](?P<hour>\d{1,2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,6}))?)?)?\s*$"
)


@lru_cache(maxsize=64)
def _named_patterns(month_names: tuple[str, ...]) -> tuple[re.Pattern[str], re.Pattern[str]]:
    names = "|".join(re.escape(n) for n in sorted(month_names, key=len, reverse=True))
    era = r"(?:\s+(?P<era>\S.*?))?"
    day_first = re.compile(
        rf"^\s*(?P<day>\d{{1,2}})\.?\s+(?P<month>{names})\s+(?P<year>-?\d+){era}\s*$",
        re.IGNORECASE,
    )
    month_first = re.compile(
        rf"^\s*(?P<month>{names})\s+(?P<day>\d{{1,2}}),?\s+(?P<year>-?\d+){era}\s*$",
        re.IGNORECASE,
    )
    return day_first, month_first


class DateParser:
    """
    Reads ``Y-m-d[ H:i[:s[.u]]]`` and the named forms ``j F Y`` / ``F j, Y``
    (month names matched case-insensitively, optional trailing era label).

    A year written with the before-epoch label counts backwards from year 1:
    ``1 Before DR`` is year 0.
    """

    def parse(self, calendar: "Calendar", text: str) -> TimePoint:
        match = _NUMERIC.match(text)
        if match is not None:
            fraction = match["fraction"] or ""
            return TimePoint(
                calendar,
                int(match["year"]),
                int(match["month"]),
                int(match["day"]),
                int(match["hour"] or 0),
                int(match["minute"] or 0),
                int(match["second"] or 0),
                int(fraction.ljust(6, "0")) if fraction else 0,
            )

        for pattern in _named_patterns(calendar.month_names):
            match = pattern.match(text)
            if match is not None:
                month = self._month_index(calendar, match["month"])
                year = self._apply_era(calendar, int(match["year"]), match["era"], text)
                return TimePoint(calendar, year, month, int(match["day"]))

        raise InvalidDateError(f"Failed to parse date: {text!r}")

    @staticmethod
    def _month_index(calendar: "Calendar", name: str) -> int:
        lowered = name.casefold()
        for i, candidate in enumerate(calendar.month_names, start=1):
            if candidate.casefold() == lowered:
                return i
        raise InvalidDateError(f"Unknown month name: {name!r}")

    @staticmethod
    def _apply_era(calendar: "Calendar", year: int, era: Optional[str], text: str) -> int:
        if era is None:
            return year
        notation = calendar.epoch_notation
        label = era.strip().casefold()
        if label == notation.after.casefold():
            return year
        if label == notation.before.casefold():
            return 1 - year if year > 0 else year
        raise InvalidDateError(f"Failed to parse date: {text!r} (unknown era {era!r})")
