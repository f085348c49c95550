# src/almanac/calendar/__init__.py
"""
almanac.calendar
~~~~~~~~~~~~~~~~

Calendar arithmetic for real and fictional calendars.  A Calendar wraps a set
of pure rules (month lengths, leap rule, nameless days) and converts between
structured dates and a linear "seconds since epoch" coordinate.

Basic usage::

    from almanac.calendar import Calendar, CalendarRules, NamelessDayGroup, TimeSpan

    rules = CalendarRules(
        name="aventurian",
        display_name="Aventurian",
        month_names=tuple(f"M{i}" for i in range(1, 13)),
        month_days=(30,) * 12,
        nameless_days=(NamelessDayGroup(12, ("1st", "2nd", "3rd", "4th", "5th")),),
    )
    cal = Calendar(rules)
    start = cal.point(1000, 12, 25)
    end = start.add(TimeSpan.from_days(11))          # → 1001-01-01
    cal.diff(cal.point(1000, 1, 1), cal.point(1001, 1, 1)).total_days   # → 365

Year lookups are vectorised; ``cal.converter.year_of_day`` accepts a scalar
or a NumPy array of day numbers.

Public API
----------
Calendar              Façade: points, diff, seconds conversion, text.
CalendarRules         Immutable description of one calendar.
TimeConverter         Date ⇄ linear-time algorithm for one set of rules.
TimePoint, TimeSpan   Immutable moment / signed duration.
CalendarConfiguration Pydantic record for custom calendars.
CalendarError         Base exception for all calendar-related errors.
"""

from __future__ import annotations

from almanac.calendar._exceptions import (
    CalendarError,
    DateArithmeticError,
    IncompatibleCalendarError,
    InvalidCalendarConfigError,
    InvalidDateError,
    UnknownProfileError,
)
from almanac.calendar.calendar import Calendar, NamelessDay
from almanac.calendar.configuration import CalendarConfiguration, LeapRuleConfig
from almanac.calendar.converter import DateFields, TimeConverter
from almanac.calendar.rules import (
    GREGORIAN,
    NEVER,
    CalendarRules,
    Custom,
    EpochNotation,
    EveryN,
    GregorianRule,
    LeapRule,
    NamelessDayGroup,
    Never,
)
from almanac.calendar.timepoint import TimePoint
from almanac.calendar.timespan import TimeSpan

__all__ = [
    "Calendar",
    "CalendarConfiguration",
    "CalendarError",
    "CalendarRules",
    "Custom",
    "DateArithmeticError",
    "DateFields",
    "EpochNotation",
    "EveryN",
    "GREGORIAN",
    "GregorianRule",
    "IncompatibleCalendarError",
    "InvalidCalendarConfigError",
    "InvalidDateError",
    "LeapRule",
    "LeapRuleConfig",
    "NEVER",
    "NamelessDay",
    "NamelessDayGroup",
    "Never",
    "TimeConverter",
    "TimePoint",
    "TimeSpan",
    "UnknownProfileError",
]
