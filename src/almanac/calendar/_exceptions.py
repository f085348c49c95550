from __future__ import annotations


class CalendarError(Exception):
    """Base exception for all calendar-related errors."""


class InvalidDateError(CalendarError, ValueError):
    """A date component is out of range, or a date lies outside a valid range."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: int | None = None,
        minimum: int | None = None,
        maximum: int | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum

    @classmethod
    def out_of_range(
        cls, field: str, value: int, minimum: int, maximum: int, context: str = ""
    ) -> "InvalidDateError":
        suffix = f" {context}" if context else ""
        return cls(
            f"Invalid {field}: {value}. Must be between {minimum} and {maximum}{suffix}.",
            field=field,
            value=value,
            minimum=minimum,
            maximum=maximum,
        )


class IncompatibleCalendarError(CalendarError):
    """Operation mixes points or mappings of non-matching calendars."""


class InvalidCalendarConfigError(CalendarError, ValueError):
    """Calendar rules or configuration records are inconsistent."""


class DateArithmeticError(CalendarError):
    """Arithmetic produced a point the calendar rules reject."""


class UnknownProfileError(CalendarError, LookupError):
    """No calendar profile is registered under the requested name."""
