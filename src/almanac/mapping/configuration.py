from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from almanac.calendar import InvalidCalendarConfigError


class DateRecord(BaseModel):
    """Calendar-agnostic (year, month, day); checked against a calendar later."""

    year: int
    month: int
    day: int

    model_config = {"frozen": True}


class Correlation(BaseModel):
    source: DateRecord
    target: DateRecord

    model_config = {"frozen": True}


class ValidRange(BaseModel):
    min: Optional[DateRecord] = None
    max: Optional[DateRecord] = None

    model_config = {"frozen": True}


class CalendarMappingConfiguration(BaseModel):
    """
    Correlation between two calendars: one date in each, declared to be the
    same instant, an optional valid range in the source calendar and whether
    the mapping may be used target → source.
    """

    source_calendar_name: str = Field(..., min_length=1)
    target_calendar_name: str = Field(..., min_length=1)
    correlation: Correlation
    valid_range: Optional[ValidRange] = None
    bidirectional: bool = True

    model_config = {"frozen": True}

    @classmethod
    def load(cls, data: Mapping[str, Any]) -> "CalendarMappingConfiguration":
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise InvalidCalendarConfigError(f"Invalid mapping configuration: {exc}") from exc
