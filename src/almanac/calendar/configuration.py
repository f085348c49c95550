"""
Configuration records for custom calendars.

Records are frozen Pydantic models and accept plain mappings through
``CalendarConfiguration.load``; validation failures surface as
``InvalidCalendarConfigError``.
"""

from __future__ import annotations

from typing import Any, Callable, Literal, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from ._exceptions import InvalidCalendarConfigError
from .rules import (
    GREGORIAN,
    NEVER,
    CalendarRules,
    Custom,
    EpochNotation,
    EveryN,
    LeapRule,
    NamelessDayGroup,
)


class LeapRuleConfig(BaseModel):
    """Serializable leap rule: never, every ``n`` years, or Gregorian."""

    kind: Literal["never", "every_n", "gregorian"] = "never"
    n: Optional[int] = Field(None, ge=1, description="Cycle length for every_n")
    offset: int = Field(0, description="Year offset for every_n")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_cycle(self) -> "LeapRuleConfig":
        if self.kind == "every_n" and self.n is None:
            raise ValueError("every_n leap rule requires n")
        return self

    def to_rule(self) -> LeapRule:
        if self.kind == "gregorian":
            return GREGORIAN
        if self.kind == "every_n":
            return EveryN(int(self.n), self.offset)
        return NEVER


class EpochNotationConfig(BaseModel):
    before: str = Field("BE", min_length=1)
    after: str = Field("AE", min_length=1)

    model_config = {"frozen": True}


class NamelessDaysConfig(BaseModel):
    after_month: int = Field(..., ge=0, description="Month the days follow; 0 = before the first")
    labels: list[str] = Field(..., min_length=1)
    grows_in_leap_year: bool = False
    leap_label: Optional[str] = None

    model_config = {"frozen": True}


class CalendarConfiguration(BaseModel):
    """Parameters of a user-defined calendar."""

    name: str = Field(..., min_length=1, pattern=r"^[A-Za-z0-9_\-]+$")
    display_name: str = Field(..., min_length=1)
    month_names: list[str] = Field(..., min_length=1)
    days_per_month: list[int] = Field(..., min_length=1)
    leap_rule: LeapRuleConfig = Field(default_factory=LeapRuleConfig)
    leap_function: Optional[Callable[[int], bool]] = None
    leap_month: Optional[int] = Field(None, ge=1)
    epoch_notation: EpochNotationConfig = Field(default_factory=EpochNotationConfig)
    format_patterns: list[str] = Field(default_factory=lambda: ["F j, Y"], min_length=1)
    nameless_days: list[NamelessDaysConfig] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @field_validator("month_names")
    @classmethod
    def _month_names_not_blank(cls, names: list[str]) -> list[str]:
        for i, name in enumerate(names, start=1):
            if not name.strip():
                raise ValueError(f"month name {i} must not be empty")
        return names

    @field_validator("days_per_month")
    @classmethod
    def _days_positive(cls, days: list[int]) -> list[int]:
        for i, d in enumerate(days, start=1):
            if d < 1:
                raise ValueError(f"days in month {i} must be at least 1")
        return days

    @model_validator(mode="after")
    def _check_shape(self) -> "CalendarConfiguration":
        n = len(self.month_names)
        if len(self.days_per_month) != n:
            raise ValueError("number of days_per_month entries must match number of months")
        if self.leap_month is not None and self.leap_month > n:
            raise ValueError(f"leap_month must be between 1 and {n}")
        for group in self.nameless_days:
            if group.after_month > n:
                raise ValueError(f"nameless days must follow a month between 0 and {n}")
        if self.leap_function is not None and self.leap_rule.kind != "never":
            raise ValueError("leap_function and a leap_rule kind are mutually exclusive")
        return self

    @classmethod
    def load(cls, data: Mapping[str, Any]) -> "CalendarConfiguration":
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise InvalidCalendarConfigError(f"Invalid calendar configuration: {exc}") from exc

    def to_rules(self) -> CalendarRules:
        leap: LeapRule = (
            Custom(self.leap_function) if self.leap_function is not None else self.leap_rule.to_rule()
        )
        return CalendarRules(
            name=self.name,
            display_name=self.display_name,
            month_names=tuple(self.month_names),
            month_days=tuple(self.days_per_month),
            leap_rule=leap,
            leap_month=self.leap_month,
            nameless_days=tuple(
                NamelessDayGroup(g.after_month, tuple(g.labels), g.grows_in_leap_year, g.leap_label)
                for g in self.nameless_days
            ),
            epoch_notation=EpochNotation(self.epoch_notation.before, self.epoch_notation.after),
            format_patterns=tuple(self.format_patterns),
            metadata={
                "source": "Custom",
                "setting": "User-defined",
                "description": "Custom calendar configuration",
                **self.metadata,
            },
        )
