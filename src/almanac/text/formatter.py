from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from almanac.calendar import Calendar, TimePoint


def _era(calendar: "Calendar", point: "TimePoint") -> str:
    notation = calendar.epoch_notation
    return notation.after if point.year >= 1 else notation.before


_TOKENS: dict[str, Callable[["Calendar", "TimePoint"], str]] = {
    "Y": lambda c, p: str(p.year),
    "y": lambda c, p: f"{p.year % 100:02d}",
    "F": lambda c, p: c.month_name(p.month),
    "m": lambda c, p: f"{p.month:02d}",
    "n": lambda c, p: str(p.month),
    "d": lambda c, p: f"{p.day:02d}",
    "j": lambda c, p: str(p.day),
    "H": lambda c, p: f"{p.hour:02d}",
    "i": lambda c, p: f"{p.minute:02d}",
    "s": lambda c, p: f"{p.second:02d}",
    "u": lambda c, p: f"{p.microsecond:06d}",
    "E": _era,
}


class DateFormatter:
    """
    Renders a TimePoint through a pattern of single-character tokens
    (``Y y F m n d j H i s u E``). Substituted values are never rescanned;
    ``\\`` emits the following character literally.
    """

    def format(
        self, calendar: "Calendar", point: "TimePoint", pattern: Optional[str] = None
    ) -> str:
        if pattern is None:
            pattern = calendar.format_patterns[0]

        out: list[str] = []
        chars = iter(pattern)
        for ch in chars:
            if ch == "\\":
                out.append(next(chars, ""))
            elif ch in _TOKENS:
                out.append(_TOKENS[ch](calendar, point))
            else:
                out.append(ch)
        return "".join(out)
