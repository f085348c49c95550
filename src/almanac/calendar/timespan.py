from __future__ import annotations

from .converter import MICROSECONDS_PER_SECOND, SECONDS_PER_DAY


class TimeSpan:
    """
    Immutable signed duration of whole seconds plus microseconds.

    Both components always carry the same sign and ``|microseconds|`` stays
    below one second, so ``TimeSpan.from_seconds(1, -1)`` is stored as
    (0 s, 999 999 µs).
    """

    __slots__ = ("_seconds", "_microseconds")

    def __init__(self, seconds: int = 0, microseconds: int = 0) -> None:
        total = int(seconds) * MICROSECONDS_PER_SECOND + int(microseconds)
        sign = -1 if total < 0 else 1
        whole, micro = divmod(abs(total), MICROSECONDS_PER_SECOND)
        object.__setattr__(self, "_seconds", sign * whole)
        object.__setattr__(self, "_microseconds", sign * micro)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("TimeSpan is immutable.")

    # ── constructors ─────────────────────────────────────────────────────

    @classmethod
    def from_seconds(cls, seconds: int, microseconds: int = 0) -> "TimeSpan":
        return cls(seconds, microseconds)

    @classmethod
    def from_microseconds(cls, microseconds: int) -> "TimeSpan":
        return cls(0, microseconds)

    @classmethod
    def from_days(cls, days: int) -> "TimeSpan":
        return cls(days * SECONDS_PER_DAY)

    @classmethod
    def from_hours(cls, hours: int) -> "TimeSpan":
        return cls(hours * 3600)

    @classmethod
    def from_minutes(cls, minutes: int) -> "TimeSpan":
        return cls(minutes * 60)

    # ── components ───────────────────────────────────────────────────────

    @property
    def total_seconds(self) -> int:
        return self._seconds

    @property
    def microseconds(self) -> int:
        return self._microseconds

    @property
    def total_microseconds(self) -> int:
        return self._seconds * MICROSECONDS_PER_SECOND + self._microseconds

    # Unit projections truncate toward zero.

    @property
    def total_days(self) -> int:
        return _truncate(self._seconds, SECONDS_PER_DAY)

    @property
    def total_hours(self) -> int:
        return _truncate(self._seconds, 3600)

    @property
    def total_minutes(self) -> int:
        return _truncate(self._seconds, 60)

    def to_float(self) -> float:
        return self._seconds + self._microseconds / MICROSECONDS_PER_SECOND

    def is_negative(self) -> bool:
        return self._seconds < 0 or self._microseconds < 0

    def is_zero(self) -> bool:
        return self._seconds == 0 and self._microseconds == 0

    # ── arithmetic ───────────────────────────────────────────────────────

    def negate(self) -> "TimeSpan":
        return TimeSpan(-self._seconds, -self._microseconds)

    def abs(self) -> "TimeSpan":
        return TimeSpan(abs(self._seconds), abs(self._microseconds))

    def add(self, other: "TimeSpan") -> "TimeSpan":
        return TimeSpan(0, self.total_microseconds + other.total_microseconds)

    def __neg__(self) -> "TimeSpan":
        return self.negate()

    def __abs__(self) -> "TimeSpan":
        return self.abs()

    def __add__(self, other: object) -> "TimeSpan":
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "TimeSpan":
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.add(other.negate())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.total_microseconds == other.total_microseconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.total_microseconds < other.total_microseconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.total_microseconds <= other.total_microseconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.total_microseconds > other.total_microseconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.total_microseconds >= other.total_microseconds

    def __hash__(self) -> int:
        return hash(self.total_microseconds)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __repr__(self) -> str:
        return f"TimeSpan(seconds={self._seconds}, microseconds={self._microseconds})"


def _truncate(value: int, unit: int) -> int:
    whole = abs(value) // unit
    return -whole if value < 0 else whole
