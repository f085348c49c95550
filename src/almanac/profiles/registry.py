from __future__ import annotations

import logging
from typing import Iterable, Iterator, Union

from almanac.calendar import Calendar, CalendarRules, UnknownProfileError

from .builtin import DEFAULT_PROFILES

logger = logging.getLogger(__name__)


class ProfileRegistry:
    """
    Name → Calendar lookup. Constructed and passed explicitly; nothing is
    registered until the owner asks for it.
    """

    def __init__(self, profiles: Iterable[Union[CalendarRules, Calendar]] = ()) -> None:
        self._calendars: dict[str, Calendar] = {}
        for profile in profiles:
            self.register(profile)

    @classmethod
    def with_defaults(cls) -> "ProfileRegistry":
        """Registry holding the built-in profiles in a fixed order."""
        return cls(DEFAULT_PROFILES)

    def register(self, profile: Union[CalendarRules, Calendar]) -> Calendar:
        calendar = profile if isinstance(profile, Calendar) else Calendar(profile)
        if calendar.name in self._calendars:
            logger.debug("Replacing calendar profile %r", calendar.name)
        else:
            logger.debug("Registered calendar profile %r", calendar.name)
        self._calendars[calendar.name] = calendar
        return calendar

    def get(self, name: str) -> Calendar:
        try:
            return self._calendars[name]
        except KeyError:
            available = ", ".join(self._calendars) or "none"
            raise UnknownProfileError(
                f"Unknown calendar profile: '{name}'. Available profiles: {available}"
            ) from None

    def names(self) -> list[str]:
        return list(self._calendars)

    def __contains__(self, name: object) -> bool:
        return name in self._calendars

    def __iter__(self) -> Iterator[Calendar]:
        return iter(self._calendars.values())

    def __len__(self) -> int:
        return len(self._calendars)

    def __repr__(self) -> str:
        return f"ProfileRegistry(profiles={self.names()})"
