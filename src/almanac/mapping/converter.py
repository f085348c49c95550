from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from almanac.calendar import Calendar, IncompatibleCalendarError, TimePoint

from .mapping import CalendarMapping

logger = logging.getLogger(__name__)


class DateConverter:
    """
    Registry of calendar mappings keyed by (source name, target name).
    Bidirectional mappings are reachable under both orderings.
    """

    def __init__(self) -> None:
        self._mappings: dict[tuple[str, str], CalendarMapping] = {}

    def register_mapping(self, mapping: CalendarMapping) -> None:
        source, target = mapping.source.name, mapping.target.name
        self._mappings[(source, target)] = mapping
        if mapping.bidirectional:
            self._mappings[(target, source)] = mapping
        logger.debug("Registered mapping %r", mapping)

    def can_convert(self, source_name: str, target_name: str) -> bool:
        return (source_name, target_name) in self._mappings

    def get_mapping(self, source_name: str, target_name: str) -> Optional[CalendarMapping]:
        return self._mappings.get((source_name, target_name))

    @property
    def mappings(self) -> Mapping[tuple[str, str], CalendarMapping]:
        return MappingProxyType(self._mappings)

    def convert(self, date: TimePoint, target: Calendar) -> TimePoint:
        source_name, target_name = date.calendar.name, target.name
        mapping = self._mappings.get((source_name, target_name))
        if mapping is None:
            raise IncompatibleCalendarError(
                f"No mapping found between '{source_name}' and '{target_name}'"
            )
        if mapping.source.name == source_name:
            return mapping.convert(date)
        return mapping.reverse_convert(date)

    def __len__(self) -> int:
        return len(self._mappings)

    def __repr__(self) -> str:
        pairs = [f"{s}->{t}" for s, t in self._mappings]
        return f"DateConverter(mappings={pairs})"
