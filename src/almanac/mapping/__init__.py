# src/almanac/mapping/__init__.py
"""
almanac.mapping
~~~~~~~~~~~~~~~

Cross-calendar conversion through correlation dates.

Basic usage::

    from almanac.mapping import CalendarMapping, DateConverter
    from almanac.profiles import ProfileRegistry

    registry  = ProfileRegistry.with_defaults()
    gregorian = registry.get("gregorian")
    faerun    = registry.get("faerun")

    mapping = CalendarMapping(
        {
            "source_calendar_name": "gregorian",
            "target_calendar_name": "faerun",
            "correlation": {
                "source": {"year": 2024, "month": 1, "day": 1},
                "target": {"year": 1492, "month": 1, "day": 1},
            },
        },
        gregorian,
        faerun,
    )
    converter = DateConverter()
    converter.register_mapping(mapping)
    converter.convert(gregorian.point(2024, 12, 25), faerun)   # → 1492, Nightal 24
"""

from almanac.mapping.configuration import (
    CalendarMappingConfiguration,
    Correlation,
    DateRecord,
    ValidRange,
)
from almanac.mapping.converter import DateConverter
from almanac.mapping.mapping import CalendarMapping

__all__ = [
    "CalendarMapping",
    "CalendarMappingConfiguration",
    "Correlation",
    "DateConverter",
    "DateRecord",
    "ValidRange",
]
