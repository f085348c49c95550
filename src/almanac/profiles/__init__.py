"""
almanac.profiles
~~~~~~~~~~~~~~~~

Built-in calendar rules and an explicit name → Calendar registry.

Basic usage::

    from almanac.profiles import ProfileRegistry

    registry = ProfileRegistry.with_defaults()
    faerun = registry.get("faerun")
    faerun.days_in_year(1492)                       # → 366 (Shieldmeet)
"""

from almanac.profiles.builtin import (
    DEFAULT_PROFILES,
    DRAGONLANCE_RULES,
    DSA_RULES,
    EBERRON_RULES,
    FAERUN_RULES,
    GOLARION_RULES,
    GREGORIAN_RULES,
    GREYHAWK_RULES,
)
from almanac.profiles.registry import ProfileRegistry

__all__ = [
    "DEFAULT_PROFILES",
    "DRAGONLANCE_RULES",
    "DSA_RULES",
    "EBERRON_RULES",
    "FAERUN_RULES",
    "GOLARION_RULES",
    "GREGORIAN_RULES",
    "GREYHAWK_RULES",
    "ProfileRegistry",
]
