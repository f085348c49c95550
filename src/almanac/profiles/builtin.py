from __future__ import annotations

from almanac.calendar.rules import (
    GREGORIAN,
    NEVER,
    CalendarRules,
    EpochNotation,
    EveryN,
    NamelessDayGroup,
)

_GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _wotc_notice(setting: str, trademarks: str) -> str:
    return (
        f"The calendar names, month names, and associated terminology from the {setting} "
        "setting are the property of Wizards of the Coast. This calendar implementation is "
        "provided for non-commercial use only to help game masters and players keep track "
        f"of their campaigns. Dungeons & Dragons, D&D, {trademarks}, and all related "
        "trademarks are property of Wizards of the Coast LLC."
    )


def _paizo_notice(setting: str, trademarks: str) -> str:
    return (
        f"The calendar names, month names, and associated terminology from the {setting} "
        "setting are the property of Paizo Inc. This calendar implementation is provided "
        "for non-commercial use only to help game masters and players keep track of their "
        f"campaigns. {trademarks}, and all related trademarks are property of Paizo Inc."
    )


def _ulisses_notice(game: str, trademarks: str) -> str:
    return (
        f"The calendar names, month names, and associated terminology from {game} "
        "are the property of Ulisses Spiele. This calendar implementation is provided "
        "for non-commercial use only to help game masters and players keep track of their "
        f"campaigns. {trademarks}, and all related trademarks are property of "
        "Ulisses Spiele GmbH."
    )


GREGORIAN_RULES = CalendarRules(
    name="gregorian",
    display_name="Gregorian Calendar",
    month_names=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    month_days=_GREGORIAN_MONTH_DAYS,
    leap_rule=GREGORIAN,
    leap_month=2,
    epoch_notation=EpochNotation("BCE", "CE"),
    format_patterns=("F j, Y", "Y-m-d", "d/m/Y", "m/d/Y"),
    metadata={
        "source": "International standard",
        "setting": "Real world",
        "description": "Standard Gregorian calendar used internationally",
    },
)

# Harptos: 12 × 30 days, five festivals, Shieldmeet after Midsummer every 4 years.
FAERUN_RULES = CalendarRules(
    name="faerun",
    display_name="Faerûn (Harptos Calendar)",
    month_names=(
        "Hammer", "Alturiak", "Ches", "Tarsakh", "Mirtul", "Kythorn",
        "Flamerule", "Eleasis", "Eleint", "Marpenoth", "Uktar", "Nightal",
    ),
    month_days=(30,) * 12,
    leap_rule=EveryN(4),
    nameless_days=(
        NamelessDayGroup(1, ("Midwinter",)),
        NamelessDayGroup(4, ("Greengrass",)),
        NamelessDayGroup(7, ("Midsummer",), grows_in_leap_year=True, leap_label="Shieldmeet"),
        NamelessDayGroup(9, ("Highharvestide",)),
        NamelessDayGroup(11, ("Feast of the Moon",)),
    ),
    epoch_notation=EpochNotation("Before DR", "DR"),
    format_patterns=(r"j F Y \D\R",),
    metadata={
        "source": "Forgotten Realms Campaign Setting",
        "setting": "Forgotten Realms (Dungeons & Dragons)",
        "description": "Harptos Calendar with 12 months of 30 days plus annual festivals",
        "copyright": _wotc_notice("Forgotten Realms", "Forgotten Realms"),
    },
)

GOLARION_RULES = CalendarRules(
    name="golarion",
    display_name="Golarion (Absalom Reckoning)",
    month_names=(
        "Abadius", "Calistril", "Pharast", "Gozran", "Desnus", "Sarenith",
        "Erastus", "Arodus", "Rova", "Lamashan", "Neth", "Kuthona",
    ),
    month_days=_GREGORIAN_MONTH_DAYS,
    leap_rule=EveryN(8),
    leap_month=2,
    epoch_notation=EpochNotation("Before AR", "AR"),
    format_patterns=("F j, Y AR", "j F Y"),
    metadata={
        "source": "Pathfinder Campaign Setting",
        "setting": "Golarion",
        "description": "Absalom Reckoning calendar, dating from the founding of Absalom in 1 AR",
        "copyright": _paizo_notice("Golarion", "Pathfinder, Golarion"),
    },
)

DSA_RULES = CalendarRules(
    name="dsa",
    display_name="Das Schwarze Auge (Aventurian Calendar)",
    month_names=(
        "Praios", "Rondra", "Efferd", "Travia", "Boron", "Hesinde",
        "Firun", "Tsa", "Phex", "Peraine", "Ingerimm", "Rahja",
    ),
    month_days=(30,) * 12,
    leap_rule=NEVER,
    nameless_days=(
        NamelessDayGroup(
            12,
            (
                "First Nameless Day",
                "Second Nameless Day",
                "Third Nameless Day",
                "Fourth Nameless Day",
                "Fifth Nameless Day",
            ),
        ),
    ),
    epoch_notation=EpochNotation("Before BF", "BF"),
    format_patterns=(r"j. F Y \B\F",),
    metadata={
        "source": "Das Schwarze Auge (The Dark Eye) RPG",
        "setting": "Aventuria",
        "description": "Bosparans Fall calendar with 12 months of 30 days plus 5 nameless days",
        "copyright": _ulisses_notice(
            "Das Schwarze Auge (The Dark Eye)", "Das Schwarze Auge, The Dark Eye"
        ),
    },
)

EBERRON_RULES = CalendarRules(
    name="eberron",
    display_name="Eberron (Galifar Calendar)",
    month_names=(
        "Zarantyr", "Olarune", "Therendor", "Eyre", "Dravago", "Nymm",
        "Lharvion", "Barrakas", "Rhaan", "Sypheros", "Aryth", "Vult",
    ),
    month_days=(28,) * 12,
    leap_rule=NEVER,
    epoch_notation=EpochNotation("Before YK", "YK"),
    format_patterns=(r"j F Y \Y\K",),
    metadata={
        "source": "Eberron Campaign Setting (D&D)",
        "setting": "Eberron",
        "description": "Galifar Calendar with 12 months of 28 days each (336 days per year)",
        "copyright": _wotc_notice("Eberron", "Eberron"),
    },
)

DRAGONLANCE_RULES = CalendarRules(
    name="dragonlance",
    display_name="Dragonlance (Krynn Calendar)",
    month_names=(
        "Winter Deep", "Winter Wane", "Spring Dawning", "Spring Rain",
        "Spring Bloom", "Summer Home", "Summer Run", "Summer End",
        "Autumn Harvest", "Autumn Twilight", "Autumn Dark", "Winter Come",
    ),
    month_days=_GREGORIAN_MONTH_DAYS,
    leap_rule=GREGORIAN,
    leap_month=2,
    epoch_notation=EpochNotation("PC", "AC"),
    format_patterns=(r"j F Y \A\C",),
    metadata={
        "source": "Dragonlance Campaign Setting",
        "setting": "Krynn",
        "description": "Krynn calendar with varying month lengths, AC/PC reckoning from the Cataclysm",
        "copyright": _wotc_notice("Dragonlance", "Dragonlance"),
    },
)

# Common Year: four 7-day festival weeks (months 1, 5, 9, 13) between 28-day months.
GREYHAWK_RULES = CalendarRules(
    name="greyhawk",
    display_name="Greyhawk (Common Year Calendar)",
    month_names=(
        "Needfest", "Fireseek", "Readying", "Coldeven",
        "Growfest", "Planting", "Flocktime", "Wealsun",
        "Richfest", "Reaping", "Goodmonth", "Harvester",
        "Brewfest", "Patchwall", "Ready'reat", "Sunsebb",
    ),
    month_days=(7, 28, 28, 28) * 4,
    leap_rule=NEVER,
    epoch_notation=EpochNotation("Before CY", "CY"),
    format_patterns=(r"j F Y \C\Y",),
    metadata={
        "source": "World of Greyhawk Campaign Setting",
        "setting": "Oerth (Greyhawk)",
        "description": "Common Year calendar with 12 months of 28 days plus 4 festival weeks "
                       "(364 days total)",
        "copyright": _wotc_notice("Greyhawk", "Greyhawk"),
    },
)

DEFAULT_PROFILES: tuple[CalendarRules, ...] = (
    GREGORIAN_RULES,
    FAERUN_RULES,
    GOLARION_RULES,
    DSA_RULES,
    EBERRON_RULES,
    DRAGONLANCE_RULES,
    GREYHAWK_RULES,
)
