"""
almanac.text
~~~~~~~~~~~~

Pattern formatting and string parsing for TimePoints.

    from almanac.text import DateFormatter

    DateFormatter().format(cal, point, r"F j, Y \a\t H:i")   # → "December 25, 2024 at 12:00"
"""

from almanac.text.formatter import DateFormatter
from almanac.text.parser import DateParser

__all__ = ["DateFormatter", "DateParser"]
