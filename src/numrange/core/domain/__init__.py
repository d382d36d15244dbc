"""
Domain models and value objects.

Contains range records and options shared by all range operations.
"""

from numrange.core.domain.options import DEFAULT_OPTIONS, RangeOptions
from numrange.core.domain.range import (
    Range,
    RangeDefinition,
    RangeLike,
    as_range,
    as_range_definition,
)

__all__ = [
    # Options
    "RangeOptions",
    "DEFAULT_OPTIONS",
    # Range records
    "Range",
    "RangeDefinition",
    "RangeLike",
    "as_range",
    "as_range_definition",
]
