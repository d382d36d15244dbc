"""
Core math modules для numrange

Операции над замкнутыми одномерными диапазонами в двух числовых доменах.
"""

# Containment
from numrange.core.math.containment import (
    create_range_validator,
    is_at_boundary,
    is_in_all_ranges,
    is_in_any_range,
    is_in_range,
)

# Measurement
from numrange.core.math.measurement import (
    clamp,
    clamp_to_range,
    distance_to_range,
    range_center,
    range_size,
)

# Set algebra
from numrange.core.math.set_algebra import (
    range_contains,
    range_envelope,
    range_intersection,
    range_union,
    ranges_overlap,
)

# Construction
from numrange.core.math.construction import EmptyValuesError, range_from_values

__all__ = [
    # Containment
    "is_in_range",
    "is_in_any_range",
    "is_in_all_ranges",
    "is_at_boundary",
    "create_range_validator",
    # Measurement
    "distance_to_range",
    "range_size",
    "range_center",
    "clamp",
    "clamp_to_range",
    # Set algebra
    "ranges_overlap",
    "range_intersection",
    "range_union",
    "range_envelope",
    "range_contains",
    # Construction
    "EmptyValuesError",
    "range_from_values",
]
