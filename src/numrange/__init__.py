"""
numrange — проверки принадлежности, метрики и операции над диапазонами

Публичный API: свободные функции для int (произвольной точности) и float,
общие опции RangeOptions, записи Range/RangeDefinition, явный кэш RangeCache.
"""

import logging

from numrange.core.cache import (
    CacheStats,
    RangeCache,
    RangeCacheConfig,
    clear_cache,
    default_cache,
    get_cache_stats,
)
from numrange.core.domain import Range, RangeDefinition, RangeOptions
from numrange.core.domain.value import RangeValue
from numrange.core.math import (
    EmptyValuesError,
    clamp_to_range,
    create_range_validator,
    distance_to_range,
    is_at_boundary,
    is_in_all_ranges,
    is_in_any_range,
    is_in_range,
    range_center,
    range_contains,
    range_envelope,
    range_from_values,
    range_intersection,
    range_size,
    range_union,
    ranges_overlap,
)
from numrange.core.numeric_domain import (
    DomainMismatchError,
    InvalidScalarTypeError,
    NumericDomain,
    RangeValidationError,
    normalize,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

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
    "clamp_to_range",
    # Set algebra
    "ranges_overlap",
    "range_intersection",
    "range_union",
    "range_envelope",
    "range_contains",
    # Construction
    "range_from_values",
    # Numeric domain
    "NumericDomain",
    "normalize",
    # Models
    "Range",
    "RangeDefinition",
    "RangeOptions",
    "RangeValue",
    # Cache
    "RangeCache",
    "RangeCacheConfig",
    "CacheStats",
    "default_cache",
    "clear_cache",
    "get_cache_stats",
    # Errors
    "RangeValidationError",
    "InvalidScalarTypeError",
    "DomainMismatchError",
    "EmptyValuesError",
]
