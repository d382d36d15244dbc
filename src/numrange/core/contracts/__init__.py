"""
Contract Validation Module

Модуль для валидации JSON контрактов записей диапазонов.
"""

from .validators import (
    ContractValidator,
    RangeDefinitionValidator,
    RangeRecordValidator,
    SchemaLoader,
    validate_range_definition,
    validate_range_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RangeRecordValidator",
    "RangeDefinitionValidator",
    # Functions
    "validate_range_record",
    "validate_range_definition",
]
