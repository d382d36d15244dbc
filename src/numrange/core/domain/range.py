"""
Range — Модели записей диапазонов

Immutable Pydantic модели:
- Range: пара границ {start, end} для set-algebra функций
- RangeDefinition: Range + опциональные per-range опции

Границы хранятся в исходном порядке; lower/upper вычисляются
нормализацией (диапазоны двунаправленные).

Сырые записи (mapping) перед построением модели проверяются
JSON Schema контрактами (numrange.core.contracts).
"""

import numbers
import operator
from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from numrange.core.contracts import validate_range_definition, validate_range_record
from numrange.core.domain.options import RangeOptions
from numrange.core.numeric_domain import (
    InvalidScalarTypeError,
    RangeValidationError,
    Scalar,
    is_scalar,
    normalize,
)


def _check_bound(value: Any) -> Scalar:
    if not is_scalar(value):
        raise ValueError(f"bound must be an int or float, got {type(value).__name__}")
    if isinstance(value, numbers.Integral):
        return operator.index(value)
    return float(value)


# =============================================================================
# RANGE MODEL
# =============================================================================


class Range(BaseModel):
    """
    Замкнутый одномерный диапазон.

    start == end допустим (вырожденный диапазон, одна точка).
    """

    start: Union[int, float] = Field(..., description="Первая граница")
    end: Union[int, float] = Field(..., description="Вторая граница")

    model_config = {"frozen": True}

    @field_validator("start", "end", mode="before")
    @classmethod
    def validate_bound(cls, v: Any) -> Any:
        return _check_bound(v)

    @property
    def lower(self) -> Scalar:
        """Нормализованная нижняя граница."""
        return normalize(self.start, self.end)[0]

    @property
    def upper(self) -> Scalar:
        """Нормализованная верхняя граница."""
        return normalize(self.start, self.end)[1]

    @property
    def is_degenerate(self) -> bool:
        return self.start == self.end

    def as_tuple(self) -> tuple[Scalar, Scalar]:
        return self.start, self.end


class RangeDefinition(BaseModel):
    """
    Запись диапазона для is_in_any_range / is_in_all_ranges.

    Границы могут быть None: в non-strict режиме такая запись не содержит
    ни одного значения, в strict режиме проверка вызывает ошибку.
    """

    start: Optional[Union[int, float]] = Field(..., description="Первая граница")
    end: Optional[Union[int, float]] = Field(..., description="Вторая граница")
    options: Optional[RangeOptions] = Field(default=None, description="Опции записи")

    model_config = {"frozen": True}

    @field_validator("start", "end", mode="before")
    @classmethod
    def validate_bound(cls, v: Any) -> Any:
        if v is None:
            return v
        return _check_bound(v)


# =============================================================================
# COERCION
# =============================================================================


RangeLike = Union[Range, Mapping[str, Any], Sequence[Any]]


def _is_pair_sequence(obj: Any) -> bool:
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray))


def as_range(obj: RangeLike) -> Range:
    """
    Приведение записи к Range.

    Принимает Range, mapping {"start", "end"} или пару (start, end).

    Raises:
        RangeValidationError: Если запись структурно невалидна
        InvalidScalarTypeError: Если граница не скаляр
    """
    if isinstance(obj, Range):
        return obj

    if isinstance(obj, Mapping):
        validate_range_record(obj)
        return _build(Range, dict(obj))

    if _is_pair_sequence(obj):
        if len(obj) != 2:
            raise RangeValidationError(f"Range pair must have 2 elements, got {len(obj)}")
        return _build(Range, {"start": obj[0], "end": obj[1]})

    raise RangeValidationError(
        f"Expected Range, mapping or (start, end) pair, got {type(obj).__name__}"
    )


def as_range_definition(obj: Union[RangeDefinition, RangeLike]) -> RangeDefinition:
    """
    Приведение записи к RangeDefinition.

    Принимает RangeDefinition, Range, mapping {"start", "end", "options"?}
    или кортеж (start, end[, options]).
    """
    if isinstance(obj, RangeDefinition):
        return obj

    if isinstance(obj, Range):
        return RangeDefinition(start=obj.start, end=obj.end)

    if isinstance(obj, Mapping):
        data = dict(obj)
        if isinstance(data.get("options"), RangeOptions):
            data["options"] = data["options"].model_dump()
        validate_range_definition(data)
        return _build(RangeDefinition, data)

    if _is_pair_sequence(obj):
        if len(obj) not in (2, 3):
            raise RangeValidationError(
                f"Range definition must have 2 or 3 elements, got {len(obj)}"
            )
        data = {"start": obj[0], "end": obj[1]}
        if len(obj) == 3:
            data["options"] = RangeOptions.coerce(obj[2])
        return _build(RangeDefinition, data)

    raise RangeValidationError(
        f"Expected RangeDefinition, mapping or tuple, got {type(obj).__name__}"
    )


def _build(model: type[BaseModel], data: dict[str, Any]) -> Any:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        if any(err["loc"] and err["loc"][0] in ("start", "end") for err in e.errors()):
            raise InvalidScalarTypeError(f"Invalid range bound: {e}") from e
        raise RangeValidationError(f"Invalid range record: {e}") from e
