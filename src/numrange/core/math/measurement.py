"""
Measurement — Метрики диапазона и clamp

Модуль реализует:
- distance_to_range: расстояние от значения до ближайшей границы (0 внутри)
- range_size: ширина диапазона upper - lower
- range_center: середина диапазона
- clamp_to_range: ближайшее к значению число внутри диапазона

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. distance_to_range >= 0; == 0 тогда и только тогда, когда значение
   внутри inclusive диапазона
2. clamp_to_range всегда в [lower, upper] и идемпотентен
3. Результат в домене операндов (int для INTEGER, float для REAL)
4. range_center в INTEGER домене: деление с усечением к нулю
5. Смешанные int + дробный float: арифметика точная (Fraction), результат
   округляется в float один раз; вне диапазона float → DomainMismatchError
6. NaN не является операндом метрик: RangeValidationError
"""

import math
from collections.abc import Callable
from fractions import Fraction
from typing import Any

from numrange.core.numeric_domain import (
    DomainMismatchError,
    NumericDomain,
    RangeValidationError,
    Scalar,
    ordered,
    promote,
)


# =============================================================================
# ПРОДВИЖЕНИЕ ОПЕРАНДОВ
# =============================================================================


def _promote_measured(*values: Any) -> tuple[NumericDomain, tuple[Scalar, ...]]:
    domain, promoted = promote(*values)
    if any(isinstance(v, float) and math.isnan(v) for v in promoted):
        raise RangeValidationError("NaN is not a valid range operand")
    return domain, promoted


def _is_mixed(domain: NumericDomain, operands: tuple[Scalar, ...]) -> bool:
    return domain is NumericDomain.REAL and any(isinstance(v, int) for v in operands)


def _real_arithmetic(fn: Callable[..., Any], *operands: Scalar) -> float:
    """
    Вычисление fn над смешанными int/float операндами без OverflowError.

    Конечные операнды переводятся в Fraction (точно), результат округляется
    в float один раз. Бесконечный float поглощает любой конечный int.

    Raises:
        DomainMismatchError: Если точный результат не представим как float
    """
    if any(isinstance(v, float) and math.isinf(v) for v in operands):
        return float(fn(*(v if isinstance(v, float) else 0.0 for v in operands)))

    exact = fn(*(Fraction(v) for v in operands))
    try:
        return float(exact)
    except OverflowError as e:
        raise DomainMismatchError(
            "Result of mixed int/float arithmetic exceeds the float range"
        ) from e


def _sub(a: Any, b: Any) -> Any:
    return a - b


def _midpoint(a: Any, b: Any) -> Any:
    return (a + b) / 2


# =============================================================================
# DISTANCE / SIZE / CENTER
# =============================================================================


def distance_to_range(value: Any, start: Any, end: Any) -> Scalar:
    """
    Расстояние от value до диапазона.

    Args:
        value: Значение
        start: Первая граница (порядок не важен)
        end: Вторая граница

    Returns:
        0 если value внутри [lower, upper], иначе lower - value (ниже)
        или value - upper (выше)

    Raises:
        InvalidScalarTypeError: Если операнд не скаляр
        RangeValidationError: Если операнд NaN
        DomainMismatchError: Если смешанный результат вне диапазона float

    Examples:
        >>> distance_to_range(15, 0, 10)
        5
        >>> distance_to_range(-5, 0, 10)
        5
        >>> distance_to_range(5.0, 0.0, 10.0)
        0.0
    """
    domain, operands = _promote_measured(value, start, end)
    v, a, b = operands
    lower, upper = ordered(a, b)

    if v < lower:
        high, low = lower, v
    elif v > upper:
        high, low = v, upper
    else:
        return 0 if domain is NumericDomain.INTEGER else 0.0

    if _is_mixed(domain, operands):
        return _real_arithmetic(_sub, high, low)
    return high - low


def range_size(start: Any, end: Any) -> Scalar:
    """
    Ширина диапазона: upper - lower (всегда неотрицательная).

    Examples:
        >>> range_size(10, 0)
        10
    """
    domain, operands = _promote_measured(start, end)
    lower, upper = ordered(*operands)
    if _is_mixed(domain, operands):
        return _real_arithmetic(_sub, upper, lower)
    return upper - lower


def _halve_toward_zero(total: int) -> int:
    half = abs(total) // 2
    return -half if total < 0 else half


def range_center(start: Any, end: Any) -> Scalar:
    """
    Середина диапазона (start + end) / 2.

    В INTEGER домене результат int: деление с усечением к нулю
    (range_center(-3, 0) == -1, а не -2 как при floor).

    Examples:
        >>> range_center(0, 10)
        5
        >>> range_center(0.0, 5.0)
        2.5
        >>> range_center(0, 5)
        2
    """
    domain, operands = _promote_measured(start, end)
    a, b = operands
    if domain is NumericDomain.INTEGER:
        return _halve_toward_zero(a + b)
    if _is_mixed(domain, operands):
        return _real_arithmetic(_midpoint, a, b)
    return (a + b) / 2


# =============================================================================
# CLAMP
# =============================================================================


def clamp(
    value: Scalar,
    min_value: Scalar | None = None,
    max_value: Scalar | None = None,
) -> Scalar:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]
    """
    result = value

    if min_value is not None and result < min_value:
        result = min_value

    if max_value is not None and result > max_value:
        result = max_value

    return result


def clamp_to_range(value: Any, start: Any, end: Any) -> Scalar:
    """
    Ближайшее к value значение внутри диапазона.

    Значение внутри диапазона возвращается без изменений (исходный объект),
    вне диапазона возвращается ближайшая граница.

    Raises:
        InvalidScalarTypeError: Если операнд не скаляр
        RangeValidationError: Если операнд NaN (у NaN нет ближайшей точки)

    Examples:
        >>> clamp_to_range(15, 0, 10)
        10
        >>> clamp_to_range(-5, 10, 0)
        0
        >>> clamp_to_range(7.5, 0.0, 10.0)
        7.5
    """
    _, (v, a, b) = _promote_measured(value, start, end)
    lower, upper = ordered(a, b)

    if lower <= v <= upper:
        return value
    return clamp(v, lower, upper)
