"""
Numeric Domain — двухдоменная диспетчеризация скаляров

Модуль определяет, в каком числовом домене выполняется операция:
- REAL: float (и прочие numbers.Real, не являющиеся целыми)
- INTEGER: int произвольной точности (и прочие numbers.Integral)

Правило продвижения применяется явно на границе каждой публичной функции,
неявная коэрция не используется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Если хотя бы один операнд INTEGER, вычисления идут в int (без потери точности)
2. float продвигается в int только если он конечен и целочисленен (точная конверсия)
3. Дробный float рядом с int: strict → DomainMismatchError, иначе REAL-домен
   (int сравнивается с float точно, усечение никогда не выполняется)
4. bool и None не являются скалярами
"""

import logging
import math
import numbers
import operator
from enum import Enum
from typing import Any, Union

logger = logging.getLogger(__name__)

Scalar = Union[int, float]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RangeValidationError(ValueError):
    """Базовая ошибка валидации входных данных диапазона."""


class InvalidScalarTypeError(RangeValidationError, TypeError):
    """Граница или значение отсутствует либо не является int/float."""


class DomainMismatchError(RangeValidationError):
    """
    Дробный float смешан с int в strict режиме.

    Точная конверсия в INTEGER-домен невозможна, а усечение запрещено.
    """


# =============================================================================
# DOMAIN
# =============================================================================


class NumericDomain(str, Enum):
    """Числовой домен операции"""

    REAL = "real"
    INTEGER = "integer"


def is_scalar(value: Any) -> bool:
    """
    Проверка, является ли значение скаляром (int или float).

    bool исключён явно: True/False не являются границами диапазона.
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, numbers.Real)


def domain_of(value: Any) -> NumericDomain:
    """
    Определение домена скаляра по его runtime-представлению.

    Raises:
        InvalidScalarTypeError: Если value не скаляр
    """
    if not is_scalar(value):
        raise InvalidScalarTypeError(
            f"Expected an int or float, got {type(value).__name__}: {value!r}"
        )
    if isinstance(value, numbers.Integral):
        return NumericDomain.INTEGER
    return NumericDomain.REAL


def _is_integral_float(value: float) -> bool:
    return math.isfinite(value) and value.is_integer()


def promote(*values: Any, strict: bool = False) -> tuple[NumericDomain, tuple[Scalar, ...]]:
    """
    Продвижение операндов в общий числовой домен.

    Args:
        *values: Операнды операции (value, границы, ...)
        strict: Запретить fallback в REAL-домен при дробном float

    Returns:
        (домен, операнды, приведённые к домену)

    Raises:
        InvalidScalarTypeError: Если любой операнд не скаляр
        DomainMismatchError: Если strict и дробный float смешан с int

    Examples:
        >>> promote(1.5, 2.5)
        (<NumericDomain.REAL: 'real'>, (1.5, 2.5))
        >>> promote(10, 0.0, 19)
        (<NumericDomain.INTEGER: 'integer'>, (10, 0, 19))
        >>> promote(2.5, 0, 10)
        (<NumericDomain.REAL: 'real'>, (2.5, 0, 10))
    """
    domains = [domain_of(v) for v in values]

    if NumericDomain.INTEGER not in domains:
        return NumericDomain.REAL, tuple(float(v) for v in values)

    reals = [float(v) for v, d in zip(values, domains) if d is NumericDomain.REAL]
    inexact = [v for v in reals if not _is_integral_float(v)]

    if not inexact:
        promoted = tuple(
            operator.index(v) if d is NumericDomain.INTEGER else int(float(v))
            for v, d in zip(values, domains)
        )
        return NumericDomain.INTEGER, promoted

    if strict:
        raise DomainMismatchError(
            f"Cannot mix non-integral float {inexact[0]!r} with an integer range "
            f"without losing precision"
        )

    logger.debug(
        "Mixed int/float operands with non-integral float %r, using real domain",
        inexact[0],
    )
    mixed = tuple(
        operator.index(v) if d is NumericDomain.INTEGER else float(v)
        for v, d in zip(values, domains)
    )
    return NumericDomain.REAL, mixed


# =============================================================================
# NORMALIZATION
# =============================================================================


def ordered(a: Scalar, b: Scalar) -> tuple[Scalar, Scalar]:
    """Упорядочивание пары уже продвинутых значений: (min, max)."""
    if b < a:
        return b, a
    return a, b


def normalize(a: Any, b: Any, *, strict: bool = False) -> tuple[Scalar, Scalar]:
    """
    Нормализация границ диапазона: (lower, upper) независимо от порядка.

    Диапазоны всегда двунаправленные: (10, 0) и (0, 10) эквивалентны.

    Args:
        a: Первая граница
        b: Вторая граница
        strict: Передаётся в promote

    Returns:
        (lower, upper) в общем домене

    Examples:
        >>> normalize(19, 0)
        (0, 19)
        >>> normalize(2.5, -1.0)
        (-1.0, 2.5)
    """
    _, (pa, pb) = promote(a, b, strict=strict)
    return ordered(pa, pb)
