"""
Containment — Проверка принадлежности значения диапазону

Модуль реализует:
- is_in_range: значение между нормализованными границами
- is_in_any_range / is_in_all_ranges: дизъюнкция / конъюнкция по списку записей
- is_at_boundary: точное совпадение с границей
- create_range_validator: замыкание над фиксированными границами

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. is_in_range(x, a, b) == is_in_range(x, b, a) (двунаправленность)
2. Вырожденный диапазон (a == b): inclusive содержит ровно a, exclusive пуст
3. Кэш (options.cache) не меняет результат, только производительность
4. strict: отсутствующие/нескалярные операнды → InvalidScalarTypeError
5. non-strict: отсутствующие/нескалярные операнды → False (диапазон не задан)
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any, Union

from numrange.core.cache import RangeCache, default_cache
from numrange.core.domain.options import RangeOptions
from numrange.core.domain.range import RangeDefinition, as_range_definition
from numrange.core.numeric_domain import (
    InvalidScalarTypeError,
    Scalar,
    is_scalar,
    ordered,
    promote,
)

OptionsLike = Union[RangeOptions, Mapping[str, Any], None]


# =============================================================================
# ВАЛИДАЦИЯ ОПЕРАНДОВ
# =============================================================================


def _validate_strict(value: Any, start: Any, end: Any) -> None:
    if start is None or end is None:
        raise InvalidScalarTypeError("Range boundaries cannot be None")
    if not is_scalar(start):
        raise InvalidScalarTypeError("Start boundary must be an int or float")
    if not is_scalar(end):
        raise InvalidScalarTypeError("End boundary must be an int or float")
    if not is_scalar(value):
        raise InvalidScalarTypeError("Value must be an int or float")


def _between(value: Scalar, lower: Scalar, upper: Scalar, exclusive: bool) -> bool:
    if exclusive:
        return lower < value < upper
    return lower <= value <= upper


# =============================================================================
# CONTAINMENT
# =============================================================================


def is_in_range(
    value: Any,
    start: Any,
    end: Any,
    options: OptionsLike = None,
    *,
    cache: RangeCache | None = None,
) -> bool:
    """
    Проверка, лежит ли value между нормализованными границами.

    Args:
        value: Проверяемое значение (int или float)
        start: Первая граница (порядок не важен)
        end: Вторая граница
        options: RangeOptions или mapping {exclusive, strict, cache}
        cache: Явный кэш для options.cache=True (default: кэш процесса)

    Returns:
        True если value в диапазоне (inclusive по умолчанию)

    Raises:
        InvalidScalarTypeError: strict и граница/значение отсутствует или не скаляр
        DomainMismatchError: strict и дробный float смешан с int

    Examples:
        >>> is_in_range(10, 0, 19)
        True
        >>> is_in_range(10, 19, 0)
        True
        >>> is_in_range(0, 0, 10, {"exclusive": True})
        False
    """
    opts = RangeOptions.coerce(options)

    if opts.strict:
        _validate_strict(value, start, end)
    elif not (is_scalar(value) and is_scalar(start) and is_scalar(end)):
        return False

    _, (v, a, b) = promote(value, start, end, strict=opts.strict)
    lower, upper = ordered(a, b)

    if not opts.cache:
        return _between(v, lower, upper, opts.exclusive)

    store = cache if cache is not None else default_cache()
    key = (v, lower, upper, opts.exclusive)
    hit = store.get(key)
    if hit is not None:
        return hit

    result = _between(v, lower, upper, opts.exclusive)
    store.put(key, result)
    return result


def _check_definition(value: Any, definition: Any) -> bool:
    record: RangeDefinition = as_range_definition(definition)
    return is_in_range(value, record.start, record.end, record.options)


def is_in_any_range(value: Any, ranges: Iterable[Any]) -> bool:
    """
    Проверка, лежит ли value хотя бы в одном из диапазонов.

    Пустой список → False (пустая дизъюнкция).

    Args:
        value: Проверяемое значение
        ranges: Записи RangeDefinition, mapping {start, end, options?}
            или кортежи (start, end[, options])

    Raises:
        RangeValidationError: Если запись структурно невалидна (в том числе
            нечисловая граница), независимо от strict. Граница None
            структурно допустима и в non-strict режиме даёт False.
    """
    return any(_check_definition(value, r) for r in ranges)


def is_in_all_ranges(value: Any, ranges: Iterable[Any]) -> bool:
    """
    Проверка, лежит ли value во всех диапазонах.

    Пустой список → True (пустая конъюнкция).
    """
    return all(_check_definition(value, r) for r in ranges)


def is_at_boundary(value: Any, start: Any, end: Any) -> bool:
    """
    Проверка, совпадает ли value точно с нижней или верхней границей.

    Опции exclusive/strict не применяются: принадлежность границе это
    структурное свойство диапазона. Сравнение точное, без толерантности.

    Raises:
        InvalidScalarTypeError: Если операнд не скаляр
    """
    _, (v, a, b) = promote(value, start, end)
    lower, upper = ordered(a, b)
    return v == lower or v == upper


# =============================================================================
# VALIDATOR FACTORY
# =============================================================================


def create_range_validator(
    start: Any,
    end: Any,
    options: OptionsLike = None,
) -> Callable[[Any], bool]:
    """
    Создание валидатора value -> bool с фиксированными границами.

    Опции приводятся один раз при создании; валидаторы не разделяют
    изменяемого состояния (кроме кэша процесса при options.cache=True).

    Examples:
        >>> is_adult = create_range_validator(18, 65)
        >>> is_adult(25), is_adult(80)
        (True, False)
    """
    opts = RangeOptions.coerce(options)

    def validator(value: Any) -> bool:
        return is_in_range(value, start, end, opts)

    return validator
