"""
Set Algebra — Операции над парами диапазонов

Модуль реализует:
- ranges_overlap: пересекаются ли диапазоны (касание считается пересечением
  только в inclusive режиме)
- range_intersection: общий поддиапазон или None
- range_union: ограничивающая оболочка (convex hull) двух диапазонов
- range_contains: вложенность одного диапазона в другой

ВАЖНО: range_union НЕ является объединением множеств. Для непересекающихся
диапазонов [0, 1] и [5, 6] результат [0, 6] включает промежуток (1, 5).

Каждая запись нормализуется; домен выбирается по всем четырём границам.
"""

from collections.abc import Mapping
from typing import Any, Optional, Union

from numrange.core.domain.options import RangeOptions
from numrange.core.domain.range import Range, RangeLike, as_range
from numrange.core.numeric_domain import Scalar, ordered, promote

Bounds = tuple[Scalar, Scalar, Scalar, Scalar]


def _bounds(range1: RangeLike, range2: RangeLike, strict: bool = False) -> Bounds:
    """(lower1, upper1, lower2, upper2) в общем домене."""
    r1 = as_range(range1)
    r2 = as_range(range2)
    _, (s1, e1, s2, e2) = promote(r1.start, r1.end, r2.start, r2.end, strict=strict)
    lower1, upper1 = ordered(s1, e1)
    lower2, upper2 = ordered(s2, e2)
    return lower1, upper1, lower2, upper2


def ranges_overlap(
    range1: RangeLike,
    range2: RangeLike,
    options: Union[RangeOptions, Mapping[str, Any], None] = None,
) -> bool:
    """
    Проверка пересечения двух диапазонов.

    Inclusive: lower1 <= upper2 и lower2 <= upper1 (касание = пересечение).
    Exclusive: строгие неравенства (общая граница не считается).

    Examples:
        >>> ranges_overlap((0, 10), (10, 20))
        True
        >>> ranges_overlap((0, 10), (10, 20), {"exclusive": True})
        False
    """
    opts = RangeOptions.coerce(options)
    lower1, upper1, lower2, upper2 = _bounds(range1, range2, opts.strict)

    if opts.exclusive:
        return lower1 < upper2 and lower2 < upper1
    return lower1 <= upper2 and lower2 <= upper1


def range_intersection(range1: RangeLike, range2: RangeLike) -> Optional[Range]:
    """
    Пересечение двух диапазонов.

    Returns:
        Range(max(lower1, lower2), min(upper1, upper2)) или None,
        если диапазоны не пересекаются (inclusive тест)

    Examples:
        >>> range_intersection((0, 10), (5, 15))
        Range(start=5, end=10)
        >>> range_intersection((0, 10), (20, 30)) is None
        True
    """
    lower1, upper1, lower2, upper2 = _bounds(range1, range2)

    if not (lower1 <= upper2 and lower2 <= upper1):
        return None

    return Range(start=max(lower1, lower2), end=min(upper1, upper2))


def range_union(range1: RangeLike, range2: RangeLike) -> Range:
    """
    Ограничивающая оболочка двух диапазонов.

    Возвращает Range(min(lower1, lower2), max(upper1, upper2)) безусловно,
    в том числе для непересекающихся диапазонов.

    Examples:
        >>> range_union((0, 5), (10, 15))
        Range(start=0, end=15)
    """
    lower1, upper1, lower2, upper2 = _bounds(range1, range2)
    return Range(start=min(lower1, lower2), end=max(upper1, upper2))


range_envelope = range_union


def range_contains(
    outer_range: RangeLike,
    inner_range: RangeLike,
    options: Union[RangeOptions, Mapping[str, Any], None] = None,
) -> bool:
    """
    Проверка вложенности inner_range в outer_range.

    Inclusive: outer_lower <= inner_lower и inner_upper <= outer_upper
    (одинаковые диапазоны вложены друг в друга).
    Exclusive: строгие неравенства на обоих концах.

    Examples:
        >>> range_contains((0, 20), (5, 15))
        True
        >>> range_contains((0, 10), (0, 10), {"exclusive": True})
        False
    """
    opts = RangeOptions.coerce(options)
    outer_lower, outer_upper, inner_lower, inner_upper = _bounds(
        outer_range, inner_range, opts.strict
    )

    if opts.exclusive:
        return outer_lower < inner_lower and inner_upper < outer_upper
    return outer_lower <= inner_lower and inner_upper <= outer_upper
