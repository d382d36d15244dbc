"""
Construction — Построение диапазона по набору значений

range_from_values возвращает наименьший диапазон, содержащий все значения.
Домен выбирается по всем элементам сразу: один int переводит сравнение
в INTEGER домен (целочисленные float конвертируются точно).
"""

from collections.abc import Iterable, Mapping
from typing import Any

from numrange.core.domain.range import Range
from numrange.core.numeric_domain import RangeValidationError, promote


class EmptyValuesError(RangeValidationError):
    """Набор значений пуст или не является последовательностью."""


def range_from_values(values: Iterable[Any]) -> Range:
    """
    Диапазон [min(values), max(values)].

    Args:
        values: Непустая последовательность (или iterable) скаляров

    Returns:
        Range(start=min, end=max)

    Raises:
        EmptyValuesError: Если values пуст или не последовательность
            (str/bytes/mapping не принимаются)
        InvalidScalarTypeError: Если элемент не скаляр

    Examples:
        >>> range_from_values([1, 5, 10, 3, 8, -2, 15])
        Range(start=-2, end=15)
    """
    if isinstance(values, (str, bytes, bytearray, Mapping)) or not isinstance(
        values, Iterable
    ):
        raise EmptyValuesError("Values must be a non-empty sequence")

    items = list(values)
    if not items:
        raise EmptyValuesError("Values must be a non-empty sequence")

    _, promoted = promote(*items)
    return Range(start=min(promoted), end=max(promoted))
