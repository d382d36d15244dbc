"""
RangeValue — Вызов в стиле метода скаляра

value.is_in_range(start, end) для int и float без расширения встроенных
типов: обёртка делегирует общим свободным функциям, логика не дублируется
между доменами.
"""

from dataclasses import dataclass
from typing import Any

from numrange.core.math.containment import OptionsLike, is_at_boundary, is_in_range
from numrange.core.math.measurement import clamp_to_range, distance_to_range
from numrange.core.numeric_domain import NumericDomain, Scalar, domain_of


@dataclass(frozen=True)
class RangeValue:
    """Скаляр с методами проверки диапазона."""

    value: Scalar

    def __post_init__(self) -> None:
        # Проверка типа на входе
        domain_of(self.value)

    @property
    def domain(self) -> NumericDomain:
        return domain_of(self.value)

    def is_in_range(self, start: Any, end: Any, options: OptionsLike = None) -> bool:
        return is_in_range(self.value, start, end, options)

    def is_at_boundary(self, start: Any, end: Any) -> bool:
        return is_at_boundary(self.value, start, end)

    def distance_to(self, start: Any, end: Any) -> Scalar:
        return distance_to_range(self.value, start, end)

    def clamp_to(self, start: Any, end: Any) -> Scalar:
        return clamp_to_range(self.value, start, end)
