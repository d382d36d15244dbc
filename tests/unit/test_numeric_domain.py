"""
Тесты для модуля Numeric Domain

Проверяет:
1. Классификацию скаляров (int / float / не скаляр)
2. Правило продвижения в общий домен
3. Точную конверсию целочисленных float в INTEGER домен
4. Поведение при дробном float рядом с int (strict / non-strict)
5. Нормализацию границ
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from numrange.core.numeric_domain import (
    DomainMismatchError,
    InvalidScalarTypeError,
    NumericDomain,
    RangeValidationError,
    domain_of,
    is_scalar,
    normalize,
    ordered,
    promote,
)


# =============================================================================
# ТЕСТЫ КЛАССИФИКАЦИИ
# =============================================================================


class TestIsScalar:
    """Тесты для is_scalar"""

    def test_int_and_float_are_scalars(self) -> None:
        """int и float являются скалярами"""
        assert is_scalar(0)
        assert is_scalar(-7)
        assert is_scalar(10**40)
        assert is_scalar(1.5)
        assert is_scalar(-0.0)
        assert is_scalar(float("inf"))

    def test_rational_is_scalar(self) -> None:
        """numbers.Real (Fraction) принимается"""
        assert is_scalar(Fraction(1, 2))

    def test_bool_is_not_scalar(self) -> None:
        """bool не является границей диапазона"""
        assert not is_scalar(True)
        assert not is_scalar(False)

    def test_non_numeric_values_rejected(self) -> None:
        """None, строки, Decimal, контейнеры не скаляры"""
        assert not is_scalar(None)
        assert not is_scalar("10")
        assert not is_scalar(Decimal("1.5"))
        assert not is_scalar([1])
        assert not is_scalar(1 + 2j)


class TestDomainOf:
    """Тесты для domain_of"""

    def test_int_is_integer_domain(self) -> None:
        assert domain_of(10) is NumericDomain.INTEGER
        assert domain_of(10**30) is NumericDomain.INTEGER

    def test_float_is_real_domain(self) -> None:
        """Даже целочисленный float остаётся REAL"""
        assert domain_of(10.0) is NumericDomain.REAL
        assert domain_of(0.5) is NumericDomain.REAL

    def test_non_scalar_raises(self) -> None:
        with pytest.raises(InvalidScalarTypeError, match="Expected an int or float"):
            domain_of("abc")

        with pytest.raises(InvalidScalarTypeError):
            domain_of(None)


# =============================================================================
# ТЕСТЫ ПРОДВИЖЕНИЯ
# =============================================================================


class TestPromote:
    """Тесты для promote"""

    def test_all_floats_stay_real(self) -> None:
        domain, values = promote(1.5, 2.5)
        assert domain is NumericDomain.REAL
        assert values == (1.5, 2.5)

    def test_fraction_converted_to_float(self) -> None:
        domain, values = promote(Fraction(1, 4), 1.0)
        assert domain is NumericDomain.REAL
        assert values == (0.25, 1.0)
        assert all(isinstance(v, float) for v in values)

    def test_all_ints_stay_integer(self) -> None:
        domain, values = promote(10, 0, 19)
        assert domain is NumericDomain.INTEGER
        assert values == (10, 0, 19)

    def test_integral_float_promoted_exactly(self) -> None:
        """Целочисленный float рядом с int конвертируется в int"""
        domain, values = promote(10, 0.0, 19.0)
        assert domain is NumericDomain.INTEGER
        assert values == (10, 0, 19)
        assert all(isinstance(v, int) for v in values)

    def test_large_integral_float_promoted_exactly(self) -> None:
        """1e20 представим точно и конвертируется без потерь"""
        _, values = promote(10**20, 1e20)
        assert values == (10**20, 10**20)

    def test_no_narrowing_of_big_ints(self) -> None:
        """int за пределами точности float не сужается до float"""
        big = 2**53 + 1
        domain, values = promote(big, 0.0)
        assert domain is NumericDomain.INTEGER
        assert values[0] == big
        assert values[0] != float(big)

    def test_fractional_float_with_int_falls_back_to_real(self) -> None:
        """Non-strict: REAL домен, int остаётся int, усечения нет"""
        domain, values = promote(2.5, 0, 10)
        assert domain is NumericDomain.REAL
        assert values == (2.5, 0, 10)
        assert isinstance(values[1], int)

    def test_fractional_float_with_int_strict_raises(self) -> None:
        with pytest.raises(DomainMismatchError, match="non-integral float 2.5"):
            promote(2.5, 0, 10, strict=True)

    def test_infinite_float_with_int(self) -> None:
        """inf не целочисленный: REAL fallback или ошибка в strict"""
        domain, _ = promote(5, float("inf"))
        assert domain is NumericDomain.REAL

        with pytest.raises(DomainMismatchError):
            promote(5, float("inf"), strict=True)

    def test_non_scalar_operand_raises(self) -> None:
        with pytest.raises(InvalidScalarTypeError):
            promote(1, None)

        with pytest.raises(InvalidScalarTypeError):
            promote(True, 1)

    def test_errors_form_validation_hierarchy(self) -> None:
        """Иерархия ошибок совместима с ValueError/TypeError"""
        assert issubclass(InvalidScalarTypeError, RangeValidationError)
        assert issubclass(InvalidScalarTypeError, TypeError)
        assert issubclass(DomainMismatchError, RangeValidationError)
        assert issubclass(RangeValidationError, ValueError)


# =============================================================================
# ТЕСТЫ НОРМАЛИЗАЦИИ
# =============================================================================


class TestNormalize:
    """Тесты для normalize / ordered"""

    def test_sorted_input_unchanged(self) -> None:
        assert normalize(0, 19) == (0, 19)

    def test_reversed_input_sorted(self) -> None:
        assert normalize(19, 0) == (0, 19)
        assert normalize(2.5, -1.0) == (-1.0, 2.5)

    def test_degenerate_range(self) -> None:
        assert normalize(5, 5) == (5, 5)

    def test_mixed_domain_normalized_in_integer(self) -> None:
        lower, upper = normalize(19.0, 0)
        assert (lower, upper) == (0, 19)
        assert isinstance(lower, int) and isinstance(upper, int)

    def test_strict_normalize_rejects_mismatch(self) -> None:
        with pytest.raises(DomainMismatchError):
            normalize(0, 0.5, strict=True)

    def test_ordered(self) -> None:
        assert ordered(3, 1) == (1, 3)
        assert ordered(1, 3) == (1, 3)
