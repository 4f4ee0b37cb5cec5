"""
Тесты для модуля Linear Combination

Проверяет:
1. Точность разложения (split, two_product)
2. Компенсированную сумму при сокращении
3. Совпадение с наивной формулой на "простых" данных
4. Поведение при overflow и NaN/Inf
"""

import math

import pytest

from hullkit.core.math.linear_combination import (
    linear_combination,
    linear_combination_of,
    split,
    two_product,
)

# 1 + 2^-30: квадрат не представим точно в float64
A_NEAR_ONE = 1.0 + 2.0**-30


class TestSplit:
    """Тесты для split"""

    def test_parts_sum_to_value(self) -> None:
        """high + low восстанавливает исходное значение"""
        for value in (1.0, math.pi, -123.456, 1e-300, 1e300, A_NEAR_ONE):
            high, low = split(value)
            assert high + low == value

    def test_low_part_is_small(self) -> None:
        """Младшая часть мала относительно старшей"""
        high, low = split(math.pi)
        assert abs(low) < abs(high) * 2.0**-26


class TestTwoProduct:
    """Тесты для two_product"""

    def test_exact_product_has_zero_error(self) -> None:
        """Точно представимое произведение: ошибка 0"""
        assert two_product(3.0, 5.0) == (15.0, 0.0)

    def test_rounding_error_recovered(self) -> None:
        """Ошибка округления восстанавливается точно"""
        product, error = two_product(A_NEAR_ONE, A_NEAR_ONE)
        # (1 + 2^-30)^2 = 1 + 2^-29 + 2^-60
        assert product == 1.0 + 2.0**-29
        assert error == 2.0**-60


class TestLinearCombination:
    """Тесты для linear_combination"""

    def test_simple_values(self) -> None:
        """Простые значения совпадают с наивной формулой"""
        assert linear_combination(1.0, 2.0, 3.0, 4.0) == 14.0
        assert linear_combination(-1.5, 2.0, 0.5, 4.0) == -1.0

    def test_cancellation_preserved(self) -> None:
        """Сокращение: компенсированная сумма сохраняет младшие биты"""
        naive = A_NEAR_ONE * A_NEAR_ONE - 1.0 * 1.0
        compensated = linear_combination(A_NEAR_ONE, A_NEAR_ONE, -1.0, 1.0)

        assert compensated == 2.0**-29 + 2.0**-60
        assert naive != compensated

    def test_exact_cancellation_is_zero(self) -> None:
        """Полное сокращение даёт точный ноль"""
        assert linear_combination(1e16, 1.0, -1e16, 1.0) == 0.0
        assert linear_combination(A_NEAR_ONE, 3.0, -3.0, A_NEAR_ONE) == 0.0

    def test_overflow_in_split_falls_back_to_naive(self) -> None:
        """Overflow в split → наивная формула"""
        assert linear_combination(1e305, 1.0, 0.0, 0.0) == 1e305

    def test_infinite_input(self) -> None:
        """Inf во входе → как у наивной формулы"""
        assert linear_combination(math.inf, 1.0, 1.0, 1.0) == math.inf

    def test_nan_input(self) -> None:
        """NaN во входе → NaN"""
        assert math.isnan(linear_combination(math.nan, 1.0, 1.0, 1.0))


class TestLinearCombinationOf:
    """Тесты для linear_combination_of"""

    def test_three_terms(self) -> None:
        """Три слагаемых"""
        assert linear_combination_of([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]) == 32.0

    def test_empty(self) -> None:
        """Пустые последовательности дают 0"""
        assert linear_combination_of([], []) == 0.0

    def test_length_mismatch_raises(self) -> None:
        """Разная длина → ValueError"""
        with pytest.raises(ValueError, match="length mismatch"):
            linear_combination_of([1.0, 2.0], [1.0])
