"""
Linear Combination — компенсированное вычисление суммы произведений

Наивное a1*b1 + a2*b2 теряет точность при сокращении (cancellation), когда
слагаемые близки по модулю и противоположны по знаку. Именно это происходит
в векторном произведении почти коллинеарных векторов, поэтому знак поворота
при проверке выпуклости hull вычисляется здесь.

Алгоритм:
1. Каждое произведение раскладывается без ошибки (Dekker two-product):
   a * b = p + e, где p = fl(a * b), e — точная ошибка округления.
   Разбиение операндов — Veltkamp split с множителем 2^27 + 1.
2. Все компоненты (p_i, e_i) суммируются через math.fsum (точное округление).
3. Если компоненты не конечны (overflow в split), возвращается наивная сумма.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат для конечных входов без overflow — корректно округлённая сумма
2. NaN/Inf во входах дают тот же результат, что и наивная формула
"""

import math
from typing import Final, Sequence

# Множитель Veltkamp split для float64: 2^27 + 1
SPLIT_FACTOR: Final[float] = 134217729.0


def split(value: float) -> tuple[float, float]:
    """
    Veltkamp split: value = high + low, где high содержит старшие 26 бит мантиссы.

    Args:
        value: Исходное значение

    Returns:
        (high, low)
    """
    c = SPLIT_FACTOR * value
    high = c - (c - value)
    return high, value - high


def two_product(a: float, b: float) -> tuple[float, float]:
    """
    Точное произведение (Dekker): a * b = product + error.

    Args:
        a: Первый множитель
        b: Второй множитель

    Returns:
        (product, error), где product = fl(a * b)

    Examples:
        >>> two_product(3.0, 5.0)
        (15.0, 0.0)
    """
    product = a * b
    a_high, a_low = split(a)
    b_high, b_low = split(b)
    error = a_low * b_low - (((product - a_high * b_high) - a_low * b_high) - a_high * b_low)
    return product, error


def linear_combination_of(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Компенсированное вычисление Σ a[i] * b[i].

    Args:
        a: Коэффициенты
        b: Множители (той же длины)

    Returns:
        Сумма произведений

    Raises:
        ValueError: Если длины последовательностей различаются
    """
    if len(a) != len(b):
        raise ValueError(f"length mismatch: {len(a)} != {len(b)}")

    naive = sum(x * y for x, y in zip(a, b))

    terms: list[float] = []
    for x, y in zip(a, b):
        terms.extend(two_product(x, y))

    if not all(math.isfinite(t) for t in terms):
        return naive

    try:
        return math.fsum(terms)
    except OverflowError:
        return naive


def linear_combination(a1: float, b1: float, a2: float, b2: float) -> float:
    """
    Компенсированное вычисление a1 * b1 + a2 * b2.

    Examples:
        >>> linear_combination(1.0, 2.0, 3.0, 4.0)
        14.0
        >>> linear_combination(1e16, 1.0, -1e16, 1.0)
        0.0
    """
    return linear_combination_of((a1, a2), (b1, b2))
