"""
Numerical Safeguards — tolerance-параметры и сравнения float

Модуль обеспечивает численную устойчивость геометрических предикатов:
- Epsilon-параметры (tolerance по умолчанию, порог переключения формул угла)
- NaN/Inf проверки
- Сравнения float с учётом tolerance (знак -1 / 0 / +1)
- Валидация параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значение в пределах tolerance от нуля всегда классифицируется как 0
2. Граница tolerance включительная: abs(diff) == tol → 0
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для общих вычислений и сравнений
# Используется как нижняя граница "ненулевого" радиуса региона
EPS_CALC: Final[float] = 1e-12

# Абсолютная толерантность для сравнения float по умолчанию
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Tolerance для hull по умолчанию: ниже этого порога поворот считается коллинеарным,
# а точки линии — совпадающими
DEFAULT_HULL_TOLERANCE: Final[float] = 1e-10

# Если |cos| угла между векторами больше этого порога, acos плохо обусловлен
# и угол вычисляется через asin векторного произведения
ANGLE_SINE_SWITCH_RATIO: Final[float] = 0.9999


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """True для конечных значений (tolerance, координаты, коэффициенты)"""
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Значение в пределах tol от нуля (граница включительная).

    Так определяется параллельность прямых: определитель направлений
    is_zero(d, line.tolerance).
    """
    return abs(value) <= tol


def compare_with_tolerance(
    a: float,
    b: float,
    tol: float = EPS_FLOAT_COMPARE_ABS,
) -> int:
    """
    Сравнение двух float с учётом толерантности.

    Используется для классификации знака поворота при проверке выпуклости:
    compare_with_tolerance(cross, 0.0, tolerance).

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        -1 если a < b (с учётом tol)
         0 если a ≈ b (в пределах tol)
        +1 если a > b (с учётом tol), а также если разность NaN

    Examples:
        >>> compare_with_tolerance(1.0, 2.0)
        -1
        >>> compare_with_tolerance(2.0, 1.0)
        1
        >>> compare_with_tolerance(1.0, 1.0 + 1e-13)
        0
    """
    diff = a - b

    if abs(diff) <= tol:
        return 0
    elif diff < 0:
        return -1
    else:
        return 1


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative(value: float, name: str) -> None:
    """
    Проверка tolerance и подобных порогов: конечное и >= 0.

    Args:
        value: Значение порога
        name: Имя параметра в сообщении об ошибке

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
