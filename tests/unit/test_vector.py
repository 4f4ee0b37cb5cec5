"""
Тесты для Vector2D

Проверяет:
1. Создание, фабрики и ошибки размерности
2. Immutability (frozen=True)
3. Алгебру, нормы и расстояния
4. Компенсированные dot/cross и знак векторного произведения
5. Угол между векторами (обе формулы)
6. NaN-равенство и hash
"""

import math

import pytest
from pydantic import ValidationError

from hullkit.core.domain import NAN_HASH, Vector2D
from hullkit.core.errors import DimensionMismatchError, ErrorKind, ZeroNormError


# =============================================================================
# СОЗДАНИЕ
# =============================================================================


class TestCreation:
    """Тесты создания Vector2D"""

    def test_positional_and_keyword(self) -> None:
        """Позиционные и именованные координаты"""
        v = Vector2D(1.5, -2.0)
        assert v.x == 1.5
        assert v.y == -2.0
        assert Vector2D(x=1.5, y=-2.0) == v

    def test_int_coordinates_coerced_to_float(self) -> None:
        """Целые координаты приводятся к float"""
        v = Vector2D(1, 2)
        assert isinstance(v.x, float)
        assert isinstance(v.y, float)

    def test_from_array(self) -> None:
        """Построение из массива из двух элементов"""
        assert Vector2D.from_array([3.0, 4.0]) == Vector2D(3.0, 4.0)
        assert Vector2D.from_array((3.0, 4.0)) == Vector2D(3.0, 4.0)

    @pytest.mark.parametrize("values", [[], [1.0], [1.0, 2.0, 3.0]])
    def test_from_array_dimension_mismatch(self, values: list[float]) -> None:
        """Массив длины != 2 → DimensionMismatchError"""
        with pytest.raises(DimensionMismatchError, match="Dimension mismatch") as exc_info:
            Vector2D.from_array(values)
        assert exc_info.value.kind == ErrorKind.DIMENSION_MISMATCH
        assert exc_info.value.actual == len(values)

    def test_model_validate_accepts_pair(self) -> None:
        """Pydantic-валидация принимает последовательность [x, y]"""
        assert Vector2D.model_validate([1.0, 2.0]) == Vector2D(1.0, 2.0)
        assert Vector2D.model_validate({"x": 1.0, "y": 2.0}) == Vector2D(1.0, 2.0)

    def test_model_validate_rejects_wrong_length(self) -> None:
        """Pydantic-валидация отклоняет последовательность длины != 2"""
        with pytest.raises(ValidationError, match="Dimension mismatch"):
            Vector2D.model_validate([1.0, 2.0, 3.0])

    def test_immutable(self) -> None:
        """Vector2D должен быть immutable (frozen=True)"""
        v = Vector2D(1.0, 2.0)
        with pytest.raises(ValidationError):
            v.x = 3.0  # type: ignore

    def test_from_linear_combination(self) -> None:
        """Линейная комбинация от 1 до 4 пар"""
        u1 = Vector2D(1.0, 0.0)
        u2 = Vector2D(0.0, 1.0)
        assert Vector2D.from_linear_combination(2.0, u1) == Vector2D(2.0, 0.0)
        assert Vector2D.from_linear_combination(2.0, u1, 3.0, u2) == Vector2D(2.0, 3.0)
        assert Vector2D.from_linear_combination(1.0, u1, 1.0, u2, -1.0, u1, 2.0, u2) == Vector2D(
            0.0, 3.0
        )

    def test_from_linear_combination_invalid_arity(self) -> None:
        """Неполная пара или более 4 пар → ValueError"""
        u = Vector2D(1.0, 1.0)
        with pytest.raises(ValueError, match="pairs"):
            Vector2D.from_linear_combination(2.0)
        with pytest.raises(ValueError, match="pairs"):
            Vector2D.from_linear_combination(*([1.0, u] * 5))

    def test_sentinels(self) -> None:
        """Константы ZERO, NAN, POSITIVE_INFINITY, NEGATIVE_INFINITY"""
        assert Vector2D.ZERO == Vector2D(0.0, 0.0)
        assert Vector2D.NAN.is_nan()
        assert Vector2D.POSITIVE_INFINITY == Vector2D(math.inf, math.inf)
        assert Vector2D.NEGATIVE_INFINITY == Vector2D(-math.inf, -math.inf)
        assert Vector2D(5.0, 5.0).zero() is Vector2D.ZERO

    def test_to_array_is_copy(self) -> None:
        """to_array возвращает новый список"""
        v = Vector2D(1.0, 2.0)
        arr = v.to_array()
        arr[0] = 99.0
        assert v.to_array() == [1.0, 2.0]


# =============================================================================
# АЛГЕБРА
# =============================================================================


class TestAlgebra:
    """Тесты арифметики"""

    @pytest.fixture
    def a(self) -> Vector2D:
        return Vector2D(1.5, -2.25)

    @pytest.fixture
    def b(self) -> Vector2D:
        return Vector2D(0.5, 4.0)

    def test_add_subtract(self, a: Vector2D, b: Vector2D) -> None:
        """Покомпонентные сумма и разность"""
        assert a.add(b) == Vector2D(2.0, 1.75)
        assert a.subtract(b) == Vector2D(1.0, -6.25)

    def test_add_then_subtract_round_trip(self, a: Vector2D, b: Vector2D) -> None:
        """a + b - b == a"""
        assert a.add(b).subtract(b) == a

    def test_scaled_add_subtract(self, a: Vector2D, b: Vector2D) -> None:
        """self ± factor * v"""
        assert a.add(b, 2.0) == Vector2D(2.5, 5.75)
        assert a.subtract(b, 2.0) == Vector2D(0.5, -10.25)

    def test_scalar_multiply_and_negate(self, a: Vector2D) -> None:
        """Масштаб и смена знака"""
        assert a.scalar_multiply(2.0) == Vector2D(3.0, -4.5)
        assert a.negate() == Vector2D(-1.5, 2.25)

    def test_operators(self, a: Vector2D, b: Vector2D) -> None:
        """Операторы +, -, унарный -, * скаляр"""
        assert a + b == a.add(b)
        assert a - b == a.subtract(b)
        assert -a == a.negate()
        assert 2.0 * a == a.scalar_multiply(2.0)
        assert a * 2 == a.scalar_multiply(2.0)

    def test_operators_reject_non_vectors(self, a: Vector2D) -> None:
        """Смешивание со скаляром в + → TypeError"""
        with pytest.raises(TypeError):
            a + 1.0  # type: ignore
        with pytest.raises(TypeError):
            a * a  # type: ignore

    def test_operations_return_new_instances(self, a: Vector2D) -> None:
        """Операции не изменяют исходный вектор"""
        a.add(Vector2D(1.0, 1.0))
        a.negate()
        assert a == Vector2D(1.5, -2.25)


# =============================================================================
# НОРМЫ
# =============================================================================


class TestNorms:
    """Тесты норм и нормализации"""

    def test_norms(self) -> None:
        """L2, L1, L∞ и квадрат L2"""
        v = Vector2D(3.0, -4.0)
        assert v.norm() == 5.0
        assert v.norm1() == 7.0
        assert v.norm_inf() == 4.0
        assert v.norm_sq() == 25.0

    def test_normalize(self) -> None:
        """Единичный вектор"""
        u = Vector2D(3.0, 4.0).normalize()
        assert u.x == pytest.approx(0.6)
        assert u.y == pytest.approx(0.8)
        assert u.norm() == pytest.approx(1.0)

    def test_normalize_zero_raises(self) -> None:
        """Нормализация нулевого вектора → ZeroNormError"""
        with pytest.raises(ZeroNormError, match="Norm is zero") as exc_info:
            Vector2D.ZERO.normalize()
        assert exc_info.value.kind == ErrorKind.ZERO_NORM


# =============================================================================
# СКАЛЯРНОЕ И ВЕКТОРНОЕ ПРОИЗВЕДЕНИЯ
# =============================================================================


class TestProducts:
    """Тесты dot и cross"""

    def test_dot(self) -> None:
        """Скалярное произведение"""
        assert Vector2D(1.0, 2.0).dot(Vector2D(3.0, 4.0)) == 11.0
        assert Vector2D(1.0, 0.0).dot(Vector2D(0.0, 1.0)) == 0.0

    def test_dot_compensated(self) -> None:
        """Сокращение в dot не теряет младшие биты"""
        a = 1.0 + 2.0**-30
        assert Vector2D(a, -1.0).dot(Vector2D(a, 1.0)) == 2.0**-29 + 2.0**-60

    def test_cross_left_is_positive(self) -> None:
        """Точка слева от p1 → p2 даёт положительное произведение"""
        p1 = Vector2D(0.0, 0.0)
        p2 = Vector2D(1.0, 0.0)
        assert Vector2D(0.0, 1.0).cross(p1, p2) > 0
        assert Vector2D(0.0, 1.0).cross(p1, p2) == 1.0

    def test_cross_right_is_negative(self) -> None:
        """Точка справа → отрицательное произведение"""
        assert Vector2D(0.0, -1.0).cross(Vector2D(0.0, 0.0), Vector2D(1.0, 0.0)) < 0

    def test_cross_collinear_is_zero(self) -> None:
        """Коллинеарная точка → 0"""
        assert Vector2D(2.0, 2.0).cross(Vector2D(0.0, 0.0), Vector2D(1.0, 1.0)) == 0.0


# =============================================================================
# УГОЛ
# =============================================================================


class TestAngle:
    """Тесты для Vector2D.angle"""

    def test_same_vector_is_zero(self) -> None:
        """Угол вектора с самим собой — 0"""
        v = Vector2D(3.0, -7.0)
        assert Vector2D.angle(v, v) == 0.0

    def test_opposite_vector_is_pi(self) -> None:
        """Угол с противоположным вектором — π"""
        v = Vector2D(3.0, -7.0)
        assert Vector2D.angle(v, v.negate()) == pytest.approx(math.pi)

    def test_orthogonal(self) -> None:
        """Ортогональные векторы — π/2"""
        assert Vector2D.angle(Vector2D(1.0, 0.0), Vector2D(0.0, 2.0)) == pytest.approx(
            math.pi / 2
        )

    def test_diagonal(self) -> None:
        """45 и 135 градусов"""
        x = Vector2D(1.0, 0.0)
        assert Vector2D.angle(x, Vector2D(1.0, 1.0)) == pytest.approx(math.pi / 4)
        assert Vector2D.angle(x, Vector2D(-1.0, 1.0)) == pytest.approx(3 * math.pi / 4)

    def test_nearly_parallel_uses_sine(self) -> None:
        """Почти параллельные векторы: малый угол вычисляется точно"""
        angle = Vector2D.angle(Vector2D(1.0, 0.0), Vector2D(1.0, 1e-9))
        assert angle == pytest.approx(1e-9, rel=1e-6)

    def test_nearly_antiparallel_uses_sine(self) -> None:
        """Почти противоположные векторы: угол близок к π"""
        angle = Vector2D.angle(Vector2D(1.0, 0.0), Vector2D(-1.0, 1e-9))
        assert math.pi - angle == pytest.approx(1e-9, rel=1e-5)

    def test_symmetric(self) -> None:
        """angle(a, b) == angle(b, a)"""
        a = Vector2D(2.0, 1.0)
        b = Vector2D(-1.0, 3.0)
        assert Vector2D.angle(a, b) == pytest.approx(Vector2D.angle(b, a))

    def test_zero_norm_raises(self) -> None:
        """Нулевой вектор → ZeroNormError"""
        with pytest.raises(ZeroNormError):
            Vector2D.angle(Vector2D.ZERO, Vector2D(1.0, 0.0))
        with pytest.raises(ZeroNormError):
            Vector2D.angle(Vector2D(1.0, 0.0), Vector2D.ZERO)


# =============================================================================
# РАССТОЯНИЯ
# =============================================================================


class TestDistances:
    """Тесты расстояний"""

    @pytest.fixture
    def p1(self) -> Vector2D:
        return Vector2D(1.0, 2.0)

    @pytest.fixture
    def p2(self) -> Vector2D:
        return Vector2D(4.0, -2.0)

    def test_values(self, p1: Vector2D, p2: Vector2D) -> None:
        """L2, L1, L∞ и квадрат L2"""
        assert p1.distance(p2) == 5.0
        assert p1.distance1(p2) == 7.0
        assert p1.distance_inf(p2) == 4.0
        assert p1.distance_sq(p2) == 25.0

    def test_symmetric(self, p1: Vector2D, p2: Vector2D) -> None:
        """distance(p1, p2) == distance(p2, p1)"""
        assert p1.distance(p2) == p2.distance(p1)
        assert p1.distance1(p2) == p2.distance1(p1)
        assert p1.distance_inf(p2) == p2.distance_inf(p1)

    def test_static_form_identical(self) -> None:
        """Vector2D.distance(a, b) численно идентичен a.distance(b)"""
        a = Vector2D(0.1, 0.7)
        b = Vector2D(-3.3, 1e-3)
        assert Vector2D.distance(a, b) == a.distance(b)
        assert Vector2D.distance1(a, b) == a.distance1(b)
        assert Vector2D.distance_inf(a, b) == a.distance_inf(b)
        assert Vector2D.distance_sq(a, b) == a.distance_sq(b)

    def test_distance_sq_matches_square(self) -> None:
        """distance_sq ≈ distance²"""
        a = Vector2D(0.1, 0.7)
        b = Vector2D(-3.3, 1e-3)
        assert a.distance_sq(b) == pytest.approx(a.distance(b) ** 2)


# =============================================================================
# КЛАССИФИКАЦИЯ, РАВЕНСТВО, HASH
# =============================================================================


class TestEqualityAndHash:
    """Тесты NaN/Inf классификации, равенства и hash"""

    def test_is_nan(self) -> None:
        """NaN в любой координате"""
        assert Vector2D(math.nan, 1.0).is_nan()
        assert Vector2D(1.0, math.nan).is_nan()
        assert not Vector2D(1.0, 1.0).is_nan()

    def test_is_infinite(self) -> None:
        """Inf без NaN; NaN доминирует"""
        assert Vector2D(math.inf, 0.0).is_infinite()
        assert Vector2D(0.0, -math.inf).is_infinite()
        assert not Vector2D(math.inf, math.nan).is_infinite()
        assert not Vector2D(1.0, 1.0).is_infinite()

    def test_any_nan_equals_canonical_nan(self) -> None:
        """Любой NaN-вектор равен Vector2D.NAN и имеет его hash"""
        for v in (Vector2D(math.nan, 1.0), Vector2D(2.0, math.nan), Vector2D(math.nan, math.nan)):
            assert v == Vector2D.NAN
            assert Vector2D.NAN == v
            assert hash(v) == hash(Vector2D.NAN) == NAN_HASH

    def test_nan_not_equal_to_regular(self) -> None:
        """NaN не равен обычному вектору"""
        assert Vector2D(math.nan, 1.0) != Vector2D(1.0, 1.0)
        assert Vector2D(1.0, 1.0) != Vector2D(1.0, math.nan)

    def test_regular_equality_and_hash(self) -> None:
        """Равные координаты → равны и одинаковый hash"""
        assert Vector2D(1.0, 2.0) == Vector2D(1.0, 2.0)
        assert hash(Vector2D(1.0, 2.0)) == hash(Vector2D(1.0, 2.0))
        assert Vector2D(1.0, 2.0) != Vector2D(2.0, 1.0)

    def test_usable_as_dict_key(self) -> None:
        """Дедупликация через set"""
        points = {Vector2D(1.0, 2.0), Vector2D(1.0, 2.0), Vector2D(math.nan, 0.0), Vector2D.NAN}
        assert len(points) == 2

    def test_not_equal_to_other_types(self) -> None:
        """Сравнение с другими типами"""
        assert Vector2D(1.0, 2.0) != (1.0, 2.0)


class TestFormatting:
    """Тесты строкового представления"""

    def test_str(self) -> None:
        """Формат {x; y}"""
        assert str(Vector2D(1.0, 0.5)) == "{1; 0.5}"

    def test_format_spec(self) -> None:
        """Пользовательский format spec"""
        assert Vector2D(1.0, 0.5).format(".2f") == "{1.00; 0.50}"
