"""
Vector2D — неизменяемый 2D вектор/точка и его алгебра

Immutable Pydantic модель (frozen=True). Один тип играет две роли:
- свободный вектор (направление, смещение)
- точка (радиус-вектор от фиксированного начала координат)

Все операции чистые и возвращают новые экземпляры.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любой экземпляр с NaN координатой — это канонический NaN:
   он равен Vector2D.NAN и имеет тот же hash (NAN_HASH)
2. dot() и cross() вычисляются через компенсированную сумму произведений,
   поэтому знак поворота надёжен вблизи нуля
3. Vector2D.distance(a, b) и a.distance(b) — один и тот же путь вычисления
"""

import math
from typing import Any, ClassVar, Final, Sequence

from pydantic import BaseModel, Field, model_validator

from hullkit.core.errors import DimensionMismatchError, ZeroNormError
from hullkit.core.math.linear_combination import linear_combination
from hullkit.core.math.numerical_safeguards import ANGLE_SINE_SWITCH_RATIO

# Общий hash всех NaN-векторов
NAN_HASH: Final[int] = 542

# Максимальное число пар (коэффициент, вектор) в from_linear_combination
MAX_COMBINATION_TERMS: Final[int] = 4


class Vector2D(BaseModel):
    """
    Вектор (или точка) на плоскости.

    Immutable модель (frozen=True). Конструктор принимает координаты
    позиционно: Vector2D(1.0, 2.0). При валидации вложенных полей pydantic
    также принимает последовательность из двух чисел.
    """

    x: float = Field(..., description="Абсцисса")
    y: float = Field(..., description="Ордината")

    model_config = {"frozen": True}

    ZERO: ClassVar["Vector2D"]
    NAN: ClassVar["Vector2D"]
    POSITIVE_INFINITY: ClassVar["Vector2D"]
    NEGATIVE_INFINITY: ClassVar["Vector2D"]

    def __init__(self, x: float, y: float) -> None:
        super().__init__(x=x, y=y)

    @model_validator(mode="before")
    @classmethod
    def coerce_coordinate_pair(cls, data: Any) -> Any:
        """Последовательность [x, y] → {"x": x, "y": y}; другая длина — ошибка размерности"""
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise DimensionMismatchError(len(data))
            return {"x": data[0], "y": data[1]}
        return data

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "Vector2D":
        """
        Построение вектора из массива координат.

        Args:
            values: Массив [x, y]

        Returns:
            Новый вектор

        Raises:
            DimensionMismatchError: Если длина массива != 2
        """
        if len(values) != 2:
            raise DimensionMismatchError(len(values))
        return cls(values[0], values[1])

    @classmethod
    def from_linear_combination(cls, *terms: Any) -> "Vector2D":
        """
        Линейная комбинация a1 * u1 + a2 * u2 + ... (от 1 до 4 пар).

        Examples:
            >>> Vector2D.from_linear_combination(2.0, Vector2D(1.0, 0.0), 3.0, Vector2D(0.0, 1.0))
            Vector2D(x=2.0, y=3.0)

        Raises:
            ValueError: Если аргументы не образуют от 1 до 4 пар
        """
        if len(terms) % 2 != 0 or not 2 <= len(terms) <= 2 * MAX_COMBINATION_TERMS:
            raise ValueError(
                f"expected 1 to {MAX_COMBINATION_TERMS} (factor, vector) pairs, "
                f"got {len(terms)} arguments"
            )
        factors = terms[0::2]
        vectors = terms[1::2]
        return cls(
            sum(a * u.x for a, u in zip(factors, vectors)),
            sum(a * u.y for a, u in zip(factors, vectors)),
        )

    def zero(self) -> "Vector2D":
        """Нулевой вектор того же пространства"""
        return Vector2D.ZERO

    def to_array(self) -> list[float]:
        """Координаты как новый список [x, y]"""
        return [self.x, self.y]

    # =========================================================================
    # НОРМЫ
    # =========================================================================

    def norm(self) -> float:
        """Евклидова норма (L2)"""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def norm1(self) -> float:
        """Норма L1 (сумма модулей)"""
        return abs(self.x) + abs(self.y)

    def norm_inf(self) -> float:
        """Норма L∞ (максимум модулей)"""
        return max(abs(self.x), abs(self.y))

    def norm_sq(self) -> float:
        """Квадрат нормы L2, без извлечения корня"""
        return self.x * self.x + self.y * self.y

    # =========================================================================
    # АЛГЕБРА
    # =========================================================================

    def add(self, v: "Vector2D", factor: float = 1.0) -> "Vector2D":
        """
        Сумма self + factor * v.

        Args:
            v: Прибавляемый вектор
            factor: Масштаб прибавляемого вектора (default: 1.0)
        """
        return Vector2D(self.x + factor * v.x, self.y + factor * v.y)

    def subtract(self, v: "Vector2D", factor: float = 1.0) -> "Vector2D":
        """
        Разность self - factor * v.

        Args:
            v: Вычитаемый вектор
            factor: Масштаб вычитаемого вектора (default: 1.0)
        """
        return Vector2D(self.x - factor * v.x, self.y - factor * v.y)

    def scalar_multiply(self, a: float) -> "Vector2D":
        return Vector2D(a * self.x, a * self.y)

    def negate(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def normalize(self) -> "Vector2D":
        """
        Единичный вектор того же направления.

        Raises:
            ZeroNormError: Если норма равна 0
        """
        s = self.norm()
        if s == 0:
            raise ZeroNormError()
        return self.scalar_multiply(1 / s)

    def dot(self, v: "Vector2D") -> float:
        """Скалярное произведение (компенсированная сумма x1*x2 + y1*y2)"""
        return linear_combination(self.x, v.x, self.y, v.y)

    def cross(self, p1: "Vector2D", p2: "Vector2D") -> float:
        """
        Векторное произведение (p2 - p1) x (self - p1).

        Знак:
        - > 0: self лежит слева от направленной прямой p1 → p2
        - = 0: self коллинеарна p1, p2
        - < 0: self лежит справа

        Args:
            p1: Начало направленной прямой
            p2: Конец направленной прямой

        Returns:
            (p2.x - p1.x) * (self.y - p1.y) - (p2.y - p1.y) * (self.x - p1.x)
        """
        x1 = p2.x - p1.x
        y1 = self.y - p1.y
        x2 = self.x - p1.x
        y2 = p2.y - p1.y
        return linear_combination(x1, y1, -x2, y2)

    @staticmethod
    def angle(v1: "Vector2D", v2: "Vector2D") -> float:
        """
        Угол между векторами в диапазоне [0, π].

        Вблизи 0 и π функция acos плохо обусловлена, поэтому при
        |cos| > ANGLE_SINE_SWITCH_RATIO угол вычисляется через asin
        модуля векторного произведения.

        Raises:
            ZeroNormError: Если норма любого из векторов равна 0
        """
        norm_product = v1.norm() * v2.norm()
        if norm_product == 0:
            raise ZeroNormError()

        dot = v1.dot(v2)
        threshold = norm_product * ANGLE_SINE_SWITCH_RATIO
        if dot < -threshold or dot > threshold:
            # почти коллинеарные векторы: через синус
            n = abs(linear_combination(v1.x, v2.y, -v1.y, v2.x))
            if dot >= 0:
                return math.asin(n / norm_product)
            return math.pi - math.asin(n / norm_product)

        return math.acos(dot / norm_product)

    # =========================================================================
    # РАССТОЯНИЯ
    # =========================================================================
    # Вызов через класс (Vector2D.distance(p1, p2)) — статическая форма,
    # численно идентичная p1.distance(p2).

    def distance(self, p: "Vector2D") -> float:
        """Евклидово расстояние (L2)"""
        dx = p.x - self.x
        dy = p.y - self.y
        return math.sqrt(dx * dx + dy * dy)

    def distance1(self, p: "Vector2D") -> float:
        """Расстояние L1"""
        return abs(p.x - self.x) + abs(p.y - self.y)

    def distance_inf(self, p: "Vector2D") -> float:
        """Расстояние L∞"""
        return max(abs(p.x - self.x), abs(p.y - self.y))

    def distance_sq(self, p: "Vector2D") -> float:
        """Квадрат евклидова расстояния"""
        dx = p.x - self.x
        dy = p.y - self.y
        return dx * dx + dy * dy

    # =========================================================================
    # КЛАССИФИКАЦИЯ
    # =========================================================================

    def is_nan(self) -> bool:
        """True если хотя бы одна координата NaN"""
        return math.isnan(self.x) or math.isnan(self.y)

    def is_infinite(self) -> bool:
        """True если вектор не NaN и хотя бы одна координата бесконечна"""
        return not self.is_nan() and (math.isinf(self.x) or math.isinf(self.y))

    # =========================================================================
    # ОПЕРАТОРЫ, РАВЕНСТВО, ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def __add__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Vector2D":
        return self.negate()

    def __mul__(self, a: float) -> "Vector2D":
        if not isinstance(a, (int, float)):
            return NotImplemented
        return self.scalar_multiply(a)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Vector2D):
            return NotImplemented
        # NaN классифицируется до сравнения координат
        if other.is_nan():
            return self.is_nan()
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        if self.is_nan():
            return NAN_HASH
        return hash((self.x, self.y))

    def format(self, spec: str = "g") -> str:
        """
        Представление "{x; y}" с заданным format spec.

        Examples:
            >>> Vector2D(1.0, 0.5).format(".2f")
            '{1.00; 0.50}'
        """
        return "{" + format(self.x, spec) + "; " + format(self.y, spec) + "}"

    def __str__(self) -> str:
        return self.format()


Vector2D.ZERO = Vector2D(0.0, 0.0)
Vector2D.NAN = Vector2D(math.nan, math.nan)
Vector2D.POSITIVE_INFINITY = Vector2D(math.inf, math.inf)
Vector2D.NEGATIVE_INFINITY = Vector2D(-math.inf, -math.inf)
