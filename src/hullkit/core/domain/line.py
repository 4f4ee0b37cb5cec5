"""
Line / Segment — направленная прямая с tolerance и отрезок границы

Line задаёт полуплоскость: "внутренняя" сторона — слева от направления.
Offset точки — знаковое расстояние до прямой:
- offset < 0: точка слева (внутри полуплоскости)
- offset = 0: точка на прямой
- offset > 0: точка справа (снаружи)

Представление: origin (точка на прямой), direction (единичный вектор),
tolerance (порог принадлежности точки прямой).
"""

import math
from dataclasses import dataclass
from typing import Optional

from hullkit.core.errors import DegenerateLineError
from hullkit.core.math.linear_combination import linear_combination
from hullkit.core.math.numerical_safeguards import is_zero
from hullkit.core.domain.vector import Vector2D


# =============================================================================
# LINE
# =============================================================================


@dataclass(frozen=True)
class Line:
    """Направленная прямая на плоскости."""

    origin: Vector2D  # Точка, через которую проходит прямая
    direction: Vector2D  # Единичный вектор направления
    tolerance: float  # Порог принадлежности точки прямой

    @classmethod
    def from_points(cls, p1: Vector2D, p2: Vector2D, tolerance: float) -> "Line":
        """
        Прямая через две точки, направленная от p1 к p2.

        Args:
            p1: Первая точка
            p2: Вторая точка
            tolerance: Порог совпадения точек

        Returns:
            Новая прямая

        Raises:
            DegenerateLineError: Если точки совпадают в пределах tolerance
        """
        if not p1.distance(p2) > tolerance:
            raise DegenerateLineError(
                f"Cannot build a line through {p1} and {p2}: "
                f"points coincide within tolerance {tolerance}"
            )
        return cls(origin=p1, direction=p2.subtract(p1).normalize(), tolerance=tolerance)

    @property
    def angle(self) -> float:
        """Угол направления в диапазоне [0, 2π)"""
        angle = math.atan2(self.direction.y, self.direction.x)
        if angle < 0:
            angle += 2 * math.pi
        return angle

    @property
    def origin_offset(self) -> float:
        """Offset начала координат"""
        return linear_combination(
            self.direction.x, self.origin.y, -self.direction.y, self.origin.x
        )

    def offset(self, point: Vector2D) -> float:
        """
        Знаковое расстояние от точки до прямой.

        Returns:
            < 0 слева (внутри), > 0 справа (снаружи)
        """
        return (
            linear_combination(self.direction.y, point.x, -self.direction.x, point.y)
            + self.origin_offset
        )

    def contains(self, point: Vector2D) -> bool:
        """True если точка лежит на прямой в пределах tolerance"""
        return abs(self.offset(point)) <= self.tolerance

    def halfspace(self) -> tuple[float, float, float]:
        """
        Коэффициенты полуплоскости (a, b, c): внутренняя сторона a*x + b*y + c <= 0.

        (a, b) — единичная внешняя нормаль.
        """
        return (self.direction.y, -self.direction.x, self.origin_offset)

    def reverse(self) -> "Line":
        """Та же прямая с противоположным направлением (стороны меняются местами)"""
        return Line(origin=self.origin, direction=self.direction.negate(), tolerance=self.tolerance)

    def intersection(self, other: "Line") -> Optional[Vector2D]:
        """
        Точка пересечения двух прямых.

        Returns:
            Точка пересечения или None, если прямые параллельны в пределах tolerance
        """
        d = linear_combination(
            self.direction.x, other.direction.y, -self.direction.y, other.direction.x
        )
        if is_zero(d, self.tolerance):
            return None

        delta = other.origin.subtract(self.origin)
        t = linear_combination(delta.x, other.direction.y, -delta.y, other.direction.x) / d
        return self.origin.add(self.direction, t)


# =============================================================================
# SEGMENT
# =============================================================================


@dataclass(frozen=True)
class Segment:
    """Отрезок границы: начало, конец и несущая прямая."""

    start: Vector2D
    end: Vector2D
    line: Line

    @classmethod
    def from_points(cls, start: Vector2D, end: Vector2D, tolerance: float) -> "Segment":
        """
        Отрезок start → end с несущей прямой, построенной с той же tolerance.

        Raises:
            DegenerateLineError: Если start и end совпадают в пределах tolerance
        """
        return cls(start=start, end=end, line=Line.from_points(start, end, tolerance))

    def length(self) -> float:
        return self.start.distance(self.end)

    def distance(self, point: Vector2D) -> float:
        """
        Расстояние от точки до замкнутого отрезка.

        Если проекция точки попадает внутрь отрезка — расстояние до прямой,
        иначе — до ближайшего конца.
        """
        delta = self.end.subtract(self.start)
        length_sq = delta.norm_sq()
        if length_sq == 0:
            return self.start.distance(point)

        r = point.subtract(self.start).dot(delta) / length_sq
        if r < 0:
            return self.start.distance(point)
        if r > 1:
            return self.end.distance(point)
        return abs(self.line.offset(point))
