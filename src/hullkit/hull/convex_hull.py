"""
ConvexHull2D — проверенная выпуклая оболочка на плоскости

Immutable Pydantic модель (frozen=True), владеющая:
- упорядоченными вершинами (CCW обход)
- tolerance для всех сравнений знака при проверке и построении рёбер
- лениво вычисляемым кэшем отрезков границы (не часть identity)

Конструктор — единственная точка валидации: невалидная последовательность
вершин никогда не даёт живой экземпляр.

Проверка (один проход O(n)):
    для каждой вершины i: d1 = v[i] - v[i-1], d2 = v[i+1] - v[i] (по модулю n)
    turn = d1.x * d2.y - d1.y * d2.x   (компенсированная сумма)
    sign = compare_with_tolerance(turn, 0, tolerance)
- Поворот в пределах tolerance — коллинеарный (0) и ни с чем не конфликтует
- Первый ненулевой знак фиксируется; ненулевой знак, отличный от него → NON_CONVEX
- Менее 3 вершин — вырожденный hull (точка или отрезок), всегда валиден

Вырожденный hull валиден, но регион из него не строится (create_region).
"""

import logging
from enum import Enum
from typing import Final, Iterable, Optional, Sequence

from pydantic import BaseModel, Field, PrivateAttr, model_validator

from hullkit.core.domain.line import Segment
from hullkit.core.domain.region import ConvexRegion, build_convex_region
from hullkit.core.domain.vector import Vector2D
from hullkit.core.errors import HullValidationError, InsufficientVerticesError
from hullkit.core.math.linear_combination import linear_combination
from hullkit.core.math.numerical_safeguards import (
    DEFAULT_HULL_TOLERANCE,
    compare_with_tolerance,
)

logger = logging.getLogger(__name__)

# Минимальное число вершин для построения региона
MIN_REGION_VERTICES: Final[int] = 3


# =============================================================================
# WINDING
# =============================================================================


class Winding(str, Enum):
    """Ориентация замкнутой последовательности вершин"""

    DEGENERATE = "DEGENERATE"  # менее 3 вершин
    COLLINEAR = "COLLINEAR"  # все повороты в пределах tolerance
    COUNTER_CLOCKWISE = "COUNTER_CLOCKWISE"
    CLOCKWISE = "CLOCKWISE"
    NON_CONVEX = "NON_CONVEX"  # повороты разных знаков


# Ориентации, допустимые для ConvexHull2D
ACCEPTED_WINDINGS: Final[frozenset[Winding]] = frozenset(
    {Winding.DEGENERATE, Winding.COLLINEAR, Winding.COUNTER_CLOCKWISE}
)


def classify_winding(vertices: Sequence[Vector2D], tolerance: float) -> Winding:
    """
    Классификация ориентации замкнутой последовательности вершин.

    Останавливается на первом повороте, знак которого противоречит ранее
    зафиксированному.

    Args:
        vertices: Вершины в порядке обхода
        tolerance: Порог, ниже которого поворот считается коллинеарным

    Returns:
        Winding

    Examples:
        >>> square = [Vector2D(0, 0), Vector2D(1, 0), Vector2D(1, 1), Vector2D(0, 1)]
        >>> classify_winding(square, 0.0)
        <Winding.COUNTER_CLOCKWISE: 'COUNTER_CLOCKWISE'>
    """
    n = len(vertices)
    if n < 3:
        return Winding.DEGENERATE

    sign = 0
    for i in range(n):
        p1 = vertices[i - 1]
        p2 = vertices[i]
        p3 = vertices[(i + 1) % n]

        d1 = p2.subtract(p1)
        d2 = p3.subtract(p2)

        turn = linear_combination(d1.x, d2.y, -d1.y, d2.x)
        cmp = compare_with_tolerance(turn, 0.0, tolerance)
        # коллинеарный поворот ни с чем не конфликтует
        if cmp != 0:
            if sign != 0 and cmp != sign:
                return Winding.NON_CONVEX
            sign = cmp

    if sign == 0:
        return Winding.COLLINEAR
    if sign > 0:
        return Winding.COUNTER_CLOCKWISE
    return Winding.CLOCKWISE


# =============================================================================
# CONVEX HULL MODEL
# =============================================================================


class ConvexHull2D(BaseModel):
    """
    Выпуклая оболочка с вершинами в CCW порядке.

    Принимается только обход против часовой стрелки (или вырожденная /
    коллинеарная последовательность). Последовательный CW обход
    отклоняется, хотя проверка "все повороты одного знака" его бы
    пропустила: регион строится из левых полуплоскостей рёбер, и для CW
    вершин он был бы неверным. Порядок вершин не переставляется.

    Immutable модель (frozen=True). Ошибка проверки выпуклости приходит
    как pydantic ValidationError (подкласс ValueError), исходный
    HullValidationError доступен в exc.errors()[0]["ctx"]["error"].
    """

    vertices: tuple[Vector2D, ...] = Field(
        default=(), description="Вершины оболочки в CCW порядке"
    )
    tolerance: float = Field(
        DEFAULT_HULL_TOLERANCE,
        ge=0,
        allow_inf_nan=False,
        description="Порог коллинеарности поворотов и совпадения точек",
    )

    model_config = {"frozen": True}

    # Кэш отрезков: публикуется целиком одним присваиванием
    _line_segments: Optional[tuple[Segment, ...]] = PrivateAttr(default=None)

    def __init__(
        self,
        vertices: Iterable[Vector2D] = (),
        tolerance: float = DEFAULT_HULL_TOLERANCE,
    ) -> None:
        super().__init__(vertices=tuple(vertices), tolerance=tolerance)

    @model_validator(mode="after")
    def validate_convexity(self) -> "ConvexHull2D":
        """Вершины должны образовывать выпуклую оболочку в CCW порядке"""
        winding = classify_winding(self.vertices, self.tolerance)
        if winding not in ACCEPTED_WINDINGS:
            logger.debug(
                "Rejected %d hull vertices (winding=%s, tolerance=%g)",
                len(self.vertices),
                winding.value,
                self.tolerance,
            )
            raise HullValidationError(
                f"Vertices do not form a convex hull in CCW winding "
                f"(winding: {winding.value})"
            )
        return self

    # =========================================================================
    # ДОСТУП
    # =========================================================================

    def get_vertices(self) -> list[Vector2D]:
        """Копия вершин; изменение списка не влияет на hull"""
        return list(self.vertices)

    def get_line_segments(self) -> list[Segment]:
        """
        Упорядоченные отрезки границы (копия).

        - 0 или 1 вершина: []
        - 2 вершины: один отрезок v0 → v1
        - n >= 3: n отрезков, последний замыкает v[n-1] → v0
        """
        return list(self._retrieve_line_segments())

    def _retrieve_line_segments(self) -> tuple[Segment, ...]:
        segments = self._line_segments
        if segments is None:
            # при конкурентном первом доступе допустимо повторное вычисление
            segments = self._build_line_segments()
            self._line_segments = segments
        return segments

    def _build_line_segments(self) -> tuple[Segment, ...]:
        size = len(self.vertices)
        if size <= 1:
            return ()
        if size == 2:
            return (Segment.from_points(self.vertices[0], self.vertices[1], self.tolerance),)

        segments = [
            Segment.from_points(start, end, self.tolerance)
            for start, end in zip(self.vertices, self.vertices[1:])
        ]
        segments.append(Segment.from_points(self.vertices[-1], self.vertices[0], self.tolerance))
        logger.debug("Built %d boundary segments", len(segments))
        return tuple(segments)

    # =========================================================================
    # РЕГИОН
    # =========================================================================

    def create_region(self) -> ConvexRegion:
        """
        Регион как пересечение левых полуплоскостей прямых границы.

        Returns:
            Новый ConvexRegion, не связанный с состоянием hull

        Raises:
            InsufficientVerticesError: Если вершин меньше 3
            RegionError: Если пересечение неограничено
        """
        if len(self.vertices) < MIN_REGION_VERTICES:
            raise InsufficientVerticesError(len(self.vertices), MIN_REGION_VERTICES)

        lines = [segment.line for segment in self._retrieve_line_segments()]
        return build_convex_region(lines, self.tolerance)

    # =========================================================================
    # РАВЕНСТВО
    # =========================================================================
    # Кэш отрезков — производное состояние и в сравнении не участвует.

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConvexHull2D):
            return NotImplemented
        return self.vertices == other.vertices and self.tolerance == other.tolerance

    def __hash__(self) -> int:
        return hash((self.vertices, self.tolerance))
