"""
Convex Region — пересечение полуплоскостей в ограниченный выпуклый регион

Построение региона из набора направленных прямых: каждая прямая задаёт
полуплоскость слева от себя, регион — их пересечение.

Алгоритм build_convex_region:
1. Chebyshev centre: линейная программа (scipy.optimize.linprog)
   max r  при  a_i·c + r <= -c_i,  r >= 0
   - infeasible → пустой регион
   - радиус ограничен сверху MAX_INSCRIBED_RADIUS, чтобы LP оставалась
     ограниченной для неограниченных пересечений
   - r <= EPS_CALC → внутренности нет → пустой регион (tolerance здесь
     не участвует: она задаёт только порог классификации точек)
2. Проверка ограниченности: внешние нормали должны положительно покрывать
   плоскость (максимальный угловой зазор между ними < π)
3. scipy.spatial.HalfspaceIntersection от центра, затем
   scipy.spatial.ConvexHull пересечений: вершины в CCW порядке,
   площадь (volume) и периметр (area)

Результат принадлежит вызывающему коду и не разделяет изменяемого
состояния с источником прямых.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Sequence

import numpy as np
from scipy.optimize import linprog
from scipy.spatial import ConvexHull, HalfspaceIntersection

from hullkit.core.errors import RegionError
from hullkit.core.math.numerical_safeguards import EPS_CALC, validate_non_negative
from hullkit.core.domain.line import Line
from hullkit.core.domain.vector import Vector2D

logger = logging.getLogger(__name__)

# Верхняя граница радиуса вписанного круга в LP (ниже бесконечности HiGHS, 1e20)
MAX_INSCRIBED_RADIUS: Final[float] = 1e15


# =============================================================================
# ENUMS
# =============================================================================


class Location(str, Enum):
    """Положение точки относительно региона"""

    INSIDE = "INSIDE"
    OUTSIDE = "OUTSIDE"
    BOUNDARY = "BOUNDARY"


# =============================================================================
# REGION
# =============================================================================


@dataclass(frozen=True)
class ConvexRegion:
    """
    Ограниченный выпуклый регион на плоскости.

    Пустой регион (нет внутренности) имеет ноль вершин и нулевую площадь;
    все точки для него OUTSIDE.
    """

    vertices: tuple[Vector2D, ...]  # CCW порядок
    area: float
    boundary_size: float  # Периметр
    lines: tuple[Line, ...]
    tolerance: float

    # Матрица полуплоскостей [a, b, c] (n x 3) для векторной проверки точек
    _halfspaces: np.ndarray = field(repr=False, compare=False, default=None)

    def is_empty(self) -> bool:
        return not self.vertices

    def barycenter(self) -> Vector2D:
        """
        Центр масс многоугольника.

        Returns:
            Vector2D.NAN для пустого региона
        """
        if self.is_empty() or self.area == 0:
            return Vector2D.NAN

        pts = np.array([v.to_array() for v in self.vertices])
        x, y = pts[:, 0], pts[:, 1]
        x_next, y_next = np.roll(x, -1), np.roll(y, -1)
        cross = x * y_next - x_next * y
        factor = 1.0 / (6.0 * self.area)
        return Vector2D(
            float(factor * np.sum((x + x_next) * cross)),
            float(factor * np.sum((y + y_next) * cross)),
        )

    def check_point(self, point: Vector2D) -> Location:
        """
        Классификация точки относительно региона.

        Returns:
            INSIDE / BOUNDARY (в пределах tolerance от границы) / OUTSIDE
        """
        if self.is_empty():
            return Location.OUTSIDE

        offsets = self._halfspaces[:, :2] @ np.array([point.x, point.y]) + self._halfspaces[:, 2]
        if np.any(offsets > self.tolerance):
            return Location.OUTSIDE
        if np.any(offsets >= -self.tolerance):
            return Location.BOUNDARY
        return Location.INSIDE

    def contains(self, point: Vector2D) -> bool:
        """True для точек внутри региона или на его границе"""
        return self.check_point(point) != Location.OUTSIDE


# =============================================================================
# BUILDER
# =============================================================================


def _empty_region(lines: tuple[Line, ...], tolerance: float) -> ConvexRegion:
    return ConvexRegion(
        vertices=(),
        area=0.0,
        boundary_size=0.0,
        lines=lines,
        tolerance=tolerance,
        _halfspaces=np.zeros((0, 3)),
    )


def _max_normal_gap(halfspaces: np.ndarray) -> float:
    """Максимальный угловой зазор между соседними внешними нормалями"""
    angles = np.sort(np.arctan2(halfspaces[:, 1], halfspaces[:, 0]))
    gaps = np.diff(np.append(angles, angles[0] + 2 * math.pi))
    return float(np.max(gaps))


def build_convex_region(lines: Sequence[Line], tolerance: float = 0.0) -> ConvexRegion:
    """
    Пересечение "внутренних" (левых) полуплоскостей прямых.

    Args:
        lines: Направленные прямые
        tolerance: Порог BOUNDARY при классификации точек

    Returns:
        Новый ConvexRegion (возможно пустой)

    Raises:
        RegionError: Если прямых нет или пересечение неограничено
        ValueError: Если tolerance отрицательная или NaN/Inf
    """
    validate_non_negative(tolerance, "tolerance")
    lines = tuple(lines)
    if not lines:
        raise RegionError("Cannot build a bounded region from zero lines")

    halfspaces = np.array([line.halfspace() for line in lines], dtype=float)
    normals = halfspaces[:, :2]
    offsets = halfspaces[:, 2]

    # Chebyshev centre: переменные (cx, cy, r), максимизируем r
    result = linprog(
        c=np.array([0.0, 0.0, -1.0]),
        A_ub=np.hstack([normals, np.ones((len(lines), 1))]),
        b_ub=-offsets,
        bounds=[(None, None), (None, None), (0.0, MAX_INSCRIBED_RADIUS)],
    )

    if result.status == 2:
        logger.debug("Half-plane intersection of %d lines is empty", len(lines))
        return _empty_region(lines, tolerance)
    if result.status != 0:
        raise RegionError(f"Half-plane intersection failed: {result.message}")

    center = result.x[:2]
    radius = float(result.x[2])
    if radius <= EPS_CALC:
        logger.debug(
            "Half-plane intersection of %d lines has no interior (radius=%.3e)",
            len(lines),
            radius,
        )
        return _empty_region(lines, tolerance)

    if _max_normal_gap(halfspaces) >= math.pi:
        raise RegionError(f"Intersection of {len(lines)} half-planes is unbounded")

    intersection = HalfspaceIntersection(halfspaces, center)
    hull = ConvexHull(intersection.intersections)
    points = intersection.intersections[hull.vertices]

    region = ConvexRegion(
        vertices=tuple(Vector2D(float(px), float(py)) for px, py in points),
        area=float(hull.volume),
        boundary_size=float(hull.area),
        lines=lines,
        tolerance=tolerance,
        _halfspaces=halfspaces,
    )
    logger.debug(
        "Built convex region: %d vertices, area=%.6g", len(region.vertices), region.area
    )
    return region
