"""
Convex Hull Generator — абстракция "множество точек → ConvexHull2D"

Конкретные стратегии построения (gift wrapping, monotone chain,
Akl–Toussaint и т.д.) реализуются вне пакета. Здесь:
- ConvexHullGenerator: интерфейс с единственным методом generate()
- GeneratorConfig: параметры стратегии (tolerance, коллинеарные точки)
- BaseConvexHullGenerator2D: общий шаблон generate() для 2D стратегий

Контракт generate():
- вход: произвольная коллекция точек (неупорядоченная, с дубликатами)
- выход: ConvexHull2D с CCW вершинами из подмножества входа
- если оболочку построить нельзя → HullGenerationError (частичный hull
  никогда не возвращается)
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Collection, Optional, Sequence

from pydantic import ValidationError

from hullkit.core.domain.vector import Vector2D
from hullkit.core.errors import HullGenerationError
from hullkit.core.math.numerical_safeguards import (
    DEFAULT_HULL_TOLERANCE,
    validate_non_negative,
)
from hullkit.hull.convex_hull import ConvexHull2D

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class GeneratorConfig:
    """Конфигурация генератора выпуклой оболочки.

    - tolerance: порог, ниже которого точки считаются совпадающими,
      а повороты — коллинеарными
    - include_collinear_points: оставлять ли точки, лежащие на рёбрах оболочки
    - allow_empty_input: пустой вход даёт пустой hull (True) или ошибку (False)
    """
    tolerance: float = DEFAULT_HULL_TOLERANCE
    include_collinear_points: bool = False
    allow_empty_input: bool = True

    def __post_init__(self) -> None:
        validate_non_negative(self.tolerance, "tolerance")


# =============================================================================
# INTERFACE
# =============================================================================


class ConvexHullGenerator(ABC):
    """Стратегия построения выпуклой оболочки."""

    @abstractmethod
    def generate(self, points: Collection[Vector2D]) -> ConvexHull2D:
        """
        Построение выпуклой оболочки множества точек.

        Args:
            points: Точки (порядок произвольный, дубликаты допустимы)

        Returns:
            Выпуклая оболочка

        Raises:
            HullGenerationError: Если оболочку построить нельзя
        """


# =============================================================================
# 2D TEMPLATE
# =============================================================================


class BaseConvexHullGenerator2D(ConvexHullGenerator):
    """Общий шаблон generate() для 2D стратегий.

    Подкласс реализует только find_hull_vertices(): получает уникальные
    точки (не менее 2) и возвращает вершины оболочки в CCW порядке.

    Шаблон сам не читает include_collinear_points: флаг только передаётся
    стратегиям, которые решают, оставлять ли точки на рёбрах.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """
        Args:
            config: конфигурация генератора (default: GeneratorConfig())
        """
        self.config = config or GeneratorConfig()

    @property
    def tolerance(self) -> float:
        return self.config.tolerance

    @property
    def include_collinear_points(self) -> bool:
        """Флаг для find_hull_vertices() подклассов; generate() его не использует"""
        return self.config.include_collinear_points

    def generate(self, points: Collection[Vector2D]) -> ConvexHull2D:
        if points is None:
            raise TypeError("points must not be None")

        unique_points = list(dict.fromkeys(points))

        if not unique_points and not self.config.allow_empty_input:
            raise HullGenerationError("Cannot generate a convex hull from an empty point set")

        if len(unique_points) < 2:
            hull_vertices: Sequence[Vector2D] = unique_points
        else:
            hull_vertices = self.find_hull_vertices(unique_points)

        try:
            hull = ConvexHull2D(hull_vertices, self.tolerance)
        except ValidationError as e:
            # при слишком большой tolerance вершины могут не пройти проверку
            raise HullGenerationError(
                f"{type(self).__name__} produced {len(hull_vertices)} vertices "
                f"that do not form a convex hull (tolerance={self.tolerance})"
            ) from e

        logger.debug(
            "%s: %d input points -> %d hull vertices",
            type(self).__name__,
            len(unique_points),
            len(hull.vertices),
        )
        return hull

    @abstractmethod
    def find_hull_vertices(self, points: Sequence[Vector2D]) -> Sequence[Vector2D]:
        """
        Вершины оболочки в CCW порядке.

        Args:
            points: Уникальные входные точки (не менее 2)

        Returns:
            Подмножество points, упорядоченное против часовой стрелки
        """
