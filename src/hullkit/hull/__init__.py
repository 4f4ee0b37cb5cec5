"""
Hull — выпуклая оболочка и абстракция её генерации.
"""

from hullkit.hull.convex_hull import (
    ACCEPTED_WINDINGS,
    MIN_REGION_VERTICES,
    ConvexHull2D,
    Winding,
    classify_winding,
)
from hullkit.hull.generator import (
    BaseConvexHullGenerator2D,
    ConvexHullGenerator,
    GeneratorConfig,
)

__all__ = [
    # Convex hull
    "ACCEPTED_WINDINGS",
    "MIN_REGION_VERTICES",
    "ConvexHull2D",
    "Winding",
    "classify_winding",
    # Generators
    "BaseConvexHullGenerator2D",
    "ConvexHullGenerator",
    "GeneratorConfig",
]
