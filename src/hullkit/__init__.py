"""
hullkit — 2D computational-geometry primitives.

- Vector2D: неизменяемый вектор/точка и его алгебра
- ConvexHull2D: проверенная выпуклая оболочка, её рёбра и регион
- ConvexHullGenerator: абстракция "множество точек → оболочка"
"""

import logging

from hullkit.core.domain import (
    NAN_HASH,
    ConvexRegion,
    Line,
    Location,
    Segment,
    Vector2D,
    build_convex_region,
)
from hullkit.core.errors import (
    DegenerateLineError,
    DimensionMismatchError,
    ErrorKind,
    GeometryError,
    HullGenerationError,
    HullValidationError,
    InsufficientVerticesError,
    RegionError,
    ZeroNormError,
)
from hullkit.hull import (
    BaseConvexHullGenerator2D,
    ConvexHull2D,
    ConvexHullGenerator,
    GeneratorConfig,
    Winding,
    classify_winding,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Domain
    "NAN_HASH",
    "Vector2D",
    "Line",
    "Segment",
    "ConvexRegion",
    "Location",
    "build_convex_region",
    # Hull
    "ConvexHull2D",
    "Winding",
    "classify_winding",
    "ConvexHullGenerator",
    "BaseConvexHullGenerator2D",
    "GeneratorConfig",
    # Errors
    "ErrorKind",
    "GeometryError",
    "DimensionMismatchError",
    "ZeroNormError",
    "HullValidationError",
    "InsufficientVerticesError",
    "HullGenerationError",
    "DegenerateLineError",
    "RegionError",
]
