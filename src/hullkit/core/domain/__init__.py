"""
Domain models and value objects.

Contains fundamental geometric values: Vector2D, Line, Segment, ConvexRegion.
"""

from hullkit.core.domain.vector import NAN_HASH, Vector2D
from hullkit.core.domain.line import Line, Segment
from hullkit.core.domain.region import ConvexRegion, Location, build_convex_region

__all__ = [
    # Vector
    "NAN_HASH",
    "Vector2D",
    # Line collaborator
    "Line",
    "Segment",
    # Region collaborator
    "ConvexRegion",
    "Location",
    "build_convex_region",
]
