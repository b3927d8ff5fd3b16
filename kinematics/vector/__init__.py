"""Vector quantities composed of per-axis scalar quantities.

Exports:
    Axis: Coordinate axis enumeration used for indexing
    Vector2, Vector3: Generic bases parametrised by component dimension
    Distance2, Velocity2, Acceleration2: 2D composites
    Distance3, Velocity3, Acceleration3: 3D composites
"""

from .axis import Axis
from .vector import (
    Acceleration2,
    Acceleration3,
    Distance2,
    Distance3,
    Vector2,
    Vector3,
    Velocity2,
    Velocity3,
)

__all__ = [
    "Axis",
    "Vector2",
    "Vector3",
    "Distance2",
    "Velocity2",
    "Acceleration2",
    "Distance3",
    "Velocity3",
    "Acceleration3",
]
