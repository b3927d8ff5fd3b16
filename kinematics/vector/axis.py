"""Coordinate axes used to index vector quantities."""

from enum import IntEnum


class Axis(IntEnum):
    """Represents an axis of a right-handed coordinate system."""

    X = 0
    Y = 1
    Z = 2
