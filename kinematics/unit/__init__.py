"""Type-safe kinematic quantities.

This package provides one quantity type per physical dimension used in
constant-acceleration kinematics. All four share the numeric contract of
``Quantity`` (IEEE-754 comparisons, arithmetic, rounding, clamping,
stepping and interpolation) and differ only in their family, display symbol
and the SUVAT solver classmethods they carry.

Architecture:
    - unit_base: Foundation Unit class with family management system
    - unit_quantity: Float-based Quantity with the shared numeric contract
    - unit_formula: Decorator evaluating equations of motion without raising
    - unit_distance: Distance (m) and the displacement solvers
    - unit_speed: Speed (m/s) and the start/end speed solvers
    - unit_acceleration: Acceleration (m/s²) and its solvers
    - unit_time: Time (s) and the elapsed-time solvers

Unit Families:
    Each family represents a distinct physical quantity and cannot be mixed
    with the others in arithmetic or comparisons:

    - Distance, Speed, Acceleration, Time

Example:
    >>> from kinematics.unit import Acceleration, Distance, Speed, Time
    >>> v = Speed.end_speed_from_uat(Speed(0), Acceleration(2), Time(3))
    >>> v
    Speed(6.0)
    >>> Distance(1) + Time(1)
    Traceback (most recent call last):
        ...
    TypeError: cannot combine Distance with Time
"""

from .unit_acceleration import Acceleration
from .unit_base import Unit
from .unit_distance import Distance
from .unit_formula import kinematic_formula
from .unit_quantity import Quantity
from .unit_speed import Speed
from .unit_time import Time

__all__ = [
    # Base classes
    "Unit",
    "Quantity",
    "kinematic_formula",
    # Dimensions
    "Distance",
    "Speed",
    "Acceleration",
    "Time",
]
