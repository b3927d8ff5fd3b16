"""Strongly-typed kinematic quantities and constant-acceleration equations of motion.

Kinematics is a small library for computing with distances, speeds,
accelerations and times without mixing them up. Each physical dimension is
its own float-based type sharing one numeric contract, and the classical
SUVAT equations are exposed as named solver functions that take each input
in its own dimension and return the solved one.

Package Architecture:
    Quantity Layer (kinematics.unit):
        • Quantity: Generic float-based value with IEEE-754 comparisons,
          arithmetic, rounding, clamping, stepping and interpolation
        • Distance, Speed, Acceleration, Time: One family per dimension,
          never interoperable with each other in arithmetic
        • Solver classmethods: one per input triple, e.g.
          ``Speed.end_speed_from_uat`` or ``Time.from_asu``

    Solver Facade (kinematics.solver):
        • solve: Fill in all five SUVAT values from any three
        • Motion: Frozen record of a solved motion

    Vector Layer (kinematics.vector):
        • Distance2/3, Velocity2/3, Acceleration2/3: Per-axis composites
        • Axis: Enumeration for indexing components

    Configuration (kinematics.config):
        • Text conversion fallback policy and fractional-part precision

Numeric Policy:
    Degenerate input never raises. Division by a zero time or acceleration
    yields ±inf or NaN, square roots of negative numbers yield NaN, and NaN
    propagates through everything downstream. Callers check results with
    ``math.isnan``/``math.isinf`` rather than catching exceptions.

Usage Patterns:
    Single Equation:
        >>> from kinematics import Acceleration, Distance, Speed, Time
        >>> Distance.from_uat(Speed(0), Acceleration(2), Time(3))
        Distance(9.0)

    Any Three Knowns:
        >>> from kinematics import solve
        >>> motion = solve(s=9, u=0, v=6)
        >>> motion.a, motion.t
        (Acceleration(2.0), Time(3.0))

    Approaching a Target Each Frame:
        >>> position = Distance(0)
        >>> while position != Distance(10):
        ...     position = position.step(Distance(10), Speed(4).value * 0.5)

Integration Requirements:
    Dependencies:
        • Python 3.11+
        • NumPy for IEEE-754 evaluation of degenerate operations
        • Rich for the command-line table output
"""

from kinematics import config
from kinematics.solver import Motion, solve
from kinematics.unit import Acceleration, Distance, Quantity, Speed, Time

__all__ = [
    "config",
    "Quantity",
    "Distance",
    "Speed",
    "Acceleration",
    "Time",
    "Motion",
    "solve",
]
