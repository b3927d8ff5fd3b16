"""Acceleration quantity and the equations of motion solved for acceleration.

Classes:
    Acceleration: Constant acceleration in meters per second squared.

Solvers:
    ``from_uvt``  A = (V − U) / T
    ``from_suv``  A = (V² − U²) / 2S
    ``from_sut``  A = 2S/T² − 2U/T
    ``from_svt``  A = 2(V·T − S) / T²

Example:
    >>> from kinematics.unit import Speed, Time
    >>> Acceleration.from_uvt(Speed(0), Speed(6), Time(3))
    Acceleration(2.0)
    >>> Acceleration.from_uvt(Speed(0), Speed(6), Time(0))
    Acceleration(inf)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .unit_formula import kinematic_formula
from .unit_quantity import Quantity

if TYPE_CHECKING:
    from .unit_distance import Distance
    from .unit_speed import Speed
    from .unit_time import Time


class Acceleration(Quantity):
    """Acceleration quantity: Meter per Second squared.

    Attributes:
        IS_FAMILY_ROOT (bool): True, indicating this is the root acceleration unit.
        SYMBOL (str): "m/s²", the standard symbol for meters per second squared.
    """

    IS_FAMILY_ROOT = True
    SYMBOL = "m/s²"

    @kinematic_formula
    def from_uvt(cls, start_speed: Speed, end_speed: Speed, time: Time) -> Acceleration:
        """Acceleration from the change in speed over a time span.

        Zero time yields ±inf, or NaN when the speeds are equal.
        """
        return (end_speed - start_speed) / time

    @kinematic_formula
    def from_suv(cls, distance: Distance, start_speed: Speed, end_speed: Speed) -> Acceleration:
        return (end_speed**2 - start_speed**2) / (2.0 * distance)

    @kinematic_formula
    def from_sut(cls, distance: Distance, start_speed: Speed, time: Time) -> Acceleration:
        return 2.0 * distance / time**2 - 2.0 * start_speed / time

    @kinematic_formula
    def from_svt(cls, distance: Distance, end_speed: Speed, time: Time) -> Acceleration:
        return 2.0 * (end_speed * time - distance) / time**2
