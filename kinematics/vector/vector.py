"""2D and 3D vector quantities built from per-axis scalars.

A vector quantity is an immutable record of independent per-axis quantities
of one dimension. It exists to carry positions, velocities and accelerations
around together; it has no arithmetic of its own and never calls the SUVAT
solvers. Apply the scalar solvers per axis instead:

Example:
    >>> from kinematics.unit import Acceleration, Speed, Time
    >>> u = Velocity2(0, 5)
    >>> a = Acceleration2(2, -10)
    >>> t = Time(1)
    >>> Velocity2(*(Speed.end_speed_from_uat(ui, ai, t) for ui, ai in zip(u, a)))
    Velocity2(x=Speed(2.0), y=Speed(-5.0))
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, fields
from typing import ClassVar, Generic, TypeVar

from kinematics.unit import Acceleration, Distance, Quantity, Speed

from .axis import Axis

Q = TypeVar("Q", bound=Quantity)


@dataclass(frozen=True)
class Vector2(Generic[Q]):
    """Two per-axis quantities of the same dimension.

    Components are coerced to ``COMPONENT`` on construction, so plain numbers
    are accepted while quantities of another dimension raise ``TypeError``.

    Attributes:
        x (Q): Component along the X axis.
        y (Q): Component along the Y axis.
    """

    COMPONENT: ClassVar[type[Quantity]] = Quantity

    x: Q
    y: Q

    def __post_init__(self):
        for field in fields(self):
            object.__setattr__(self, field.name, self.COMPONENT(getattr(self, field.name)))

    def __getitem__(self, axis: Axis) -> Q:
        """Return the component along ``axis``.

        Raises:
            IndexError: If this vector has no component along ``axis``.
        """
        name = Axis(axis).name.lower()
        if name not in {field.name for field in fields(self)}:
            msg = f"{type(self).__name__} has no {Axis(axis).name} component"
            raise IndexError(msg)
        return getattr(self, name)

    def __iter__(self) -> Iterator[Q]:
        for field in fields(self):
            yield getattr(self, field.name)

    def __len__(self) -> int:
        return len(fields(self))


@dataclass(frozen=True)
class Vector3(Vector2[Q]):
    """Three per-axis quantities of the same dimension.

    Attributes:
        z (Q): Component along the Z axis.
    """

    z: Q


class Distance2(Vector2[Distance]):
    """A 2D position or displacement."""

    COMPONENT = Distance


class Velocity2(Vector2[Speed]):
    """A 2D velocity."""

    COMPONENT = Speed


class Acceleration2(Vector2[Acceleration]):
    """A 2D acceleration."""

    COMPONENT = Acceleration


class Distance3(Vector3[Distance]):
    """A 3D position or displacement."""

    COMPONENT = Distance


class Velocity3(Vector3[Speed]):
    """A 3D velocity."""

    COMPONENT = Speed


class Acceleration3(Vector3[Acceleration]):
    """A 3D acceleration."""

    COMPONENT = Acceleration
