"""Base unit family system for type-safe kinematic quantities.

This module provides the fundamental Unit class that serves as the abstract
base for all quantity types in the kinematics package. It implements the
unit family system using automatic ROOT class assignment, which allows
operations between values of the same physical dimension while preventing
any mixing of different dimensions.

Each family represents one physical dimension (distance, speed, acceleration,
time). A quantity can only be added to, subtracted from or compared with a
quantity of its own family. Cross-dimension results are only produced by the
named kinematics functions, which take each argument in its own dimension.

Key Concepts:
- ROOT Class: Each unit family has a root class that defines the family
- IS_FAMILY_ROOT: Boolean flag marking the root class of each family
- Automatic Assignment: ROOT classes are determined automatically via MRO
- Type Safety: Operations are restricted to values of the same family

Classes:
    Unit: Abstract base class for all quantity types with family management.

Example:
    >>> class Distance(Unit):
    ...     IS_FAMILY_ROOT = True  # This becomes the ROOT for distances
    >>> class Displacement(Distance):
    ...     pass  # Automatically gets ROOT = Distance
    >>> class Time(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> Displacement.ROOT is Distance
    True
    >>> Distance.is_same_family(Time)
    False
"""

from __future__ import annotations

from typing import Any, ClassVar


class Unit:
    """Base class for all quantity types.

    This abstract base class provides the foundation for the family system,
    implementing automatic ROOT class assignment and basic unit metadata.
    Concrete quantity classes should inherit from Quantity rather than
    directly from this class.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    __slots__ = ()
    __array_priority__ = 1000

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Automatically set ROOT class for subclasses.

        This method is called when a class is subclassed and automatically
        determines the ROOT class by finding the first ancestor with
        IS_FAMILY_ROOT=True, or defaults to self if none found.

        Args:
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.
        """
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def family_name(cls) -> str:
        """Name of the dimension this class belongs to (e.g. ``"Speed"``)."""
        return cls.ROOT.__name__

    @classmethod
    def is_same_family(cls, unit_type: type[Any]) -> bool:
        """Return True if ``unit_type`` is a unit of the same family."""
        return getattr(unit_type, "ROOT", None) is cls.ROOT

    @classmethod
    def _check_same_root(cls, unit_type: type[Any]):
        """Check if two types belong to the same physical quantity family.

        This method ensures type safety by verifying that operations are only
        performed between values of the same physical dimension (distances
        with distances, times with times).

        Args:
            unit_type: The other type to check compatibility with. Types that
                are not units at all are rejected too.

        Raises:
            TypeError: If the types belong to different families.
        """
        if not cls.is_same_family(unit_type):
            other = getattr(unit_type, "ROOT", unit_type)
            msg = f"cannot combine {cls.ROOT.__name__} with {other.__name__}"
            raise TypeError(msg)
