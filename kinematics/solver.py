"""Complete a constant-acceleration motion from any three of its SUVAT values.

The per-dimension solver classmethods each compute one unknown from one
fixed set of inputs. ``solve`` sits on top of them: given any three of
S (distance), U (start speed), V (end speed), A (acceleration) and
T (time), it picks the pair of solvers that takes exactly those three and
returns all five values.

Degenerate inputs are not rejected. A zero time, a zero acceleration or an
unreachable end state comes back as ±inf/NaN in the affected fields, exactly
as the underlying solver produced it.

Example:
    >>> motion = solve(u=0, a=2, t=3)
    >>> motion.v, motion.s
    (Speed(6.0), Distance(9.0))
    >>> sorted(motion.knowns)
    ['a', 't', 'u']
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import logging

from kinematics.config import BASE_TYPE
from kinematics.unit import Acceleration, Distance, Quantity, Speed, Time

logger = logging.getLogger(__name__)

SUVAT = "suvat"

FIELD_TYPES: dict[str, type[Quantity]] = {
    "s": Distance,
    "u": Speed,
    "v": Speed,
    "a": Acceleration,
    "t": Time,
}

# known triple -> ((unknown, solver, argument order), ...)
_FORMULAS: dict[frozenset[str], tuple[tuple[str, Callable[..., Quantity], str], ...]] = {
    frozenset("uvt"): (("s", Distance.from_uvt, "uvt"), ("a", Acceleration.from_uvt, "uvt")),
    frozenset("uat"): (("v", Speed.end_speed_from_uat, "uat"), ("s", Distance.from_uat, "uat")),
    frozenset("vat"): (("u", Speed.start_speed_from_vat, "vat"), ("s", Distance.from_vat, "vat")),
    frozenset("uva"): (("s", Distance.from_uva, "uva"), ("t", Time.from_vua, "vua")),
    frozenset("suv"): (("a", Acceleration.from_suv, "suv"), ("t", Time.from_svu, "svu")),
    frozenset("sua"): (("v", Speed.end_speed_from_sua, "sua"), ("t", Time.from_asu, "asu")),
    frozenset("sva"): (("u", Speed.start_speed_from_sva, "sva"), ("t", Time.from_vas, "vas")),
    frozenset("sut"): (("v", Speed.end_speed_from_sut, "sut"), ("a", Acceleration.from_sut, "sut")),
    frozenset("svt"): (("u", Speed.start_speed_from_svt, "svt"), ("a", Acceleration.from_svt, "svt")),
    frozenset("sat"): (("u", Speed.start_speed_from_sat, "sat"), ("v", Speed.end_speed_from_sat, "sat")),
}


@dataclass(frozen=True)
class Motion:
    """All five SUVAT values of one constant-acceleration motion.

    Attributes:
        s (Distance): Displacement.
        u (Speed): Start speed.
        v (Speed): End speed.
        a (Acceleration): Constant acceleration.
        t (Time): Elapsed time.
        knowns (frozenset[str]): Names of the fields that were given.
    """

    s: Distance
    u: Speed
    v: Speed
    a: Acceleration
    t: Time
    knowns: frozenset[str] = field(default_factory=frozenset)

    @property
    def unknowns(self) -> frozenset[str]:
        """Names of the fields that were derived."""
        return frozenset(SUVAT) - self.knowns


def solve(
    *,
    s: Distance | BASE_TYPE | None = None,
    u: Speed | BASE_TYPE | None = None,
    v: Speed | BASE_TYPE | None = None,
    a: Acceleration | BASE_TYPE | None = None,
    t: Time | BASE_TYPE | None = None,
) -> Motion:
    """Derive the two missing SUVAT values from exactly three known ones.

    Args:
        s: Displacement.
        u: Start speed.
        v: End speed.
        a: Acceleration.
        t: Elapsed time.

    Returns:
        Motion: The given values plus the two derived ones.

    Raises:
        ValueError: If not exactly three values are given.
        TypeError: If a value is a quantity of the wrong dimension.
    """
    given = {
        name: value
        for name, value in zip(SUVAT, (s, u, v, a, t))
        if value is not None
    }
    if len(given) != 3:
        msg = f"exactly three of s, u, v, a, t are required, got {len(given)}"
        if given:
            msg += f" ({', '.join(sorted(given))})"
        raise ValueError(msg)

    values = {name: FIELD_TYPES[name](value) for name, value in given.items()}
    for unknown, solver, order in _FORMULAS[frozenset(given)]:
        values[unknown] = solver(*(values[name] for name in order))
        logger.debug("%s = %r via %s", unknown, values[unknown], solver.__qualname__)

    return Motion(**values, knowns=frozenset(given))
