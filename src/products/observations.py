"""
Observation requirements (what a product reads) and path snapshots
(what the simulator delivers)

Sequences in a Snapshot are aligned by position with the maturities and
definitions declared in the ObservationRequirement for the same date.
"""
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .errors import PathMismatchError
from .numeric import Numeric


@dataclass(frozen=True)
class RateDefinition:
    """Simple rate accruing from start to end"""
    start: float
    end: float
    name: str = "libor"


@dataclass(frozen=True)
class ObservationRequirement:
    """
    Market quantities the simulator must produce on one event date

    Attributes:
        numeraire: Whether the numeraire value is needed
        forward_maturities: Maturities of forwards F(t, T); F(t, t) is the spot
        discount_maturities: Maturities of discount factors DF(t, T)
        rate_definitions: Reference rates observed on this date
    """
    numeraire: bool = True
    forward_maturities: Tuple[float, ...] = ()
    discount_maturities: Tuple[float, ...] = ()
    rate_definitions: Tuple[RateDefinition, ...] = ()


@dataclass(frozen=True)
class Snapshot:
    """Market observations on one event date of a simulated path"""
    forwards: Sequence[Numeric] = ()
    discounts: Sequence[Numeric] = ()
    libors: Sequence[Numeric] = ()
    numeraire: Optional[Numeric] = None


# One snapshot per timeline date
Scenario = Sequence[Snapshot]


def check_scenario(path: Scenario, dataline: Sequence[ObservationRequirement]) -> None:
    """Raise PathMismatchError unless path matches dataline date by date"""
    if len(path) != len(dataline):
        raise PathMismatchError(
            f"path has {len(path)} snapshots, product timeline has {len(dataline)} dates"
        )

    for i, (snapshot, requirement) in enumerate(zip(path, dataline)):
        expected = (
            ("forwards", len(requirement.forward_maturities), len(snapshot.forwards)),
            ("discounts", len(requirement.discount_maturities), len(snapshot.discounts)),
            ("libors", len(requirement.rate_definitions), len(snapshot.libors)),
        )
        for field, declared, supplied in expected:
            if declared != supplied:
                raise PathMismatchError(
                    f"date {i}: {supplied} {field} supplied, {declared} declared"
                )
        if requirement.numeraire and snapshot.numeraire is None:
            raise PathMismatchError(f"date {i}: numeraire declared but not supplied")
