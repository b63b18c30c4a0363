"""
Numeric capability shared by all payoff code

Payoffs are written once against plain arithmetic and run unchanged on
floats (pricing) and on differentiable scalars such as torch tensors
(risk via automatic differentiation).
"""
from typing import Any, Protocol, TypeVar


class Numeric(Protocol):
    """Arithmetic, ordering against plain floats, explicit down-conversion"""

    def __add__(self, other: Any) -> Any: ...
    def __sub__(self, other: Any) -> Any: ...
    def __mul__(self, other: Any) -> Any: ...
    def __truediv__(self, other: Any) -> Any: ...
    def __gt__(self, other: Any) -> Any: ...
    def __lt__(self, other: Any) -> Any: ...
    def __float__(self) -> float: ...


T = TypeVar("T")


def to_float(x) -> float:
    """
    Down-convert a numeric value to a plain float

    The result no longer carries derivative information, whatever the
    backend of x.
    """
    return float(x)
