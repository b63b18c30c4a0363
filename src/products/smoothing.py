"""
Smoothed indicators for discontinuous payoffs

Knock-out barriers and digitals are replaced by linear ramps over a band
of half-width `smooth` ("fuzzy" barriers) so that bump and AAD risks
stay stable.
"""
from .errors import PathMismatchError
from .numeric import Numeric, to_float


def smoothing_width(reference: Numeric, fraction: float) -> float:
    """
    Half-width of the smoothing band as a fraction of a reference level

    The width is down-converted to a plain float: it is a numerical device
    and takes no part in differentiation.
    """
    width = to_float(reference * fraction)
    if width <= 0.0:
        raise PathMismatchError(
            f"smoothing width must be positive, got {width} from reference level {to_float(reference)}"
        )
    return width


def fuzzy_step(x: Numeric, threshold: float, smooth: float) -> Numeric:
    """
    Smoothed indicator of x > threshold

    1 above threshold + smooth, 0 below threshold - smooth,
    (x - threshold + smooth) / (2 smooth) in between.
    """
    if x - threshold > smooth:
        return 1.0
    if x - threshold < -smooth:
        return 0.0
    return (x - threshold + smooth) / (2.0 * smooth)


def fuzzy_barrier(x: Numeric, barrier: float, smooth: float) -> Numeric:
    """
    Smoothed survival indicator of x <= barrier

    1 below barrier - smooth, 0 above barrier + smooth,
    (barrier + smooth - x) / (2 smooth) in between.
    """
    if x > barrier + smooth:
        return 0.0
    if x > barrier - smooth:
        return (barrier + smooth - x) / (2.0 * smooth)
    return 1.0
