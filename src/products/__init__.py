"""
Products module - Monte-Carlo payoffs for European, barrier, basket and
contingent-coupon contracts, generic over the numeric type
"""

# Base
from .base import Product
from .errors import ProductError, ConfigurationError, PathMismatchError
from .numeric import Numeric, to_float

# Schedules and market observations
from .schedule import Schedule, SYSTEM_TIME, ONE_HOUR, ONE_DAY
from .observations import (
    RateDefinition,
    ObservationRequirement,
    Snapshot,
    Scenario,
    check_scenario,
)

# Smoothing
from .smoothing import smoothing_width, fuzzy_step, fuzzy_barrier

# Contracts
from .vanilla import European, Europeans
from .path_dependent import UpAndOutCall
from .rates import ContingentBond

__all__ = [
    # Base
    "Product",
    "ProductError",
    "ConfigurationError",
    "PathMismatchError",
    "Numeric",
    "to_float",
    # Schedules and observations
    "Schedule",
    "SYSTEM_TIME",
    "ONE_HOUR",
    "ONE_DAY",
    "RateDefinition",
    "ObservationRequirement",
    "Snapshot",
    "Scenario",
    "check_scenario",
    # Smoothing
    "smoothing_width",
    "fuzzy_step",
    "fuzzy_barrier",
    # Contracts
    "European",
    "Europeans",
    "UpAndOutCall",
    "ContingentBond",
]
