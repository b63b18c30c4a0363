"""
Event schedules for path-dependent products

Times are year fractions from today.
"""
import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

SYSTEM_TIME = 0.0

# Minimum final stubs
ONE_HOUR = 0.000114469
ONE_DAY = 0.003773585


@dataclass(frozen=True)
class Schedule:
    """Strictly increasing event dates from today to a horizon"""
    dates: Tuple[float, ...]

    @classmethod
    def from_horizon(cls, horizon: float, frequency: float, min_stub: float,
                     today: float = SYSTEM_TIME) -> "Schedule":
        """
        Step from today by frequency, then close on the horizon

        Intermediate dates stop once the gap left to the horizon is within
        min_stub, so the last period is never degenerate.

        Args:
            horizon: Last date (maturity)
            frequency: Step between consecutive dates
            min_stub: Shortest final period kept as a separate step
            today: First date
        """
        if frequency <= 0:
            raise ConfigurationError(f"frequency must be positive, got {frequency}")
        if min_stub <= 0:
            raise ConfigurationError(f"min_stub must be positive, got {min_stub}")
        if horizon <= today:
            raise ConfigurationError(f"horizon {horizon} must be after today {today}")
        if frequency > horizon - today:
            raise ConfigurationError(
                f"frequency {frequency} exceeds the schedule span {horizon - today}"
            )

        dates = [float(today)]
        t = today + frequency
        while horizon - t > min_stub:
            dates.append(float(t))
            t += frequency
        dates.append(float(horizon))

        logger.debug("Built schedule to %.4f with %d dates", horizon, len(dates))
        return cls(dates=tuple(dates))

    @property
    def n_dates(self) -> int:
        return len(self.dates)

    def coverages(self) -> np.ndarray:
        """Period lengths date(i+1) - date(i), shape (n_dates - 1,)"""
        return np.diff(np.asarray(self.dates, dtype=float))

    def __repr__(self) -> str:
        return f"Schedule({self.dates[0]} -> {self.dates[-1]}, n={self.n_dates})"
