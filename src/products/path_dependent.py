"""
Path-dependent products

Barrier monitoring uses the fuzzy barrier of smoothing.py so that risks
are stable under bumps and AAD.
"""
import logging
from typing import MutableSequence, Tuple

from .base import Product
from .errors import ConfigurationError
from .numeric import T
from .observations import ObservationRequirement, Scenario
from .schedule import ONE_HOUR, SYSTEM_TIME, Schedule
from .smoothing import fuzzy_barrier, smoothing_width

logger = logging.getLogger(__name__)


class UpAndOutCall(Product[T]):
    """
    Discretely monitored up-and-out call

    Payoffs:
        0: max(S_T - K, 0) / numeraire(T) if the spot never crossed the barrier
        1: max(S_T - K, 0) / numeraire(T), the same call without barrier
    """

    def __init__(self, strike: float, barrier: float, maturity: float,
                 monitor_freq: float, smooth: float, today: float = SYSTEM_TIME):
        """
        Args:
            strike: Call strike
            barrier: Knock-out level, monitored on every schedule date
            maturity: Expiry
            monitor_freq: Time between monitoring dates
            smooth: Half-width of the barrier band, as a fraction of the initial spot
            today: First monitoring date
        """
        if smooth <= 0:
            raise ConfigurationError(f"smooth must be positive, got {smooth}")

        self.strike = float(strike)
        self.barrier = float(barrier)
        self.maturity = float(maturity)
        self.monitor_freq = float(monitor_freq)
        self.smooth = float(smooth)

        self._schedule = Schedule.from_horizon(maturity, monitor_freq, ONE_HOUR, today)

        # Spot = F(t, t) on every date, numeraire on the last one only
        n = self._schedule.n_dates
        self._dataline = tuple(
            ObservationRequirement(numeraire=(i == n - 1), forward_maturities=(t,))
            for i, t in enumerate(self._schedule.dates)
        )

        vanilla = f"call {self.maturity:.2f} {self.strike:.2f}"
        self._labels = (
            f"{vanilla} up and out {self.barrier:.2f} monitoring freq "
            f"{self.monitor_freq:.2f} smooth {self.smooth:.2f}",
            vanilla,
        )
        logger.debug("%r: %d monitoring dates", self, n)

    @property
    def timeline(self) -> Tuple[float, ...]:
        return self._schedule.dates

    @property
    def dataline(self) -> Tuple[ObservationRequirement, ...]:
        return self._dataline

    @property
    def payoff_labels(self) -> Tuple[str, ...]:
        return self._labels

    def _fill_payoffs(self, path: Scenario, payoffs: MutableSequence[T]) -> None:
        smooth = smoothing_width(path[0].forwards[0], self.smooth)

        alive = 1.0
        for scen in path:
            spot = scen.forwards[0]
            # Breached, no further contribution
            if spot > self.barrier + smooth:
                alive = 0.0
                break
            # Inside the band
            if spot > self.barrier - smooth:
                alive = alive * fuzzy_barrier(spot, self.barrier, smooth)

        last = path[-1]
        vanilla = max(last.forwards[0] - self.strike, 0.0) / last.numeraire
        payoffs[1] = vanilla
        payoffs[0] = alive * vanilla

    @property
    def contract_type(self) -> str:
        return "up_and_out_call"

    def __repr__(self) -> str:
        return (f"UpAndOutCall(K={self.strike}, B={self.barrier}, T={self.maturity}, "
                f"freq={self.monitor_freq}, smooth={self.smooth})")
