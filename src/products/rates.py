"""
Rate-linked structured products
"""
import logging
from typing import MutableSequence, Tuple

from .base import Product
from .errors import ConfigurationError
from .numeric import T
from .observations import ObservationRequirement, RateDefinition, Scenario
from .schedule import ONE_DAY, SYSTEM_TIME, Schedule
from .smoothing import fuzzy_step, smoothing_width

logger = logging.getLogger(__name__)


class ContingentBond(Product[T]):
    """
    Bond paying libor plus a fixed coupon only over periods where the
    underlying did not fall, redeemed at par at maturity

    Payoff = sum_i 1{S(i+1) >= S(i)} * (libor(Ti, Ti+1) + cpn) * cov(Ti, Ti+1) / numeraire(Ti+1)
             + 1 / numeraire(T)

    The digital is smoothed over a band of +/- smooth * S(0).
    Coverages are year fractions (act/365 is applied upstream by the time axis).
    """

    def __init__(self, maturity: float, cpn: float, pay_freq: float,
                 smooth: float, today: float = SYSTEM_TIME):
        if smooth <= 0:
            raise ConfigurationError(f"smooth must be positive, got {smooth}")

        self.maturity = float(maturity)
        self.cpn = float(cpn)
        self.pay_freq = float(pay_freq)
        self.smooth = float(smooth)

        self._schedule = Schedule.from_horizon(maturity, pay_freq, ONE_DAY, today)
        self._dt = tuple(float(dt) for dt in self._schedule.coverages())

        dates = self._schedule.dates
        n = len(dates)
        self._dataline = tuple(
            ObservationRequirement(
                # Paid on every date but the first
                numeraire=i > 0,
                forward_maturities=(t,),
                # Fixed on every date but the last
                rate_definitions=(
                    (RateDefinition(t, dates[i + 1], "libor"),) if i < n - 1 else ()
                ),
            )
            for i, t in enumerate(dates)
        )

        self._labels = (f"contingent bond {self.maturity:.2f} {self.cpn:.2f}",)
        logger.debug("%r: %d coupon periods", self, len(self._dt))

    @property
    def coverages(self) -> Tuple[float, ...]:
        return self._dt

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

        total = 0.0
        for i, dt in enumerate(self._dt):
            start, end = path[i], path[i + 1]
            digital = fuzzy_step(end.forwards[0] - start.forwards[0], 0.0, smooth)
            total = total + digital * (start.libors[0] + self.cpn) * dt / end.numeraire

        # Redemption
        payoffs[0] = total + 1.0 / path[-1].numeraire

    @property
    def contract_type(self) -> str:
        return "contingent_bond"

    def __repr__(self) -> str:
        return (f"ContingentBond(T={self.maturity}, cpn={self.cpn}, "
                f"freq={self.pay_freq}, smooth={self.smooth})")
