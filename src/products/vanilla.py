"""
European calls: single option and a multi-maturity, multi-strike book
"""
import logging
from typing import Dict, MutableSequence, Optional, Sequence, Tuple

from .base import Product
from .errors import ConfigurationError
from .numeric import T
from .observations import ObservationRequirement, Scenario

logger = logging.getLogger(__name__)


class European(Product[T]):
    """
    European call, exercised on exercise_date and settled on settlement_date

    Payoff = max(F(Te, Ts) - K, 0) * DF(Te, Ts) / numeraire(Te)
    """

    def __init__(self, strike: float, exercise_date: float,
                 settlement_date: Optional[float] = None):
        if settlement_date is None:
            settlement_date = exercise_date
        if settlement_date < exercise_date:
            raise ConfigurationError(
                f"settlement date {settlement_date} precedes exercise date {exercise_date}"
            )

        self.strike = float(strike)
        self.exercise_date = float(exercise_date)
        self.settlement_date = float(settlement_date)

        self._timeline = (self.exercise_date,)
        self._dataline = (
            ObservationRequirement(
                numeraire=True,
                forward_maturities=(self.settlement_date,),
                discount_maturities=(self.settlement_date,),
            ),
        )

        if self.settlement_date == self.exercise_date:
            label = f"call {self.strike:.2f} {self.exercise_date:.2f}"
        else:
            label = f"call {self.strike:.2f} {self.exercise_date:.2f} {self.settlement_date:.2f}"
        self._labels = (label,)

    @property
    def timeline(self) -> Tuple[float, ...]:
        return self._timeline

    @property
    def dataline(self) -> Tuple[ObservationRequirement, ...]:
        return self._dataline

    @property
    def payoff_labels(self) -> Tuple[str, ...]:
        return self._labels

    def _fill_payoffs(self, path: Scenario, payoffs: MutableSequence[T]) -> None:
        scen = path[0]
        payoffs[0] = max(scen.forwards[0] - self.strike, 0.0) * scen.discounts[0] / scen.numeraire

    @property
    def contract_type(self) -> str:
        return "european_call"

    def __repr__(self) -> str:
        return (f"European(K={self.strike}, Te={self.exercise_date}, "
                f"Ts={self.settlement_date})")


class Europeans(Product[T]):
    """
    Book of European calls, several strikes per maturity

    Payoffs are maturity major: maturities ascending, then strikes in the
    order given for that maturity.
    """

    def __init__(self, options: Dict[float, Sequence[float]]):
        """
        Args:
            options: Strikes keyed by maturity
        """
        if not options:
            raise ConfigurationError("Europeans needs at least one maturity")

        self._maturities = tuple(sorted(float(t) for t in options))
        strikes_by_maturity = {float(t): ks for t, ks in options.items()}
        self._strikes = tuple(
            tuple(float(k) for k in strikes_by_maturity[t]) for t in self._maturities
        )

        # Numeraire and spot = F(t, t) on every maturity
        self._dataline = tuple(
            ObservationRequirement(numeraire=True, forward_maturities=(t,))
            for t in self._maturities
        )

        self._labels = tuple(
            f"call {t:.2f} {k:.2f}"
            for t, strikes in zip(self._maturities, self._strikes)
            for k in strikes
        )
        logger.debug("Europeans: %d maturities, %d options", len(self._maturities), len(self._labels))

    @property
    def maturities(self) -> Tuple[float, ...]:
        return self._maturities

    @property
    def strikes(self) -> Tuple[Tuple[float, ...], ...]:
        return self._strikes

    @property
    def timeline(self) -> Tuple[float, ...]:
        return self._maturities

    @property
    def dataline(self) -> Tuple[ObservationRequirement, ...]:
        return self._dataline

    @property
    def payoff_labels(self) -> Tuple[str, ...]:
        return self._labels

    def _fill_payoffs(self, path: Scenario, payoffs: MutableSequence[T]) -> None:
        j = 0
        for scen, strikes in zip(path, self._strikes):
            spot, num = scen.forwards[0], scen.numeraire
            for k in strikes:
                payoffs[j] = max(spot - k, 0.0) / num
                j += 1

    @property
    def contract_type(self) -> str:
        return "european_calls"

    def __repr__(self) -> str:
        return f"Europeans(maturities={len(self._maturities)}, options={len(self._labels)})"
