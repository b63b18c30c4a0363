"""
Base class for Monte-Carlo products

A product declares the dates it must observe (timeline), what it needs
on each date (dataline) and names its payoffs (labels). Given a simulated
path it fills one payoff per label, discounted by the path numeraire.
"""
import copy
from abc import ABC, abstractmethod
from typing import Generic, List, MutableSequence, Tuple

from .errors import PathMismatchError
from .numeric import T
from .observations import ObservationRequirement, Scenario, check_scenario


class Product(ABC, Generic[T]):
    """
    Abstract product

    Products are read-only after construction. Workers evaluating paths
    concurrently each hold their own clone().
    """

    def clone(self) -> "Product[T]":
        """Independent deep copy"""
        return copy.deepcopy(self)

    @property
    @abstractmethod
    def timeline(self) -> Tuple[float, ...]:
        """Event dates, ascending"""
        pass

    @property
    @abstractmethod
    def dataline(self) -> Tuple[ObservationRequirement, ...]:
        """One observation requirement per timeline date"""
        pass

    @property
    @abstractmethod
    def payoff_labels(self) -> Tuple[str, ...]:
        """One label per payoff"""
        pass

    @property
    @abstractmethod
    def contract_type(self) -> str:
        pass

    @abstractmethod
    def _fill_payoffs(self, path: Scenario, payoffs: MutableSequence[T]) -> None:
        """Write payoffs for a validated path into a correctly sized buffer"""
        pass

    def payoffs(self, path: Scenario, payoffs: MutableSequence[T]) -> None:
        """
        Compute payoffs on a simulated path

        Args:
            path: One snapshot per timeline date, matching the dataline
            payoffs: Pre-allocated buffer, one entry per payoff label
        """
        check_scenario(path, self.dataline)
        if len(payoffs) != len(self.payoff_labels):
            raise PathMismatchError(
                f"payoff buffer has {len(payoffs)} entries, "
                f"{self.contract_type} produces {len(self.payoff_labels)}"
            )
        self._fill_payoffs(path, payoffs)

    def evaluate(self, path: Scenario) -> List[T]:
        """Allocate a buffer, fill it and return it"""
        payoffs = [0.0] * len(self.payoff_labels)
        self.payoffs(path, payoffs)
        return payoffs
