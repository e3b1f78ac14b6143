"""Payoff functions for equity options."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Payoff(ABC):
    """Payoff of an option for a given underlying spot price."""

    @abstractmethod
    def payoff(self, price):
        """Return the payoff value at the spot ``price``."""

    @abstractmethod
    def clone(self):
        """Return an independent copy of this payoff."""


@dataclass(frozen=True)
class CallPayoff(Payoff):
    """Call payoff: max(price - strike, 0)."""

    strike: float

    def payoff(self, price):
        return max(price - self.strike, 0.0)

    def clone(self):
        return CallPayoff(self.strike)


@dataclass(frozen=True)
class PutPayoff(Payoff):
    """Put payoff, evaluated as max(price - strike, 0)."""

    strike: float

    def payoff(self, price):
        return max(price - self.strike, 0.0)

    def clone(self):
        return PutPayoff(self.strike)