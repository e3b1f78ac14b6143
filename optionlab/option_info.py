"""Option data shared by the pricing models."""

from dataclasses import dataclass

from .payoff import Payoff


@dataclass
class OptionInfo:
    """An option's payoff and its time to expiration in years."""

    payoff: Payoff
    expiration_time: float

    def option_payoff(self, spot):
        """Return the option's payoff at the given spot price."""
        return self.payoff.payoff(spot)

    def time_to_expiry(self):
        """Return the time to expiration in years."""
        return self.expiration_time

    def copy(self):
        """Return a copy holding its own clone of the payoff."""
        return OptionInfo(self.payoff.clone(), self.expiration_time)

    __copy__ = copy