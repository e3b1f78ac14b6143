"""Black-Scholes option valuation, implied volatility and risk values."""

import math
from dataclasses import dataclass
from enum import Enum


class PayOffType(Enum):
    """Sign φ of the payoff: 1 for a call, -1 for a put."""

    CALL = 1
    PUT = -1


class RiskValues(Enum):
    """The sensitivities returned by :meth:`BlackScholes.risk_values`."""

    DELTA = "delta"
    GAMMA = "gamma"
    VEGA = "vega"
    RHO = "rho"
    THETA = "theta"


def norm_cdf(x):
    """Return the standard normal cumulative distribution at ``x``."""
    return (1.0 + math.erf(x / math.sqrt(2.0))) / 2.0


def _norm_pdf(x):
    return (1.0 / math.sqrt(2.0)) * math.exp(-x)


def _divide(numerator, denominator):
    """Divide with IEEE semantics for a zero denominator."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


@dataclass(frozen=True)
class BlackScholes:
    """Black-Scholes valuation of a European equity option.

    V = φ[S e^(-qT) N(φ d1) - X e^(-rT) N(φ d2)], with the time to
    expiration T in years.
    """

    strike_price: float
    spot_price: float
    expiry_time: float
    interest_rate: float
    pay_off_type: PayOffType
    dividend: float = 0.0

    @property
    def _phi(self):
        return self.pay_off_type.value

    def __call__(self, vol):
        """Return the option value for the volatility ``vol``."""
        phi = self._phi
        if self.expiry_time > 0.0:
            d1, d2 = self.norm_args(vol)
            n_d1 = norm_cdf(phi * d1)
            n_d2 = norm_cdf(phi * d2)
            discount = math.exp(-self.interest_rate * self.expiry_time)
            return (
                phi * (self.spot_price * math.exp(-self.dividend * self.expiry_time)) * n_d1
                - discount * self.strike_price * n_d2
            )
        return max(phi * (self.spot_price - self.strike_price), 0.0)

    def norm_args(self, volatility):
        """Return the pair (d1, d2) for the given volatility."""
        spread = volatility * math.sqrt(self.expiry_time)
        numerator = math.log(self.spot_price / self.strike_price) + (
            self.interest_rate - self.dividend + volatility * volatility / 2
        ) * self.expiry_time
        d1 = _divide(numerator, spread)
        return d1, d1 - spread

    def implied_volatility(self, market_price, x0, x1, tolerance, max_iteration):
        """Find the volatility matching ``market_price`` by the secant method.

        Starts from the guesses ``x0`` and ``x1``; returns NaN if the
        iteration does not converge within ``max_iteration`` steps.
        """

        def diff(vol):
            return self(vol) - market_price

        y0, y1 = diff(x0), diff(x1)
        for _ in range(max_iteration + 1):
            if not abs(x1 - x0) > tolerance:
                return x1
            if y1 == y0:
                return math.nan
            estimate = x1 - (x1 - x0) * y1 / (y1 - y0)
            x0, x1 = x1, estimate
            y0, y1 = y1, diff(x1)
        return math.nan

    def risk_values(self, volatility):
        """Return delta, gamma, vega, rho and theta for the given volatility."""
        d1, d2 = self.norm_args(volatility)
        phi = self._phi
        spot, strike, expiry = self.spot_price, self.strike_price, self.expiry_time
        rate, div = self.interest_rate, self.dividend

        nd_1 = norm_cdf(phi * d1)
        nd_2 = norm_cdf(phi * d2)
        discount = math.exp(-rate * expiry)
        div_discount = math.exp(-div * expiry)

        delta = phi * div_discount * nd_1
        gamma = div_discount * _norm_pdf(d1) / (spot * volatility * math.sqrt(expiry))
        vega = spot * spot * gamma * volatility * expiry
        rho = phi * expiry * strike * discount * nd_2
        theta = (
            phi * div * spot * div_discount * nd_1
            - phi * rate * strike * discount * nd_2
            - spot * div_discount * _norm_pdf(d1) * volatility / (2.0 * math.sqrt(expiry))
        )

        return {
            RiskValues.DELTA: delta,
            RiskValues.GAMMA: gamma,
            RiskValues.VEGA: vega,
            RiskValues.RHO: rho,
            RiskValues.THETA: theta,
        }