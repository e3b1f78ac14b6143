import math

import pytest

from optionlab.black_scholes import BlackScholes, PayOffType, RiskValues, norm_cdf


def make(pay_off=PayOffType.CALL, strike=100.0, spot=100.0, expiry=1.0, rate=0.05):
    return BlackScholes(strike, spot, expiry, rate, pay_off)


@pytest.mark.parametrize(
    "sign, spot, expected",
    [(1, 120.0, 20.0), (1, 80.0, 0.0), (-1, 80.0, 20.0), (-1, 120.0, 0.0)],
)
def test_pay_off_type_sign_selects_intrinsic(sign, spot, expected):
    option = BlackScholes(100.0, spot, 0.0, 0.05, PayOffType(sign))
    assert option(0.2) == pytest.approx(expected)


def test_norm_cdf_centre():
    assert norm_cdf(0.0) == pytest.approx(0.5)


@pytest.mark.parametrize("x", [0.1, 0.7, 1.5, 3.0])
def test_norm_cdf_symmetry(x):
    assert norm_cdf(x) + norm_cdf(-x) == pytest.approx(1.0)
    assert norm_cdf(-x) < norm_cdf(x)


def test_call_price_standard_example():
    assert make()(0.2) == pytest.approx(10.4506, abs=1e-3)


def test_call_price_increases_with_volatility():
    option = make()
    assert option(0.1) < option(0.2) < option(0.4)


def test_expired_call_is_intrinsic():
    assert make(spot=110.0, expiry=0.0)(0.2) == pytest.approx(10.0)
    assert make(spot=90.0, expiry=0.0)(0.2) == 0.0


def test_expired_put_is_intrinsic():
    assert make(PayOffType.PUT, spot=90.0, expiry=0.0)(0.2) == pytest.approx(10.0)
    assert make(PayOffType.PUT, spot=110.0, expiry=0.0)(0.2) == 0.0


def test_norm_args_spread():
    d1, d2 = make(expiry=0.25).norm_args(0.3)
    assert d1 - d2 == pytest.approx(0.3 * math.sqrt(0.25))


def test_norm_args_zero_volatility_is_infinite():
    d1, _ = make(spot=110.0).norm_args(0.0)
    assert d1 == math.inf


def test_implied_volatility_round_trip():
    option = make(spot=105.0, expiry=0.5)
    price = option(0.25)
    assert option.implied_volatility(price, 0.1, 0.5, 1e-8, 100) == pytest.approx(0.25, abs=1e-6)


def test_implied_volatility_equal_guesses_returns_guess():
    assert make().implied_volatility(5.0, 0.3, 0.3, 1e-6, 10) == 0.3


def test_implied_volatility_no_iterations_is_nan():
    option = make()
    price = option(0.25)
    result = option.implied_volatility(price, 0.05, 0.9, 1e-12, 0)
    assert str(result) == "nan"


def test_risk_values_keys_in_order():
    values = make().risk_values(0.2)
    assert list(values) == [
        RiskValues.DELTA,
        RiskValues.GAMMA,
        RiskValues.VEGA,
        RiskValues.RHO,
        RiskValues.THETA,
    ]


def test_call_and_put_delta_differ_by_one():
    call = make().risk_values(0.2)[RiskValues.DELTA]
    put = make(PayOffType.PUT).risk_values(0.2)[RiskValues.DELTA]
    assert 0.0 < call < 1.0
    assert -1.0 < put < 0.0
    assert call - put == pytest.approx(1.0)


def test_rho_sign_follows_pay_off():
    assert make().risk_values(0.2)[RiskValues.RHO] > 0.0
    assert make(PayOffType.PUT).risk_values(0.2)[RiskValues.RHO] < 0.0


def test_gamma_and_vega_same_for_call_and_put():
    call = make().risk_values(0.2)
    put = make(PayOffType.PUT).risk_values(0.2)
    assert call[RiskValues.GAMMA] == pytest.approx(put[RiskValues.GAMMA])
    assert call[RiskValues.VEGA] == pytest.approx(put[RiskValues.VEGA])
    assert call[RiskValues.GAMMA] > 0.0