# optionlab

A small library for valuing European equity options with the
Black-Scholes formula. It also reads tabular numeric data from
comma-separated files.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `optionlab.black_scholes`

- `PayOffType`: `CALL` (value 1) and `PUT` (value -1). This value is the sign φ in the formula.
- `BlackScholes(strike_price, spot_price, expiry_time, interest_rate, pay_off_type, dividend=0.0)`
  is a frozen dataclass. `expiry_time` is the time to expiration in years.
  - Call the instance with a volatility to get the option value. When
    `expiry_time` is not positive, the value is `max(φ·(spot − strike), 0)`.
  - `norm_args(volatility)` returns the pair `(d1, d2)`.
  - `implied_volatility(market_price, x0, x1, tolerance, max_iteration)`
    runs the secant method from the starting guesses `x0` and `x1`. It
    returns NaN if the method does not converge.
  - `risk_values(volatility)` returns a dict that maps the `RiskValues`
    members `DELTA`, `GAMMA`, `VEGA`, `RHO` and `THETA` to floats.
- `norm_cdf(x)` is the standard normal cumulative distribution function.

### `optionlab.payoff`

- `Payoff` is the abstract base class. It has the methods `payoff(price)` and `clone()`.
- `CallPayoff(strike)` and `PutPayoff(strike)` are frozen dataclasses. Both
  compute their payoff as `max(price - strike, 0)`.

### `optionlab.option_info`

- `OptionInfo(payoff, expiration_time)` holds a payoff and a time to expiry. Its methods are:
  - `option_payoff(spot)`
  - `time_to_expiry()`
  - `copy()`, which returns a copy with its own clone of the payoff. `copy.copy` uses it too.

### `optionlab.zscore`

`ZScore` is a four-digit table of standard normal probabilities for z from
-3.7 to 3.6.

- `probability(z, decimal)` returns the table entry for row `z` and column
  `decimal`. It returns 0.0 when either argument is out of range.
- `score(target_prob)` is the reverse lookup. It uses a binary search over
  the rows and returns 0.0 when no row spans the target.

### `optionlab.dataset`

`Dataset` holds `fields` (the column names) and `data` (all values as a
flat list, row by row).

- `import_data(file_name)` reads a CSV file. The first line gives the
  column names and every other line gives numbers. Whitespace inside each
  field is removed. The method returns `True` on success. It returns
  `False` and logs a message if the file is empty, cannot be opened or
  holds a non-numeric value.
- `format_data()` renders the table as right-aligned text. If there are no
  fields, no data, or the data does not fill whole rows, it returns a
  message instead.
- `print_data(file=None)` writes the output of `format_data()` to `file`,
  or to standard output when `file` is not given.

### `optionlab.filereader` and `optionlab.logger`

- `read_file_into_string(path)` returns the contents of a file. It raises
  `OSError` if the file cannot be opened.
- `string_to_double(text)` and `string_to_int(text)` parse numbers
  strictly. They raise `ValueError` on bad input or trailing characters.
  `string_to_int` only accepts values in the 32-bit range.
- `log(level, message)` writes the message to standard output when `level`
  is at or below the current level. `set_log_level(level)` sets the level,
  clamped to 9, and `get_log_level()` returns it. The default level is 1.

## Example

```python
from optionlab.black_scholes import BlackScholes, PayOffType, RiskValues

bs = BlackScholes(strike_price=100.0, spot_price=100.0, expiry_time=1.0,
                  interest_rate=0.05, pay_off_type=PayOffType.CALL)
price = bs(0.2)
vol = bs.implied_volatility(price, 0.1, 0.3, 1e-8, 100)
greeks = bs.risk_values(0.2)
print(price, vol, greeks[RiskValues.DELTA])
```

```python
from optionlab.zscore import ZScore

table = ZScore()
print(table.probability(1.9, 0.05))
print(table.score(0.975))
```

## What it does not do

- It has no command-line program. You use it only as a library.
- Black-Scholes is the only pricing model. It has no lattice or
  simulation models, so it cannot price American options.
- It does not fetch market data. Data comes only from local CSV files.