"""Option payoffs, Black-Scholes valuation, z-table lookups and CSV data tables."""

__version__ = "0.1.0"
__all__ = [
    "logger",
    "filereader",
    "dataset",
    "payoff",
    "option_info",
    "zscore",
    "black_scholes",
]