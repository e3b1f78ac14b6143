[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "optionlab"
version = "0.1.0"
description = "Equity option tools: payoffs, Black-Scholes valuation, implied volatility, risk values, z-table lookups and CSV data tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["options", "black-scholes", "implied volatility", "greeks", "finance", "z-table"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["optionlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
