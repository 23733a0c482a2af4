"""Monte Carlo simulation toolkit: random numbers, blocking statistics, integration, option pricing and random walks."""

__version__ = "0.1.0"