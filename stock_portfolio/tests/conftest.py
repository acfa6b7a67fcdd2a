"""Shared fixtures for the stock portfolio tests."""

import pytest

from stock_portfolio.core.portfolio import Portfolio
from stock_portfolio.core.stock import Stock


class FixedRng:
    """Generator stand-in that always draws the same step."""

    def __init__(self, step):
        self.step = step
        self.calls = []

    def integers(self, low, high):
        self.calls.append((low, high))
        return self.step


@pytest.fixture
def fixed_rng():
    """Factory for generators returning a fixed step in hundredths."""
    return FixedRng


@pytest.fixture
def retirement():
    """Portfolio from the demo after the three initial investments."""
    portfolio = Portfolio("Retirement Fund", 50000.0)
    portfolio.add_stock(Stock("AAPL", 150.0, 50, 0.2))
    portfolio.add_stock(Stock("GOOG", 2000.0, 10, 0.1))
    portfolio.add_stock(Stock("BND", 80.0, 100, 0.05))
    return portfolio
