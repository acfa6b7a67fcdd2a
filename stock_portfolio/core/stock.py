"""
Stock Holding Module

This module provides the Stock class for tracking a single ticker's price,
share count, and volatility together with its transaction history.
"""

from typing import List, Dict, Any
import logging

import pandas as pd

from .transaction import Transaction, TransactionType

logger = logging.getLogger(__name__)

DEFAULT_VOLATILITY = 0.1


class InvalidArgumentError(ValueError):
    """Raised when a stock operation receives a negative or out-of-range argument."""


class Stock:
    """
    A holding of one ticker.

    This class manages:
    - Current price and share quantity
    - Volatility used for simulated price moves
    - Append-only transaction history in chronological order
    """

    def __init__(self,
                 ticker: str,
                 price: float,
                 quantity: int,
                 volatility: float = DEFAULT_VOLATILITY):
        """
        Initialize a new holding and record its initial purchase.

        Args:
            ticker: Stock ticker (e.g., 'AAPL')
            price: Current price per share
            quantity: Number of shares held
            volatility: Fraction bounding simulated price swings

        Raises:
            InvalidArgumentError: If price, quantity or volatility is negative
        """
        if price < 0 or quantity < 0 or volatility < 0:
            raise InvalidArgumentError(
                "Price, quantity, and volatility must be non-negative."
            )

        self.ticker = ticker
        self.price = price
        self.quantity = quantity
        self.volatility = volatility
        self.history: List[Transaction] = []

        self._record(TransactionType.BUY, price, quantity)

    def _record(self, transaction_type: TransactionType, price: float, quantity: int):
        self.history.append(Transaction(transaction_type, self.ticker, price, quantity))

    def get_value(self) -> float:
        """Get market value of the holding (price x quantity)."""
        return self.price * self.quantity

    def update_price(self, new_price: float):
        """
        Set a new market price.

        The PRICE_UPDATE transaction records the new price and the current
        quantity.

        Args:
            new_price: New price per share

        Raises:
            InvalidArgumentError: If new_price is negative
        """
        if new_price < 0:
            raise InvalidArgumentError("Price cannot be negative.")

        self._record(TransactionType.PRICE_UPDATE, new_price, self.quantity)
        self.price = new_price

    def add_shares(self, quantity: int, buy_price: float):
        """
        Add shares to the holding (buy transaction).

        Args:
            quantity: Number of shares to add, must be positive
            buy_price: Price paid per share

        Raises:
            InvalidArgumentError: If quantity is not positive or buy_price is negative
        """
        if quantity <= 0 or buy_price < 0:
            raise InvalidArgumentError(
                "Additional quantity and buy price must be positive."
            )

        self.quantity += quantity
        self._record(TransactionType.BUY, buy_price, quantity)

    def sell_shares(self, quantity: int, sell_price: float) -> bool:
        """
        Remove shares from the holding (sell transaction).

        Args:
            quantity: Number of shares to sell
            sell_price: Price received per share

        Returns:
            True if the sale was recorded, False if quantity is not in
            (0, held shares] or sell_price is negative
        """
        if quantity <= 0 or quantity > self.quantity or sell_price < 0:
            return False

        self.quantity -= quantity
        self._record(TransactionType.SELL, sell_price, quantity)
        return True

    def simulate_price_update(self, rng):
        """
        Move the price by a random fraction of its volatility.

        The draw is an integer in [-100, 100) from ``rng``, read as hundredths
        of the volatility band.

        Args:
            rng: Random generator exposing ``integers(low, high)``, usually a
                ``numpy.random.Generator``

        Raises:
            InvalidArgumentError: If the move would make the price negative
        """
        step = int(rng.integers(-100, 100))
        change = step / 100.0 * self.volatility * self.price
        logger.debug(f"{self.ticker}: simulated change {change:+.4f} from {self.price:.4f}")
        self.update_price(self.price + change)

    def print_history(self):
        """Print every transaction for this holding, oldest first."""
        print(f"Transaction History for {self.ticker}:")
        for transaction in self.history:
            print(transaction.render())

    def get_history_frame(self) -> pd.DataFrame:
        """
        Get the transaction history as a DataFrame.

        Returns:
            DataFrame with one row per transaction in chronological order
        """
        return pd.DataFrame([t.get_transaction_summary() for t in self.history])

    def get_stock_summary(self) -> Dict[str, Any]:
        """Get holding summary."""
        return {
            'ticker': self.ticker,
            'price': float(self.price),
            'quantity': int(self.quantity),
            'volatility': float(self.volatility),
            'value': float(self.get_value()),
            'number_of_transactions': len(self.history)
        }

    def __str__(self) -> str:
        return (f"{self.ticker}, Price: {self.price:.2f}, "
                f"Shares: {self.quantity}, Value: {self.get_value():.2f}")

    def __repr__(self) -> str:
        return (f"Stock(ticker='{self.ticker}', price={self.price}, "
                f"quantity={self.quantity}, volatility={self.volatility})")
