"""
Transaction Recording Module

This module provides the immutable transaction record that every stock
holding appends to its history on each buy, sell, or price update.
"""

from datetime import datetime
from typing import Dict, Any
from dataclasses import dataclass, field
from enum import Enum
import uuid


class TransactionType(Enum):
    """Transaction type enumeration."""
    BUY = "buy"
    SELL = "sell"
    PRICE_UPDATE = "price_update"


@dataclass(frozen=True)
class Transaction:
    """
    A single entry in a stock's transaction history.

    The timestamp is captured when the record is created. Values are not
    validated here; the owning Stock checks its arguments before appending.
    """
    transaction_type: TransactionType
    ticker: str
    price: float
    quantity: int
    timestamp: datetime = field(default_factory=datetime.now)
    transaction_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def value(self) -> float:
        """Price times quantity."""
        return self.price * self.quantity

    def render(self) -> str:
        """
        Render the transaction as one human-readable line.

        Returns:
            String such as ``BUY AAPL - Price: 150.00, Shares: 50, Time: ...``
        """
        kind = self.transaction_type.name
        return (f"{kind} {self.ticker} - Price: {self.price:.2f}, "
                f"Shares: {self.quantity}, Time: {self.timestamp.ctime()}")

    def get_transaction_summary(self) -> Dict[str, Any]:
        """
        Get transaction summary.

        Returns:
            Dictionary with all transaction fields
        """
        return {
            'transaction_id': self.transaction_id,
            'transaction_type': self.transaction_type.value,
            'ticker': self.ticker,
            'price': float(self.price),
            'quantity': int(self.quantity),
            'value': float(self.value),
            'timestamp': self.timestamp.isoformat()
        }

    def __str__(self) -> str:
        return self.render()
