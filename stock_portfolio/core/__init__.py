"""
Core Portfolio Components

This module contains the building blocks of the simulation:
- Portfolio: Holdings plus cash, with trading and reporting operations
- Stock: A single ticker's price, shares, volatility and history
- Transaction: Immutable record of a buy, sell or price update
"""

from .portfolio import Portfolio
from .stock import Stock, InvalidArgumentError
from .transaction import Transaction, TransactionType
from .results import OperationResult, OperationStatus

__all__ = [
    'Portfolio',
    'Stock',
    'InvalidArgumentError',
    'Transaction',
    'TransactionType',
    'OperationResult',
    'OperationStatus',
]
