"""
Test cases for Transaction records
"""

from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from stock_portfolio.core.transaction import Transaction, TransactionType


def test_transaction_captures_timestamp():
    """Timestamp is taken at construction"""
    before = datetime.now()
    transaction = Transaction(TransactionType.BUY, "AAPL", 150.0, 50)
    after = datetime.now()

    assert before <= transaction.timestamp <= after


def test_transaction_value():
    """Value is price times quantity"""
    transaction = Transaction(TransactionType.SELL, "GOOG", 2050.0, 5)
    assert transaction.value == pytest.approx(10250.0)


def test_transaction_is_immutable():
    """Fields cannot be reassigned after creation"""
    transaction = Transaction(TransactionType.BUY, "AAPL", 150.0, 50)

    with pytest.raises(FrozenInstanceError):
        transaction.price = 1.0


def test_render_contains_all_fields():
    """Rendered line shows kind, ticker, price, shares and time"""
    stamp = datetime(2024, 1, 2, 9, 30, 0)
    transaction = Transaction(TransactionType.PRICE_UPDATE, "BND", 82.0, 100, timestamp=stamp)

    line = transaction.render()

    assert line == f"PRICE_UPDATE BND - Price: 82.00, Shares: 100, Time: {stamp.ctime()}"
    assert str(transaction) == line


def test_transaction_summary():
    """Summary dictionary exposes every field"""
    stamp = datetime(2024, 1, 2, 9, 30, 0)
    transaction = Transaction(TransactionType.BUY, "AAPL", 155.0, 20, timestamp=stamp)

    summary = transaction.get_transaction_summary()

    assert summary['transaction_type'] == "buy"
    assert summary['ticker'] == "AAPL"
    assert summary['price'] == 155.0
    assert summary['quantity'] == 20
    assert summary['value'] == pytest.approx(3100.0)
    assert summary['timestamp'] == stamp.isoformat()
    assert summary['transaction_id'] == transaction.transaction_id


def test_transaction_ids_are_unique():
    """Each record gets its own id"""
    first = Transaction(TransactionType.BUY, "AAPL", 150.0, 1)
    second = Transaction(TransactionType.BUY, "AAPL", 150.0, 1)
    assert first.transaction_id != second.transaction_id
