"""
Portfolio Management Module

This module provides the Portfolio class that owns a set of stock holdings
and a cash balance, and keeps the two consistent across buys, sells, price
updates and removals.
"""

from typing import Dict, List, Optional, Any
import json
import logging

import pandas as pd

from .stock import Stock, InvalidArgumentError
from .results import OperationResult, OperationStatus

logger = logging.getLogger(__name__)

DEFAULT_PORTFOLIO_NAME = "Unnamed Portfolio"
DEFAULT_INITIAL_CASH = 10000.0
DEFAULT_BUY_VOLATILITY = 0.15


class Portfolio:
    """
    Portfolio of stock holdings plus cash.

    This class provides:
    - Buying, selling, price updates and removal of holdings
    - Cash management tied to every trade
    - Total value and diversification reporting
    - Simulated market moves driven by an explicit random generator

    Holdings are keyed by ticker and iterate in the order they were added.
    Operations that can fail for business reasons (unknown ticker, not
    enough cash or shares) return an OperationResult. Negative prices and
    quantities raise InvalidArgumentError.
    """

    def __init__(self,
                 name: str,
                 initial_cash: float = DEFAULT_INITIAL_CASH,
                 default_volatility: float = DEFAULT_BUY_VOLATILITY):
        """
        Initialize a new portfolio.

        Args:
            name: Portfolio name, replaced by a placeholder when empty
            initial_cash: Starting cash balance
            default_volatility: Volatility given to holdings opened by buy_stock
        """
        self.name = name or DEFAULT_PORTFOLIO_NAME
        self.cash_balance = initial_cash
        self.default_volatility = default_volatility
        self.holdings: Dict[str, Stock] = {}

    def add_stock(self, stock: Stock) -> OperationResult:
        """
        Add a holding and pay for it from cash.

        Args:
            stock: Holding to add; its current value is deducted from cash

        Returns:
            SUCCESS, or DUPLICATE_TICKER if the ticker is already held
        """
        if stock.ticker in self.holdings:
            message = f"{stock.ticker} is already held in {self.name}"
            logger.warning(message)
            return OperationResult.failure(OperationStatus.DUPLICATE_TICKER, message)

        self.holdings[stock.ticker] = stock
        self.cash_balance -= stock.get_value()
        logger.info(f"Added {stock.quantity} {stock.ticker} @ {stock.price:.2f} to {self.name}")
        return OperationResult.success(f"Added {stock.ticker}")

    def remove_stock(self, ticker: str) -> OperationResult:
        """
        Remove a holding and credit its current value to cash.

        Args:
            ticker: Ticker to remove

        Returns:
            SUCCESS, or NOT_FOUND if the ticker is not held
        """
        stock = self.holdings.pop(ticker, None)
        if stock is None:
            return self._not_found(ticker)

        self.cash_balance += stock.get_value()
        logger.info(f"Removed {ticker} from {self.name}, credited {stock.get_value():.2f}")
        return OperationResult.success(f"Removed {ticker}")

    def get_stock(self, ticker: str) -> Optional[Stock]:
        """Get holding for a ticker."""
        return self.holdings.get(ticker)

    def get_holdings(self) -> List[Stock]:
        """Get all holdings in insertion order."""
        return list(self.holdings.values())

    def get_cash_balance(self) -> float:
        """Get current cash balance."""
        return self.cash_balance

    def get_market_value(self) -> float:
        """Get total value of all holdings, excluding cash."""
        return sum(stock.get_value() for stock in self.holdings.values())

    def get_total_value(self) -> float:
        """Get total portfolio value (cash + holdings)."""
        return self.cash_balance + self.get_market_value()

    def update_stock_price(self, ticker: str, new_price: float) -> OperationResult:
        """
        Set the price of a held stock.

        Args:
            ticker: Ticker to update
            new_price: New price per share

        Returns:
            SUCCESS, or NOT_FOUND if the ticker is not held

        Raises:
            InvalidArgumentError: If new_price is negative
        """
        stock = self.holdings.get(ticker)
        if stock is None:
            return self._not_found(ticker)

        stock.update_price(new_price)
        return OperationResult.success(f"Updated {ticker} to {new_price:.2f}")

    def buy_stock(self, ticker: str, price: float, quantity: int) -> OperationResult:
        """
        Buy shares, adding to an existing holding or opening a new one.

        Args:
            ticker: Ticker to buy
            price: Price per share
            quantity: Number of shares

        Returns:
            SUCCESS, or INSUFFICIENT_FUNDS when the cost exceeds cash

        Raises:
            InvalidArgumentError: If quantity is not positive or price is negative
        """
        if quantity <= 0 or price < 0:
            raise InvalidArgumentError(
                "Buy quantity must be positive and price non-negative."
            )

        cost = price * quantity
        if cost > self.cash_balance:
            message = f"Insufficient cash to buy {quantity} shares of {ticker}"
            logger.warning(f"{message} (cost {cost:.2f}, available {self.cash_balance:.2f})")
            return OperationResult.failure(OperationStatus.INSUFFICIENT_FUNDS, message)

        stock = self.holdings.get(ticker)
        if stock is None:
            # add_stock deducts the new holding's value, which equals cost
            return self.add_stock(Stock(ticker, price, quantity, self.default_volatility))

        stock.add_shares(quantity, price)
        self.cash_balance -= cost
        logger.info(f"Bought {quantity} {ticker} @ {price:.2f} (cost {cost:.2f})")
        return OperationResult.success(f"Bought {quantity} {ticker}")

    def sell_stock(self, ticker: str, quantity: int, sell_price: float) -> OperationResult:
        """
        Sell shares of a held stock.

        A holding sold down to zero shares is removed from the portfolio.

        Args:
            ticker: Ticker to sell
            quantity: Number of shares
            sell_price: Price received per share

        Returns:
            SUCCESS, NOT_FOUND, INSUFFICIENT_SHARES when quantity exceeds the
            holding, or INVALID_ORDER for a non-positive quantity or
            negative price
        """
        stock = self.holdings.get(ticker)
        if stock is None:
            return self._not_found(ticker)

        if not stock.sell_shares(quantity, sell_price):
            if quantity > stock.quantity:
                status = OperationStatus.INSUFFICIENT_SHARES
                message = f"Cannot sell {quantity} shares of {ticker}, holding has {stock.quantity}"
            else:
                status = OperationStatus.INVALID_ORDER
                message = f"Invalid sell order for {ticker}: quantity={quantity}, price={sell_price}"
            logger.warning(message)
            return OperationResult.failure(status, message)

        proceeds = sell_price * quantity
        self.cash_balance += proceeds
        logger.info(f"Sold {quantity} {ticker} @ {sell_price:.2f} (proceeds {proceeds:.2f})")

        if stock.quantity == 0:
            del self.holdings[ticker]
            logger.info(f"Closed {ticker}, no shares left")

        return OperationResult.success(f"Sold {quantity} {ticker}")

    def get_diversification(self) -> Dict[str, float]:
        """
        Get each holding's share of non-cash value.

        Returns:
            Dictionary of ticker -> percentage (0-100), empty when there is
            no stock value
        """
        market_value = self.get_market_value()
        if market_value <= 0:
            return {}

        return {
            ticker: stock.get_value() / market_value * 100
            for ticker, stock in self.holdings.items()
        }

    def print_diversification(self):
        """Print the percentage of non-cash value held in each stock."""
        diversification = self.get_diversification()
        if not diversification:
            print("No stock value to analyze diversification")
            return

        print("Portfolio Diversification:")
        for ticker, percentage in diversification.items():
            print(f"{ticker}: {percentage:.2f}%")

    def simulate_market_update(self, rng):
        """
        Apply one simulated price move to every holding.

        Args:
            rng: Random generator passed to Stock.simulate_price_update

        Raises:
            InvalidArgumentError: If any simulated price would go negative;
                holdings after the failing one are left untouched
        """
        for stock in self.holdings.values():
            stock.simulate_price_update(rng)
        logger.info(f"Market update applied to {len(self.holdings)} holdings in {self.name}")

    def print_portfolio(self):
        """Print holdings, cash balance and total value."""
        if not self.holdings:
            print("Portfolio is empty")
        else:
            print(f"Portfolio: {self.name}")
            for stock in self.holdings.values():
                print(stock)
        print(f"Cash Balance: {self.cash_balance:.2f}")
        print(f"Total portfolio value: {self.get_total_value():.2f}")

    def print_all_histories(self):
        """Print the transaction history of every holding."""
        for stock in self.holdings.values():
            stock.print_history()

    def get_holdings_frame(self) -> pd.DataFrame:
        """
        Get holdings as a DataFrame.

        Returns:
            DataFrame indexed by ticker with price, quantity, volatility,
            value and weight (percentage of non-cash value)
        """
        columns = ['ticker', 'price', 'quantity', 'volatility', 'value', 'number_of_transactions']
        frame = pd.DataFrame([s.get_stock_summary() for s in self.holdings.values()], columns=columns)
        frame = frame.set_index('ticker')

        market_value = frame['value'].sum()
        frame['weight'] = frame['value'] / market_value * 100 if market_value > 0 else 0.0
        return frame

    def get_transaction_history(self, ticker: str = None) -> pd.DataFrame:
        """
        Get transaction history across holdings.

        Args:
            ticker: Optional ticker filter

        Returns:
            DataFrame of transactions, holdings in insertion order and each
            holding's transactions in chronological order
        """
        stocks = self.holdings.values()
        if ticker:
            stocks = [s for s in stocks if s.ticker == ticker]

        frames = [stock.get_history_frame() for stock in stocks]
        if not frames:
            return pd.DataFrame()
        return pd.concat(frames, ignore_index=True)

    def get_portfolio_summary(self) -> Dict[str, Any]:
        """
        Get portfolio summary.

        Returns:
            Dictionary with values, holdings and diversification
        """
        return {
            'name': self.name,
            'cash_balance': float(self.cash_balance),
            'market_value': float(self.get_market_value()),
            'total_value': float(self.get_total_value()),
            'number_of_holdings': len(self.holdings),
            'holdings': [stock.get_stock_summary() for stock in self.holdings.values()],
            'diversification': self.get_diversification()
        }

    def export_to_json(self) -> str:
        """Export portfolio summary and transactions to a JSON string."""
        data = self.get_portfolio_summary()
        data['transactions'] = [
            t.get_transaction_summary()
            for stock in self.holdings.values()
            for t in stock.history
        ]
        return json.dumps(data, indent=2, default=str)

    def _not_found(self, ticker: str) -> OperationResult:
        message = f"{ticker} not found in {self.name}"
        logger.warning(message)
        return OperationResult.failure(OperationStatus.NOT_FOUND, message)

    def __len__(self) -> int:
        return len(self.holdings)

    def __contains__(self, ticker: str) -> bool:
        return ticker in self.holdings

    def __str__(self) -> str:
        """String representation of portfolio."""
        return f"Portfolio('{self.name}', {len(self.holdings)} holdings, ${self.get_total_value():,.2f})"

    def __repr__(self) -> str:
        """Detailed string representation."""
        return (f"Portfolio(name='{self.name}', cash={self.cash_balance}, "
                f"holdings={list(self.holdings)})")
