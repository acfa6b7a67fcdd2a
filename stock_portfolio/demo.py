#!/usr/bin/env python3
"""
Stock Portfolio Demo

Runs a fixed sequence of portfolio operations:
- Opening positions in AAPL, GOOG and BND
- Buying and selling shares
- A simulated market move
- A manual price update and a removal
- Printing every transaction history

Run this file to see the simulation in action.
"""

import argparse
import logging
import sys
import traceback

from stock_portfolio.config import SimulationConfig, load_config
from stock_portfolio.core.portfolio import Portfolio
from stock_portfolio.core.stock import Stock
from stock_portfolio.utils.random_state import create_rng

logger = logging.getLogger(__name__)


def run_simulation(config: SimulationConfig, rng=None) -> Portfolio:
    """
    Run the fixed operation sequence.

    Args:
        config: Simulation settings
        rng: Random generator for the market update; built from
            ``config.seed`` when not given

    Returns:
        The portfolio in its final state
    """
    if rng is None:
        rng = create_rng(config.seed)

    portfolio = Portfolio(config.portfolio_name, config.initial_cash,
                          default_volatility=config.default_volatility)

    # Initial investments
    portfolio.add_stock(Stock("AAPL", 150.0, 50, 0.2))
    portfolio.add_stock(Stock("GOOG", 2000.0, 10, 0.1))
    portfolio.add_stock(Stock("BND", 80.0, 100, 0.05))
    print("Initial Portfolio:")
    portfolio.print_portfolio()
    portfolio.print_diversification()
    print()

    portfolio.buy_stock("AAPL", 155.0, 20)
    print("After buying 20 more AAPL shares:")
    portfolio.print_portfolio()
    print()

    if portfolio.sell_stock("GOOG", 5, 2050.0):
        print("After selling 5 GOOG shares:")
        portfolio.print_portfolio()
    else:
        print("Failed to sell GOOG shares")
    print()

    portfolio.simulate_market_update(rng)
    print("After market price update:")
    portfolio.print_portfolio()
    portfolio.print_diversification()
    print()

    portfolio.update_stock_price("BND", 82.0)
    print("After manual BND price update to 82.0:")
    portfolio.print_portfolio()
    print()

    if portfolio.remove_stock("AAPL"):
        print("After removing AAPL:")
        portfolio.print_portfolio()
    print()

    print("Full Transaction History:")
    portfolio.print_all_histories()

    return portfolio


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run the stock portfolio simulation")
    parser.add_argument("--config", default=None, help="Configuration JSON file path")
    parser.add_argument("--seed", type=int, default=None, help="Seed for simulated market moves")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ...)")

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config).with_overrides(seed=args.seed, log_level=args.log_level)
        logging.basicConfig(level=config.log_level,
                            format="%(asctime)s %(levelname)s %(name)s: %(message)s")
        logger.info(f"Starting simulation for {config.portfolio_name} with seed={config.seed}")

        run_simulation(config)

    except Exception as e:
        print(f"\nSimulation failed with error: {str(e)}")
        traceback.print_exc()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
