"""
Stock Portfolio Package

An in-memory stock portfolio simulator: holdings with transaction
histories, cash management, diversification reporting and simulated
market moves.

Key Components:
- Core: Portfolio, Stock, and Transaction management
- Config: Settings for the demo driver
- Utils: Random generator construction
"""

__version__ = "1.0.0"

from .core.portfolio import Portfolio
from .core.stock import Stock, InvalidArgumentError
from .core.transaction import Transaction, TransactionType
from .core.results import OperationResult, OperationStatus
from .config import SimulationConfig, load_config
from .utils.random_state import create_rng

__all__ = [
    # Core
    'Portfolio',
    'Stock',
    'InvalidArgumentError',
    'Transaction',
    'TransactionType',
    'OperationResult',
    'OperationStatus',
    # Config
    'SimulationConfig',
    'load_config',
    # Utils
    'create_rng',
]
