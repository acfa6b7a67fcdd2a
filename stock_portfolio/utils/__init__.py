"""
Utility functions for the stock portfolio simulator.
"""

from .random_state import create_rng

__all__ = ['create_rng']
