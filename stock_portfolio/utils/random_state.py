"""
Random generator construction for simulated market moves.
"""

from typing import Optional
import time

import numpy as np


def create_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create the generator used for simulated price updates.

    Args:
        seed: Fixed seed for reproducible runs. When None the generator is
            seeded from the current time.

    Returns:
        numpy Generator
    """
    if seed is None:
        seed = time.time_ns()
    return np.random.default_rng(seed)
