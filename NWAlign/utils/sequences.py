"""
Random test sequences
"""
from typing import Optional

import numpy as np

DNA_ALPHABET = "ACGT"


def random_sequence(length: int,
                    alphabet: str = DNA_ALPHABET,
                    seed: Optional[int] = None) -> str:
    """
    Draw a sequence uniformly from alphabet

    Args:
        length: Number of symbols
        alphabet: Symbols to draw from (default "ACGT")
        seed: Seed for reproducible output

    Returns:
        str: Random sequence

    Example:
        >>> random_sequence(8, seed=1) == random_sequence(8, seed=1)
        True
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    if not alphabet:
        raise ValueError("alphabet must not be empty")

    rng = np.random.default_rng(seed)
    idx = rng.integers(0, len(alphabet), size=length)
    return ''.join(alphabet[k] for k in idx)
