"""
Hash function for integer cell coordinates.
"""

from typing import Iterable

DEFAULT_HASH_BASE = 257


class IndexHash:
    """
    Combining hash for N-dimensional cell coordinates.

    Each axis is scaled by a different power of ``base`` before being folded
    in with XOR, so axis-aligned neighbours rarely collide.
    """

    def __init__(self, base: int = DEFAULT_HASH_BASE):
        """
        Initialize hasher.

        Parameters
        ----------
        base : int
            Multiplier applied to the per-axis weight after each axis (>= 2)
        """
        if int(base) != base or base < 2:
            raise ValueError(f"hash base must be an integer >= 2, got {base}")
        self.base = int(base)

    def __call__(self, index: Iterable[int]) -> int:
        res = 0
        weight = 1
        for component in index:
            res ^= weight * component
            weight *= self.base
        return res

    def __repr__(self) -> str:
        return f"IndexHash(base={self.base})"
