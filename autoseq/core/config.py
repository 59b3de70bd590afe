"""
autoseq.core.config
===================

Capacity-growth configuration for the sequence cache.

The cache grows its backing buffer in bursts rather than one term at a time.
`GrowthPolicy` decides how large the next buffer is:

- grow by `factor` (1.5 by default), but never below the requested size;
- below `threshold` (1024 by default), round up to the next power of two.

Examples
--------
>>> from autoseq.core.config import GrowthPolicy
>>> policy = GrowthPolicy()
>>> policy.next_capacity(0, 3)
4
>>> policy.next_capacity(16, 17)
32
>>> policy.next_capacity(1024, 1025)
1536
"""

from __future__ import annotations
from dataclasses import dataclass


def bit_ceil(value: int) -> int:
    """Smallest power of two not less than `value` (1 for 0 and 1).

    Examples
    --------
    >>> [bit_ceil(v) for v in (0, 1, 2, 3, 5, 1000)]
    [1, 1, 2, 4, 8, 1024]
    """
    if value <= 1:
        return 1
    return 1 << (value - 1).bit_length()


@dataclass(frozen=True)
class GrowthPolicy:
    """
    Growth rule for the backing buffer of an `AutoSequence`.

    Attributes
    ----------
    threshold : int, default=1024
        Capacities below this value are rounded up to a power of two.
        Set to 0 to disable rounding entirely.
    factor : float, default=1.5
        Amortized growth factor applied to the current capacity.

    Examples
    --------
    >>> GrowthPolicy(threshold=0).next_capacity(10, 11)
    15
    >>> GrowthPolicy(factor=1.0).validate()
    Traceback (most recent call last):
        ...
    ValueError: factor must be > 1, got 1.0
    """

    threshold: int = 1024
    factor: float = 1.5

    def validate(self) -> None:
        """Validate growth configuration."""
        if self.threshold < 0:
            raise ValueError(f"threshold must be non-negative, got {self.threshold}")
        if self.factor <= 1:
            raise ValueError(f"factor must be > 1, got {self.factor}")

    def next_capacity(self, capacity: int, needed: int) -> int:
        """
        Capacity to allocate when `needed` terms do not fit in `capacity`.

        Parameters
        ----------
        capacity : int
            Current buffer capacity.
        needed : int
            Number of terms the buffer must hold after growth.

        Returns
        -------
        int
            New capacity, always >= `needed`.
        """
        if self.factor == 1.5:
            grown = capacity + capacity // 2
        else:
            grown = int(capacity * self.factor)
        new_capacity = max(needed, grown)
        if new_capacity < self.threshold:
            new_capacity = bit_ceil(new_capacity)
        return new_capacity
