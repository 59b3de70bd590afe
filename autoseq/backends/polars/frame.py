"""
autoseq.backends.polars.frame
=============================

Export cached terms to a **Polars** DataFrame.

Only the terms already cached are exported; nothing is computed.

Examples
--------
>>> from autoseq import AutoSequence
>>> from autoseq.backends.polars.frame import to_frame
>>> seq = AutoSequence(lambda n, h: n * n)
>>> seq.prefetch_up_to(3)
>>> df = to_frame(seq, name="square")
>>> df.columns
['n', 'square']
>>> df["square"].to_list()
[0, 1, 4, 9]
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import polars as pl

if TYPE_CHECKING:
    from autoseq.core.sequence import AutoSequence


def to_frame(seq: "AutoSequence", name: str = "value") -> pl.DataFrame:
    """Return columns ``n`` (UInt64) and `name`, one row per cached term."""
    if name == "n":
        raise ValueError("value column cannot be named 'n'")
    terms = seq.snapshot()
    return pl.DataFrame(
        [
            pl.Series("n", list(range(len(terms))), dtype=pl.UInt64),
            pl.Series(name, terms),
        ]
    )
