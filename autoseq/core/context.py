"""
autoseq.core.context
====================

The math context handed to single-argument formulas.

A `MathContext` pairs the index being computed with a read-only view of every
term computed so far. One is built for each formula call and dropped right
after; it owns nothing.

Indexing a context uses *math* indices: ``ctx[i]`` is ``a[i]`` and must
satisfy ``0 <= i < n``. Negative indices are not wrapped around.

Examples
--------
>>> from autoseq import AutoSequence
>>> fib = AutoSequence(lambda a: a[a.n() - 1] + a[a.n() - 2], 0, 1)
>>> fib[10]
55
>>> squares_diff = AutoSequence(lambda a: a.last() + 2 * a.index() - 1, 0)
>>> squares_diff.slice(0, 6).tolist()
[0, 1, 4, 9, 16, 25]
"""

from __future__ import annotations
import operator
from typing import Any, Iterator

from autoseq.core.view import SequenceView


class MathContext:
    """Read-only pairing of the current index with the computed history."""

    __slots__ = ("_index", "history")

    def __init__(self, index: int, history: SequenceView) -> None:
        self._index = index
        self.history = history

    def index(self) -> int:
        """Index ``n`` of the term being computed."""
        return self._index

    n = index

    def previous(self) -> Any:
        """The term ``a[n-1]``; requires a non-empty history."""
        assert len(self.history) > 0, (
            "autoseq: previous() called with an empty history"
        )
        return self.history[len(self.history) - 1]

    last = previous

    def at(self, i: int) -> Any:
        """The term ``a[i]`` for ``0 <= i < n``."""
        i = operator.index(i)
        assert 0 <= i < len(self.history), f"autoseq: index {i} out of range"
        return self.history[i]

    __getitem__ = at

    def __iter__(self) -> Iterator[Any]:
        return iter(self.history)

    def __len__(self) -> int:
        return len(self.history)

    def __repr__(self) -> str:
        return f"MathContext(index={self._index}, history={self.history!r})"
