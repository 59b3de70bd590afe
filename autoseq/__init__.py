"""
autoseq — lazily evaluated, self-memoizing mathematical sequences.

A sequence is defined by a recurrence and optional seed terms. Reading
``a[n]`` computes every missing term up to `n` exactly once and caches it;
later reads are plain lookups. A formula is written either as
``f(index, history)`` or as ``f(ctx)`` over a math context exposing
``ctx.n()``, ``ctx.last()`` and ``ctx[i]``.

Sequences compose: one sequence's formula may read another's terms, and each
cache grows on its own.

Example
-------
>>> from autoseq import AutoSequence
>>> fib = AutoSequence(lambda a: a[a.n() - 1] + a[a.n() - 2], 0, 1)
>>> total = AutoSequence(lambda a: a[a.n() - 1] + fib[a.n()], 0)
>>> total[5], total.at(10), total.size()
(12, 143, 11)
>>> total.slice(3, 8).tolist()
[4, 7, 12, 20, 33]
>>> total.reserve(100)
>>> total.prefetch_up_to(20)
>>> total.size()
21
>>> copied = total.snapshot()
>>> moved = total.snapshot(move=True)
>>> copied == moved, total.size()
(True, 0)
"""

from autoseq.__version__ import __version__
from autoseq.core import (
    AutoSequence,
    AutoseqError,
    ElementTypeError,
    Formula,
    FormulaSignatureError,
    GrowthPolicy,
    MathContext,
    SequenceView,
    contextual,
    make_dispatch,
    raw,
)

__all__ = [
    "__version__",
    "AutoSequence",
    "AutoseqError",
    "ElementTypeError",
    "Formula",
    "FormulaSignatureError",
    "GrowthPolicy",
    "MathContext",
    "SequenceView",
    "contextual",
    "make_dispatch",
    "raw",
]
