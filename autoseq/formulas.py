"""
autoseq.formulas
================

Ready-made recurrences built on `AutoSequence`.

Each factory returns a fresh sequence; nothing is computed until a term is
read.

Examples
--------
>>> from autoseq.formulas import fibonacci, partial_sums
>>> fib = fibonacci()
>>> sums = partial_sums(fib, seed=0)
>>> sums[5], sums[10]
(12, 143)
>>> fib.size()
11
"""

from __future__ import annotations
from typing import Any, Callable, Iterable, Optional, Protocol

from autoseq.core.context import MathContext
from autoseq.core.sequence import AutoSequence
from autoseq.core.view import SequenceView


class Indexable(Protocol):
    """Anything readable by term index, such as an `AutoSequence` or a list."""

    def __getitem__(self, n: int) -> Any: ...


def linear_recurrence(
    coefficients: Iterable[Any],
    seeds: Iterable[Any],
    constant: Any = 0,
    element_type: Optional[Callable[[Any], Any]] = None,
) -> AutoSequence:
    """
    Sequence ``a[n] = c[0]*a[n-1] + c[1]*a[n-2] + ... + constant``.

    Parameters
    ----------
    coefficients : iterable
        Weights of the previous terms, nearest first.
    seeds : iterable
        Initial terms; at least as many as there are coefficients.
    constant : number, default=0
        Term added at every step.
    element_type : callable, optional
        Conversion applied to seeds and computed terms.

    Examples
    --------
    >>> pell = linear_recurrence([2, 1], [0, 1])
    >>> pell.slice(0, 7).tolist()
    [0, 1, 2, 5, 12, 29, 70]
    >>> linear_recurrence([1, 1], [0])
    Traceback (most recent call last):
        ...
    ValueError: linear recurrence of order 2 needs at least 2 seeds, got 1
    """
    coefficients = tuple(coefficients)
    seeds = tuple(seeds)
    if not coefficients:
        raise ValueError("coefficients must not be empty")
    order = len(coefficients)
    if len(seeds) < order:
        raise ValueError(
            f"linear recurrence of order {order} needs at least {order} seeds, "
            f"got {len(seeds)}"
        )

    def step(n: int, history: SequenceView) -> Any:
        total = constant
        for i, c in enumerate(coefficients):
            total = total + c * history[n - 1 - i]
        return total

    return AutoSequence(step, *seeds, element_type=element_type)


def fibonacci() -> AutoSequence:
    """0, 1, 1, 2, 3, 5, 8, ..."""
    return linear_recurrence([1, 1], [0, 1])


def factorial() -> AutoSequence:
    """1, 1, 2, 6, 24, ...

    >>> factorial()[10]
    3628800
    """
    return AutoSequence(lambda a: a.last() * a.n(), 1)


def catalan() -> AutoSequence:
    """Catalan numbers via the convolution ``C[n] = sum C[i] * C[n-1-i]``.

    >>> catalan().slice(0, 8).tolist()
    [1, 1, 2, 5, 14, 42, 132, 429]
    """

    def step(n: int, history: SequenceView) -> int:
        return sum(history[i] * history[n - 1 - i] for i in range(n))

    return AutoSequence(step, 1)


def partial_sums(source: Indexable, seed: Any = None) -> AutoSequence:
    """
    Running sums ``s[n] = s[n-1] + source[n]``.

    `source` is read lazily, so it may itself be an `AutoSequence`; both
    sequences then grow independently. With `seed`, ``s[0] = seed``;
    otherwise ``s[0] = source[0]``.
    """
    if seed is not None:
        return AutoSequence(lambda a: a.last() + source[a.n()], seed)

    def step(a: MathContext) -> Any:
        if a.n() == 0:
            return source[0]
        return a.last() + source[a.n()]

    return AutoSequence(step)
