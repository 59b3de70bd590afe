"""
autoseq.core.sequence
=====================

`AutoSequence`: a lazily evaluated, self-memoizing recurrence sequence.

The sequence owns an append-only cache of terms and a normalized formula.
Reading term `n` extends the cache up to `n`, evaluating the formula once per
missing index with the index and a read-only view of every earlier term.
Cached terms are never recomputed.

Every read path (`get`, `at`, `slice`, `prefetch_up_to`) goes through one
extension routine:

1. nothing to do if `n` is already cached;
2. grow the backing buffer once, following the `GrowthPolicy`;
3. append ``formula(size, view[0:size])`` until `n` is covered.

Examples
--------
>>> from autoseq import AutoSequence
>>> fib = AutoSequence(lambda a: a[a.n() - 1] + a[a.n() - 2], 0, 1)
>>> fib[10]
55
>>> len(fib), fib.capacity()
(11, 16)
>>> fib.slice(3, 8).tolist()
[2, 3, 5, 8, 13]
>>> list(fib)[:6]
[0, 1, 1, 2, 3, 5]
"""

from __future__ import annotations
import logging
import operator
from typing import TYPE_CHECKING, Any, Callable, Iterator, List, NoReturn, Optional

from autoseq.core.config import GrowthPolicy
from autoseq.core.dispatch import FormulaLike, Normalized, make_dispatch
from autoseq.core.errors import ElementTypeError
from autoseq.core.view import SequenceView

if TYPE_CHECKING:
    import polars as pl

logger = logging.getLogger(__name__)

# Marks unwritten slots of the backing buffer.
_EMPTY: Any = object()


class AutoSequence:
    """
    Memoizing sequence ``a[0], a[1], ...`` defined by a recurrence.

    Parameters
    ----------
    formula : callable or Formula
        Either ``f(index, history)`` or ``f(ctx)``; see `autoseq.core.dispatch`.
    *seeds
        Initial terms ``a[0] .. a[k-1]``, stored as given without calling
        the formula.
    element_type : callable, optional
        Conversion applied to seeds and computed terms (``int``, ``float``,
        ``fractions.Fraction``...).
    growth : GrowthPolicy, optional
        Buffer growth rule; defaults to ``GrowthPolicy()``.

    Notes
    -----
    Sequences are move-only: they cannot be copied or pickled, because the
    formula may hold resources that must not be duplicated. Use `transfer`
    to hand the whole sequence to a new owner.

    Views returned by `view` and `slice` borrow the backing buffer. Any call
    that grows the buffer may invalidate them; do not hold a view across
    such a call.
    """

    __slots__ = (
        "_formula",
        "_buffer",
        "_size",
        "_generation",
        "_growth",
        "_element_type",
        "_extending",
        "_released",
    )

    def __init__(
        self,
        formula: FormulaLike,
        *seeds: Any,
        element_type: Optional[Callable[[Any], Any]] = None,
        growth: Optional[GrowthPolicy] = None,
    ) -> None:
        if element_type is not None and not callable(element_type):
            raise ElementTypeError(
                f"element_type must be callable, got {type(element_type).__name__}"
            )
        self._growth = growth if growth is not None else GrowthPolicy()
        self._growth.validate()
        self._element_type = element_type
        self._formula: Optional[Normalized] = make_dispatch(formula, element_type)

        if element_type is not None:
            seeds = tuple(element_type(s) for s in seeds)
        self._buffer: List[Any] = list(seeds)
        self._size = len(self._buffer)
        self._generation = 0
        self._extending = False
        self._released = False

    # ---- extension ----

    def _check_alive(self) -> None:
        assert not self._released, "autoseq: sequence used after transfer()"

    def _reallocate(self, capacity: int) -> None:
        logger.debug(
            "reallocating buffer: capacity %d -> %d", len(self._buffer), capacity
        )
        buffer = self._buffer[: self._size]
        buffer.extend([_EMPTY] * (capacity - self._size))
        self._buffer = buffer
        self._generation += 1

    def _ensure(self, target: int) -> None:
        """Extend the cache so that `target` is a cached index."""
        self._check_alive()
        if target < self._size:
            return
        assert not self._extending, (
            "autoseq: formula re-entered its own sequence beyond the cached prefix"
        )
        needed = target + 1
        capacity = len(self._buffer)
        if needed > capacity:
            self._reallocate(self._growth.next_capacity(capacity, needed))

        logger.debug("extending terms [%d, %d)", self._size, needed)
        formula = self._formula
        buffer = self._buffer
        self._extending = True
        try:
            while self._size < needed:
                index = self._size
                buffer[index] = formula(index, SequenceView(self, 0, index))
                self._size = index + 1
        finally:
            self._extending = False

    # ---- element access ----

    def get(self, n: int) -> Any:
        """Term ``a[n]``, computing ``a[size] .. a[n]`` first if needed."""
        n = operator.index(n)
        assert n >= 0, f"autoseq: negative index {n}"
        self._ensure(n)
        return self._buffer[n]

    def at(self, n: int) -> Any:
        """
        Bounds-checked variant of `get`.

        Raises
        ------
        IndexError
            If `n` is negative or, after extension, not a cached index.
        """
        n = operator.index(n)
        if n < 0:
            raise IndexError(f"autoseq index out of range: {n}")
        self._ensure(n)
        if n >= self._size:
            raise IndexError(f"autoseq index out of range: {n}")
        return self._buffer[n]

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, slice):
            if key.step not in (None, 1):
                raise ValueError("autoseq slices must be contiguous (step 1)")
            if key.stop is None:
                raise ValueError("autoseq slices need an explicit stop")
            start = 0 if key.start is None else key.start
            return self.slice(start, key.stop)
        return self.get(key)

    def prefetch_up_to(self, n: int) -> None:
        """Compute and cache every term up to ``a[n]``."""
        n = operator.index(n)
        assert n >= 0, f"autoseq: negative index {n}"
        self._ensure(n)

    def reserve(self, capacity: int) -> None:
        """Grow the backing buffer to hold at least `capacity` terms."""
        self._check_alive()
        assert not self._extending, "autoseq: reserve() during extension"
        capacity = operator.index(capacity)
        if capacity > len(self._buffer):
            self._reallocate(capacity)

    # ---- views ----

    def slice(self, start: int, end: int) -> SequenceView:
        """
        Zero-copy view of ``a[start:end]`` (half-open).

        Terms up to ``a[end-1]`` are computed first. An empty range returns
        an empty view without computing anything.
        """
        self._check_alive()
        start, end = operator.index(start), operator.index(end)
        assert 0 <= start <= end, f"autoseq: invalid range [{start}, {end})"
        if start == end:
            return SequenceView(self, start, start)
        self._ensure(end - 1)
        return SequenceView(self, start, end)

    def view(self) -> SequenceView:
        """Zero-copy view of every cached term; computes nothing."""
        self._check_alive()
        return SequenceView(self, 0, self._size)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.view())

    # ---- ownership ----

    def snapshot(self, move: bool = False) -> List[Any]:
        """
        Owned list of the cached terms.

        Parameters
        ----------
        move : bool, default=False
            If False, return a copy and leave the sequence unchanged.
            If True, hand the backing buffer over: the sequence is reset to
            zero terms but keeps its formula. Seeds are *not* replayed, so the
            next read recomputes ``a[0]`` from the formula with an empty
            history.

        Examples
        --------
        >>> seq = AutoSequence(lambda n, h: 2 ** n)
        >>> seq.prefetch_up_to(4)
        >>> seq.snapshot()
        [1, 2, 4, 8, 16]
        >>> seq.snapshot(move=True)
        [1, 2, 4, 8, 16]
        >>> seq.size(), seq.capacity()
        (0, 0)
        >>> seq[2]
        4
        """
        self._check_alive()
        if not move:
            return self._buffer[: self._size]
        assert not self._extending, "autoseq: snapshot(move=True) during extension"
        buffer = self._buffer
        del buffer[self._size :]
        logger.debug("moved %d terms out; sequence reset to empty", self._size)
        self._buffer = []
        self._size = 0
        self._generation += 1
        return buffer

    def transfer(self) -> "AutoSequence":
        """
        Move the formula and cache into a new sequence.

        The source is released: any further use of it fails an assertion.
        """
        self._check_alive()
        assert not self._extending, "autoseq: transfer() during extension"
        moved = AutoSequence.__new__(AutoSequence)
        moved._formula = self._formula
        moved._buffer = self._buffer
        moved._size = self._size
        moved._generation = self._generation + 1
        moved._growth = self._growth
        moved._element_type = self._element_type
        moved._extending = False
        moved._released = False

        self._formula = None
        self._buffer = []
        self._size = 0
        self._generation += 1
        self._released = True
        logger.debug("transferred %d terms to a new owner", moved._size)
        return moved

    def _refuse_copy(self, *args: Any) -> NoReturn:
        raise TypeError(
            "AutoSequence cannot be copied or pickled; use transfer() to move it"
        )

    __copy__ = _refuse_copy
    __deepcopy__ = _refuse_copy
    __reduce_ex__ = _refuse_copy
    __reduce__ = _refuse_copy

    # ---- introspection ----

    def size(self) -> int:
        """Number of cached terms."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def capacity(self) -> int:
        """Number of terms the backing buffer holds without growing."""
        return len(self._buffer)

    @property
    def growth(self) -> GrowthPolicy:
        return self._growth

    @property
    def element_type(self) -> Optional[Callable[[Any], Any]]:
        return self._element_type

    def to_frame(self, name: str = "value") -> "pl.DataFrame":
        """Cached terms as a polars DataFrame; see `autoseq.backends.polars`."""
        from autoseq.backends.polars.frame import to_frame

        return to_frame(self, name=name)

    def __repr__(self) -> str:
        if self._released:
            return "AutoSequence(<released>)"
        return f"AutoSequence(size={self._size}, capacity={len(self._buffer)})"
