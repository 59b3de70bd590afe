"""
autoseq.core.view
=================

Read-only, zero-copy windows into a sequence's backing buffer.

A `SequenceView` borrows the buffer of its owning sequence; it never copies
terms. The borrow is only valid while the owner keeps the same buffer: any
growth that reallocates, a moving snapshot, or a transfer replaces the buffer
and bumps the owner's generation. Reading through a view taken before that
point is a precondition violation and fails an assertion.

Examples
--------
>>> from autoseq import AutoSequence
>>> seq = AutoSequence(lambda n, h: n * n)
>>> window = seq.slice(2, 5)
>>> window
SequenceView([4, 9, 16])
>>> window[-1], len(window), window[1:].tolist()
(16, 3, [9, 16])
>>> seq.reserve(4096)
>>> window.valid
False
"""

from __future__ import annotations
import itertools
import operator
from collections.abc import Sequence
from typing import Any, Iterator, List, Optional, Protocol, Union, overload


class BufferOwner(Protocol):
    """What a view needs from the sequence it borrows from."""

    _buffer: List[Any]
    _generation: int


class SequenceView(Sequence):
    """
    Read-only window ``[start, stop)`` over an owner's backing buffer.

    Indexing follows Python conventions (negative indices count from the end
    of the view). Slicing with a unit step returns another zero-copy view;
    any other step returns a list copy.
    """

    __slots__ = ("_owner", "_buffer", "_start", "_stop", "_generation")

    def __init__(self, owner: BufferOwner, start: int, stop: int) -> None:
        self._owner = owner
        self._buffer = owner._buffer
        self._start = start
        self._stop = stop
        self._generation = owner._generation

    @property
    def valid(self) -> bool:
        """True while the owner still uses the buffer this view borrowed."""
        return self._generation == self._owner._generation

    def _check(self) -> None:
        assert self.valid, (
            "autoseq: view used after its sequence replaced the backing buffer"
        )

    def __len__(self) -> int:
        return self._stop - self._start

    @overload
    def __getitem__(self, key: int) -> Any: ...

    @overload
    def __getitem__(self, key: slice) -> Union["SequenceView", List[Any]]: ...

    def __getitem__(self, key):
        self._check()
        length = self._stop - self._start
        if isinstance(key, slice):
            start, stop, step = key.indices(length)
            if step == 1:
                stop = max(start, stop)
                sub = SequenceView(self._owner, self._start + start, self._start + stop)
                sub._buffer = self._buffer
                sub._generation = self._generation
                return sub
            return [self._buffer[self._start + i] for i in range(start, stop, step)]
        i = operator.index(key)
        if i < 0:
            i += length
        assert 0 <= i < length, f"autoseq: view index {key} out of range"
        return self._buffer[self._start + i]

    def __iter__(self) -> Iterator[Any]:
        self._check()
        return itertools.islice(self._buffer, self._start, self._stop)

    def index(self, value: Any, start: int = 0, stop: Optional[int] = None) -> int:
        self._check()
        for i in range(len(self))[start:stop]:
            term = self[i]
            if term is value or term == value:
                return i
        raise ValueError(f"{value!r} is not in view")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (SequenceView, list, tuple)):
            return len(self) == len(other) and all(
                a == b for a, b in zip(self, other)
            )
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def tolist(self) -> List[Any]:
        """Copy the viewed terms into a new list."""
        self._check()
        return self._buffer[self._start : self._stop]

    def __repr__(self) -> str:
        if not self.valid:
            return f"SequenceView(<stale>, len={len(self)})"
        return f"SequenceView({self.tolist()!r})"
