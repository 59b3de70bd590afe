"""
autoseq.core.dispatch
=====================

Formula adapter: normalizes user formulas into one canonical call shape.

A formula may be written in either of two shapes:

- **raw** — ``f(index, history)`` where `history` is a `SequenceView` of the
  terms ``a[0] .. a[index-1]``;
- **context** — ``f(ctx)`` where `ctx` is a `MathContext` exposing
  ``ctx.n()``, ``ctx.last()`` and ``ctx[i]``.

`make_dispatch` inspects the callable's signature once, when the sequence is
built, and returns a closure of shape ``(index, history) -> term``. The raw
shape is tried first, so a callable that accepts both (``*args``) is treated
as raw. A callable that fits neither shape is rejected with
`FormulaSignatureError` before any sequence exists. Callables whose signature
cannot be introspected can be tagged explicitly with `raw` or `contextual`.

Examples
--------
>>> from autoseq.core.dispatch import detect_shape, contextual
>>> detect_shape(lambda n, h: n)
'raw'
>>> detect_shape(lambda ctx: ctx.n())
'context'
>>> detect_shape(lambda *args: 0)
'raw'
>>> detect_shape(lambda: 0)
Traceback (most recent call last):
    ...
autoseq.core.errors.FormulaSignatureError: formula <lambda> accepts neither (index, history) nor a single context argument
>>> contextual(abs).shape
'context'
"""

from __future__ import annotations
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Literal, Optional, Union

from autoseq.core.context import MathContext
from autoseq.core.errors import FormulaSignatureError
from autoseq.core.view import SequenceView

logger = logging.getLogger(__name__)

Shape = Literal["raw", "context"]
RAW: Shape = "raw"
CONTEXT: Shape = "context"

# Canonical formula shape after dispatch.
Normalized = Callable[[int, SequenceView], Any]


@dataclass(frozen=True)
class Formula:
    """A callable explicitly tagged with its call shape."""

    func: Callable[..., Any]
    shape: Shape

    def __post_init__(self) -> None:
        if self.shape not in (RAW, CONTEXT):
            raise FormulaSignatureError(
                f"unknown formula shape {self.shape!r}; expected 'raw' or 'context'"
            )


def raw(func: Callable[[int, SequenceView], Any]) -> Formula:
    """Tag `func` as a raw ``(index, history)`` formula."""
    return Formula(func, RAW)


def contextual(func: Callable[[MathContext], Any]) -> Formula:
    """Tag `func` as a single-argument context formula."""
    return Formula(func, CONTEXT)


FormulaLike = Union[Formula, Callable[..., Any]]


def _name(func: Any) -> str:
    return getattr(func, "__qualname__", None) or type(func).__name__


def _binds(signature: inspect.Signature, nargs: int) -> bool:
    try:
        signature.bind(*([None] * nargs))
    except TypeError:
        return False
    return True


def detect_shape(func: Callable[..., Any]) -> Shape:
    """
    Work out which call shape `func` accepts.

    Raises
    ------
    FormulaSignatureError
        If `func` is not callable, its signature cannot be read, or it
        accepts neither two positional arguments nor one.
    """
    if not callable(func):
        raise FormulaSignatureError(
            f"formula must be callable, got {type(func).__name__}"
        )
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError) as exc:
        raise FormulaSignatureError(
            f"cannot read the signature of formula {_name(func)}; "
            "tag it with autoseq.raw() or autoseq.contextual()"
        ) from exc
    if _binds(signature, 2):
        return RAW
    if _binds(signature, 1):
        return CONTEXT
    raise FormulaSignatureError(
        f"formula {_name(func)} accepts neither (index, history) "
        "nor a single context argument"
    )


def make_dispatch(
    formula: FormulaLike, element_type: Optional[Callable[[Any], Any]] = None
) -> Normalized:
    """
    Normalize `formula` into a closure ``(index, history) -> term``.

    Parameters
    ----------
    formula : Formula or callable
        The recurrence, in either accepted shape.
    element_type : callable, optional
        Applied to every result, e.g. ``int`` or ``fractions.Fraction``.

    Returns
    -------
    Callable[[int, SequenceView], Any]
        The normalized formula.
    """
    if isinstance(formula, Formula):
        func, shape = formula.func, formula.shape
        if not callable(func):
            raise FormulaSignatureError(
                f"formula must be callable, got {type(func).__name__}"
            )
    else:
        func, shape = formula, detect_shape(formula)
    logger.debug("dispatching formula %s as %s", _name(func), shape)

    if shape == RAW:

        def call(index: int, history: SequenceView) -> Any:
            return func(index, history)

    else:

        def call(index: int, history: SequenceView) -> Any:
            return func(MathContext(index, history))

    if element_type is None:
        return call

    def converted(index: int, history: SequenceView) -> Any:
        return element_type(call(index, history))

    return converted
