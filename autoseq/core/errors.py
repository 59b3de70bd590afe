"""
autoseq.core.errors
===================

Definition-time errors.

Only contract violations that make a sequence unusable are reported with
exceptions, and they are raised before the sequence object exists. Misuse of
a live sequence (empty history, inverted slices, stale views) is a
programmer error and is checked with assertions instead.

Examples
--------
>>> from autoseq.core.errors import FormulaSignatureError
>>> issubclass(FormulaSignatureError, TypeError)
True
"""

from __future__ import annotations


class AutoseqError(Exception):
    """Base class for autoseq errors."""


class FormulaSignatureError(AutoseqError, TypeError):
    """The formula accepts neither ``(index, history)`` nor a single context."""


class ElementTypeError(AutoseqError, TypeError):
    """The element type cannot be used to construct terms."""
