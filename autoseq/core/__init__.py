"""
autoseq.core
============

The memoization engine.

- `dispatch`: normalizes formulas of either call shape
- `context` / `view`: what a formula sees while a term is computed
- `config`: buffer growth policy
- `sequence`: the `AutoSequence` cache itself
"""

from autoseq.core.config import GrowthPolicy
from autoseq.core.context import MathContext
from autoseq.core.dispatch import Formula, contextual, make_dispatch, raw
from autoseq.core.errors import AutoseqError, ElementTypeError, FormulaSignatureError
from autoseq.core.sequence import AutoSequence
from autoseq.core.view import SequenceView

__all__ = [
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
