"""
autoseq.backends.polars
=======================

Polars-backed export of cached sequence terms.
"""

from autoseq.backends.polars.frame import to_frame

__all__ = ["to_frame"]
