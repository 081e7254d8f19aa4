# faults/errors/__init__.py
"""
Error types for faults.

This package defines the components responsible for:
- Representing failures synthesized by the accumulator
- Categorizing failures with stable codes

No side effects on import.
"""

from . import codes
from .exceptions import FaultError

__all__ = ["codes", "FaultError"]
