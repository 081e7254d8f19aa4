# faults/core/__init__.py
"""Core accumulator."""

from .accumulator import Block, Faults, new

__all__ = ["Block", "Faults", "new"]
