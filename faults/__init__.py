# faults/__init__.py
"""
faults - collect named failures from a sequence of checks

Basic usage:
    >>> from faults import Faults
    >>> f = Faults()
    >>> (f.check("name", lambda: None)
    ...   .condition(age < 18, "underage")
    ...   .check("email", lambda: validate_email(email)))
    >>> if f.is_not_empty():
    ...     print(f.last_message(), f.get_last())

Stacking mode keeps every failure and never short-circuits:
    >>> f = Faults().enable_stack()

From configuration (YAML optional, code defaults otherwise):
    >>> from faults import Faults, load_config
    >>> f = Faults.from_config(load_config("faults.yml"))
"""

__version__ = "0.1.0"

from .core import Block, Faults, new
from .errors import FaultError, codes
from .config import FaultsConfig, load_config, validate_config, ConfigIssue

__all__ = [
    "__version__",
    "Block",
    "Faults",
    "new",
    "FaultError",
    "codes",
    "FaultsConfig",
    "load_config",
    "validate_config",
    "ConfigIssue",
]
