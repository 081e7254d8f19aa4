# faults/config/__init__.py
"""
Faults Configuration

YAML is input parameters, code has defaults (YAML can be deleted).
"""

from .loader import FaultsConfig, load_config, CONFIG_ENV_VAR
from .validator import validate_config, ConfigIssue

__all__ = [
    "FaultsConfig",
    "load_config",
    "CONFIG_ENV_VAR",
    "validate_config",
    "ConfigIssue",
]
