# faults/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- System works without YAML
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import logging
import os

import yaml

from .validator import ConfigIssue, section_of, validate_config


CONFIG_ENV_VAR = "FAULTS_CONFIG"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FaultsConfig:
    """
    Construction settings for a Faults accumulator.

    allow_stack: start in stacking mode (reset() still returns to non-stacking)
    capture_exceptions: record exceptions raised by check blocks instead of propagating
    """

    allow_stack: bool = False
    capture_exceptions: bool = False

    @classmethod
    def default(cls) -> "FaultsConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_dict(cls, data: Any) -> "FaultsConfig":
        """Build from raw config data; invalid or unknown entries fall back to defaults."""
        return cls(**section_of(data))

    @classmethod
    def from_yaml(cls, config_path: Optional[Union[str, Path]] = None) -> "FaultsConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file. If None, tries:
                1. $FAULTS_CONFIG
                2. ~/.faults/config.yml

        Returns:
            FaultsConfig instance (always has code defaults as fallback)
        """
        yaml_data = _load_yaml(config_path)
        if yaml_data is None:
            return cls.default()

        for issue in validate_config(yaml_data):
            logger.warning("Config issue: %s", issue)

        return cls.from_dict(yaml_data)

    def validate(self) -> List[ConfigIssue]:
        """Validate the effective configuration."""
        return validate_config({"faults": self.to_dict()})

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_config(config_path: Optional[Union[str, Path]] = None) -> FaultsConfig:
    """
    Load faults configuration.

    Args:
        config_path: Optional path to YAML file

    Returns:
        FaultsConfig instance
    """
    return FaultsConfig.from_yaml(config_path)


def _candidate_paths(config_path: Optional[Union[str, Path]]) -> List[Path]:
    if config_path:
        return [Path(config_path)]

    paths = []
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        paths.append(Path(env_path))
    paths.append(Path.home() / ".faults" / "config.yml")
    return paths


def _load_yaml(config_path: Optional[Union[str, Path]] = None) -> Any:
    """Load YAML file, return None if not found (not an error)"""
    for path in _candidate_paths(config_path):
        if path.exists():
            try:
                with open(path, "r", encoding="utf-8") as f:
                    return yaml.safe_load(f)
            except (OSError, ValueError, yaml.YAMLError) as e:
                # ValueError covers UnicodeDecodeError
                logger.warning("Failed to load config from %s, using defaults: %s", path, e)
                return None

    return None
