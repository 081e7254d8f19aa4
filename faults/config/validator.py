# faults/config/validator.py
"""
Configuration Validator

Validates raw configuration mappings for unknown keys and wrong types.
Returns structured issues with level (warn/error), path, message, hint.
"""

from typing import Any, Dict, List, Literal, Mapping
from dataclasses import dataclass


# Boolean fields accepted under the "faults" section
BOOL_FIELDS = ("allow_stack", "capture_exceptions")


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for CLI/logging.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "faults.allow_stack"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"[{self.level}] [{self.path}] {self.message}{hint_str}"


def validate_config(data: Mapping[str, Any]) -> List[ConfigIssue]:
    """
    Validate a raw configuration mapping (as loaded from YAML).

    Args:
        data: Top-level mapping; settings live under the "faults" key

    Returns:
        List of issues (warn/error level)
    """
    issues: List[ConfigIssue] = []

    if not isinstance(data, Mapping):
        issues.append(ConfigIssue(
            level="error",
            path="",
            message=f"configuration must be a mapping, got {type(data).__name__}",
        ))
        return issues

    for key in data:
        if key != "faults":
            issues.append(ConfigIssue(
                level="warn",
                path=str(key),
                message="unknown top-level key is ignored",
                hint="Put settings under the 'faults' section",
            ))

    section = data.get("faults")
    if section is None:
        return issues

    if not isinstance(section, Mapping):
        issues.append(ConfigIssue(
            level="error",
            path="faults",
            message=f"'faults' must be a mapping, got {type(section).__name__}",
        ))
        return issues

    for key, value in section.items():
        path = f"faults.{key}"
        if key not in BOOL_FIELDS:
            issues.append(ConfigIssue(
                level="warn",
                path=path,
                message="unknown key is ignored",
                hint=f"Known keys: {', '.join(BOOL_FIELDS)}",
            ))
        elif not isinstance(value, bool):
            issues.append(ConfigIssue(
                level="error",
                path=path,
                message=f"expected a boolean, got {value!r}",
                hint="Use true or false",
            ))

    return issues


def section_of(data: Any) -> Dict[str, Any]:
    """Return the usable "faults" section of raw config data (empty if absent or malformed)."""
    if not isinstance(data, Mapping):
        return {}
    section = data.get("faults")
    if not isinstance(section, Mapping):
        return {}
    return {k: v for k, v in section.items() if k in BOOL_FIELDS and isinstance(v, bool)}
