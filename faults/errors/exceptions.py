# faults/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from . import codes


def _safe_str(x: Any) -> str:
    try:
        return str(x)
    except Exception:
        return "<unstringifiable>"


def _normalize_error_code(code: Any) -> str:
    """
    Keep error_code stable and finite.
    Unknown codes are downgraded to UNKNOWN.
    """
    c = _safe_str(code or codes.UNKNOWN).strip() or codes.UNKNOWN
    if c in codes.KNOWN_CODES:
        return c
    return codes.UNKNOWN


@dataclass
class FaultError(Exception):
    """
    Failure value synthesized by the accumulator.

    Caller blocks may return any exception instance; FaultError is what the
    accumulator itself builds for condition() and for captured exceptions.
    """
    message: str
    error_code: str = codes.UNKNOWN
    check: str = ""
    details: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        self.error_code = _normalize_error_code(self.error_code)
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "error_code": self.error_code,
            "message": self.message,
            "check": self.check,
            "details": self.details,
        }
        if self.cause is not None:
            data["cause"] = f"{type(self.cause).__name__}: {_safe_str(self.cause)}"
        return data

    # -------- factories --------

    @classmethod
    def condition(cls, name: str) -> "FaultError":
        """Failure recorded when a condition predicate holds; message is the check name."""
        return cls(
            message=name,
            error_code=codes.CONDITION_FAILED,
            check=name,
        )

    @classmethod
    def check_failed(
        cls,
        message: str,
        *,
        check: str = "",
        details: Optional[Dict[str, Any]] = None,
    ) -> "FaultError":
        return cls(
            message=message,
            error_code=codes.CHECK_FAILED,
            check=check,
            details=details or {},
        )

    @classmethod
    def from_exception(cls, exc: BaseException, *, check: str = "") -> "FaultError":
        """Wrap an exception raised inside a check block."""
        return cls(
            message=_safe_str(exc) or type(exc).__name__,
            error_code=codes.CHECK_RAISED,
            check=check,
            details={"exception_type": type(exc).__name__},
            cause=exc,
        )
