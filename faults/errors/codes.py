# faults/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
UNKNOWN: Final[str] = "UNKNOWN"

# predicate given to condition()/conditionf() held
CONDITION_FAILED: Final[str] = "CONDITION_FAILED"

# block given to check() reported a failure
CHECK_FAILED: Final[str] = "CHECK_FAILED"

# block given to check() raised (capture_exceptions=True)
CHECK_RAISED: Final[str] = "CHECK_RAISED"


KNOWN_CODES: Final[set[str]] = {
    UNKNOWN,
    CONDITION_FAILED,
    CHECK_FAILED,
    CHECK_RAISED,
}
