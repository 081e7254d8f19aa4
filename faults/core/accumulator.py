# faults/core/accumulator.py
"""
Faults - accumulator for named check failures

Runs a sequence of named checks, records the failures they report and
decides whether later checks still run.

Two flags drive the behavior:
- allow_stack: keep every distinct named failure (True) or only the most recent (False)
- locked: set when a check/condition fails while not stacking; later checks are skipped

add() and review_last_fail() write unconditionally and ignore the lock.
Only reset() is guaranteed to reopen a locked accumulator.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional
import json
import logging

from ..errors import FaultError

if TYPE_CHECKING:
    from ..config import FaultsConfig


# Zero-argument block run by check(); returns a failure or None
Block = Callable[[], Optional[BaseException]]

logger = logging.getLogger(__name__)


class Faults:
    """
    Named failure accumulator.

    Mutators return the accumulator itself so calls can be chained:

        >>> f = Faults()
        >>> _ = f.check("name", lambda: None).condition(len("") == 0, "empty")
        >>> f.last_message()
        'empty'
    """

    def __init__(self, *, allow_stack: bool = False, capture_exceptions: bool = False):
        self._failures: Dict[str, BaseException] = {}
        self._last_name = ""
        self._allow_stack = False
        self._locked = False
        self.capture_exceptions = capture_exceptions
        if allow_stack:
            self.enable_stack()

    @classmethod
    def from_config(cls, config: "FaultsConfig") -> "Faults":
        return cls(
            allow_stack=config.allow_stack,
            capture_exceptions=config.capture_exceptions,
        )

    # ---- configuration ----

    def enable_stack(self) -> "Faults":
        self._allow_stack = True
        return self

    def disable_stack(self) -> "Faults":
        self._allow_stack = False
        return self

    def reset(self) -> "Faults":
        """Discard all failures and return to the initial state (open, not stacking)."""
        self._failures = {}
        self._last_name = ""
        self._allow_stack = False
        self._locked = False
        return self

    # ---- recording ----

    def add(self, failure: BaseException, name: str) -> "Faults":
        """Record failure under name. Does not consult or change the lock."""
        if not self._allow_stack:
            self._failures.clear()
        self._failures[name] = failure
        self._last_name = name
        logger.debug("Recorded failure %r: %s", name, failure)
        return self

    def condition(self, predicate: Any, name: str) -> "Faults":
        """Record a FaultError named after the check when predicate holds."""
        if not self._is_open():
            logger.debug("Skipped condition %r: locked", name)
            return self
        if predicate:
            self._record(FaultError.condition(name), name)
        return self

    def conditionf(self, predicate: Any, template: str, *args: Any) -> "Faults":
        """condition() with a printf-style name: conditionf(x > 10, "%s overflow", "x")."""
        name = template % args if args else template
        return self.condition(predicate, name)

    def check(self, name: str, block: Block) -> "Faults":
        """
        Run block unless locked and record the failure it returns.

        Args:
            name: Check name the failure is recorded under
            block: Zero-argument callable returning a failure or None

        Returns:
            self

        Note:
            Exceptions raised by block propagate unless capture_exceptions is set,
            in which case they are wrapped in FaultError (CHECK_RAISED) and recorded.
        """
        if not self._is_open():
            logger.debug("Skipped check %r: locked", name)
            return self

        try:
            failure = block()
        except Exception as e:
            if not self.capture_exceptions:
                raise
            failure = FaultError.from_exception(e, check=name)

        if failure is not None:
            self._record(failure, name)
        return self

    # ---- re-classification ----

    def review_last_fail(self, new_name: str, test: Callable[[BaseException], Any]) -> "Faults":
        """
        Relabel the last failure when test(failure) holds.

        The same failure object is moved from the current last name to new_name
        and new_name becomes the last name. Ignores the lock.
        """
        failure = self.get_last()
        if failure is None or not test(failure):
            return self

        old_name = self._last_name
        del self._failures[old_name]
        self.add(failure, new_name)
        logger.debug("Relabelled failure %r as %r", old_name, new_name)
        return self

    # ---- queries ----

    def last_message(self) -> str:
        """Name of the last recorded failure ("" if none)."""
        return self._last_name

    def get_last(self) -> Optional[BaseException]:
        if not self._last_name:
            return None
        return self._failures.get(self._last_name)

    def get_all(self) -> Mapping[str, BaseException]:
        """Read-only snapshot of name -> failure."""
        return MappingProxyType(dict(self._failures))

    def is_empty(self) -> bool:
        return len(self._failures) == 0

    def is_not_empty(self) -> bool:
        return not self.is_empty()

    def is_locked(self) -> bool:
        return self._locked

    def is_stacking(self) -> bool:
        return self._allow_stack

    def __contains__(self, name: object) -> bool:
        return name in self._failures

    def __repr__(self) -> str:
        return (
            f"Faults(failures={list(self._failures)!r}, last={self._last_name!r}, "
            f"allow_stack={self._allow_stack}, locked={self._locked})"
        )

    # ---- serialization ----

    def to_dict(self) -> Dict[str, Any]:
        """External representation: {"errors": {name: message}}. Flags are not serialized."""
        return {"errors": {name: _describe(failure) for name, failure in self._failures.items()}}

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.to_dict(), **kwargs)

    # ---- internals ----

    def _is_open(self) -> bool:
        return not self._locked

    def _should_lock(self) -> bool:
        # locked=False, allow_stack=False -> lock
        # locked=False, allow_stack=True  -> stay open
        return not self._allow_stack

    def _record(self, failure: BaseException, name: str) -> None:
        self.add(failure, name)
        if self._should_lock():
            self._locked = True
            logger.debug("Locked after failure %r", name)


def new(*, allow_stack: bool = False, capture_exceptions: bool = False) -> Faults:
    """Create a new accumulator."""
    return Faults(allow_stack=allow_stack, capture_exceptions=capture_exceptions)


def _describe(failure: BaseException) -> str:
    if isinstance(failure, FaultError):
        return failure.message
    return str(failure)
