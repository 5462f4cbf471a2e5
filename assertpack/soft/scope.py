"""Soft assertion scopes: record failures now, report them once at close."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
import threading
from typing import Any, Iterator, Literal

from assertpack.core.models import FailureRecord, Location, Outcome
from assertpack.core.types import HighlightMode
from assertpack.diff.formatting import format_soft_report
from assertpack.highlight import configured_highlight_mode
from assertpack.soft.exceptions import ScopeClosedError, ScopeOwnershipError, SoftAssertionError

ScopeState = Literal["open", "closed"]

_CURRENT_SCOPE: ContextVar["SoftAssertionScope | None"] = ContextVar(
    "assertpack_current_soft_scope",
    default=None,
)


@dataclass(slots=True)
class SoftAssertionScope:
    """Mutable failure list for one unit of work.

    A scope belongs to the thread that opened it. It moves from ``open`` to
    ``closed`` exactly once; recording into or closing a closed scope is a
    misuse error.
    """

    name: str | None = None
    failures: list[FailureRecord] = field(default_factory=list)
    checks: int = 0
    state: ScopeState = "open"
    _owner: int = field(default_factory=threading.get_ident, init=False, repr=False)

    @property
    def closed(self) -> bool:
        return self.state == "closed"

    @property
    def is_clean(self) -> bool:
        return not self.failures

    def record(
        self,
        outcome: Outcome,
        *,
        description: str | None = None,
        location: Location | None = None,
    ) -> None:
        self._ensure_usable("record into")
        self.checks += 1
        if outcome.mismatch is not None:
            self.failures.append(
                FailureRecord(
                    mismatch=outcome.mismatch,
                    description=description,
                    location=location,
                )
            )

    def close(self, *, mode: HighlightMode | None = None) -> None:
        self._ensure_usable("close")
        self.state = "closed"
        if not self.failures:
            return
        raise SoftAssertionError(
            self.report(mode=mode),
            failures=tuple(self.failures),
            checks=self.checks,
        )

    def report(self, *, mode: HighlightMode | None = None) -> str:
        return format_soft_report(
            self.failures,
            mode or configured_highlight_mode(),
            checks=self.checks,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "state": self.state,
            "checks": self.checks,
            "failure_count": len(self.failures),
            "failures": [failure.to_dict() for failure in self.failures],
        }

    def _ensure_usable(self, action: str) -> None:
        if threading.get_ident() != self._owner:
            raise ScopeOwnershipError(f"cannot {action} a soft assertion scope from another thread")
        if self.closed:
            label = f" {self.name!r}" if self.name else ""
            raise ScopeClosedError(f"cannot {action} soft assertion scope{label}: already closed")


def open_scope(name: str | None = None) -> SoftAssertionScope:
    return SoftAssertionScope(name=name)


def record(
    scope: SoftAssertionScope,
    outcome: Outcome,
    *,
    description: str | None = None,
    location: Location | None = None,
) -> None:
    scope.record(outcome, description=description, location=location)


def close(scope: SoftAssertionScope, *, mode: HighlightMode | None = None) -> None:
    scope.close(mode=mode)


def get_current_scope() -> SoftAssertionScope | None:
    return _CURRENT_SCOPE.get()


@contextmanager
def soft_assertions(name: str | None = None) -> Iterator[SoftAssertionScope]:
    """Collect soft assertion failures for a block and report them on exit."""
    # Nested scopes use stack semantics: the inner scope is current for its
    # duration, then the outer scope is restored.
    scope = open_scope(name)
    token = _CURRENT_SCOPE.set(scope)
    try:
        yield scope
    except BaseException as error:
        if not scope.closed:
            scope.state = "closed"
            if scope.failures:
                error.add_note(scope.report())
        raise
    else:
        if not scope.closed:
            scope.close()
    finally:
        _CURRENT_SCOPE.reset(token)
