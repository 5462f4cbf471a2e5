"""Soft assertion subsystem exceptions."""

from __future__ import annotations

from assertpack.core.exceptions import AssertKitError
from assertpack.core.models import FailureRecord
from assertpack.expect.exceptions import AssertionFailure


class ScopeError(AssertKitError):
    """Base class for soft assertion scope misuse."""


class ScopeClosedError(ScopeError):
    """Raised when a closed scope is recorded into or closed again."""


class ScopeOwnershipError(ScopeError):
    """Raised when a scope is used outside the thread that opened it."""


class NoActiveScopeError(ScopeError):
    """Raised when a soft assertion is requested without an active scope."""


class SoftAssertionError(AssertionFailure):
    """Aggregated failure raised once when a scope with failures is closed."""

    def __init__(self, message: str, *, failures: tuple[FailureRecord, ...], checks: int) -> None:
        super().__init__(message)
        self.failures = failures
        self.checks = checks
