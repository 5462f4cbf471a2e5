"""Expectation subsystem exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from assertpack.core.exceptions import AssertKitError

if TYPE_CHECKING:
    from assertpack.core.models import Outcome


class ExpectationError(AssertKitError):
    """Base class for expectation misuse errors."""


class PredicateError(ExpectationError):
    """Raised when a predicate cannot be applied to the subject."""

    def __init__(self, predicate_name: str, message: str) -> None:
        super().__init__(f"predicate {predicate_name!r} could not be applied: {message}")
        self.predicate_name = predicate_name


class AssertionFailure(AssertionError):
    """A failed hard assertion; the message is the formatted report."""

    def __init__(self, message: str, *, outcome: "Outcome | None" = None) -> None:
        super().__init__(message)
        self.message = message
        self.outcome = outcome
