"""Assertion front end: wrap a subject and chain expectations against it."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from assertpack.core.models import FailureRecord, Location, Outcome
from assertpack.diff.formatting import format_failure, format_outcome
from assertpack.expect import (
    AssertionFailure,
    Expectation,
    evaluate,
    is_equal_to,
    satisfies,
)
from assertpack.highlight import configured_highlight_mode
from assertpack.soft import NoActiveScopeError, SoftAssertionScope, get_current_scope

_CALL_SITE: Any = object()


@dataclass(slots=True)
class Spec:
    """One assertion subject plus the context its failures are reported with.

    A hard spec raises :class:`AssertionFailure` on the first failing
    expectation. A soft spec records every outcome into its scope instead and
    leaves reporting to the scope's close.
    """

    subject: Any
    name: str = "subject"
    description: str | None = None
    location: Location | None = None
    soft: bool = False
    scope: SoftAssertionScope | None = None
    failures: list[FailureRecord] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.soft and self.scope is None:
            raise NoActiveScopeError("a soft spec requires a soft assertion scope")

    def named(self, name: str) -> "Spec":
        self.name = name
        return self

    def described_as(self, description: str) -> "Spec":
        self.description = description
        return self

    def located_at(self, location: Location | None) -> "Spec":
        self.location = location
        return self

    def expecting(self, expectation: Expectation) -> "Spec":
        outcome = evaluate(self.subject, expectation, name=self.name)
        self._handle(outcome)
        return self

    def satisfies(self, predicate: Callable[[Any], bool], message: str | None = None) -> "Spec":
        return self.expecting(satisfies(predicate, message))

    def is_equal_to(self, expected: Any) -> "Spec":
        return self.expecting(is_equal_to(expected))

    def each_item(self, expectation: Expectation) -> "Spec":
        """Check every item of the subject; failures name the 1-based item position."""
        outcomes = [
            evaluate(item, expectation, name=f"{self.name} {position}. item")
            for position, item in enumerate(self.subject, start=1)
        ]
        if self.soft:
            for outcome in outcomes:
                self._record(outcome)
            return self

        records = [self._remember(outcome) for outcome in outcomes if outcome.failed]
        if records:
            mode = configured_highlight_mode()
            raise AssertionFailure("\n\n".join(format_failure(record, mode) for record in records))
        return self

    def _handle(self, outcome: Outcome) -> None:
        if self.soft:
            self._record(outcome)
            return
        if outcome.passed:
            return
        self._remember(outcome)
        raise AssertionFailure(
            format_outcome(
                outcome,
                configured_highlight_mode(),
                description=self.description,
                location=self.location,
            ),
            outcome=outcome,
        )

    def _record(self, outcome: Outcome) -> None:
        if self.scope is None:
            raise NoActiveScopeError("a soft spec requires a soft assertion scope")
        self.scope.record(outcome, description=self.description, location=self.location)
        if outcome.failed:
            self._remember(outcome)

    def _remember(self, outcome: Outcome) -> FailureRecord:
        record = FailureRecord(
            mismatch=outcome.mismatch,
            description=self.description,
            location=self.location,
        )
        self.failures.append(record)
        return record


def assert_that(
    subject: Any,
    *,
    name: str | None = None,
    description: str | None = None,
    location: Location | None = _CALL_SITE,
) -> Spec:
    """Start a hard assertion; the first failing expectation raises.

    The call site is recorded unless ``location`` is given; pass ``None``
    to report without one.
    """
    return Spec(
        subject=subject,
        name=name or "subject",
        description=description,
        location=_location(location),
    )


def verify_that(
    subject: Any,
    *,
    name: str | None = None,
    description: str | None = None,
    location: Location | None = _CALL_SITE,
    scope: SoftAssertionScope | None = None,
) -> Spec:
    """Start a soft assertion recorded into ``scope`` or the current scope."""
    target = scope if scope is not None else get_current_scope()
    if target is None:
        raise NoActiveScopeError(
            "verify_that() requires an active soft_assertions() block or an explicit scope"
        )
    return Spec(
        subject=subject,
        name=name or "subject",
        description=description,
        location=_location(location),
        soft=True,
        scope=target,
    )


def _location(location: Location | None) -> Location | None:
    # Skip this helper and the assert_that/verify_that frame.
    if location is _CALL_SITE:
        return Location.from_caller(depth=2)
    return location
