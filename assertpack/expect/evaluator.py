"""Evaluation of expectation trees against a subject."""

from __future__ import annotations

from typing import Any as AnyValue

from assertpack.core.canonical import prefix_block
from assertpack.core.models import Mismatch, Outcome
from assertpack.expect.exceptions import PredicateError
from assertpack.expect.expectations import All, Any, Atomic, Expectation, Not, Verdict


def evaluate(subject: AnyValue, expectation: Expectation, *, name: str = "subject") -> Outcome:
    """Evaluate one expectation against ``subject``.

    Assertion failures come back as a failing :class:`Outcome`; nothing is
    raised for them. A predicate that cannot be applied at all raises
    :class:`PredicateError`.
    """
    if isinstance(expectation, Atomic):
        return _evaluate_atomic(subject, expectation, name=name)
    if isinstance(expectation, Not):
        return _evaluate_not(subject, expectation, name=name)
    if isinstance(expectation, All):
        return _evaluate_all(subject, expectation, name=name)
    if isinstance(expectation, Any):
        return _evaluate_any(subject, expectation, name=name)
    raise TypeError(f"Unsupported expectation type: {type(expectation).__name__}")


def _evaluate_atomic(subject: AnyValue, expectation: Atomic, *, name: str) -> Outcome:
    try:
        verdict = expectation.predicate(subject, **expectation.arguments())
    except PredicateError:
        raise
    except Exception as error:
        raise PredicateError(
            expectation.name,
            f"{error.__class__.__name__}: {error}",
        ) from error

    if not isinstance(verdict, Verdict):
        raise PredicateError(
            expectation.name,
            f"expected a Verdict, got {type(verdict).__name__}",
        )

    text = f"{name} {verdict.clause}"
    if verdict.passed:
        return Outcome.success(text)

    return Outcome.failure(
        text,
        Mismatch(
            description=verdict.message or f"expected {text}",
            expected=verdict.expected,
            actual=verdict.actual,
            diffable=verdict.diffable,
            granularity=verdict.granularity,
            container=verdict.container,
        ),
    )


def _evaluate_not(subject: AnyValue, expectation: Not, *, name: str) -> Outcome:
    inner = evaluate(subject, expectation.inner, name=name)
    text = f"NOT {inner.expectation}"
    if inner.failed:
        return Outcome.success(text)
    return Outcome.failure(
        text,
        Mismatch(description=f"expected NOT {inner.expectation} but it did"),
    )


def _evaluate_all(subject: AnyValue, expectation: All, *, name: str) -> Outcome:
    outcomes = [evaluate(subject, item, name=name) for item in expectation.items]
    text = _describe_group("all of", outcomes)
    failures = _positioned_failures(outcomes)
    if not failures:
        return Outcome.success(text)
    return Outcome.failure(text, _combined(failures))


def _evaluate_any(subject: AnyValue, expectation: Any, *, name: str) -> Outcome:
    # Every alternative is evaluated so the positive description is complete
    # when an enclosing Not reports it.
    outcomes = [evaluate(subject, item, name=name) for item in expectation.items]
    text = _describe_group("any of", outcomes)
    if any(outcome.passed for outcome in outcomes):
        return Outcome.success(text)
    if not outcomes:
        return Outcome.failure(
            text,
            Mismatch(description="expected any of [] but there were no alternatives"),
        )
    return Outcome.failure(text, _combined(_positioned_failures(outcomes)))


def _describe_group(label: str, outcomes: list[Outcome]) -> str:
    return f"{label} [" + "; ".join(outcome.expectation for outcome in outcomes) + "]"


def _positioned_failures(outcomes: list[Outcome]) -> list[Mismatch]:
    return [
        outcome.mismatch.at_position(position)
        for position, outcome in enumerate(outcomes, start=1)
        if outcome.mismatch is not None
    ]


def _combined(failures: list[Mismatch]) -> Mismatch:
    description = "\n".join(
        prefix_block(f"[{failure.position}] ", failure.description) for failure in failures
    )
    return Mismatch(description=description, children=tuple(failures))
