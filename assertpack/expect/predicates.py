"""Reference atomic predicates built on the evaluator contract."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Callable

from assertpack.core.canonical import represent
from assertpack.expect.expectations import Atomic, Verdict, expectation


def is_equal_to(expected: Any) -> Atomic:
    return expectation("is_equal_to", _check_equal, expected=expected)


def satisfies(predicate: Callable[[Any], bool], message: str | None = None) -> Atomic:
    return expectation("satisfies", _check_satisfies, predicate=predicate, message=message)


def contains(item: Any) -> Atomic:
    return expectation("contains", _check_contains, item=item)


def is_greater_than(bound: Any) -> Atomic:
    return expectation("is_greater_than", _check_greater_than, bound=bound)


def is_less_than(bound: Any) -> Atomic:
    return expectation("is_less_than", _check_less_than, bound=bound)


def has_length(length: int) -> Atomic:
    return expectation("has_length", _check_length, length=length)


def _check_equal(subject: Any, *, expected: Any) -> Verdict:
    return Verdict.comparing(
        subject == expected,
        f"to be equal to {represent(expected)}",
        expected=expected,
        actual=subject,
    )


def _check_satisfies(subject: Any, *, predicate: Callable[[Any], bool], message: str | None) -> Verdict:
    passed = bool(predicate(subject))
    return Verdict(
        passed=passed,
        clause="to satisfy the given predicate",
        message=message
        or f"expected {represent(subject)} to satisfy the given predicate, but returned false",
    )


def _check_contains(subject: Any, *, item: Any) -> Verdict:
    if isinstance(subject, str) and not isinstance(item, str):
        raise TypeError(f"a string can only contain strings, got {type(item).__name__}")
    if not isinstance(subject, (str, Iterable)):
        raise TypeError(f"{type(subject).__name__} is not a container")
    return Verdict.describing(
        item in subject,
        f"to contain {represent(item)}",
        expected=represent(item),
        actual=subject,
    )


def _check_greater_than(subject: Any, *, bound: Any) -> Verdict:
    return Verdict.describing(
        subject > bound,
        f"to be greater than {represent(bound)}",
        expected=f"> {represent(bound)}",
        actual=subject,
    )


def _check_less_than(subject: Any, *, bound: Any) -> Verdict:
    return Verdict.describing(
        subject < bound,
        f"to be less than {represent(bound)}",
        expected=f"< {represent(bound)}",
        actual=subject,
    )


def _check_length(subject: Any, *, length: int) -> Verdict:
    actual_length = len(subject)
    return Verdict.describing(
        actual_length == length,
        f"to have a length of {length}",
        expected=str(length),
        actual=actual_length,
    )
