"""Expectation model, combinators and evaluator for AssertKit."""

from assertpack.expect.evaluator import evaluate
from assertpack.expect.exceptions import AssertionFailure, ExpectationError, PredicateError
from assertpack.expect.expectations import (
    All,
    Any,
    Atomic,
    Expectation,
    Not,
    Predicate,
    Verdict,
    all_of,
    any_of,
    expectation,
    not_,
)
from assertpack.expect.predicates import (
    contains,
    has_length,
    is_equal_to,
    is_greater_than,
    is_less_than,
    satisfies,
)

__all__ = [
    "ExpectationError",
    "PredicateError",
    "AssertionFailure",
    "Verdict",
    "Predicate",
    "Atomic",
    "Not",
    "All",
    "Any",
    "Expectation",
    "expectation",
    "not_",
    "all_of",
    "any_of",
    "evaluate",
    "is_equal_to",
    "satisfies",
    "contains",
    "is_greater_than",
    "is_less_than",
    "has_length",
]
