"""Expectation variants: atomic checks and the Not/All/Any combinators.

The set of shapes is closed: an expectation is an :class:`Atomic` check
wrapping a predicate, or one of the three combinators over other
expectations. Trees are built once at the call site and evaluated by
:func:`assertpack.expect.evaluator.evaluate`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from assertpack.core.canonical import container_kind, granularity_for, tokens_for
from assertpack.core.types import ContainerKind, Granularity


@dataclass(frozen=True, slots=True)
class Verdict:
    """What a predicate reports back to the evaluator.

    ``clause`` is the positive phrasing of the check ("to be positive"). The
    evaluator prefixes it with the subject name. ``message`` replaces the
    generated failure description when set.
    """

    passed: bool
    clause: str
    expected: tuple[str, ...] | None = None
    actual: tuple[str, ...] | None = None
    diffable: bool = False
    granularity: Granularity = "chars"
    container: ContainerKind = "list"
    message: str | None = None

    @classmethod
    def comparing(
        cls,
        passed: bool,
        clause: str,
        *,
        expected: object,
        actual: object,
        granularity: Granularity | None = None,
    ) -> "Verdict":
        """Verdict whose failure shows a highlighted diff of both values."""
        resolved = granularity or granularity_for(expected, actual)
        return cls(
            passed=passed,
            clause=clause,
            expected=tokens_for(expected, resolved),
            actual=tokens_for(actual, resolved),
            diffable=True,
            granularity=resolved,
            container=container_kind(expected) or "list",
        )

    @classmethod
    def describing(
        cls,
        passed: bool,
        clause: str,
        *,
        expected: str,
        actual: object,
    ) -> "Verdict":
        """Verdict whose failure shows the actual value next to a plain expectation."""
        return cls(
            passed=passed,
            clause=clause,
            expected=tuple(expected),
            actual=tokens_for(actual, "chars"),
        )


Predicate = Callable[..., Verdict]


@dataclass(frozen=True, slots=True)
class Atomic:
    """One predicate call; ``params`` are its keyword arguments as name/value pairs."""

    name: str
    predicate: Predicate
    params: tuple[tuple[str, object], ...] = ()

    def arguments(self) -> dict[str, object]:
        return dict(self.params)


@dataclass(frozen=True, slots=True)
class Not:
    inner: "Expectation"


@dataclass(frozen=True, slots=True)
class All:
    items: tuple["Expectation", ...]


@dataclass(frozen=True, slots=True)
class Any:
    items: tuple["Expectation", ...]


Expectation = Union[Atomic, Not, All, Any]

EXPECTATION_TYPES: tuple[type, ...] = (Atomic, Not, All, Any)


def expectation(name: str, predicate: Predicate, /, **params: object) -> Atomic:
    return Atomic(name=name, predicate=predicate, params=tuple(params.items()))


def not_(inner: Expectation) -> Not:
    return Not(inner=inner)


def all_of(*items: Expectation) -> All:
    return All(items=tuple(items))


def any_of(*items: Expectation) -> Any:
    return Any(items=tuple(items))
