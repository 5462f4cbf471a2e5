"""Core data models for AssertKit outcomes and mismatches."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
import inspect
import os
from typing import Any

from assertpack.core.canonical import wrap_items
from assertpack.core.types import ContainerKind, Granularity


@dataclass(frozen=True, slots=True)
class Location:
    """Call-site of an assertion, threaded through to the failure report."""

    file: str
    line: int
    column: int | None = None

    def __str__(self) -> str:
        if self.column is None:
            return f"{self.file}:{self.line}"
        return f"{self.file}:{self.line}:{self.column}"

    @classmethod
    def from_caller(cls, depth: int = 1) -> "Location | None":
        """Capture the location ``depth`` frames above the caller of this method."""
        frame = inspect.currentframe()
        try:
            target = frame.f_back if frame is not None else None
            for _ in range(depth):
                if target is None:
                    break
                target = target.f_back
            if target is None:
                return None
            return cls(file=_display_path(target.f_code.co_filename), line=target.f_lineno)
        finally:
            del frame

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file,
            "line": self.line,
            "column": self.column,
        }


@dataclass(frozen=True, slots=True)
class Mismatch:
    """Failure detail of one evaluated expectation.

    ``expected`` and ``actual`` hold the comparable token form of both sides.
    Characters are used for scalar/string comparisons, element reprs for
    sequence comparisons (see ``granularity``); ``container`` names the
    brackets item tokens are rendered in. Combinator failures carry the
    failing sub-mismatches in ``children``, each tagged with its 1-based
    ``position`` among the combined expectations.
    """

    description: str
    expected: tuple[str, ...] | None = None
    actual: tuple[str, ...] | None = None
    diffable: bool = False
    granularity: Granularity = "chars"
    container: ContainerKind = "list"
    position: int | None = None
    children: tuple[Mismatch, ...] = field(default_factory=tuple)

    @property
    def has_comparison(self) -> bool:
        return self.expected is not None and self.actual is not None

    @property
    def expected_text(self) -> str | None:
        if self.expected is None:
            return None
        return join_tokens(self.expected, self.granularity, self.container)

    @property
    def actual_text(self) -> str | None:
        if self.actual is None:
            return None
        return join_tokens(self.actual, self.granularity, self.container)

    def at_position(self, position: int) -> Mismatch:
        return replace(self, position=position)

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "expected": self.expected_text,
            "actual": self.actual_text,
            "diffable": self.diffable,
            "granularity": self.granularity,
            "container": self.container,
            "position": self.position,
            "children": [child.to_dict() for child in self.children],
        }


@dataclass(frozen=True, slots=True)
class Outcome:
    """Pass/fail result of evaluating one expectation against a subject."""

    passed: bool
    expectation: str
    mismatch: Mismatch | None = None

    def __post_init__(self) -> None:
        if self.passed and self.mismatch is not None:
            raise ValueError("A passing outcome must not carry a mismatch")
        if not self.passed and self.mismatch is None:
            raise ValueError("A failing outcome requires a mismatch")

    @classmethod
    def success(cls, expectation: str) -> "Outcome":
        return cls(passed=True, expectation=expectation)

    @classmethod
    def failure(cls, expectation: str, mismatch: Mismatch) -> "Outcome":
        return cls(passed=False, expectation=expectation, mismatch=mismatch)

    @property
    def failed(self) -> bool:
        return not self.passed

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": "pass" if self.passed else "fail",
            "expectation": self.expectation,
            "mismatch": self.mismatch.to_dict() if self.mismatch is not None else None,
        }


@dataclass(frozen=True, slots=True)
class FailureRecord:
    """A mismatch together with the caller context it was raised in."""

    mismatch: Mismatch
    description: str | None = None
    location: Location | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "mismatch": self.mismatch.to_dict(),
            "description": self.description,
            "location": self.location.to_dict() if self.location is not None else None,
        }


def join_tokens(
    tokens: tuple[str, ...],
    granularity: Granularity,
    container: ContainerKind = "list",
) -> str:
    if granularity == "items":
        return wrap_items(tokens, container)
    return "".join(tokens)


def _display_path(path: str) -> str:
    try:
        relative = os.path.relpath(path)
    except ValueError:
        return path
    if relative.startswith(".."):
        return path
    return relative
