"""Data models for token diffs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from assertpack.core.types import DiffKind


@dataclass(frozen=True, slots=True)
class DiffSpan:
    """One aligned region of a comparison.

    ``delete`` tokens occur only in the expected sequence, ``insert`` tokens
    only in the actual sequence.
    """

    kind: DiffKind
    tokens: tuple[str, ...]

    @property
    def text(self) -> str:
        return "".join(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "tokens": list(self.tokens),
        }


@dataclass(frozen=True, slots=True)
class RenderedDiff:
    """Expected and actual text with differing regions highlighted."""

    expected: str
    actual: str

    def to_dict(self) -> dict[str, str]:
        return {
            "expected": self.expected,
            "actual": self.actual,
        }
