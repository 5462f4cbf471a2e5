"""O(N*D) token diff engine (Myers shortest edit script)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from assertpack.core.canonical import granularity_for, tokens_for
from assertpack.core.types import DiffKind, Granularity
from assertpack.diff.models import DiffSpan

_Edit = tuple[DiffKind, str]


def diff(expected: Sequence[str], actual: Sequence[str]) -> list[DiffSpan]:
    """Compute the minimal edit script turning ``expected`` into ``actual``.

    Equal runs are kept maximal and every changed region between two equal
    runs is emitted as one ``delete`` span followed by one ``insert`` span.
    Identical inputs yield exactly one ``equal`` span.
    """
    left = tuple(expected)
    right = tuple(actual)

    if left == right:
        return [DiffSpan(kind="equal", tokens=left)]

    return _coalesce(_shortest_edit_script(left, right))


def diff_values(
    expected: Any,
    actual: Any,
    *,
    granularity: Granularity | None = None,
) -> list[DiffSpan]:
    """Diff the canonical representations of two values."""
    resolved = granularity or granularity_for(expected, actual)
    return diff(tokens_for(expected, resolved), tokens_for(actual, resolved))


def expected_tokens(spans: Sequence[DiffSpan]) -> tuple[str, ...]:
    tokens: list[str] = []
    for span in spans:
        if span.kind != "insert":
            tokens.extend(span.tokens)
    return tuple(tokens)


def actual_tokens(spans: Sequence[DiffSpan]) -> tuple[str, ...]:
    tokens: list[str] = []
    for span in spans:
        if span.kind != "delete":
            tokens.extend(span.tokens)
    return tuple(tokens)


def edit_distance(spans: Sequence[DiffSpan]) -> int:
    return sum(len(span) for span in spans if span.kind != "equal")


def _shortest_edit_script(left: tuple[str, ...], right: tuple[str, ...]) -> list[_Edit]:
    n = len(left)
    m = len(right)
    max_d = n + m
    offset = max_d
    frontier = [0] * (2 * max_d + 2)
    trace: list[list[int]] = []

    for d in range(max_d + 1):
        trace.append(frontier.copy())
        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and frontier[offset + k - 1] < frontier[offset + k + 1]):
                x = frontier[offset + k + 1]
            else:
                x = frontier[offset + k - 1] + 1
            y = x - k
            while x < n and y < m and left[x] == right[y]:
                x += 1
                y += 1
            frontier[offset + k] = x
            if x >= n and y >= m:
                return _backtrack(left, right, trace, offset)

    raise RuntimeError("edit script search exhausted without reaching the end")


def _backtrack(
    left: tuple[str, ...],
    right: tuple[str, ...],
    trace: list[list[int]],
    offset: int,
) -> list[_Edit]:
    edits: list[_Edit] = []
    x = len(left)
    y = len(right)

    for d in range(len(trace) - 1, -1, -1):
        frontier = trace[d]
        k = x - y
        if k == -d or (k != d and frontier[offset + k - 1] < frontier[offset + k + 1]):
            prev_k = k + 1
        else:
            prev_k = k - 1
        prev_x = frontier[offset + prev_k]
        prev_y = prev_x - prev_k

        while x > prev_x and y > prev_y:
            x -= 1
            y -= 1
            edits.append(("equal", left[x]))

        if d > 0:
            if x == prev_x:
                edits.append(("insert", right[prev_y]))
            else:
                edits.append(("delete", left[prev_x]))
        x = prev_x
        y = prev_y

    edits.reverse()
    return edits


def _coalesce(edits: list[_Edit]) -> list[DiffSpan]:
    spans: list[DiffSpan] = []
    equal: list[str] = []
    deleted: list[str] = []
    inserted: list[str] = []

    def flush_changes() -> None:
        if deleted:
            spans.append(DiffSpan(kind="delete", tokens=tuple(deleted)))
            deleted.clear()
        if inserted:
            spans.append(DiffSpan(kind="insert", tokens=tuple(inserted)))
            inserted.clear()

    for kind, token in edits:
        if kind == "equal":
            flush_changes()
            equal.append(token)
            continue
        if equal:
            spans.append(DiffSpan(kind="equal", tokens=tuple(equal)))
            equal.clear()
        if kind == "delete":
            deleted.append(token)
        else:
            inserted.append(token)

    flush_changes()
    if equal:
        spans.append(DiffSpan(kind="equal", tokens=tuple(equal)))
    return spans
