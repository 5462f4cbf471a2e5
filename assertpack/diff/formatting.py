"""Failure report rendering for outcomes and soft-assertion scopes."""

from __future__ import annotations

from collections.abc import Sequence

from assertpack.core.canonical import prefix_block
from assertpack.core.models import FailureRecord, Location, Mismatch, Outcome
from assertpack.core.types import HighlightMode
from assertpack.diff.engine import diff
from assertpack.diff.render import render_diff


def format_outcome(
    outcome: Outcome,
    mode: HighlightMode,
    *,
    description: str | None = None,
    location: Location | None = None,
) -> str:
    """Render a failed outcome; passing outcomes render to an empty string."""
    if outcome.passed or outcome.mismatch is None:
        return ""
    return format_failure(
        FailureRecord(mismatch=outcome.mismatch, description=description, location=location),
        mode,
    )


def format_failure(record: FailureRecord, mode: HighlightMode) -> str:
    lines: list[str] = []
    header = _header(record.description, record.location)
    if header:
        lines.append(header)
    lines.append(render_mismatch(record.mismatch, mode))
    return "\n".join(lines)


def render_mismatch(mismatch: Mismatch, mode: HighlightMode) -> str:
    if mismatch.children:
        return "\n".join(
            prefix_block(f"[{child.position}] ", render_mismatch(child, mode))
            for child in mismatch.children
        )

    lines = [mismatch.description]
    if mismatch.has_comparison:
        actual, expected = _comparison_texts(mismatch, mode)
        lines.append(f"   but was: {actual}")
        lines.append(f"  expected: {expected}")
    return "\n".join(lines)


def format_soft_report(
    failures: Sequence[FailureRecord],
    mode: HighlightMode,
    *,
    checks: int | None = None,
) -> str:
    """Render every recorded failure with its 1-based ordinal, in record order."""
    blocks = [
        prefix_block(f"{ordinal}) ", format_failure(record, mode))
        for ordinal, record in enumerate(failures, start=1)
    ]
    total = checks if checks is not None else len(failures)
    noun = "assertion" if total == 1 else "assertions"
    blocks.append(f"{len(failures)} of {total} soft {noun} failed")
    return "\n\n".join(blocks)


def _comparison_texts(mismatch: Mismatch, mode: HighlightMode) -> tuple[str, str]:
    if mismatch.diffable and mismatch.expected is not None and mismatch.actual is not None:
        rendered = render_diff(
            diff(mismatch.expected, mismatch.actual),
            mode,
            granularity=mismatch.granularity,
            container=mismatch.container,
        )
        return rendered.actual, rendered.expected
    return mismatch.actual_text or "", mismatch.expected_text or ""


def _header(description: str | None, location: Location | None) -> str:
    if location is not None and description:
        return f"{location}: {description}"
    if location is not None:
        return f"{location}:"
    return description or ""
