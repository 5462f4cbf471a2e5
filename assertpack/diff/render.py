"""Highlight rendering of token diffs."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import typer

from assertpack.core.canonical import wrap_items
from assertpack.core.types import ContainerKind, Granularity, HighlightMode
from assertpack.diff.models import DiffSpan, RenderedDiff


@dataclass(frozen=True, slots=True)
class Highlight:
    """Terminal style wrapped around a highlighted region."""

    fg: str | None = None
    bold: bool = False

    @property
    def active(self) -> bool:
        return self.fg is not None or self.bold

    def apply(self, text: str) -> str:
        if not self.active or not text:
            return text
        return typer.style(text, fg=self.fg, bold=True if self.bold else None)


@dataclass(frozen=True, slots=True)
class DiffFormat:
    """Styles for the two sides of a diff.

    ``unexpected`` marks regions present only in the actual value,
    ``missing`` marks regions present only in the expected value.
    """

    unexpected: Highlight
    missing: Highlight


NO_HIGHLIGHT = Highlight()

DIFF_FORMATS: dict[str, DiffFormat] = {
    "bold": DiffFormat(unexpected=Highlight(bold=True), missing=Highlight(bold=True)),
    "red-green": DiffFormat(unexpected=Highlight(fg="red"), missing=Highlight(fg="green")),
    "red-blue": DiffFormat(unexpected=Highlight(fg="red"), missing=Highlight(fg="blue")),
    "red-yellow": DiffFormat(unexpected=Highlight(fg="red"), missing=Highlight(fg="yellow")),
    "off": DiffFormat(unexpected=NO_HIGHLIGHT, missing=NO_HIGHLIGHT),
}


def diff_format_for_mode(mode: HighlightMode) -> DiffFormat:
    try:
        return DIFF_FORMATS[mode]
    except KeyError as error:
        raise ValueError(f"Unsupported highlight mode: {mode}") from error


def render_diff(
    spans: Sequence[DiffSpan],
    mode: HighlightMode,
    *,
    granularity: Granularity = "chars",
    container: ContainerKind = "list",
) -> RenderedDiff:
    """Render both sides of a diff, highlighting the regions unique to each side."""
    diff_format = diff_format_for_mode(mode)
    expected: list[str] = []
    actual: list[str] = []

    for span in spans:
        if span.kind == "equal":
            expected.extend(span.tokens)
            actual.extend(span.tokens)
        elif span.kind == "delete":
            expected.extend(_mark(span.tokens, diff_format.missing, granularity))
        else:
            actual.extend(_mark(span.tokens, diff_format.unexpected, granularity))

    if granularity == "items":
        return RenderedDiff(
            expected=wrap_items(expected, container),
            actual=wrap_items(actual, container),
        )
    return RenderedDiff(expected="".join(expected), actual="".join(actual))


def _mark(tokens: tuple[str, ...], highlight: Highlight, granularity: Granularity) -> list[str]:
    if granularity == "items":
        return [highlight.apply(token) for token in tokens]
    return [highlight.apply("".join(tokens))]
