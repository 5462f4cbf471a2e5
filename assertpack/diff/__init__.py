"""Diff subsystem for AssertKit."""

from assertpack.diff.engine import actual_tokens, diff, diff_values, edit_distance, expected_tokens
from assertpack.diff.formatting import (
    format_failure,
    format_outcome,
    format_soft_report,
    render_mismatch,
)
from assertpack.diff.models import DiffSpan, RenderedDiff
from assertpack.diff.render import DIFF_FORMATS, DiffFormat, Highlight, diff_format_for_mode, render_diff

__all__ = [
    "DiffSpan",
    "RenderedDiff",
    "diff",
    "diff_values",
    "expected_tokens",
    "actual_tokens",
    "edit_distance",
    "Highlight",
    "DiffFormat",
    "DIFF_FORMATS",
    "diff_format_for_mode",
    "render_diff",
    "format_outcome",
    "format_failure",
    "format_soft_report",
    "render_mismatch",
]
