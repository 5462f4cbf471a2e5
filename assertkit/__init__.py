"""Stable public API surface for AssertKit.

This module is the supported import path for library users.
"""

from __future__ import annotations

from assertpack.core.exceptions import AssertKitError
from assertpack.core.models import Location, Mismatch, Outcome
from assertpack.core.types import HighlightMode
from assertpack.diff import DiffSpan, diff, format_outcome, render_diff
from assertpack.expect import (
    All,
    Any,
    AssertionFailure,
    Atomic,
    Expectation,
    Not,
    PredicateError,
    Verdict,
    all_of,
    any_of,
    contains,
    evaluate,
    expectation,
    has_length,
    is_equal_to,
    is_greater_than,
    is_less_than,
    not_,
    satisfies,
)
from assertpack.highlight import (
    HighlightConfig,
    HostCapabilities,
    configured_highlight_mode,
    reset_highlight_cache,
    use_highlight_mode,
)
from assertpack.soft import (
    NoActiveScopeError,
    ScopeClosedError,
    ScopeError,
    ScopeOwnershipError,
    SoftAssertionError,
    SoftAssertionScope,
    close,
    open_scope,
    record,
    soft_assertions,
)
from assertpack.spec import Spec, assert_that, verify_that

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "HighlightMode",
    "Location",
    "Mismatch",
    "Outcome",
    "DiffSpan",
    "Spec",
    "Verdict",
    "Atomic",
    "Not",
    "All",
    "Any",
    "Expectation",
    "AssertKitError",
    "AssertionFailure",
    "PredicateError",
    "SoftAssertionError",
    "ScopeError",
    "ScopeClosedError",
    "ScopeOwnershipError",
    "NoActiveScopeError",
    "SoftAssertionScope",
    "HighlightConfig",
    "HostCapabilities",
    "assert_that",
    "verify_that",
    "expectation",
    "not_",
    "all_of",
    "any_of",
    "is_equal_to",
    "satisfies",
    "contains",
    "is_greater_than",
    "is_less_than",
    "has_length",
    "evaluate",
    "diff",
    "render_diff",
    "format_outcome",
    "open_scope",
    "record",
    "close",
    "soft_assertions",
    "configured_highlight_mode",
    "use_highlight_mode",
    "reset_highlight_cache",
]
