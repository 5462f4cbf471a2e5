"""Core models and deterministic representations for AssertKit."""

from assertpack.core.canonical import (
    char_tokens,
    container_kind,
    granularity_for,
    item_tokens,
    represent,
    tokens_for,
    wrap_items,
)
from assertpack.core.exceptions import AssertKitError
from assertpack.core.models import FailureRecord, Location, Mismatch, Outcome
from assertpack.core.types import (
    CONTAINER_KINDS,
    DEFAULT_HIGHLIGHT_MODE,
    DIFF_KINDS,
    HIGHLIGHT_MODES,
    ContainerKind,
    DiffKind,
    Granularity,
    HighlightMode,
)

__all__ = [
    "AssertKitError",
    "Location",
    "Mismatch",
    "Outcome",
    "FailureRecord",
    "HighlightMode",
    "HIGHLIGHT_MODES",
    "DEFAULT_HIGHLIGHT_MODE",
    "DiffKind",
    "DIFF_KINDS",
    "ContainerKind",
    "CONTAINER_KINDS",
    "Granularity",
    "represent",
    "char_tokens",
    "item_tokens",
    "tokens_for",
    "granularity_for",
    "container_kind",
    "wrap_items",
]
