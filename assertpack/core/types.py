"""Type definitions for AssertKit core models."""

from typing import Literal

HighlightMode = Literal[
    "bold",
    "red-green",
    "red-blue",
    "red-yellow",
    "off",
]

HIGHLIGHT_MODES: tuple[str, ...] = (
    "bold",
    "red-green",
    "red-blue",
    "red-yellow",
    "off",
)

DEFAULT_HIGHLIGHT_MODE: HighlightMode = "red-green"

DiffKind = Literal["equal", "insert", "delete"]

DIFF_KINDS: tuple[str, ...] = ("equal", "insert", "delete")

Granularity = Literal["chars", "items"]

ContainerKind = Literal["list", "tuple", "set", "frozenset", "mapping"]

CONTAINER_KINDS: tuple[str, ...] = ("list", "tuple", "set", "frozenset", "mapping")
