"""Deterministic textual representations used for diffing failed comparisons."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from assertpack.core.types import ContainerKind, Granularity


def represent(value: Any) -> str:
    """Render a value to a stable, repr-like text.

    Mappings are rendered with keys in sorted order and sets with members in
    sorted order, so two equal values always produce the same text. A
    container that contains itself renders the repeated reference as
    ``[...]`` or ``{...}``, like :func:`repr`.
    """
    return _represent(value, set())


def _represent(value: Any, active: set[int]) -> str:
    if isinstance(value, Mapping):
        if id(value) in active:
            return "{...}"
        active.add(id(value))
        try:
            entries = [
                f"{_represent(key, active)}: {_represent(item, active)}"
                for key, item in _sorted_items(value)
            ]
        finally:
            active.discard(id(value))
        return "{" + ", ".join(entries) + "}"

    if isinstance(value, (set, frozenset)):
        if not value:
            return "set()" if isinstance(value, set) else "frozenset()"
        members = sorted(_represent(item, active) for item in value)
        body = "{" + ", ".join(members) + "}"
        return body if isinstance(value, set) else f"frozenset({body})"

    if isinstance(value, list):
        if id(value) in active:
            return "[...]"
        active.add(id(value))
        try:
            items = [_represent(item, active) for item in value]
        finally:
            active.discard(id(value))
        return "[" + ", ".join(items) + "]"

    if isinstance(value, tuple) and not hasattr(value, "_fields"):
        if id(value) in active:
            return "(...)"
        active.add(id(value))
        try:
            items = [_represent(item, active) for item in value]
        finally:
            active.discard(id(value))
        if len(items) == 1:
            return f"({items[0]},)"
        return "(" + ", ".join(items) + ")"

    return repr(value)


def char_tokens(value: Any) -> tuple[str, ...]:
    """Tokenize the representation of a value into single characters."""
    return tuple(represent(value))


def item_tokens(value: Any) -> tuple[str, ...]:
    """Tokenize a collection into the representations of its elements."""
    if isinstance(value, Mapping):
        return tuple(f"{represent(key)}: {represent(item)}" for key, item in _sorted_items(value))
    if isinstance(value, (set, frozenset)):
        return tuple(sorted(represent(item) for item in value))
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise TypeError(f"item tokens require a collection, got {type(value).__name__}")
    return tuple(represent(item) for item in value)


def tokens_for(value: Any, granularity: Granularity) -> tuple[str, ...]:
    if granularity == "items":
        return item_tokens(value)
    return char_tokens(value)


def container_kind(value: Any) -> ContainerKind | None:
    """Name the container shape of ``value``; ``None`` for scalars and strings."""
    if isinstance(value, Mapping):
        return "mapping"
    if isinstance(value, frozenset):
        return "frozenset"
    if isinstance(value, set):
        return "set"
    if isinstance(value, list):
        return "list"
    if isinstance(value, tuple) and not hasattr(value, "_fields"):
        return "tuple"
    return None


def granularity_for(expected: Any, actual: Any) -> Granularity:
    """Pick item granularity when both sides are collections of the same kind.

    Collections of different kinds (a tuple against a list) are compared by
    character so the differing brackets show up in the diff.
    """
    kind = container_kind(expected)
    if kind is not None and kind == container_kind(actual):
        return "items"
    return "chars"


def wrap_items(items: Sequence[str], container: ContainerKind) -> str:
    """Join rendered items inside the brackets of ``container``."""
    body = ", ".join(items)
    if container == "tuple":
        return f"({body},)" if len(items) == 1 else f"({body})"
    if container == "mapping":
        return "{" + body + "}"
    if container == "set":
        return "{" + body + "}" if items else "set()"
    if container == "frozenset":
        return "frozenset({" + body + "})" if items else "frozenset()"
    return "[" + body + "]"


def _sorted_items(mapping: Mapping[Any, Any]) -> list[tuple[Any, Any]]:
    return sorted(mapping.items(), key=lambda pair: represent(pair[0]))


def prefix_block(prefix: str, text: str) -> str:
    """Prefix the first line of ``text`` and align continuation lines under it."""
    lines = text.splitlines() or [""]
    pad = " " * len(prefix)
    return "\n".join([prefix + lines[0], *(pad + line if line else line for line in lines[1:])])
