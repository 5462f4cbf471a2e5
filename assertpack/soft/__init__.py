"""Soft assertion subsystem for AssertKit."""

from assertpack.soft.exceptions import (
    NoActiveScopeError,
    ScopeClosedError,
    ScopeError,
    ScopeOwnershipError,
    SoftAssertionError,
)
from assertpack.soft.scope import (
    SoftAssertionScope,
    close,
    get_current_scope,
    open_scope,
    record,
    soft_assertions,
)

__all__ = [
    "ScopeError",
    "ScopeClosedError",
    "ScopeOwnershipError",
    "NoActiveScopeError",
    "SoftAssertionError",
    "SoftAssertionScope",
    "open_scope",
    "record",
    "close",
    "get_current_scope",
    "soft_assertions",
]
