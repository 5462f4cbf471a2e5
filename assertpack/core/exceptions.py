"""Base exception for AssertKit misuse errors."""


class AssertKitError(Exception):
    """Base class for programming errors raised immediately, never deferred."""
