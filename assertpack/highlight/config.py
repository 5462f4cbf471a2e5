"""Process-wide highlight mode resolution with an explicit reset hook."""

from __future__ import annotations

from collections.abc import Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
import os
import threading
from typing import Any, Iterator, Literal, cast
import warnings

from assertpack.core.types import DEFAULT_HIGHLIGHT_MODE, HIGHLIGHT_MODES, HighlightMode

HIGHLIGHT_ENV_VAR = "ASSERTKIT_HIGHLIGHT_DIFFS"
NO_COLOR_ENV_VAR = "NO_COLOR"

ResolutionSource = Literal["capability", "no-color", "env", "default", "override"]

_UNCHANGED = object()

_FALSY_VALUES = frozenset({"0", "false", "no", "off"})

_OVERRIDE_MODE: ContextVar[HighlightMode | None] = ContextVar(
    "assertpack_highlight_mode_override",
    default=None,
)


@dataclass(frozen=True, slots=True)
class HostCapabilities:
    """What the hosting environment allows the resolver to do."""

    color_supported: bool = True
    env_readable: bool = True


@dataclass(frozen=True, slots=True)
class HighlightResolution:
    mode: HighlightMode
    source: ResolutionSource

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode,
            "source": self.source,
        }


def parse_highlight_mode(value: str) -> HighlightMode | None:
    """Match a mode name case-insensitively; ``None`` for unknown values."""
    normalized = value.strip().lower()
    if normalized in HIGHLIGHT_MODES:
        return cast(HighlightMode, normalized)
    return None


def is_truthy_env_value(value: str | None) -> bool:
    if value is None:
        return False
    normalized = value.strip().lower()
    return bool(normalized) and normalized not in _FALSY_VALUES


def resolve_highlight_mode(
    environ: Mapping[str, str],
    *,
    capabilities: HostCapabilities = HostCapabilities(),
    default: HighlightMode = DEFAULT_HIGHLIGHT_MODE,
) -> HighlightResolution:
    """Resolve the highlight mode from host capabilities and environment."""
    if not capabilities.color_supported:
        return HighlightResolution(mode="off", source="capability")

    if not capabilities.env_readable:
        return HighlightResolution(mode=default, source="default")

    if is_truthy_env_value(environ.get(NO_COLOR_ENV_VAR)):
        return HighlightResolution(mode="off", source="no-color")

    raw = environ.get(HIGHLIGHT_ENV_VAR)
    if raw is not None and raw.strip():
        mode = parse_highlight_mode(raw)
        if mode is not None:
            return HighlightResolution(mode=mode, source="env")
        warnings.warn(
            (
                f"AssertKit environment variable {HIGHLIGHT_ENV_VAR} is set to the "
                f"unrecognized value {raw!r}; default highlight mode {default!r} is used"
            ),
            RuntimeWarning,
            stacklevel=2,
        )

    return HighlightResolution(mode=default, source="default")


class HighlightConfig:
    """Lazily resolved, cached highlight configuration.

    The first call to :meth:`resolution` reads the environment once; later
    calls return the cached value until :meth:`reset` is called. Both paths
    share one lock so a reset never interleaves with a resolve.
    """

    def __init__(
        self,
        *,
        environ: Mapping[str, str] | None = None,
        capabilities: HostCapabilities | None = None,
        default: HighlightMode = DEFAULT_HIGHLIGHT_MODE,
    ) -> None:
        self._environ = environ
        self._capabilities = capabilities or HostCapabilities()
        self._default = default
        self._lock = threading.Lock()
        self._cached: HighlightResolution | None = None

    @property
    def capabilities(self) -> HostCapabilities:
        return self._capabilities

    def resolution(self) -> HighlightResolution:
        cached = self._cached
        if cached is not None:
            return cached
        with self._lock:
            if self._cached is None:
                environ = self._environ if self._environ is not None else os.environ
                self._cached = resolve_highlight_mode(
                    environ,
                    capabilities=self._capabilities,
                    default=self._default,
                )
            return self._cached

    def mode(self) -> HighlightMode:
        return self.resolution().mode

    def reset(
        self,
        *,
        environ: Mapping[str, str] | None | object = _UNCHANGED,
        capabilities: HostCapabilities | None | object = _UNCHANGED,
    ) -> None:
        """Drop the cached resolution (for tests), optionally swapping inputs.

        Omitted inputs are kept. ``environ=None`` goes back to reading
        ``os.environ`` and ``capabilities=None`` to the default capabilities.
        """
        with self._lock:
            self._cached = None
            if environ is not _UNCHANGED:
                self._environ = cast("Mapping[str, str] | None", environ)
            if capabilities is not _UNCHANGED:
                self._capabilities = (
                    cast("HostCapabilities | None", capabilities) or HostCapabilities()
                )

    @property
    def is_resolved(self) -> bool:
        return self._cached is not None


_PROCESS_CONFIG = HighlightConfig()


def get_highlight_config() -> HighlightConfig:
    return _PROCESS_CONFIG


def configured_highlight_mode() -> HighlightMode:
    """Resolve the active highlight mode from context override or process config."""
    override = _OVERRIDE_MODE.get()
    if override is not None:
        return override
    return _PROCESS_CONFIG.mode()


def current_resolution() -> HighlightResolution:
    override = _OVERRIDE_MODE.get()
    if override is not None:
        return HighlightResolution(mode=override, source="override")
    return _PROCESS_CONFIG.resolution()


@contextmanager
def use_highlight_mode(mode: HighlightMode) -> Iterator[HighlightMode]:
    """Force a highlight mode for the current context."""
    if parse_highlight_mode(mode) != mode:
        raise ValueError(f"Unsupported highlight mode: {mode}")
    token = _OVERRIDE_MODE.set(mode)
    try:
        yield mode
    finally:
        _OVERRIDE_MODE.reset(token)


def reset_highlight_cache(
    *,
    environ: Mapping[str, str] | None = None,
    capabilities: HostCapabilities | None = None,
) -> None:
    """Clear the cached process highlight mode (for tests).

    The process resolver goes back to ``os.environ`` and default capabilities
    unless replacements are passed.
    """
    _PROCESS_CONFIG.reset(environ=environ, capabilities=capabilities)
