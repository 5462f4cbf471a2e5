"""Highlight mode configuration for AssertKit."""

from assertpack.highlight.config import (
    HIGHLIGHT_ENV_VAR,
    NO_COLOR_ENV_VAR,
    HighlightConfig,
    HighlightResolution,
    HostCapabilities,
    configured_highlight_mode,
    current_resolution,
    get_highlight_config,
    is_truthy_env_value,
    parse_highlight_mode,
    reset_highlight_cache,
    resolve_highlight_mode,
    use_highlight_mode,
)

__all__ = [
    "HIGHLIGHT_ENV_VAR",
    "NO_COLOR_ENV_VAR",
    "HostCapabilities",
    "HighlightResolution",
    "HighlightConfig",
    "parse_highlight_mode",
    "is_truthy_env_value",
    "resolve_highlight_mode",
    "get_highlight_config",
    "configured_highlight_mode",
    "current_resolution",
    "use_highlight_mode",
    "reset_highlight_cache",
]
