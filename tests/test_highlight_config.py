from concurrent.futures import ThreadPoolExecutor
import warnings

import pytest

from assertpack.highlight import (
    HIGHLIGHT_ENV_VAR,
    NO_COLOR_ENV_VAR,
    HighlightConfig,
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


def test_default_mode_is_red_green() -> None:
    resolution = resolve_highlight_mode({})

    assert resolution.mode == "red-green"
    assert resolution.source == "default"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("bold", "bold"),
        ("red-green", "red-green"),
        ("red-blue", "red-blue"),
        ("red-yellow", "red-yellow"),
        ("off", "off"),
        ("RED-BLUE", "red-blue"),
        ("  Bold ", "bold"),
    ],
)
def test_env_selector_is_case_insensitive(raw: str, expected: str) -> None:
    resolution = resolve_highlight_mode({HIGHLIGHT_ENV_VAR: raw})

    assert resolution.mode == expected
    assert resolution.source == "env"


def test_no_color_wins_over_selector() -> None:
    resolution = resolve_highlight_mode({NO_COLOR_ENV_VAR: "1", HIGHLIGHT_ENV_VAR: "bold"})

    assert resolution.mode == "off"
    assert resolution.source == "no-color"


@pytest.mark.parametrize("value", ["", "0", "false", "NO", "off"])
def test_falsy_no_color_values_are_ignored(value: str) -> None:
    resolution = resolve_highlight_mode({NO_COLOR_ENV_VAR: value, HIGHLIGHT_ENV_VAR: "bold"})

    assert resolution.mode == "bold"


def test_unknown_selector_warns_and_falls_back_to_default() -> None:
    with pytest.warns(RuntimeWarning, match="unrecognized value 'sparkly'"):
        resolution = resolve_highlight_mode({HIGHLIGHT_ENV_VAR: "sparkly"})

    assert resolution.mode == "red-green"
    assert resolution.source == "default"


def test_blank_selector_is_treated_as_unset() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        resolution = resolve_highlight_mode({HIGHLIGHT_ENV_VAR: "   "})

    assert resolution.source == "default"


def test_host_without_color_forces_off() -> None:
    resolution = resolve_highlight_mode(
        {HIGHLIGHT_ENV_VAR: "bold"},
        capabilities=HostCapabilities(color_supported=False),
    )

    assert resolution.mode == "off"
    assert resolution.source == "capability"


def test_host_without_environment_uses_default() -> None:
    resolution = resolve_highlight_mode(
        {HIGHLIGHT_ENV_VAR: "bold", NO_COLOR_ENV_VAR: "1"},
        capabilities=HostCapabilities(env_readable=False),
    )

    assert resolution.mode == "red-green"
    assert resolution.source == "default"


def test_parse_and_truthiness_helpers() -> None:
    assert parse_highlight_mode("Red-Yellow") == "red-yellow"
    assert parse_highlight_mode("rainbow") is None
    assert is_truthy_env_value("yes") is True
    assert is_truthy_env_value(None) is False


def test_config_caches_until_reset() -> None:
    environ = {HIGHLIGHT_ENV_VAR: "bold"}
    config = HighlightConfig(environ=environ)

    assert config.is_resolved is False
    assert config.mode() == "bold"
    assert config.is_resolved is True

    environ[HIGHLIGHT_ENV_VAR] = "off"
    assert config.mode() == "bold"

    config.reset()
    assert config.mode() == "off"


def test_reset_can_swap_environment_and_capabilities() -> None:
    config = HighlightConfig(environ={})
    assert config.mode() == "red-green"

    config.reset(environ={HIGHLIGHT_ENV_VAR: "red-blue"})
    assert config.mode() == "red-blue"

    config.reset(capabilities=HostCapabilities(color_supported=False))
    assert config.mode() == "off"
    assert config.capabilities.color_supported is False


def test_process_config_reads_os_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(HIGHLIGHT_ENV_VAR, "red-yellow")
    reset_highlight_cache()

    assert configured_highlight_mode() == "red-yellow"
    assert current_resolution().source == "env"

    monkeypatch.setenv(NO_COLOR_ENV_VAR, "1")
    assert configured_highlight_mode() == "red-yellow"

    reset_highlight_cache()
    assert configured_highlight_mode() == "off"


def test_concurrent_first_use_resolves_one_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(HIGHLIGHT_ENV_VAR, "red-blue")
    reset_highlight_cache()

    with ThreadPoolExecutor(max_workers=8) as pool:
        modes = list(pool.map(lambda _index: configured_highlight_mode(), range(64)))

    assert set(modes) == {"red-blue"}
    assert get_highlight_config().is_resolved is True


def test_use_highlight_mode_overrides_for_the_block() -> None:
    with use_highlight_mode("off"):
        assert configured_highlight_mode() == "off"
        assert current_resolution().source == "override"
        with use_highlight_mode("bold"):
            assert configured_highlight_mode() == "bold"
        assert configured_highlight_mode() == "off"

    assert configured_highlight_mode() == "red-green"


def test_use_highlight_mode_rejects_unknown_modes() -> None:
    with pytest.raises(ValueError):
        with use_highlight_mode("Bold"):  # type: ignore[arg-type]
            pass


def test_reset_hook_returns_to_os_environ_after_injected_mapping(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    reset_highlight_cache(environ={HIGHLIGHT_ENV_VAR: "bold"})
    assert configured_highlight_mode() == "bold"

    monkeypatch.setenv(HIGHLIGHT_ENV_VAR, "red-blue")
    reset_highlight_cache()

    assert configured_highlight_mode() == "red-blue"


def test_reset_hook_restores_default_capabilities() -> None:
    reset_highlight_cache(capabilities=HostCapabilities(color_supported=False))
    assert configured_highlight_mode() == "off"

    reset_highlight_cache()

    assert configured_highlight_mode() == "red-green"
    assert get_highlight_config().capabilities == HostCapabilities()


def test_config_reset_with_none_reads_os_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(HIGHLIGHT_ENV_VAR, "red-yellow")
    config = HighlightConfig(environ={HIGHLIGHT_ENV_VAR: "bold"})
    assert config.mode() == "bold"

    config.reset(environ=None)

    assert config.mode() == "red-yellow"
