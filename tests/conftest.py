import pytest

from assertpack.highlight import HIGHLIGHT_ENV_VAR, NO_COLOR_ENV_VAR, HostCapabilities, reset_highlight_cache


@pytest.fixture(autouse=True)
def _isolated_highlight_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(HIGHLIGHT_ENV_VAR, raising=False)
    monkeypatch.delenv(NO_COLOR_ENV_VAR, raising=False)
    reset_highlight_cache(capabilities=HostCapabilities())
    yield
    reset_highlight_cache(capabilities=HostCapabilities())
