import json
import re

import pytest
from typer.testing import CliRunner

import assertkit
from assertpack.cli.app import app
from assertpack.highlight import HIGHLIGHT_ENV_VAR, NO_COLOR_ENV_VAR, reset_highlight_cache


def test_cli_version_option_reports_semver_like_value() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    reported = result.output.strip()
    assert re.fullmatch(r"\d+\.\d+\.\d+", reported) is not None
    assert reported == assertkit.__version__


def test_cli_config_reports_default_mode() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["config"])

    assert result.exit_code == 0, result.output
    assert "highlight mode: red-green (source: default)" in result.output
    assert HIGHLIGHT_ENV_VAR in result.output


def test_cli_config_json_reports_no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(NO_COLOR_ENV_VAR, "1")
    monkeypatch.setenv(HIGHLIGHT_ENV_VAR, "bold")
    reset_highlight_cache()

    runner = CliRunner()
    result = runner.invoke(app, ["config", "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["mode"] == "off"
    assert payload["source"] == "no-color"
    assert payload["modes"] == ["bold", "red-green", "red-blue", "red-yellow", "off"]
    assert payload["env_vars"] == [HIGHLIGHT_ENV_VAR, NO_COLOR_ENV_VAR]


def test_cli_config_honors_no_color_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--no-color", "config", "--json"])

    payload = json.loads(result.stdout)
    assert payload["mode"] == "off"
    assert payload["source"] == "capability"


def test_cli_pretty_json_is_indented() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--pretty-json", "config", "--json"])

    assert result.exit_code == 0
    assert result.stdout.startswith("{\n  ")
