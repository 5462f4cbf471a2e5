import json
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path
from typing import Any

import typer

from assertpack.core.types import HIGHLIGHT_MODES, HighlightMode
from assertpack.diff import (
    DIFF_FORMATS,
    DiffSpan,
    diff as diff_tokens,
    edit_distance,
    render_diff,
)
from assertpack.highlight import (
    HIGHLIGHT_ENV_VAR,
    NO_COLOR_ENV_VAR,
    HighlightResolution,
    current_resolution,
    parse_highlight_mode,
)

app = typer.Typer(help="AssertKit CLI")


@dataclass(slots=True)
class _OutputOptions:
    no_color: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()


def _resolve_cli_version() -> str:
    try:
        return package_version("assertkit")
    except PackageNotFoundError:
        from assertkit import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show AssertKit version and exit.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.no_color = no_color
    _OUTPUT_OPTIONS.stable_json = stable_json


def _echo(message: str, *, err: bool = False) -> None:
    typer.echo(message, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _echo_json(payload: dict[str, Any], *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.stable_json:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            separators=(",", ":"),
        )
    else:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            indent=2,
        )
    typer.echo(rendered, err=err, color=False)


def _resolve_mode(explicit: str | None) -> HighlightResolution:
    if explicit is not None:
        mode = parse_highlight_mode(explicit)
        if mode is None:
            raise ValueError(
                f"unsupported highlight mode {explicit!r}; expected one of "
                + ", ".join(HIGHLIGHT_MODES)
            )
        return HighlightResolution(mode=mode, source="override")
    if _OUTPUT_OPTIONS.no_color:
        return HighlightResolution(mode="off", source="capability")
    return current_resolution()


def _read_input(value: str, *, literal: bool) -> str:
    if literal:
        return value
    return Path(value).read_text(encoding="utf-8")


def _render_line_diff(spans: list[DiffSpan], mode: HighlightMode) -> str:
    diff_format = DIFF_FORMATS[mode]
    lines: list[str] = []
    for span in spans:
        for token in span.tokens:
            if span.kind == "equal":
                lines.append(f"  {token}")
            elif span.kind == "delete":
                lines.append(diff_format.missing.apply(f"- {token}"))
            else:
                lines.append(diff_format.unexpected.apply(f"+ {token}"))
    return "\n".join(lines)


@app.command()
def diff(
    expected: str = typer.Argument(..., help="Path to the expected file (or literal text with --text)."),
    actual: str = typer.Argument(..., help="Path to the actual file (or literal text with --text)."),
    text: bool = typer.Option(
        False,
        "--text",
        help="Treat EXPECTED and ACTUAL as literal text instead of file paths.",
    ),
    by_line: bool = typer.Option(
        False,
        "--lines",
        help="Diff line by line instead of character by character.",
    ),
    mode: str | None = typer.Option(
        None,
        "--mode",
        help="Highlight mode: bold, red-green, red-blue, red-yellow or off.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable diff output.",
    ),
) -> None:
    """Diff two texts and highlight where they differ."""
    try:
        resolution = _resolve_mode(mode)
        expected_text = _read_input(expected, literal=text)
        actual_text = _read_input(actual, literal=text)
    except (OSError, ValueError) as error:
        message = f"diff failed: {error}"
        if json_output:
            _echo_json({"status": "error", "exit_code": 2, "message": message})
        else:
            _echo(message, err=True)
        raise typer.Exit(code=2) from error

    if by_line:
        spans = diff_tokens(expected_text.splitlines(), actual_text.splitlines())
    else:
        spans = diff_tokens(expected_text, actual_text)

    distance = edit_distance(spans)
    exit_code = 0 if distance == 0 else 1

    if json_output:
        _echo_json(
            {
                "status": "identical" if exit_code == 0 else "different",
                "exit_code": exit_code,
                "granularity": "lines" if by_line else "chars",
                "edit_distance": distance,
                "spans": [span.to_dict() for span in spans],
            }
        )
    elif by_line:
        _echo(_render_line_diff(spans, resolution.mode))
    else:
        rendered = render_diff(spans, resolution.mode)
        _echo(f"   but was: {rendered.actual}")
        _echo(f"  expected: {rendered.expected}")

    if exit_code:
        raise typer.Exit(code=exit_code)


@app.command()
def config(
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable configuration.",
    ),
) -> None:
    """Show the resolved highlight mode and what decided it."""
    resolution = _resolve_mode(None)
    if json_output:
        _echo_json(
            {
                **resolution.to_dict(),
                "modes": list(HIGHLIGHT_MODES),
                "env_vars": [HIGHLIGHT_ENV_VAR, NO_COLOR_ENV_VAR],
            }
        )
        return
    _echo(f"highlight mode: {resolution.mode} (source: {resolution.source})")
    _echo(f"set {HIGHLIGHT_ENV_VAR} to one of: {', '.join(HIGHLIGHT_MODES)}")
    _echo(f"set {NO_COLOR_ENV_VAR} to disable highlighting")


def main() -> None:
    app()
