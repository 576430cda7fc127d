"""decent-drums: Typer application root.

Entry point for the ``decent-drums`` console script.

Commands:

- ``serve`` runs the MCP server on stdio
- ``render CONFIG`` renders a kit JSON file to ``<groups>`` XML
- ``analyze PATH...`` prints WAV sample metadata as JSON
"""
from __future__ import annotations

import asyncio
import enum
import json
import logging
import pathlib
from typing import Optional

import typer

from decent_drums.core import DrumKitConfigError, WavAnalysisError, analyze_wav_file, render_drum_kit

logger = logging.getLogger(__name__)


class ExitCode(enum.IntEnum):
    """Standardised CLI exit codes.

    0: success
    1: user error (bad arguments, invalid kit, unreadable WAV)
    3: internal error
    """

    SUCCESS = 0
    USER_ERROR = 1
    INTERNAL_ERROR = 3


cli = typer.Typer(
    name="decent-drums",
    help="Build DecentSampler drum-kit presets from structured descriptions.",
    no_args_is_help=True,
)


@cli.command("serve", help="Run the MCP server over stdin/stdout.")
def serve() -> None:
    from decent_drums.mcp import stdio_server

    asyncio.run(stdio_server.main())


@cli.command("render", help="Render a drum-kit JSON file as <groups> XML.")
def render(
    config_path: pathlib.Path = typer.Argument(..., help="Path to the kit configuration JSON."),
    output: Optional[pathlib.Path] = typer.Option(
        None, "--output", "-o", help="Write the XML here instead of stdout."
    ),
) -> None:
    try:
        config = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        typer.echo(f"❌ Cannot read {config_path}: {exc}")
        raise typer.Exit(code=ExitCode.USER_ERROR)
    except json.JSONDecodeError as exc:
        typer.echo(f"❌ {config_path} is not valid JSON: {exc}")
        raise typer.Exit(code=ExitCode.USER_ERROR)

    try:
        xml = render_drum_kit(config)
    except DrumKitConfigError as exc:
        typer.echo(f"❌ {exc}")
        raise typer.Exit(code=ExitCode.USER_ERROR)

    if output is None:
        typer.echo(xml)
        return
    output.write_text(xml, encoding="utf-8")
    typer.echo(f"✅ Wrote {output}")


@cli.command("analyze", help="Print sample length, rate, channels and bit depth for WAV files.")
def analyze(
    paths: list[str] = typer.Argument(..., help="WAV files to analyze."),
) -> None:
    results = []
    for path in paths:
        try:
            results.append(analyze_wav_file(path).model_dump(by_alias=True))
        except WavAnalysisError as exc:
            typer.echo(f"❌ {exc}")
            raise typer.Exit(code=ExitCode.USER_ERROR)
    typer.echo(json.dumps(results, indent=2))


if __name__ == "__main__":
    cli()
