import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from dotenv import load_dotenv

from match_json.errors import ConversionError
from match_json.logging_setup import configure_logging, get_logger
from match_json.sample import SAMPLE_XML
from match_json.settings import Settings, get_settings
from match_json.transform.xml_to_json import convert, revert

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(help="Convert match-result XML responses to JSON.")


@app.callback()
def main(
    ctx: typer.Context,
    env: Optional[str] = typer.Option(
        None, "--env", help="Config environment (default: MATCH_JSON_ENV or dev)."
    ),
):
    load_dotenv(override=False)
    ctx.ensure_object(dict)
    settings = get_settings(env)
    ctx.obj["SETTINGS"] = settings

    configure_logging(
        level=settings.logging.level,
        format_type=settings.logging.format,
        structured=settings.logging.structured,
    )


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj["SETTINGS"]


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    p = Path(path)
    if not p.exists():
        err_console.print(f"[bold red]Input file not found:[/] {p}")
        raise typer.Exit(code=1)
    return p.read_text(encoding="utf-8")


def _write_output(text: str, output: Optional[Path]) -> None:
    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    console.print(str(output))


@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    input: str = typer.Argument(..., help="XML file to convert, or '-' for stdin"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write JSON here instead of stdout"
    ),
):
    """Convert an XML response to JSON with MatchSummary.TotalMatchScore."""
    log = get_logger("cli.convert")
    xml_text = _read_input(input)
    try:
        json_text = convert(xml_text, output=_settings(ctx).output, log=log)
    except ConversionError as e:
        err_console.print(f"[bold red]Conversion failed:[/] {e}")
        raise typer.Exit(code=1)
    _write_output(json_text, output)


@app.command("revert")
def revert_cmd(
    input: str = typer.Argument(..., help="JSON file to turn back into XML, or '-'"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write XML here instead of stdout"
    ),
):
    """Turn a converted JSON envelope back into XML."""
    log = get_logger("cli.revert")
    json_text = _read_input(input)
    try:
        xml_text = revert(json_text, log=log)
    except ConversionError as e:
        err_console.print(f"[bold red]Conversion failed:[/] {e}")
        raise typer.Exit(code=1)
    _write_output(xml_text, output)


@app.command()
def demo(ctx: typer.Context):
    """Convert the built-in sample response and print it."""
    log = get_logger("cli.demo")
    try:
        json_text = convert(SAMPLE_XML, output=_settings(ctx).output, log=log)
    except ConversionError as e:
        log.error("Conversion failed", error=str(e))
        raise typer.Exit(code=1)
    typer.echo(json_text)


@app.command()
def health(ctx: typer.Context):
    console.print({"ok": True})
    console.print(_settings(ctx))


if __name__ == "__main__":
    app()
