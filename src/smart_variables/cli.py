"""Smart Variables CLI

Infer naming styles, suggest identifiers and manage configuration from the
command line.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from smart_variables.config import settings
from smart_variables.generation import GenerationError
from smart_variables.models import NamingStyle
from smart_variables.store import ConfigError, ConfigKey, ConfigScope, ConfigStore
from smart_variables.styles import registry
from smart_variables.suggest import (
    STYLE_CHOICES,
    InsertionError,
    StyleDetector,
    SuggestionService,
    TextDocument,
)
from smart_variables.utils.logging import setup_logging

app = typer.Typer(
    name="smart-variables",
    help="Smart Variables - context-aware identifier naming",
    add_completion=False,
)
config_app = typer.Typer(help="Read and write configuration values.")
app.add_typer(config_app, name="config")

console = Console()


@app.callback()
def main(
    log_level: str | None = typer.Option(None, "--log-level", help="Override LOG_LEVEL"),
) -> None:
    setup_logging(log_level or "WARNING")


def _load_document(path: Path, line: int, language: str | None, column: int = 0) -> TextDocument:
    try:
        return TextDocument.from_path(path, language=language, line=line, character=column)
    except OSError as exc:
        console.print(f"[red]Cannot read {path}: {exc}[/red]")
        raise typer.Exit(code=1) from exc


def _pick_style(choices: list[NamingStyle], preselected: NamingStyle | None) -> NamingStyle | None:
    table = Table(title="Naming style", show_header=False)
    table.add_column("#", style="cyan")
    table.add_column("Style", style="bold")
    table.add_column("Description", style="white")
    descriptions = dict(STYLE_CHOICES)
    for index, style in enumerate(choices, 1):
        marker = " (detected)" if style is preselected else ""
        table.add_row(str(index), f"{style.value}{marker}", descriptions[style])
    console.print(table)

    # Empty input accepts the detected style; without one it cancels.
    default = str(choices.index(preselected) + 1) if preselected in choices else ""
    answer = typer.prompt("Choose a style (q to cancel)", default=default, show_default=bool(default)).strip()
    if not answer or answer.lower() == "q":
        return None
    if answer.isdigit() and 1 <= int(answer) <= len(choices):
        return choices[int(answer) - 1]
    return NamingStyle.from_string(answer)


def _pick_candidate(candidates: list[str]) -> str | None:
    answer = typer.prompt("Insert which candidate? (empty to skip)", default="", show_default=False).strip()
    if not answer:
        return None
    if answer.isdigit() and 1 <= int(answer) <= len(candidates):
        return candidates[int(answer) - 1]
    if answer in candidates:
        return answer
    console.print(f"[yellow]No candidate {answer!r}; nothing inserted.[/yellow]")
    return None


@app.command()
def infer(
    file: Path = typer.Argument(..., help="Source file to analyse"),
    line: int = typer.Option(0, "--line", "-l", help="Zero-based cursor line"),
    language: str | None = typer.Option(None, "--language", "-L", help="Language id (guessed from extension)"),
) -> None:
    """Infer the naming style for a new identifier at LINE."""
    document = _load_document(file, line, language)
    detector = StyleDetector()
    snapshot, style = detector.analyze(document)

    table = Table(title="Style inference", show_header=False)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Language", registry.resolve(document.language_id()))
    table.add_row("Line", snapshot.target_line.strip() or "(empty)")
    table.add_row("In class", str(snapshot.in_class))
    table.add_row("In function", str(snapshot.in_function))
    table.add_row("In interface", str(snapshot.in_interface))
    table.add_row("In enum", str(snapshot.in_enum))
    table.add_row("Constant context", str(snapshot.is_constant_context))
    table.add_row("Type definition", str(snapshot.is_type_definition))
    table.add_row("Nearby identifiers", str(len(snapshot.existing_identifiers)))
    console.print(table)
    console.print(f"[bold green]Style:[/bold green] {style.value}")


@app.command()
def suggest(
    meaning: str = typer.Argument(..., help="What the identifier should mean"),
    file: Path | None = typer.Option(None, "--file", "-f", help="Source file for context"),
    line: int = typer.Option(0, "--line", "-l", help="Zero-based cursor line"),
    column: int = typer.Option(0, "--column", "-c", help="Zero-based cursor column (insertion point)"),
    language: str | None = typer.Option(None, "--language", "-L", help="Language id"),
    style: str | None = typer.Option(None, "--style", "-s", help="Force a style (camel, pascal, snake, upper)"),
    count: int = typer.Option(settings.candidate_count, "--count", "-n", help="Number of candidates"),
    insert: bool = typer.Option(False, "--insert", "-i", help="Pick a candidate and write it into FILE"),
) -> None:
    """Ask the language model for identifier candidates."""
    forced: NamingStyle | None = None
    if style:
        forced = NamingStyle.from_string(style)
        if forced is None:
            console.print(f"[red]Unknown style: {style}[/red]")
            raise typer.Exit(code=2)
    if insert and file is None:
        console.print("[red]--insert needs --file[/red]")
        raise typer.Exit(code=2)

    document = None
    if file is not None:
        document = _load_document(file, line, language, column)
    service = SuggestionService()
    try:
        result = asyncio.run(
            service.suggest(meaning, document, style=forced, picker=_pick_style, count=count)
        )
    except (GenerationError, ConfigError, ValueError) as exc:
        console.print(f"[red]Failed to generate names: {exc}[/red]")
        raise typer.Exit(code=1) from exc

    console.print(f"[bold]Style:[/bold] {result.style.value}\n")
    for index, candidate in enumerate(result.candidates, 1):
        console.print(f"[bold cyan]{index}.[/bold cyan] {candidate}")

    if not insert or document is None or file is None:
        return
    chosen = _pick_candidate(result.candidates)
    if chosen is None:
        return
    try:
        cursor = service.insert(document, chosen)
    except InsertionError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc
    file.write_text(document.text, encoding="utf-8")
    console.print(f"[green]Inserted {chosen} at {file}:{cursor.line}:{cursor.character}[/green]")


@app.command()
def toggle() -> None:
    """Switch the preferred style between auto and ask."""
    try:
        mode = SuggestionService().toggle_mode()
    except ConfigError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc
    console.print(f"preferred_style = [bold]{mode.value}[/bold]")


@config_app.command("get")
def config_get(key: ConfigKey = typer.Argument(..., help="Configuration key")) -> None:
    value = ConfigStore().get(key)
    if key is ConfigKey.API_KEY and value:
        value = "********"
    console.print(f"{key.value} = {value!r}")


@config_app.command("set")
def config_set(
    key: ConfigKey = typer.Argument(..., help="Configuration key"),
    value: str = typer.Argument(..., help="New value"),
    scope: ConfigScope = typer.Option(ConfigScope.GLOBAL, "--scope", help="Where to persist the value"),
) -> None:
    try:
        ConfigStore().set(key, value, scope)
    except ConfigError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc
    console.print(f"[green]{key.value} updated ({scope.value})[/green]")


@config_app.command("unset")
def config_unset(
    key: ConfigKey = typer.Argument(..., help="Configuration key"),
    scope: ConfigScope = typer.Option(ConfigScope.GLOBAL, "--scope", help="Scope to remove the value from"),
) -> None:
    ConfigStore().unset(key, scope)
    console.print(f"[green]{key.value} removed ({scope.value})[/green]")


@config_app.command("path")
def config_path() -> None:
    """Show where each persistent scope is stored."""
    store = ConfigStore()
    table = Table(title="Configuration files", show_header=True)
    table.add_column("Scope", style="cyan")
    table.add_column("Path", style="white")
    table.add_column("Exists", style="white")
    for scope in (ConfigScope.WORKSPACE, ConfigScope.GLOBAL):
        path = store.path_for(scope)
        table.add_row(scope.value, str(path), str(path is not None and path.is_file()))
    console.print(table)


@app.command()
def serve(
    host: str = typer.Option(settings.api_host, "--host"),
    port: int = typer.Option(settings.api_port, "--port"),
) -> None:
    """Run the HTTP API."""
    uvicorn.run(
        "smart_variables.server:app",
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
        reload=False,
    )
