# src/mcqforge/cli/app.py
"""Command-line interface for mcqforge.

A thin Typer wrapper around the library. Each command:
1. Parses args (via Typer)
2. Loads configuration (mcqforge.config)
3. Calls the Forge / ContentStore
4. Renders results with Rich
"""

from __future__ import annotations

import os

try:
    import typer
    from rich.console import Console
    from rich.markup import escape
    from rich.panel import Panel
    from rich.table import Table
except ImportError as e:
    raise SystemExit(
        "CLI requires additional dependencies.\nInstall with: pip install mcqforge[cli]"
    ) from e

from mcqforge import __version__
from mcqforge.config import (
    DEFAULT_DATA_DIR,
    build_settings,
    create_forge,
    find_config_file,
    get_content_store,
    get_forge_config,
    load_config,
    load_env_file,
)
from mcqforge.exceptions import GenerationFailed, MCQForgeError
from mcqforge.logging_config import configure_logging

app = typer.Typer(
    name="mcqforge",
    help="mcqforge - validated, deduplicated multiple-choice question generation.",
    no_args_is_help=True,
)
console = Console()

# Event names for attempt progress display
EVENT_STYLES = {
    "requesting": "cyan",
    "validating": "cyan",
    "deduplicating": "cyan",
    "persisting": "cyan",
    "retrying": "yellow",
    "failed": "red",
    "done": "green",
}


def version_callback(value: bool) -> None:
    if value:
        console.print(f"mcqforge {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Log level for library messages (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    """mcqforge - validated, deduplicated MCQ generation."""
    configure_logging(log_level)
    load_env_file()


def _effective_data_dir(data_dir: str | None, config_file: str | None) -> str:
    config = load_config(config_file)
    return str(data_dir or config.get("data_dir") or DEFAULT_DATA_DIR)


@app.command()
def generate(
    topic: str = typer.Argument(..., help="Question topic"),
    difficulty: str = typer.Argument(..., help="Difficulty label, e.g. beginner"),
    requester: str = typer.Option(
        None,
        "--requester",
        "-r",
        help="Requester id recorded in the attempt log",
    ),
    data_dir: str = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Data directory (default: from config)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Generate, validate, deduplicate and store one question."""
    try:
        forge = create_forge(get_forge_config(data_dir, config_file))
    except MCQForgeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    def on_attempt(event: str, attempt: int, max_attempts: int, message: str) -> None:
        if plain:
            console.print(f"[{attempt}/{max_attempts}] {event}: {escape(message)}")
        else:
            style = EVENT_STYLES.get(event, "dim")
            console.print(
                f"[dim]{attempt}/{max_attempts}[/dim] "
                f"[{style}]{event:>13}[/{style}] {escape(message)}"
            )

    try:
        question = forge.generate_one(
            topic, difficulty, requester_id=requester, on_attempt=on_attempt
        )
    except GenerationFailed as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from None
    except MCQForgeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    if plain:
        console.print(escape(question.text))
        for i, choice in enumerate(question.choices, 1):
            marker = "*" if choice == question.correct_answer else " "
            console.print(f" {marker} {i}. {escape(choice)}")
        console.print(f"id: {question.id}")
        return

    lines = [f"[bold]{escape(question.text)}[/bold]", ""]
    for i, choice in enumerate(question.choices, 1):
        if choice == question.correct_answer:
            lines.append(f"[green]{i}. {escape(choice)}[/green]")
        else:
            lines.append(f"{i}. {escape(choice)}")
    if question.explanation:
        lines.extend(["", f"[dim]{escape(question.explanation)}[/dim]"])
    console.print(
        Panel(
            "\n".join(lines),
            title=escape(f"{question.topic} · {question.difficulty}"),
            subtitle=f"{question.id} · ~{question.estimated_time_seconds}s",
        )
    )


@app.command()
def logs(
    limit: int = typer.Option(20, "--limit", "-n", help="Number of entries to show"),
    failed: bool = typer.Option(False, "--failed", help="Only show failed attempts"),
    data_dir: str = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Data directory (default: from config)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Show recent generation attempts, newest first."""
    try:
        effective_data_dir = _effective_data_dir(data_dir, config_file)
    except MCQForgeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    if not os.path.exists(effective_data_dir):
        console.print("[dim]No database found. Run 'mcqforge generate' first.[/dim]")
        raise typer.Exit(0)

    store = get_content_store(effective_data_dir)
    entries = store.list_logs(limit=limit, success=False if failed else None)
    if not entries:
        console.print("[dim]No attempts logged.[/dim]")
        raise typer.Exit(0)

    table = Table(title="Generation Attempts")
    table.add_column("#", style="dim", justify="right")
    table.add_column("When", style="dim")
    table.add_column("Topic", style="cyan")
    table.add_column("Attempt", justify="right")
    table.add_column("Result")
    table.add_column("Error", style="red")

    for entry in entries:
        table.add_row(
            str(entry.id),
            entry.created_at.strftime("%Y-%m-%d %H:%M:%S"),
            escape(str(entry.params.get("topic", ""))),
            str(entry.params.get("attempt", "")),
            "[green]ok[/green]" if entry.success else "[red]failed[/red]",
            escape(entry.error or ""),
        )

    console.print(table)


@app.command()
def status(
    data_dir: str = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Data directory (default: from config)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Show database statistics."""
    try:
        effective_data_dir = _effective_data_dir(data_dir, config_file)
    except MCQForgeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    if not os.path.exists(effective_data_dir):
        console.print("[dim]No database found. Run 'mcqforge generate' first.[/dim]")
        raise typer.Exit(0)

    store = get_content_store(effective_data_dir)

    table = Table(title="Database Status")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("Data directory", effective_data_dir)
    table.add_row("Questions", str(store.count_questions()))
    table.add_row("Attempts", str(store.count_logs()))
    table.add_row("Failed attempts", str(store.count_logs(success=False)))

    console.print(table)


@app.command(name="config")
def config_cmd(
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Show current configuration settings."""
    try:
        config = load_config(config_file)
        settings = build_settings(config)
    except MCQForgeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    table = Table(title="mcqforge Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row(
        "llm_model",
        str(config.get("llm_model") or os.environ.get("MCQFORGE_LLM_MODEL") or "(not set)"),
    )
    table.add_row(
        "embedding_model",
        str(
            config.get("embedding_model")
            or os.environ.get("MCQFORGE_EMBEDDING_MODEL")
            or "(not set)"
        ),
    )
    table.add_row("data_dir", str(config.get("data_dir") or DEFAULT_DATA_DIR))
    table.add_row("vector_backend", str(config.get("vector_backend", "sqlite")))
    table.add_row("", "")

    for name, value in settings.model_dump().items():
        table.add_row(name, str(value))

    console.print(table)

    config_path = config_file or find_config_file()
    if config_path:
        console.print(f"\n[dim]Config file: {config_path}[/dim]")
    else:
        console.print("\n[dim]No config file found. Using env vars / defaults.[/dim]")

    console.print("\n[dim]Precedence: env var > yaml settings > profile > default[/dim]")
