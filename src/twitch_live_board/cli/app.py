from __future__ import annotations

import httpx
import typer
from rich.console import Console
from rich.table import Table

from twitch_live_board.core.config import Settings
from twitch_live_board.core.errors import LiveBoardError
from twitch_live_board.core.logging import configure_logging
from twitch_live_board.pipeline.orchestrator import LiveCheckPipeline
from twitch_live_board.sources.roster import RosterLoader
from twitch_live_board.writer.snapshot import read_snapshot

app = typer.Typer(help="Twitch live board CLI")
console = Console()


@app.command("run-once")
def run_once() -> None:
    settings = Settings()
    configure_logging(settings.log_level)

    pipeline = LiveCheckPipeline(settings=settings)
    try:
        summary = pipeline.run_once()
    except (LiveBoardError, httpx.HTTPError) as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc
    finally:
        pipeline.close()

    if not summary.snapshot_written:
        console.print(f"No valid streamers found in {settings.roster_path}; snapshot left unchanged")
        return

    console.print(
        "Run complete: "
        f"roster={summary.roster_size}, "
        f"batches={summary.batches}, "
        f"live={summary.live_count}, "
        f"snapshot={summary.snapshot_path}"
    )


@app.command("show-roster")
def show_roster() -> None:
    settings = Settings()
    configure_logging(settings.log_level)
    try:
        roster = RosterLoader(settings.roster_path).load_identifiers()
    except LiveBoardError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    console.print(f"Roster ({len(roster)}):")
    for identifier in roster:
        console.print(f" - {identifier}")


@app.command("show-snapshot")
def show_snapshot() -> None:
    settings = Settings()
    configure_logging(settings.log_level)
    if not settings.snapshot_path.exists():
        console.print(f"No snapshot found at {settings.snapshot_path}")
        raise typer.Exit(code=1)

    try:
        snapshot = read_snapshot(settings.snapshot_path)
    except LiveBoardError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    table = Table(title=f"Live at {snapshot.timestamp}")
    for column in ("username", "title", "game", "started_at"):
        table.add_column(column)
    for record in snapshot.live:
        table.add_row(record.username, record.title, record.game, record.started_at)
    console.print(table)


if __name__ == "__main__":
    app()
