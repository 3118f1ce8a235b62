from __future__ import annotations

import logging
from pathlib import Path
import typer
from importlib import metadata
from rich.console import Console
from rich.table import Table
from rich.text import Text

from dungeon.core.audit import append_audit
from dungeon.core.config import ConfigError, DungeonConfig, load_config, resolve_config_path
from dungeon.core.models import CommandResult, NarrativeLine
from dungeon.game.loader import WorldValidationError, load_world
from dungeon.game.session import GameSession


app = typer.Typer(add_completion=False, help="Dungeon Escape: a tiny text adventure")
console = Console()

QUIT_WORDS = {"quit", "exit"}


def _get_version() -> str:
    try:
        return metadata.version("dungeon-escape")
    except metadata.PackageNotFoundError:
        return "0.0.0+local"


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the Dungeon Escape version and exit.",
        is_eager=True,
    ),
):
    if version:
        console.print(_get_version())
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit()


def _get_env(config_path: str | None) -> tuple[DungeonConfig, GameSession]:
    try:
        cfg = load_config(resolve_config_path(config_path))
    except (FileNotFoundError, ConfigError) as e:
        console.print(f"❌ {e}")
        raise typer.Exit(code=2)

    logging.basicConfig(level=getattr(logging, cfg.log_level, logging.WARNING))

    try:
        session = GameSession(load_world())
    except WorldValidationError as e:
        console.print(f"❌ Invalid world data: {e}")
        raise typer.Exit(code=3)
    return cfg, session


def _print_lines(cfg: DungeonConfig, lines: list[NarrativeLine]) -> None:
    for line in lines:
        console.print(Text(line.text, style=cfg.styles.get(line.style.value, "")))


def _audit(cfg: DungeonConfig, event: dict) -> None:
    if cfg.audit.enabled:
        append_audit(event, cfg.audit.path)


def _run_command(cfg: DungeonConfig, session: GameSession, raw: str) -> CommandResult | None:
    result = session.resolve(raw)
    if result is None:
        return None
    _audit(
        cfg,
        {
            "event": "command",
            "command": result.command,
            "verb": result.verb,
            "outcome": result.outcome.value,
            "room": session.state.player.current_room.value if session.state else None,
        },
    )
    _print_lines(cfg, result.lines)
    if not session.is_session_active():
        _audit(cfg, {"event": "session_escape"})
    return result


def _start(cfg: DungeonConfig, session: GameSession) -> None:
    _print_lines(cfg, session.start_session())
    _audit(cfg, {"event": "session_start"})


@app.command("play")
def play(
    config: str = typer.Option(None, "--config", help="Path to dungeon.yaml"),
):
    cfg, session = _get_env(config)
    _start(cfg, session)

    while session.is_session_active():
        try:
            raw = console.input(cfg.prompt)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if raw.strip().lower() in QUIT_WORDS:
            break
        _run_command(cfg, session, raw)

    if session.is_session_active():
        _audit(cfg, {"event": "session_abandon"})
        console.print("You give up for now. The dungeon will wait.")


@app.command("replay")
def replay(
    script: Path = typer.Argument(..., exists=True, dir_okay=False, help="File with one command per line"),
    config: str = typer.Option(None, "--config", help="Path to dungeon.yaml"),
):
    cfg, session = _get_env(config)
    _start(cfg, session)

    for raw in script.read_text(encoding="utf-8").splitlines():
        if raw.lstrip().startswith("#"):
            continue
        if not session.is_session_active():
            break
        _run_command(cfg, session, raw)

    if session.is_session_active():
        console.print("🧱 [bold red]STILL TRAPPED[/bold red]: the script ended inside the dungeon.")
        raise typer.Exit(code=5)
    console.print("🏁 [bold green]ESCAPED[/bold green]")


@app.command("rooms")
def rooms():
    try:
        world = load_world()
    except WorldValidationError as e:
        console.print(f"❌ Invalid world data: {e}")
        raise typer.Exit(code=3)

    table = Table(title="Dungeon Rooms")
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Exits")
    table.add_column("Blocked")
    table.add_column("Items")

    for room_id, room in world.rooms.items():
        exits = ", ".join(f"{d.value} -> {t.value}" for d, t in room.exits.items())
        blocked = ", ".join(d.value for d in room.blocked_exits)
        items = ", ".join(world.items[i].name for i in room.items)
        table.add_row(room_id.value, room.name, exits or "none", blocked or "-", items or "-")

    console.print(table)
