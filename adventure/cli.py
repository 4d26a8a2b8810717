from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional
import typer
import yaml
from importlib import metadata
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from adventure.core.config import AdventureConfig, ConfigError, load_config
from adventure.core.game import Game
from adventure.core.loader import load_world


app = typer.Typer(add_completion=False, help="Adventure: play text adventures described in JSON")
console = Console(highlight=False, soft_wrap=True, emoji=False)


def _get_version() -> str:
    try:
        return metadata.version("adventure")
    except metadata.PackageNotFoundError:
        return "0.0.0+local"


def _resolve_config_path(config_path: str) -> Path | None:
    path = Path(config_path)
    if path.exists():
        return path

    env_path = os.getenv("ADVENTURE_CONFIG")
    if env_path:
        env_candidate = Path(env_path)
        if env_candidate.exists():
            return env_candidate

    if config_path != "adventure.yaml":
        return None

    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        candidate = parent / "adventure.yaml"
        if candidate.exists():
            return candidate

    return None


def _get_config(config_path: str, verbose: bool) -> AdventureConfig:
    resolved = _resolve_config_path(config_path)
    try:
        cfg = load_config(resolved) if resolved else AdventureConfig()
    except (OSError, ConfigError, yaml.YAMLError) as e:
        console.print(f"❌ Could not load config '{resolved}': {e}", markup=False)
        raise typer.Exit(code=1)
    logging.basicConfig(
        level="DEBUG" if verbose else cfg.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True, emoji=False), show_path=False)],
        force=True,
    )
    return cfg


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the Adventure version and exit.",
        is_eager=True,
    ),
):
    if version:
        console.print(_get_version())
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit()


def _load_game(cfg: AdventureConfig, world: Optional[str]) -> Game:
    world_path = world or cfg.world_path
    try:
        return Game.from_path(world_path, cfg.aliases)
    except (OSError, ValueError) as e:
        console.print(f"❌ Could not load world '{world_path}': {e}", markup=False)
        raise typer.Exit(code=1)


@app.command("play")
def play(
    world: Optional[str] = typer.Option(None, "--world", "-w", help="Path to a world JSON file"),
    commands: Optional[list[str]] = typer.Option(
        None, "--command", "-c", help="Run these commands instead of reading the console"
    ),
    config: str = typer.Option("adventure.yaml", "--config", help="Path to config"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    cfg = _get_config(config, verbose)
    game = _load_game(cfg, world)
    console.print(game.intro(), markup=False)

    scripted = bool(commands)
    pending = list(commands or [])
    while True:
        if scripted:
            if not pending:
                return
            raw = pending.pop(0)
        else:
            try:
                raw = console.input("What would you like to do?\n")
            except EOFError:
                console.print("Goodbye!")
                return

        result = game.handle(raw)
        for line in result.lines:
            console.print(line, markup=False)
        if result.terminate:
            raise typer.Exit(code=0)


@app.command("validate")
def validate(
    world: Optional[str] = typer.Option(None, "--world", "-w", help="Path to a world JSON file"),
    config: str = typer.Option("adventure.yaml", "--config", help="Path to config"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON summary instead of a table"),
):
    cfg = _get_config(config, False)
    world_path = world or cfg.world_path
    try:
        loaded = load_world(world_path)
    except (OSError, ValueError) as e:
        console.print(f"❌ Could not load world '{world_path}': {e}", markup=False)
        raise typer.Exit(code=1)

    if as_json:
        summary = {
            "startingRoom": loaded.starting_room,
            "rooms": [
                {
                    "id": room.room_id,
                    "items": room.items.names(),
                    "characters": [c.name for c in room.characters],
                    "exits": {d: {"to": p.room_id, "locked": p.locked} for d, p in room.paths.items()},
                }
                for room in loaded.rooms.values()
            ],
        }
        console.print_json(json.dumps(summary))
        return

    table = Table(title=f"World: {world_path}")
    table.add_column("Room", justify="right")
    table.add_column("Items")
    table.add_column("Characters")
    table.add_column("Exits")
    for room in loaded.rooms.values():
        exits = ", ".join(
            f"{d}→{p.room_id}" + (" (locked)" if p.locked else "") for d, p in room.paths.items()
        )
        room_label = str(room.room_id) + (" *" if room.room_id == loaded.starting_room else "")
        table.add_row(
            room_label,
            ", ".join(room.items.names()),
            ", ".join(c.name for c in room.characters),
            exits,
        )
    console.print(table)
    console.print(f"✅ {len(loaded.rooms)} rooms, start at room {loaded.starting_room}")
