from __future__ import annotations

import json
import logging
import random
from typing import Any, Dict, List, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from catan_stage.config import THEME_NAMES, ConfigError, StageSettings, load_settings
from catan_stage.domain.board import BoardAssignment, Terrain
from catan_stage.domain.placement import PLACEMENTS
from catan_stage.domain.randomizer import describe_outcome, generate_board
from catan_stage.domain.rules import fairness_violations
from catan_stage.domain.terrain import terrain_style
from catan_stage.scene.palette import get_palette
from catan_stage.scene.snapshot import render_snapshot, save_snapshot
from catan_stage.scene.textures import TextureLibrary
from catan_stage.scene.tokens import is_high_frequency, pip_count


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def board_rows(board: BoardAssignment) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    for tile in board.tiles:
        style = terrain_style(tile.terrain)
        spot = PLACEMENTS[tile.position]
        rows.append(
            {
                "position": tile.position,
                "row": spot.row,
                "column": spot.column,
                "terrain": tile.terrain.value,
                "token": tile.token,
                "pips": pip_count(tile.token),
                "color": style.color,
                "texture": style.texture,
                "world": [round(spot.x, 4), round(spot.y, 4), round(spot.z, 4)],
            }
        )
    return rows


def board_payload(board: BoardAssignment) -> Dict[str, Any]:
    return {
        "attempts": board.attempts,
        "validated": board.validated,
        "violations": fairness_violations(board),
        "tiles": board_rows(board),
    }


def _board_table(board: BoardAssignment) -> Table:
    table = Table(title="Board Layout")
    table.add_column("Pos", justify="right")
    table.add_column("Row/Col", justify="center")
    table.add_column("Terrain")
    table.add_column("Token", justify="right")
    table.add_column("Pips")
    for row in board_rows(board):
        terrain = Terrain(row["terrain"])
        token = row["token"]
        token_text = "-" if token is None else str(token)
        if is_high_frequency(token):
            token_text = f"[bold red]{token_text}[/bold red]"
        table.add_row(
            str(row["position"]),
            f"{row['row']}/{row['column']}",
            f"[{row['color']}]{terrain_style(terrain).label}[/]",
            token_text,
            "•" * row["pips"],
        )
    return table


def _resolve_settings(ctx: click.Context, **overrides: Any) -> StageSettings:
    settings: StageSettings = ctx.obj["settings"]
    try:
        return settings.with_overrides(**overrides)
    except ConfigError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output (accepted attempts, texture lookups).")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Generate and display fair Catan board layouts."""
    configure_logging(verbose)
    try:
        settings = load_settings()
    except ConfigError as exc:
        raise click.UsageError(str(exc)) from exc
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command()
@click.option("--seed", type=int, default=None, help="Seed for reproducible layouts.")
@click.option(
    "--max-attempts",
    type=click.IntRange(1, None),
    default=None,
    help="Candidates to draw before falling back to an unvalidated layout.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the layout as JSON instead of a table.")
@click.pass_context
def generate(ctx: click.Context, seed: Optional[int], max_attempts: Optional[int], as_json: bool) -> None:
    """Generate one board layout and print it."""
    settings = _resolve_settings(ctx, seed=seed, max_attempts=max_attempts)
    board = generate_board(rng=random.Random(settings.seed), max_attempts=settings.max_attempts)

    if as_json:
        click.echo(json.dumps(board_payload(board), indent=2))
        return

    console = Console()
    console.print(_board_table(board))
    style = "green" if board.validated else "bold yellow"
    console.print(f"[{style}]{describe_outcome(board)}[/{style}]")


@cli.command()
@click.argument("output", type=click.Path(dir_okay=False, writable=True))
@click.option("--seed", type=int, default=None, help="Seed for reproducible layouts.")
@click.option("--width", type=click.IntRange(64, 8192), default=960, show_default=True)
@click.option("--height", type=click.IntRange(64, 8192), default=720, show_default=True)
@click.option("--theme", type=click.Choice(THEME_NAMES, case_sensitive=False), default=None)
@click.option(
    "--texture-dir",
    type=click.Path(file_okay=False, exists=True),
    default=None,
    help="Directory holding terrain textures (wood.png, wheat.png, ...).",
)
@click.pass_context
def snapshot(
    ctx: click.Context,
    output: str,
    seed: Optional[int],
    width: int,
    height: int,
    theme: Optional[str],
    texture_dir: Optional[str],
) -> None:
    """Render a still frame of a generated board to a PNG file."""
    settings = _resolve_settings(ctx, seed=seed, theme=theme, texture_dir=texture_dir)
    board = generate_board(rng=random.Random(settings.seed), max_attempts=settings.max_attempts)
    image = render_snapshot(
        board,
        width=width,
        height=height,
        palette=get_palette(settings.theme),
        textures=TextureLibrary(settings.texture_dir),
    )
    path = save_snapshot(image, output)
    Console().print(f"Wrote {path} ({describe_outcome(board)})")


@cli.command()
@click.option("--seed", type=int, default=None, help="Seed for the first layout.")
@click.option("--theme", type=click.Choice(THEME_NAMES, case_sensitive=False), default=None)
@click.option("--texture-dir", type=click.Path(file_okay=False, exists=True), default=None)
@click.pass_context
def show(ctx: click.Context, seed: Optional[int], theme: Optional[str], texture_dir: Optional[str]) -> None:
    """Open the desktop scene."""
    from catan_stage.app import run_app

    run_app(_resolve_settings(ctx, seed=seed, theme=theme, texture_dir=texture_dir))


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
