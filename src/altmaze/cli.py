"""Command Line Interface for the alternating-color maze.

This module provides a simple CLI to inspect levels, recompute the rooms
of freeform boards, solve mazes, replay moves and generate grid levels.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

import networkx as nx
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import GRID_COLS, GRID_ROWS, LOG_FORMAT, LOG_LEVEL
from .core.model import Board, Level
from .core.topology import build_board_graph, build_level_graph
from .engine.game import Game
from .engine.generator import generate_grid_level
from .engine.solver import solve
from .engine.validators import InvalidMove
from .io.parser import load_level, save_level
from .levels import get_level

app = typer.Typer(
    name="alt-maze",
    help="Alternating-color maze: inspect, solve, play and generate levels",
    no_args_is_help=True,
)
console = Console()

COLOR_STYLES = {"red": "red", "blue": "blue", "black": "white on black"}


@app.callback()
def configure(
    log_level: str = typer.Option(LOG_LEVEL, "--log-level", help="Logging level"),
):
    """Configure logging for every command."""
    logging.basicConfig(
        level=log_level.upper(),
        format=LOG_FORMAT,
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load(level: Optional[Path], builtin: Optional[str]) -> Union[Level, Board]:
    if level is not None:
        return load_level(str(level))
    return get_level(builtin or "hand-drawn")


def _graph(maze: Union[Level, Board]) -> Tuple[nx.MultiGraph, Optional[str], Optional[str]]:
    if isinstance(maze, Level):
        return build_level_graph(maze), maze.start, maze.goal
    start, goal = maze.start_room, maze.goal_room
    return build_board_graph(maze), start.id if start else None, goal.id if goal else None


def _colored(color: str) -> str:
    return f"[{COLOR_STYLES.get(color, 'default')}]{color}[/]"


LEVEL_OPTION = typer.Option(None, "--level", "-l", help="Path to level JSON file")
BUILTIN_OPTION = typer.Option(None, "--builtin", "-b", help="Name of a built-in level")


@app.command()
def info(level: Optional[Path] = LEVEL_OPTION, builtin: Optional[str] = BUILTIN_OPTION):
    """Show information about a level."""
    try:
        maze = _load(level, builtin)
        graph, start, goal = _graph(maze)

        console.print(f"[bold]Rooms: {graph.number_of_nodes()}[/bold]  start={start}  goal={goal}")
        table = Table()
        table.add_column("Wall ID", style="cyan")
        table.add_column("Rooms", style="yellow")
        table.add_column("Color", justify="center")
        for a, b, key, data in graph.edges(keys=True, data=True):
            table.add_row(key, f"{a}-{b}", _colored(data["color"]))
        console.print(table)

    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def rooms(level: Path = typer.Option(..., "--level", "-l", help="Path to board JSON file")):
    """Recompute and list the rooms of a freeform board."""
    try:
        maze = load_level(str(level))
        if not isinstance(maze, Board):
            console.print("[red]Error: rooms can only be computed for boards[/red]")
            raise typer.Exit(1)

        table = Table()
        table.add_column("Room ID", style="cyan")
        table.add_column("Boundary", style="green")
        table.add_column("Area", justify="right")
        table.add_column("Centroid", justify="right")
        table.add_column("Flags", style="magenta")
        for room_id, room in maze.rooms.items():
            flags = [
                name
                for name, on in (("outside", room.is_outside), ("start", room.is_start), ("goal", room.is_goal))
                if on
            ]
            table.add_row(
                room_id,
                " ".join(room.boundary),
                f"{room.area:.1f}",
                f"({room.centroid[0]:.1f}, {room.centroid[1]:.1f})",
                ", ".join(flags),
            )
        console.print(table)

    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command("solve")
def solve_command(
    level: Optional[Path] = LEVEL_OPTION,
    builtin: Optional[str] = BUILTIN_OPTION,
):
    """Check whether the goal can be reached and show a shortest path."""
    try:
        graph, start, goal = _graph(_load(level, builtin))
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    result = solve(graph, start, goal)
    if not result:
        console.print(f"[bold red]{result.reason}[/bold red]")
        raise typer.Exit(1)

    table = Table(title=f"Solution in {len(result.walls)} moves")
    table.add_column("Step", justify="right")
    table.add_column("Wall", style="cyan")
    table.add_column("Color", justify="center")
    table.add_column("Room", style="yellow")
    for step, (wall_id, color, room) in enumerate(zip(result.walls, result.colors, result.rooms[1:]), start=1):
        table.add_row(str(step), wall_id, _colored(color), room)
    console.print(table)


@app.command()
def play(
    moves: List[str] = typer.Argument(..., help="Rooms to move into (or walls with --through)"),
    level: Optional[Path] = LEVEL_OPTION,
    builtin: Optional[str] = BUILTIN_OPTION,
    through: bool = typer.Option(False, "--through", help="Treat moves as wall ids"),
):
    """Replay a sequence of moves; illegal moves are reported and skipped."""
    try:
        graph, start, goal = _graph(_load(level, builtin))
        game = Game(graph, start, goal)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    for move in moves:
        try:
            report = game.try_move_through(move) if through else game.try_move(move)
        except InvalidMove as e:
            console.print(f"[red]{move}: {e}[/red]")
            continue
        console.print(f"{move}: crossed {_colored(report.color)} wall {report.wall_id}. {report.message}")
        if report.won:
            return

    console.print(f"[yellow]Stopped in room {game.state.room}[/yellow]")
    raise typer.Exit(1)


@app.command()
def generate(
    output: Path = typer.Option(..., "--out", "-o", help="Path to output level JSON file"),
    cols: int = typer.Option(GRID_COLS, "--cols", help="Grid columns"),
    rows: int = typer.Option(GRID_ROWS, "--rows", help="Grid rows"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
):
    """Generate a solvable grid level."""
    try:
        new_level = generate_grid_level(cols=cols, rows=rows, seed=seed)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    save_level(new_level, str(output))
    console.print(f"[green]✓[/green] {new_level.name} saved to {output}")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
