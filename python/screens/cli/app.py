"""Rich terminal frontend — styled board, stats line and completion card.

Tiles slide with the arrow keys / WASD or by typing the number of a tile
next to the hole. Once the picture is complete the board stays frozen
until the player restarts.
"""

from __future__ import annotations

import random
import sys
from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from puzzle.engine.gameplay import GamePlay
from puzzle.engine.gamesolver import Solver
from puzzle.models.board import Direction
from puzzle.models.picture import PictureCatalog, PictureInfo
from screens.cli.input_handler import get_key, get_key_timeout

console = Console()

MIN_SIZE, MAX_SIZE = 2, 8

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _render_board(game: GamePlay) -> Table:
    """Return a Rich Table for the grid; tiles that can slide are highlighted."""
    board = game.state.board
    width = len(str(board.size * board.size - 1))
    movable = game.movable_indices
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="red",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            idx = r * board.size + c
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif idx in movable:
                cells.append(f"[bold yellow]{val:>{width}}[/bold yellow]")
            elif board.is_tile_correct(idx):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")
    stats.append("    Status: ", style="dim")
    if game.is_won:
        stats.append("Completed", style="bold green")
    else:
        stats.append("Playing", style="bold cyan")
    return stats


def _apply_hint(game: GamePlay) -> str:
    board = game.state.board
    hint = Solver.hint(board)
    if hint is None:
        if board.is_solved():
            return "[green]Already solved![/green]"
        return "[yellow]No hint available for this board size.[/yellow]"
    tile = board.cells[hint]
    game.move_tile(hint)
    return f"[cyan]Hint:[/cyan] moved tile [bold]{tile}[/bold]"


def _key_to_target(game: GamePlay, key: str) -> int | None:
    """Resolve a digit key to the index of the tile with that number."""
    value = int(key)
    board = game.state.board
    if not 1 <= value < board.size * board.size:
        return None
    return board.index_of(value)


# -- screens ------------------------------------------------------------------


def _draw_menu(sel_size: int) -> None:
    console.clear()

    sizes = Text()
    for s in range(MIN_SIZE, MAX_SIZE + 1):
        if s > MIN_SIZE:
            sizes.append("  ")
        if s == sel_size:
            sizes.append(f" {s}×{s} ", style="bold yellow on dark_red")
        else:
            sizes.append(f" {s}×{s} ", style="dim")

    nav = Text("  ← →  change size", style="dim")

    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Play    ")
    opts.append("2", style="bold yellow")
    opts.append("  Pictures    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(sizes),
        Align.center(nav),
        Text(""),
        Align.center(opts),
        Text(""),
    )
    panel = Panel(
        body,
        title="[bold]P I C T U R E   P U Z Z L E[/bold]",
        border_style="red",
        padding=(1, 4),
    )
    console.print()
    console.print(Align.center(panel))


def _draw_game(game: GamePlay, picture: PictureInfo | None, status: str = "") -> None:
    console.clear()

    size = game.size
    title = "Hidden picture" if picture is None else "A historical picture awaits"
    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("1-9", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    panel = Panel(
        Align.center(_render_board(game)),
        title=f"[bold red]Picture Puzzle  {size}×{size}[/bold red]",
        subtitle=f"[dim]{title}[/dim]",
        border_style="red",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    # Save the cursor right before the stats line so _update_time() can
    # repaint only that line.
    sys.stdout.write("\033[s")
    sys.stdout.flush()
    console.print(Align.center(_stats(game)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _update_time(game: GamePlay) -> None:
    """Overwrite just the stats line using the saved cursor position."""
    line = Text()
    line.append_text(_stats(game))
    with console.capture() as capture:
        console.print(Align.center(line), end="")
    sys.stdout.write(f"\033[u\033[K{capture.get()}")
    sys.stdout.flush()


def _draw_complete(game: GamePlay, picture: PictureInfo | None) -> None:
    """Completion card: the finished board next to the picture's story."""
    console.clear()

    info = Table.grid(padding=(0, 2))
    info.add_column(style="dim", justify="right")
    info.add_column()
    if picture is not None:
        info.add_row("Title", f"[bold red]{picture.title}[/bold red]")
        info.add_row("", picture.description)
        info.add_row("Source", picture.source)
        info.add_row("Difficulty", picture.difficulty)
    info.add_row("Moves", f"[bold yellow]{game.state.moves}[/bold yellow]")
    info.add_row("Time", f"[bold yellow]{_format_time(game.state.elapsed_time)}[/bold yellow]")

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("PUZZLE COMPLETE!", style="bold green")
    congrats.append(f"  Finished in {game.state.moves} moves  ", style="green")
    congrats.append("★\n", style="bold yellow")

    panel = Panel(
        Group(Align.center(_render_board(game)), Align.center(congrats), info),
        title=f"[bold green]Picture Puzzle  {game.size}×{game.size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press R to play again, Q to go back.\n", style="dim"))
    )


def _draw_preview(picture: PictureInfo | None, assets_dir: Path) -> None:
    console.clear()
    if picture is None:
        body = Text("No picture is attached to this puzzle.", style="dim")
    else:
        body = Text()
        body.append(f"{picture.title}\n\n", style="bold red")
        body.append("Finish the puzzle to read the full story of this picture.", style="dim")
        image = picture.image_path(assets_dir)
        if image.exists():
            body.append(f"\n\nOpen {image} to study the complete picture.", style="dim")
    console.print()
    console.print(Align.center(Panel(body, title="[bold]Preview[/bold]", border_style="yellow")))
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


def _show_preview(game: GamePlay, picture: PictureInfo | None, assets_dir: Path) -> None:
    # Viewing the finished picture does not count against the clock.
    game.state.pause()
    try:
        _draw_preview(picture, assets_dir)
    finally:
        game.state.resume()


def print_catalog(catalog: PictureCatalog) -> None:
    """Print the picture catalog as a table (used by ``--pictures``)."""
    pictures = catalog.pictures
    if not pictures:
        console.print("[dim]  No pictures in the catalog.[/dim]")
        return
    table = Table(
        title="Pictures",
        title_style="bold red",
        box=rich.box.ROUNDED,
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Title", style="bold")
    table.add_column("Difficulty", style="yellow")
    table.add_column("Source", style="dim")
    for i, pic in enumerate(pictures, 1):
        table.add_row(str(i), pic.title, pic.difficulty, pic.source)
    console.print(table)


def _draw_catalog(catalog: PictureCatalog) -> None:
    console.clear()
    console.print()
    print_catalog(catalog)
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


# -- game loop ----------------------------------------------------------------


def _play_game(
    size: int,
    shuffle_steps: int,
    rng: random.Random,
    catalog: PictureCatalog,
    assets_dir: Path,
) -> None:
    game = GamePlay(size, shuffle_steps, rng)
    picture = catalog.choose(rng)
    status = ""

    while True:
        if game.is_won:
            _draw_complete(game, picture)
            key = get_key()
            if key == "restart":
                game.restart()
                picture = catalog.choose(rng)
            elif key == "quit":
                return
            continue

        _draw_game(game, picture, status)
        status = ""

        # Wait with a short timeout so the clock keeps ticking.
        while True:
            key = get_key_timeout(0.5)
            if key is not None:
                break
            _update_time(game)

        if key in _DIRECTIONS:
            game.move(_DIRECTIONS[key])
        elif key.isdigit():
            target = _key_to_target(game, key)
            if target is not None and not game.move_tile(target).accepted:
                status = f"[dim]Tile {key} is not next to the hole.[/dim]"
        elif key == "hint":
            status = _apply_hint(game)
        elif key == "preview":
            _show_preview(game, picture, assets_dir)
        elif key == "restart":
            game.restart()
            picture = catalog.choose(rng)
        elif key == "quit":
            return


def _menu_loop(
    size: int,
    shuffle_steps: int,
    rng: random.Random,
    catalog: PictureCatalog,
    assets_dir: Path,
) -> None:
    sel_size = min(max(size, MIN_SIZE), MAX_SIZE)

    while True:
        _draw_menu(sel_size)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold red")))
            return
        elif key == "left":
            sel_size = max(MIN_SIZE, sel_size - 1)
        elif key == "right":
            sel_size = min(MAX_SIZE, sel_size + 1)
        elif key in ("1", "enter"):
            _play_game(sel_size, shuffle_steps, rng, catalog, assets_dir)
        elif key == "2":
            _draw_catalog(catalog)


# -- public entry point -------------------------------------------------------


def run(
    size: int,
    shuffle_steps: int,
    data_dir: Path,
    assets_dir: Path,
    seed: int | None = None,
) -> None:
    """Launch the Rich CLI with interactive menu."""
    catalog = PictureCatalog(data_dir / "pictures.json")
    _menu_loop(size, shuffle_steps, random.Random(seed), catalog, assets_dir)
