#!/usr/bin/env python3
"""Picture Puzzle.

Usage::

    python main.py                       # interactive menu
    python main.py -f rich -s 3          # Rich terminal, 3×3
    python main.py -f pygame --seed 7    # Pygame GUI, reproducible shuffle
    python main.py --pictures            # list the picture catalog
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
DATA_DIR = PROJECT_ROOT / "data"
ASSETS_DIR = PROJECT_ROOT / "assets"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from puzzle.engine.gamegenerator import DEFAULT_SHUFFLE_STEPS  # noqa: E402

DEFAULT_SIZE = 3
MIN_SIZE, MAX_SIZE = 2, 8

logger = logging.getLogger("puzzle")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.rich: "screens.cli.app",
    Frontend.pygame: "screens.gui.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _print_pictures() -> None:
    from puzzle.models.picture import PictureCatalog
    from screens.cli.app import print_catalog

    print_catalog(PictureCatalog(DATA_DIR / "pictures.json"))


def _launch(frontend: Frontend, size: int, shuffle_steps: int, seed: Optional[int]) -> None:
    logger.debug(
        "Launching %s frontend (size=%d, shuffle_steps=%d, seed=%s)",
        frontend.value, size, shuffle_steps, seed,
    )
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(
        size=size,
        shuffle_steps=shuffle_steps,
        data_dir=DATA_DIR,
        assets_dir=ASSETS_DIR,
        seed=seed,
    )


def _menu_loop(size: int, shuffle_steps: int, seed: Optional[int]) -> None:
    while True:
        print()
        print("  ====================================")
        print("       P I C T U R E   P U Z Z L E    ")
        print("  ====================================")
        print()
        print("  1.  Play  (Rich Terminal)")
        print("  2.  Play  (Pygame GUI)")
        print("  3.  List Pictures")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return
        if choice == "1":
            _launch(Frontend.rich, size, shuffle_steps, seed)
        elif choice == "2":
            _launch(Frontend.pygame, size, shuffle_steps, seed)
        elif choice == "3":
            _print_pictures()
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    shuffle_steps: int = typer.Option(
        DEFAULT_SHUFFLE_STEPS, "--shuffle-steps",
        min=0,
        help="Random hole moves used to shuffle a new board.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for reproducible shuffles.",
    ),
    pictures: bool = typer.Option(
        False, "--pictures",
        help="List the picture catalog and exit.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Enable debug logging.",
    ),
) -> None:
    """Picture Puzzle."""
    _configure_logging(verbose)

    if pictures:
        _print_pictures()
        return

    if frontend is None:
        _menu_loop(size, shuffle_steps, seed)
        return

    _launch(frontend, size, shuffle_steps, seed)


if __name__ == "__main__":
    app()
