from puzzle.models.board import Board, Direction, goal_cells, neighbors
from puzzle.models.picture import PictureCatalog, PictureInfo

__all__ = [
    "Board",
    "Direction",
    "PictureCatalog",
    "PictureInfo",
    "goal_cells",
    "neighbors",
]
