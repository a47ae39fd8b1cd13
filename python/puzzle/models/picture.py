"""Picture catalog — the historical images a puzzle is cut from."""

from __future__ import annotations

import json
import logging
import random
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_FIELDS = ("title", "description", "source", "difficulty", "image")


@dataclass(frozen=True)
class PictureInfo:
    title: str
    description: str
    source: str
    difficulty: str
    image: str

    def image_path(self, assets_dir: Path) -> Path:
        return assets_dir / "images" / self.image

    @staticmethod
    def crop_box(
        value: int, size: int, width: int, height: int
    ) -> tuple[int, int, int, int]:
        """Return the ``(x, y, w, h)`` region of the picture shown on tile *value*.

        A tile shows the piece of the picture that lies at its solved
        position, so tile 1 always carries the top-left piece. The last
        row/column absorbs any remainder so the pieces cover the picture.
        """
        if not 1 <= value < size * size:
            raise ValueError(f"No picture region for tile {value} on a {size}×{size} board.")
        row, col = divmod(value - 1, size)
        tw, th = width // size, height // size
        w = width - col * tw if col == size - 1 else tw
        h = height - row * th if row == size - 1 else th
        return col * tw, row * th, w, h


class PictureCatalog:
    """Loads and queries the picture catalog from a JSON file."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._pictures: list[PictureInfo] = []
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if not self.filepath.exists():
            logger.warning("Picture catalog %s not found; using none", self.filepath)
            return
        data = json.loads(self.filepath.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError(f"{self.filepath}: expected a list of pictures.")
        for i, entry in enumerate(data):
            if not isinstance(entry, dict):
                raise ValueError(f"{self.filepath}: picture #{i} is not an object.")
            missing = [f for f in _FIELDS if not isinstance(entry.get(f), str)]
            if missing:
                raise ValueError(
                    f"{self.filepath}: picture #{i} is missing {', '.join(missing)}."
                )
            self._pictures.append(PictureInfo(**{f: entry[f] for f in _FIELDS}))
        logger.debug("Loaded %d pictures from %s", len(self._pictures), self.filepath)

    # -- queries --------------------------------------------------------------

    @property
    def pictures(self) -> list[PictureInfo]:
        return list(self._pictures)

    def get(self, title: str) -> PictureInfo | None:
        for pic in self._pictures:
            if pic.title == title:
                return pic
        return None

    def choose(self, rng: random.Random | None = None) -> PictureInfo | None:
        if not self._pictures:
            return None
        return (rng or random.Random()).choice(self._pictures)
