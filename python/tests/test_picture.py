"""Picture catalog loading and tile crop regions."""

from __future__ import annotations

import json
import random
from pathlib import Path

import pytest

from puzzle.models.picture import PictureCatalog, PictureInfo

_ENTRY = {
    "title": "Hauling artillery",
    "description": "Guns dragged up the hills by hand.",
    "source": "Museum archive",
    "difficulty": "Medium",
    "image": "hauling.jpg",
}


def _write(tmp_path: Path, data: object) -> Path:
    path = tmp_path / "pictures.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# -- catalog --------------------------------------------------------------------


def test_loads_entries(tmp_path: Path) -> None:
    other = dict(_ENTRY, title="Bicycle columns")
    catalog = PictureCatalog(_write(tmp_path, [_ENTRY, other]))
    assert [p.title for p in catalog.pictures] == ["Hauling artillery", "Bicycle columns"]
    assert catalog.get("Bicycle columns") == PictureInfo(**other)
    assert catalog.get("Missing") is None
    assert catalog.choose(random.Random(0)) in catalog.pictures


def test_missing_file_is_empty(tmp_path: Path) -> None:
    catalog = PictureCatalog(tmp_path / "nope.json")
    assert catalog.pictures == []
    assert catalog.choose() is None


def test_rejects_incomplete_entry(tmp_path: Path) -> None:
    broken = {k: v for k, v in _ENTRY.items() if k != "source"}
    with pytest.raises(ValueError, match="source"):
        PictureCatalog(_write(tmp_path, [broken]))


@pytest.mark.parametrize("entry", ["just a title", 42, None], ids=["string", "number", "null"])
def test_rejects_non_object_entry(tmp_path: Path, entry: object) -> None:
    with pytest.raises(ValueError, match="picture #1 is not an object"):
        PictureCatalog(_write(tmp_path, [_ENTRY, entry]))


def test_rejects_non_list(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="list"):
        PictureCatalog(_write(tmp_path, _ENTRY))


def test_bundled_catalog(catalog_path: Path) -> None:
    catalog = PictureCatalog(catalog_path)
    assert catalog.pictures
    assert all(p.image for p in catalog.pictures)


def test_image_path() -> None:
    pic = PictureInfo(**_ENTRY)
    assert pic.image_path(Path("assets")) == Path("assets") / "images" / "hauling.jpg"


# -- crop regions -----------------------------------------------------------------


@pytest.mark.parametrize(
    ("value", "expected"),
    [(1, (0, 0, 100, 100)), (5, (100, 100, 100, 100)), (8, (100, 200, 100, 100))],
)
def test_crop_box(value: int, expected: tuple[int, int, int, int]) -> None:
    assert PictureInfo.crop_box(value, 3, 300, 300) == expected


def test_crop_box_absorbs_remainder() -> None:
    # Last column takes the extra pixel of a 301-wide picture.
    assert PictureInfo.crop_box(6, 3, 301, 302) == (200, 100, 101, 100)
    assert PictureInfo.crop_box(7, 3, 301, 302) == (0, 200, 100, 102)


@pytest.mark.parametrize("value", [0, 9, -1])
def test_crop_box_rejects_hole_and_unknown(value: int) -> None:
    with pytest.raises(ValueError):
        PictureInfo.crop_box(value, 3, 300, 300)
