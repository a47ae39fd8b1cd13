"""Pygame GUI frontend — picture tiles, click-to-slide.

Each tile shows the piece of a historical picture that belongs at its
solved position. When no image file is available the tiles fall back to
plain numbered squares. Completing the puzzle reveals the picture's story.
"""

from __future__ import annotations

import enum
import logging
import random
from pathlib import Path

import pygame

from puzzle.engine.gameplay import GamePlay
from puzzle.engine.gamesolver import Solver
from puzzle.models.board import Direction
from puzzle.models.picture import PictureCatalog, PictureInfo

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Palette (lacquer red and gold)
# ---------------------------------------------------------------------------
COL_BASE = (40, 18, 18)
COL_MANTLE = (28, 12, 12)
COL_SURFACE0 = (74, 32, 30)
COL_SURFACE1 = (102, 46, 42)
COL_OVERLAY0 = (150, 110, 100)
COL_TEXT = (255, 243, 224)
COL_SUBTEXT = (230, 205, 180)
COL_RED = (211, 47, 47)
COL_RED_LIGHT = (239, 83, 80)
COL_GOLD = (255, 204, 128)
COL_GOLD_LIGHT = (255, 224, 178)
COL_GREEN = (166, 227, 161)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 520, 680
TILE_GAP = 4
MARGIN = 24
BOARD_TOP = 84
BOARD_MAX = WIN_W - 2 * MARGIN
MIN_SIZE, MAX_SIZE = 2, 8


class _Screen(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"
    COMPLETE = "complete"


class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        pygame.draw.rect(surf, self.hover if self._hot else self.bg, self.rect, border_radius=8)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(lbl, lbl.get_rect(center=self.rect.center))

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


def _wrap(text: str, font: pygame.font.Font, width: int) -> list[str]:
    lines: list[str] = []
    line = ""
    for word in text.split():
        trial = f"{line} {word}".strip()
        if font.size(trial)[0] <= width:
            line = trial
        else:
            lines.append(line)
            line = word
    if line:
        lines.append(line)
    return lines


class PygameApp:
    def __init__(
        self,
        size: int,
        shuffle_steps: int,
        data_dir: Path,
        assets_dir: Path,
        seed: int | None = None,
    ) -> None:
        self._sel_size = min(max(size, MIN_SIZE), MAX_SIZE)
        self._shuffle_steps = shuffle_steps
        self._assets_dir = assets_dir
        self._rng = random.Random(seed)
        self._catalog = PictureCatalog(data_dir / "pictures.json")
        self._picture: PictureInfo | None = None
        self._full_image: pygame.Surface | None = None
        self._tile_images: dict[int, pygame.Surface] = {}
        self._ref_image: pygame.Surface | None = None

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Picture Puzzle")
        self._clock = pygame.time.Clock()

        self._f_big = pygame.font.SysFont("Helvetica", 34, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_btn = pygame.font.SysFont("Helvetica", 17, bold=True)
        self._f_btn_sm = pygame.font.SysFont("Helvetica", 14, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)
        self._f_badge = self._f_small

        self._screen = _Screen.MENU
        self._game: GamePlay | None = None
        self._status_msg = ""
        self._show_preview = False

        self._build_menu_btns()
        self._build_game_btns()
        self._build_complete_btns()

    # ── buttons ─────────────────────────────────────────────────────────────

    def _build_menu_btns(self) -> None:
        self._size_minus = _Btn((_cx(200) - 10, 250, 50, 46), "-", self._f_btn)
        self._size_plus = _Btn((_cx(200) + 160, 250, 50, 46), "+", self._f_btn)
        bw = 220
        self._play_btn = _Btn(
            (_cx(bw), 340, bw, 50), "P L A Y", self._f_btn,
            bg=COL_RED, hover=COL_RED_LIGHT, fg=COL_TEXT,
        )
        self._quit_btn = _Btn((_cx(bw), 404, bw, 42), "Q U I T", self._f_btn_sm)
        self._menu_all = [self._size_minus, self._size_plus, self._play_btn, self._quit_btn]

    def _build_game_btns(self) -> None:
        bw, gap = 120, 10
        sx = _cx(3 * bw + 2 * gap)
        self._restart_btn = _Btn(
            (sx, 0, bw, 36), "RESTART (R)", self._f_btn_sm,
            bg=COL_RED, hover=COL_RED_LIGHT,
        )
        self._hint_btn = _Btn(
            (sx + bw + gap, 0, bw, 36), "HINT (N)", self._f_btn_sm,
            bg=COL_GOLD, hover=COL_GOLD_LIGHT, fg=COL_BASE,
        )
        self._preview_btn = _Btn(
            (sx + 2 * (bw + gap), 0, bw, 36), "PREVIEW (P)", self._f_btn_sm,
        )
        self._game_btns = [self._restart_btn, self._hint_btn, self._preview_btn]

    def _build_complete_btns(self) -> None:
        bw = 220
        self._again_btn = _Btn(
            (_cx(bw), WIN_H - 120, bw, 48), "PLAY AGAIN", self._f_btn,
            bg=COL_RED, hover=COL_RED_LIGHT,
        )
        self._menu_btn = _Btn((_cx(bw), WIN_H - 62, bw, 42), "M E N U", self._f_btn_sm)

    # ── layout helpers ──────────────────────────────────────────────────────

    @staticmethod
    def _fmt(seconds: float) -> str:
        m, s = divmod(int(seconds), 60)
        return f"{m:02d}:{s:02d}"

    def _tile_layout(self) -> tuple[int, int, int, int]:
        """Return (tile_px, origin_x, origin_y, total_px) for the current game."""
        sz = self._game.size  # type: ignore[union-attr]
        tile_px = (BOARD_MAX - (sz + 1) * TILE_GAP) // sz
        total = sz * tile_px + (sz + 1) * TILE_GAP
        return tile_px, _cx(total) + TILE_GAP, BOARD_TOP + TILE_GAP, total

    def _tile_rect(self, index: int, tpx: int, ox: int, oy: int) -> pygame.Rect:
        r, c = divmod(index, self._game.size)  # type: ignore[union-attr]
        return pygame.Rect(ox + c * (tpx + TILE_GAP), oy + r * (tpx + TILE_GAP), tpx, tpx)

    # ── picture preparation ─────────────────────────────────────────────────

    _REF_SIZE = 64

    def _prepare_picture(self) -> None:
        """Pick a picture and cut it into one surface per tile value."""
        self._picture = self._catalog.choose(self._rng)
        self._full_image = None
        self._tile_images = {}
        self._ref_image = None
        if self._picture is None:
            return
        path = self._picture.image_path(self._assets_dir)
        if not path.is_file():
            logger.info("Image %s not found; using numbered tiles", path)
            return
        try:
            image = pygame.image.load(str(path)).convert()
        except pygame.error as exc:
            logger.warning("Could not load %s: %s", path, exc)
            return

        sz = self._game.size  # type: ignore[union-attr]
        tpx = (BOARD_MAX - (sz + 1) * TILE_GAP) // sz
        side = sz * tpx
        self._full_image = pygame.transform.smoothscale(image, (side, side))
        self._ref_image = pygame.transform.smoothscale(image, (self._REF_SIZE, self._REF_SIZE))
        self._f_badge = pygame.font.SysFont("Helvetica", max(10, tpx // 5), bold=True)

        for val in range(1, sz * sz):
            box = PictureInfo.crop_box(val, sz, side, side)
            self._tile_images[val] = self._full_image.subsurface(pygame.Rect(box)).copy()

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_menu(self) -> None:
        self._surf.fill(COL_BASE)
        _blit_center(self._surf, self._f_big.render("PICTURE  PUZZLE", True, COL_GOLD), 90)
        _blit_center(
            self._surf,
            self._f_body.render("Slide the pieces to restore the picture", True, COL_SUBTEXT),
            140,
        )
        _blit_center(self._surf, self._f_body.render("Grid size", True, COL_SUBTEXT), 215)
        size_lbl = self._f_title.render(f"{self._sel_size}×{self._sel_size}", True, COL_TEXT)
        _blit_center(self._surf, size_lbl, 260)
        for btn in self._menu_all:
            btn.draw(self._surf)

    def _draw_board(self) -> None:
        game = self._game
        assert game is not None
        board = game.state.board
        tpx, ox, oy, total = self._tile_layout()
        f_tile = pygame.font.SysFont("Helvetica", max(14, tpx // 3), bold=True)
        movable = game.movable_indices

        pygame.draw.rect(
            self._surf, COL_MANTLE,
            pygame.Rect(_cx(total), BOARD_TOP, total, total), border_radius=10,
        )
        for idx, val in enumerate(board.cells):
            if val == 0:
                continue
            rect = self._tile_rect(idx, tpx, ox, oy)
            if val in self._tile_images:
                self._surf.blit(self._tile_images[val], rect.topleft)
                num_lbl = self._f_badge.render(str(val), True, COL_TEXT)
                badge = pygame.Surface(
                    (num_lbl.get_width() + 8, num_lbl.get_height() + 4), pygame.SRCALPHA
                )
                badge.fill((0, 0, 0, 150))
                badge.blit(num_lbl, (4, 2))
                self._surf.blit(badge, (rect.x + 2, rect.y + 2))
            else:
                pygame.draw.rect(self._surf, COL_RED, rect, border_radius=6)
                lbl = f_tile.render(str(val), True, COL_TEXT)
                self._surf.blit(lbl, lbl.get_rect(center=rect.center))
            if idx in movable:
                pygame.draw.rect(self._surf, COL_GOLD, rect, width=3, border_radius=6)

    def _draw_game(self) -> None:
        self._surf.fill(COL_BASE)
        game = self._game
        assert game is not None
        sz = game.size

        _blit_center(
            self._surf, self._f_title.render(f"Picture Puzzle  {sz}×{sz}", True, COL_TEXT), 14
        )
        _blit_center(
            self._surf,
            self._f_body.render(
                f"Moves: {game.state.moves}    Time: {self._fmt(game.state.elapsed_time)}"
                "    Playing",
                True,
                COL_GOLD,
            ),
            46,
        )

        tpx, _, _, total = self._tile_layout()
        if self._show_preview and self._full_image is not None:
            self._surf.blit(self._full_image, (_cx(sz * tpx), BOARD_TOP + TILE_GAP))
        else:
            self._draw_board()

        if self._ref_image is not None:
            rs = self._REF_SIZE
            rx, ry = WIN_W - rs - 12, 8
            pygame.draw.rect(
                self._surf, COL_GOLD, pygame.Rect(rx - 2, ry - 2, rs + 4, rs + 4), border_radius=6
            )
            self._surf.blit(self._ref_image, (rx, ry))

        btn_y = BOARD_TOP + total + 12
        for btn in self._game_btns:
            btn.rect.y = btn_y
            btn.draw(self._surf)

        footer_y = btn_y + 46
        if self._status_msg:
            _blit_center(self._surf, self._f_small.render(self._status_msg, True, COL_GOLD), footer_y)
            footer_y += 20
        _blit_center(
            self._surf,
            self._f_small.render(
                "Click a tile next to the hole     Arrows / WASD  move     M  menu",
                True,
                COL_OVERLAY0,
            ),
            footer_y,
        )

    def _draw_complete(self) -> None:
        self._surf.fill(COL_BASE)
        game = self._game
        assert game is not None

        _blit_center(self._surf, self._f_big.render("★  COMPLETE  ★", True, COL_GREEN), 18)
        y = 70
        if self._full_image is not None:
            thumb = pygame.transform.smoothscale(self._full_image, (220, 220))
            self._surf.blit(thumb, (_cx(220), y))
            y += 232

        pic = self._picture
        if pic is not None:
            _blit_center(self._surf, self._f_title.render(pic.title, True, COL_GOLD), y)
            y += 32
            for line in _wrap(pic.description, self._f_body, WIN_W - 2 * MARGIN):
                _blit_center(self._surf, self._f_body.render(line, True, COL_SUBTEXT), y)
                y += 20
            y += 8
            meta = f"Source: {pic.source}     Difficulty: {pic.difficulty}"
            _blit_center(self._surf, self._f_small.render(meta, True, COL_OVERLAY0), y)
            y += 26

        summary = (
            f"{game.size}×{game.size}   {game.state.moves} moves   "
            f"{self._fmt(game.state.elapsed_time)}"
        )
        _blit_center(self._surf, self._f_title.render(summary, True, COL_TEXT), y)

        self._again_btn.draw(self._surf)
        self._menu_btn.draw(self._surf)

    # ── event handling ──────────────────────────────────────────────────────

    def _ev_menu(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            for b in self._menu_all:
                b.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._size_minus.hit(ev.pos):
                self._sel_size = max(MIN_SIZE, self._sel_size - 1)
            elif self._size_plus.hit(ev.pos):
                self._sel_size = min(MAX_SIZE, self._sel_size + 1)
            elif self._play_btn.hit(ev.pos):
                self._start_game()
            elif self._quit_btn.hit(ev.pos):
                return False
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_LEFT:
                self._sel_size = max(MIN_SIZE, self._sel_size - 1)
            elif ev.key == pygame.K_RIGHT:
                self._sel_size = min(MAX_SIZE, self._sel_size + 1)
            elif ev.key == pygame.K_RETURN:
                self._start_game()
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    def _ev_game(self, ev: pygame.event.Event) -> bool:
        game = self._game
        assert game is not None
        if ev.type == pygame.MOUSEMOTION:
            for btn in self._game_btns:
                btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._restart_btn.hit(ev.pos):
                self._restart()
                return True
            if self._hint_btn.hit(ev.pos):
                self._do_hint()
                return True
            if self._preview_btn.hit(ev.pos):
                self._toggle_preview()
                return True
            if self._show_preview:
                return True
            tpx, ox, oy, _ = self._tile_layout()
            for idx in range(game.size * game.size):
                if self._tile_rect(idx, tpx, ox, oy).collidepoint(ev.pos):
                    game.move_tile(idx)
                    self._status_msg = ""
                    break
        elif ev.type == pygame.KEYDOWN:
            _dirs = {
                pygame.K_UP: Direction.UP,
                pygame.K_w: Direction.UP,
                pygame.K_DOWN: Direction.DOWN,
                pygame.K_s: Direction.DOWN,
                pygame.K_LEFT: Direction.LEFT,
                pygame.K_a: Direction.LEFT,
                pygame.K_RIGHT: Direction.RIGHT,
                pygame.K_d: Direction.RIGHT,
            }
            if ev.key in _dirs and not self._show_preview:
                game.move(_dirs[ev.key])
                self._status_msg = ""
            elif ev.key == pygame.K_n:
                self._do_hint()
            elif ev.key == pygame.K_p:
                self._toggle_preview()
            elif ev.key == pygame.K_r:
                self._restart()
            elif ev.key in (pygame.K_m, pygame.K_ESCAPE):
                self._screen = _Screen.MENU
        return True

    def _ev_complete(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            self._again_btn.motion(ev.pos)
            self._menu_btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._again_btn.hit(ev.pos):
                self._restart()
            elif self._menu_btn.hit(ev.pos):
                self._screen = _Screen.MENU
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_r, pygame.K_RETURN):
                self._restart()
            elif ev.key in (pygame.K_m, pygame.K_ESCAPE):
                self._screen = _Screen.MENU
        return True

    # ── actions ─────────────────────────────────────────────────────────────

    def _do_hint(self) -> None:
        game = self._game
        assert game is not None
        board = game.state.board
        hint = Solver.hint(board)
        if hint is None:
            self._status_msg = "No hint available for this board size"
            return
        tile = board.cells[hint]
        game.move_tile(hint)
        self._status_msg = f"Hint: moved tile {tile}"

    def _toggle_preview(self) -> None:
        if self._full_image is None:
            self._status_msg = "No picture to preview"
            return
        self._show_preview = not self._show_preview
        game = self._game
        assert game is not None
        # Viewing the finished picture does not count against the clock.
        if self._show_preview:
            game.state.pause()
        else:
            game.state.resume()

    def _start_game(self) -> None:
        self._game = GamePlay(self._sel_size, self._shuffle_steps, self._rng)
        self._status_msg = ""
        self._show_preview = False
        self._prepare_picture()
        self._screen = _Screen.COMPLETE if self._game.is_won else _Screen.PLAYING

    def _restart(self) -> None:
        game = self._game
        assert game is not None
        game.restart()
        self._status_msg = ""
        self._show_preview = False
        self._prepare_picture()
        self._screen = _Screen.COMPLETE if game.is_won else _Screen.PLAYING

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        _dispatch = {
            _Screen.MENU: self._ev_menu,
            _Screen.PLAYING: self._ev_game,
            _Screen.COMPLETE: self._ev_complete,
        }
        _draw = {
            _Screen.MENU: self._draw_menu,
            _Screen.PLAYING: self._draw_game,
            _Screen.COMPLETE: self._draw_complete,
        }

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                if not _dispatch[self._screen](ev):
                    running = False
                    break

            if self._screen is _Screen.PLAYING and self._game is not None and self._game.is_won:
                self._screen = _Screen.COMPLETE

            _draw[self._screen]()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


def run(
    size: int,
    shuffle_steps: int,
    data_dir: Path,
    assets_dir: Path,
    seed: int | None = None,
) -> None:
    """Launch the Pygame GUI (opens directly to the menu)."""
    app = PygameApp(size, shuffle_steps, data_dir, assets_dir, seed)
    app.run_loop()
